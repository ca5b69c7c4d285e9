from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from property_api.core.exceptions import AppError
from property_api.core.logging import configure_logging, correlation_id_var
from property_api.core.settings import get_app_settings
from property_api.db.run_migrations import main as run_alembic
from property_api.db.seed import seed_all
from property_api.db.session import dispose_engine
from property_api.schemas.common import ErrorInfo, ErrorResponse, MessageResponse
from property_api.services.contract_expiry import ContractExpiryScheduler

# Routers
from property_api.api.routes.auth import router as auth_router
from property_api.api.routes.users import router as users_router
# Domain routers
from property_api.api.routes.contracts import router as contracts_router
from property_api.api.routes.maintenance import router as maintenance_router
from property_api.api.routes.room_types import router as room_types_router
from property_api.api.routes.rooms import router as rooms_router
from property_api.api.routes.settings import router as settings_router
from property_api.api.routes.tenants import router as tenants_router
from property_api.api.routes.transactions import router as transactions_router

settings = get_app_settings()

# Configure structured logging once at import
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Auth", "description": "Authentication and token endpoints."},
    {"name": "Users", "description": "Staff account administration."},
    {"name": "Rooms", "description": "Rooms and their occupancy status."},
    {"name": "Room Types", "description": "Room type catalogue."},
    {"name": "Tenants", "description": "Tenant records."},
    {"name": "Contracts", "description": "Rental contracts: renew, terminate, expiry sweep."},
    {"name": "Transactions", "description": "Income and expense ledger with summaries."},
    {"name": "Maintenance", "description": "Equipment maintenance tickets."},
    {"name": "Settings", "description": "Building info, preferences and finance categories."},
]

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    openapi_tags=openapi_tags,
)

# CORS - avoid wildcard with credentials
cors_allow_credentials = settings.CORS_ALLOW_CREDENTIALS
if settings.CORS_ORIGINS == ["*"] and cors_allow_credentials:
    logger.warning("CORS_ALLOW_CREDENTIALS=True with '*' origins is not permitted; disabling credentials.")
    cors_allow_credentials = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=cors_allow_credentials,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

expiry_scheduler = ContractExpiryScheduler(settings.CONTRACT_EXPIRY_SWEEP_MINUTES)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """
    Enrich request context with a correlation_id for logging and error responses.
    Adds 'X-Correlation-ID' to every response.
    """
    corr = request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID") or str(uuid4())
    token_corr = correlation_id_var.set(corr)
    request.state.correlation_id = corr

    logger.info("Incoming request %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    finally:
        correlation_id_var.reset(token_corr)

    response.headers["X-Correlation-ID"] = corr
    return response


def _build_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: Any | None = None,
) -> JSONResponse:
    """Build a standardized ErrorResponse JSONResponse."""
    err = ErrorResponse(
        status=status_code,
        error=ErrorInfo(type=error_type, message=message, details=details),
        correlation_id=getattr(request.state, "correlation_id", None),
        path=request.url.path,
        method=request.method,
        timestamp=datetime.now(tz=timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=err.model_dump(mode="json", by_alias=True))


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Map domain errors (not found, rule violations, duplicates) onto the error envelope."""
    logger.info("%s: %s", exc.error_type, exc.message)
    return _build_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        message=exc.message,
        details=exc.details,
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Global handler for HTTPException to produce a standardized error envelope.
    """
    detail = exc.detail if isinstance(exc.detail, str) else "HTTP Error"
    response = _build_error_response(
        request=request,
        status_code=exc.status_code,
        error_type="http_error",
        message=str(detail),
        details=None if isinstance(exc.detail, str) else exc.detail,
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Request validation errors are client errors like any other bad input: 400, not 422.
    """
    details = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in exc.errors()
    ]
    return _build_error_response(
        request=request,
        status_code=400,
        error_type="validation_error",
        message="Request validation failed",
        details=details,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler to avoid leaking stack traces and to return a structured error.
    """
    logger.exception("Unhandled error processing request")
    return _build_error_response(
        request=request,
        status_code=500,
        error_type="internal_error",
        message="An unexpected error occurred",
        details=None,
    )


@app.on_event("startup")
async def on_startup() -> None:
    """
    Run migrations, optional seeding and the contract expiry sweep on service startup.
    """
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        try:
            logger.info("Running Alembic migrations: upgrade head")
            await asyncio.to_thread(run_alembic, ["upgrade", "head"])
            logger.info("Migrations completed.")
        except Exception as exc:
            logger.exception("Migration step failed: %s", exc)
            # Keep serving; readiness is left to the database itself.

    if settings.AUTO_SEED:
        try:
            logger.info("Running database seeding...")
            await seed_all()
            logger.info("Seeding completed.")
        except Exception as exc:
            logger.exception("Seeding step failed: %s", exc)

    if settings.CONTRACT_EXPIRY_SWEEP_ENABLED:
        expiry_scheduler.start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    expiry_scheduler.shutdown()
    await dispose_engine()


api = APIRouter(prefix=settings.API_PREFIX)


# PUBLIC_INTERFACE
@api.get(
    "/health",
    response_model=MessageResponse,
    summary="Health Check",
    tags=["Health"],
)
def health_check() -> MessageResponse:
    """
    Basic liveness health check endpoint.

    Returns:
        MessageResponse: Simple confirmation that the service is running.
    """
    return MessageResponse(message="Healthy")


api.include_router(auth_router)
api.include_router(users_router)
api.include_router(rooms_router)
api.include_router(room_types_router)
api.include_router(tenants_router)
api.include_router(contracts_router)
api.include_router(transactions_router)
api.include_router(maintenance_router)
api.include_router(settings_router)

app.include_router(api)
