"""
Domain exceptions raised by services.

Repositories return ``None`` on a lookup miss; services translate misses and
rule violations into these exceptions, and ``property_api.api.main`` maps them
onto the standard error envelope.
"""
from __future__ import annotations

from typing import Any, Optional


class AppError(Exception):
    """Base class for errors that map onto a client-facing HTTP status."""

    status_code: int = 400
    error_type: str = "app_error"

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(AppError):
    """Entity lookup by id came back empty."""

    status_code = 404
    error_type = "not_found"

    # PUBLIC_INTERFACE
    @classmethod
    def for_entity(cls, entity: str, entity_id: Any) -> "NotFoundError":
        """Build the standard '<Entity> with ID "<id>" not found' error."""
        return cls(f'{entity} with ID "{entity_id}" not found', details={"id": str(entity_id)})


class BusinessRuleError(AppError):
    """A request is well-formed but breaks a domain rule (e.g. renewing a terminated contract)."""

    status_code = 400
    error_type = "business_rule_violation"


class DuplicateError(AppError):
    """A unique field (such as a user email) is already taken."""

    status_code = 400
    error_type = "duplicate"
