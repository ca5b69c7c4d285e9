from __future__ import annotations

import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from property_api.db.session import get_session_maker
from property_api.services.contracts import ContractService

logger = logging.getLogger(__name__)

JOB_ID = "contract_expiry_sweep"


# PUBLIC_INTERFACE
async def run_expiry_sweep() -> int:
    """Run one expiry sweep in its own session and return the number of contracts expired."""
    async with get_session_maker()() as session:
        return await ContractService(session).check_expired_contracts()


class ContractExpiryScheduler:
    """
    Periodically expires overdue contracts on the running event loop.

    The same sweep is exposed on demand through POST /contracts/check-expired.
    """

    def __init__(self, interval_minutes: int) -> None:
        self.interval_minutes = interval_minutes
        self.scheduler: Optional[AsyncIOScheduler] = None

    async def _tick(self) -> None:
        try:
            await run_expiry_sweep()
        except Exception:
            # keep the job scheduled; the next tick retries
            logger.exception("Contract expiry sweep failed")

    def start(self) -> None:
        if self.scheduler is not None:
            return
        self.scheduler = AsyncIOScheduler()
        self.scheduler.add_job(
            self._tick,
            "interval",
            minutes=self.interval_minutes,
            id=JOB_ID,
            coalesce=True,
            max_instances=1,
        )
        self.scheduler.start()
        logger.info("Contract expiry sweep scheduled every %d minute(s)", self.interval_minutes)

    def shutdown(self) -> None:
        if self.scheduler is None:
            return
        self.scheduler.shutdown(wait=False)
        self.scheduler = None
