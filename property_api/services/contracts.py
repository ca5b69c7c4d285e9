from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.enums import ContractStatus
from property_api.core.exceptions import BusinessRuleError, NotFoundError
from property_api.db.models.contracts import Contract
from property_api.repositories.contracts import ContractRepository
from property_api.repositories.rooms import RoomRepository
from property_api.repositories.tenants import TenantRepository
from property_api.schemas.contracts import (
    ContractCreate,
    ContractRenew,
    ContractTerminate,
    ContractUpdate,
)
from property_api.services.base import BaseService

logger = logging.getLogger(__name__)


def _check_period(start_date: date, end_date: date) -> None:
    if end_date <= start_date:
        raise BusinessRuleError(
            "End date must be after start date",
            details={"startDate": start_date.isoformat(), "endDate": end_date.isoformat()},
        )


class ContractService(BaseService):
    """
    Rental contracts and their lifecycle.

    A contract is created active. From active it can be renewed (same status,
    later end date), terminated, or expired by the sweep once its end date has
    passed. Terminated and expired are final.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = ContractRepository(session)
        self.tenants = TenantRepository(session)
        self.rooms = RoomRepository(session)

    async def list_contracts(
        self,
        *,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[ContractStatus] = None,
        tenant_id: Optional[UUID] = None,
        room_id: Optional[UUID] = None,
    ) -> Tuple[List[Contract], bool]:
        return await self.repo.list_contracts(
            search=search,
            status=status.value if status else None,
            tenant_id=tenant_id,
            room_id=room_id,
            page=page,
            limit=limit,
        )

    async def get_contract(self, contract_id: UUID) -> Contract:
        contract = await self.repo.get_by_id(contract_id)
        if contract is None:
            raise NotFoundError.for_entity("Contract", contract_id)
        return contract

    async def _require_parties(self, tenant_id: Optional[UUID], room_id: Optional[UUID]) -> None:
        if tenant_id is not None and not await self.tenants.exists(tenant_id):
            raise NotFoundError.for_entity("Tenant", tenant_id)
        if room_id is not None and not await self.rooms.exists(room_id):
            raise NotFoundError.for_entity("Room", room_id)

    async def create_contract(self, payload: ContractCreate) -> Contract:
        await self._require_parties(payload.tenant_id, payload.room_id)
        _check_period(payload.start_date, payload.end_date)
        values = self.values(payload)
        values["status"] = ContractStatus.active.value
        contract = await self.repo.create(**values)
        logger.info("Created contract %s for tenant %s, room %s", contract.id, contract.tenant_id, contract.room_id)
        return contract

    async def update_contract(self, contract_id: UUID, payload: ContractUpdate) -> Contract:
        contract = await self.get_contract(contract_id)
        values = self.changes(payload)
        await self._require_parties(values.get("tenant_id"), values.get("room_id"))
        _check_period(
            values.get("start_date", contract.start_date),
            values.get("end_date", contract.end_date),
        )
        return await self.repo.update(contract, values)

    async def renew_contract(self, contract_id: UUID, payload: ContractRenew) -> Contract:
        contract = await self.get_contract(contract_id)
        if contract.status != ContractStatus.active.value:
            raise BusinessRuleError(
                "Only active contracts can be renewed",
                details={"status": contract.status},
            )
        if payload.new_end_date <= contract.end_date:
            raise BusinessRuleError(
                "New end date must be after the current end date",
                details={"endDate": contract.end_date.isoformat()},
            )
        values = {"end_date": payload.new_end_date}
        if payload.new_monthly_rent is not None:
            values["monthly_rent"] = payload.new_monthly_rent
        contract = await self.repo.update(contract, values)
        logger.info("Renewed contract %s until %s", contract.id, contract.end_date)
        return contract

    async def terminate_contract(self, contract_id: UUID, payload: ContractTerminate) -> Contract:
        contract = await self.get_contract(contract_id)
        if contract.status != ContractStatus.active.value:
            raise BusinessRuleError(
                "Only active contracts can be terminated",
                details={"status": contract.status},
            )
        contract = await self.repo.update(
            contract,
            {
                "status": ContractStatus.terminated.value,
                "termination_reason": payload.reason,
                "termination_date": payload.termination_date,
            },
        )
        logger.info("Terminated contract %s on %s", contract.id, payload.termination_date)
        return contract

    async def delete_contract(self, contract_id: UUID) -> None:
        contract = await self.get_contract(contract_id)
        await self.repo.delete(contract)

    # PUBLIC_INTERFACE
    async def check_expired_contracts(self, today: Optional[date] = None) -> int:
        """
        Expire every active contract whose end date is before ``today``.

        Returns the number of contracts changed. Running it twice on the same
        day changes nothing the second time.
        """
        today = today or date.today()
        ids = await self.repo.list_overdue_active_ids(today)
        expired = await self.repo.mark_expired(ids)
        if expired:
            logger.info("Expired %d contract(s) ending before %s", expired, today)
        return expired
