"""SQLAlchemy implementation of ContractRepository."""

from typing import List, Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Contract
from src.domain.interfaces import ContractRepository
from src.infrastructure.database.models import ClientModel, ContractModel


class SqlContractRepository(ContractRepository):
    """
    SQL-backed contract repository.

    Reads join the owning client to expose its name and cellphone.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _select_with_client(self):
        return select(
            ContractModel,
            ClientModel.name,
            ClientModel.cellphone,
        ).join(ClientModel, ContractModel.client_id == ClientModel.id)

    async def list(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Contract]:
        stmt = self._select_with_client().order_by(
            ContractModel.created_at.desc(),
            ContractModel.id.desc(),
        )
        if status:
            stmt = stmt.where(ContractModel.status == status)
        if search:
            needle = search.lower()
            stmt = stmt.where(
                or_(
                    func.lower(ContractModel.folio).contains(needle),
                    func.lower(ClientModel.name).contains(needle),
                )
            )

        result = await self._session.execute(stmt)
        return [
            self._to_entity(model, client_name, client_cellphone)
            for model, client_name, client_cellphone in result.all()
        ]

    async def get(self, contract_id: int) -> Optional[Contract]:
        stmt = self._select_with_client().where(ContractModel.id == contract_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        model, client_name, client_cellphone = row
        return self._to_entity(model, client_name, client_cellphone)

    async def get_for_update(self, contract_id: int) -> Optional[Contract]:
        stmt = (
            select(ContractModel)
            .where(ContractModel.id == contract_id)
            .with_for_update()
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def add(self, contract: Contract) -> Contract:
        model = ContractModel(
            folio=contract.folio,
            client_id=contract.client_id,
            aval_id=contract.aval_id,
            amount=contract.amount,
            interest_rate=contract.interest_rate,
            term_weeks=contract.term_weeks,
            weekly_payment=contract.weekly_payment,
            start_date=contract.start_date,
            status=contract.status,
            created_at=contract.created_at,
        )
        self._session.add(model)
        await self._session.flush()

        contract.id = model.id
        return contract

    async def delete(self, contract_id: int) -> bool:
        result = await self._session.execute(
            delete(ContractModel).where(ContractModel.id == contract_id)
        )
        return result.rowcount > 0

    async def count_by_client(self, client_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(ContractModel)
            .where(ContractModel.client_id == client_id)
        )
        return (await self._session.execute(stmt)).scalar_one()

    async def count_by_aval(self, aval_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(ContractModel)
            .where(ContractModel.aval_id == aval_id)
        )
        return (await self._session.execute(stmt)).scalar_one()

    def _to_entity(
        self,
        model: ContractModel,
        client_name: Optional[str] = None,
        client_cellphone: Optional[str] = None,
    ) -> Contract:
        return Contract(
            id=model.id,
            folio=model.folio,
            client_id=model.client_id,
            aval_id=model.aval_id,
            amount=model.amount,
            interest_rate=model.interest_rate,
            term_weeks=model.term_weeks,
            weekly_payment=model.weekly_payment,
            start_date=model.start_date,
            status=model.status,
            created_at=model.created_at,
            client_name=client_name,
            client_cellphone=client_cellphone,
        )
