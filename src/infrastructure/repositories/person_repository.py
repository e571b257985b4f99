"""SQLAlchemy implementations of ClientRepository and AvalRepository."""

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Aval, Client
from src.domain.interfaces import AvalRepository, ClientRepository
from src.infrastructure.database.models import AvalModel, ClientModel

_PERSON_FIELDS = (
    "name",
    "birthdate",
    "voter_id",
    "address",
    "neighborhood",
    "zip_code",
    "municipality",
    "state",
    "phone",
    "cellphone",
    "message_phone",
    "email",
)
_CLIENT_FIELDS = _PERSON_FIELDS + ("assignment", "promoter", "supervisor", "executive")
_AVAL_FIELDS = _PERSON_FIELDS + ("group",)


class SqlClientRepository(ClientRepository):
    """
    SQL-backed client repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list(self, search: Optional[str] = None) -> List[Client]:
        stmt = select(ClientModel).order_by(ClientModel.name, ClientModel.id)
        if search:
            stmt = stmt.where(func.lower(ClientModel.name).contains(search.lower()))

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def get(self, client_id: int) -> Optional[Client]:
        model = await self._session.get(ClientModel, client_id)
        return self._to_entity(model) if model else None

    async def get_for_update(self, client_id: int) -> Optional[Client]:
        stmt = select(ClientModel).where(ClientModel.id == client_id).with_for_update()
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def add(self, client: Client) -> Client:
        model = ClientModel(
            created_at=client.created_at,
            **{name: getattr(client, name) for name in _CLIENT_FIELDS},
        )
        self._session.add(model)
        await self._session.flush()

        client.id = model.id
        return client

    async def delete(self, client_id: int) -> bool:
        result = await self._session.execute(
            delete(ClientModel).where(ClientModel.id == client_id)
        )
        return result.rowcount > 0

    def _to_entity(self, model: ClientModel) -> Client:
        return Client(
            id=model.id,
            created_at=model.created_at,
            **{name: getattr(model, name) for name in _CLIENT_FIELDS},
        )


class SqlAvalRepository(AvalRepository):
    """SQL-backed aval (guarantor) repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, aval_id: int) -> Optional[Aval]:
        model = await self._session.get(AvalModel, aval_id)
        return self._to_entity(model) if model else None

    async def get_for_update(self, aval_id: int) -> Optional[Aval]:
        stmt = select(AvalModel).where(AvalModel.id == aval_id).with_for_update()
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def add(self, aval: Aval) -> Aval:
        model = AvalModel(
            created_at=aval.created_at,
            **{name: getattr(aval, name) for name in _AVAL_FIELDS},
        )
        self._session.add(model)
        await self._session.flush()

        aval.id = model.id
        return aval

    async def delete(self, aval_id: int) -> bool:
        result = await self._session.execute(
            delete(AvalModel).where(AvalModel.id == aval_id)
        )
        return result.rowcount > 0

    def _to_entity(self, model: AvalModel) -> Aval:
        return Aval(
            id=model.id,
            created_at=model.created_at,
            **{name: getattr(model, name) for name in _AVAL_FIELDS},
        )
