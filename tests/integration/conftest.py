"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database with foreign keys enforced
- Deterministic folio generator
- Contract service wired to real repositories
- Test client for FastAPI app
- Sample client/aval/contract payloads
"""

from datetime import date
from itertools import count
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event, func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.application.dto import AvalData, ClientData, ContractCreateRequest
from src.application.services import ContractService
from src.core.dependencies import get_folio_generator
from src.domain.interfaces import FolioGenerator
from src.infrastructure.database import Base, SqlAlchemyUnitOfWork, get_db_session
from src.infrastructure.repositories import (
    SqlAvalRepository,
    SqlClientRepository,
    SqlContractRepository,
)


# =============================================================================
# Test Doubles
# =============================================================================

class SequentialFolioGenerator(FolioGenerator):
    """Folio generator producing CTR-TEST000001, CTR-TEST000002, ..."""

    def __init__(self, prefix: str = "CTR-TEST"):
        self._prefix = prefix
        self._counter = count(1)

    def generate(self) -> str:
        return f"{self._prefix}{next(self._counter):06d}"


# =============================================================================
# Database Fixtures
# =============================================================================

def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def row_count(test_session: AsyncSession):
    """Async helper counting the rows of a mapped table."""
    async def _count(model) -> int:
        result = await test_session.execute(select(func.count()).select_from(model))
        return result.scalar_one()

    return _count


@pytest.fixture
def folio_generator() -> SequentialFolioGenerator:
    return SequentialFolioGenerator()


@pytest.fixture
def contract_service(
    test_session: AsyncSession,
    folio_generator: SequentialFolioGenerator,
) -> ContractService:
    """ContractService backed by the in-memory database."""
    return ContractService(
        client_repository=SqlClientRepository(test_session),
        aval_repository=SqlAvalRepository(test_session),
        contract_repository=SqlContractRepository(test_session),
        unit_of_work=SqlAlchemyUnitOfWork(test_session),
        folio_generator=folio_generator,
    )


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    test_session: AsyncSession,
    folio_generator: SequentialFolioGenerator,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the in-memory database.

    Every request shares the test session, so data written by one
    request is visible to the next and to the test itself.
    """
    async def override_get_db_session():
        yield test_session

    def override_get_folio_generator():
        return folio_generator

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_folio_generator] = override_get_folio_generator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Test Data
# =============================================================================

@pytest.fixture
def client_payload() -> dict:
    return {
        "name": "María López",
        "birthdate": "1985-04-12",
        "voter_id": "LOPM850412MDF",
        "address": "Av. Juárez 100",
        "neighborhood": "Centro",
        "zip_code": "06000",
        "municipality": "Cuauhtémoc",
        "state": "CDMX",
        "phone": "5555555555",
        "cellphone": "5511111111",
        "message_phone": "5522222222",
        "email": "maria@example.com",
        "assignment": "Zona 1",
        "promoter": "Juan",
        "supervisor": "Ana",
        "executive": "Luis",
    }


@pytest.fixture
def aval_payload() -> dict:
    return {
        "name": "Pedro Ruiz",
        "birthdate": "1980-01-30",
        "voter_id": "RUIP800130HDF",
        "address": "Calle 5 #20",
        "neighborhood": "Roma",
        "zip_code": "06700",
        "municipality": "Cuauhtémoc",
        "state": "CDMX",
        "phone": "5533333333",
        "cellphone": "5544444444",
        "message_phone": "5566666666",
        "email": "pedro@example.com",
        "group": "A",
    }


@pytest.fixture
def contract_payload(client_payload: dict, aval_payload: dict) -> dict:
    return {
        "client": client_payload,
        "aval": aval_payload,
        "amount": 10000,
        "interest_rate": 36,
        "term_weeks": 52,
        "start_date": "2025-01-06",
    }


@pytest.fixture
def contract_request(client_payload: dict, aval_payload: dict) -> ContractCreateRequest:
    """A valid create request for the service layer."""
    client_fields = dict(client_payload, birthdate=date(1985, 4, 12))
    aval_fields = dict(aval_payload, birthdate=date(1980, 1, 30))

    return ContractCreateRequest(
        client=ClientData(**client_fields),
        aval=AvalData(**aval_fields),
        amount=10000,
        interest_rate=36,
        term_weeks=52,
        start_date=date(2025, 1, 6),
    )
