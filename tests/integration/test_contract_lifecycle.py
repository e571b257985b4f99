"""
Integration tests for the contract lifecycle against a real database.

These tests verify:
1. Creating a contract stores exactly one client, one aval and one contract
2. A failure at any insert leaves nothing behind
3. Deleting a contract removes its client/aval once no contract references them
4. Clients and avales still referenced elsewhere survive
5. Deleting an unknown contract changes nothing
"""

from dataclasses import replace
from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from structlog.testing import capture_logs

from src.application.services import ContractService
from src.domain.entities import Aval, Contract
from src.domain.exceptions import (
    ContractNotFoundException,
    InvalidRequestException,
    StoreUnavailableException,
    TransactionalFailureException,
)
from src.domain.interfaces import AvalRepository, FolioGenerator
from src.infrastructure.database import (
    AvalModel,
    ClientModel,
    ContractModel,
    SqlAlchemyUnitOfWork,
)
from src.infrastructure.repositories import (
    SqlAvalRepository,
    SqlClientRepository,
    SqlContractRepository,
)


# =============================================================================
# Test Doubles
# =============================================================================

class FailingAvalRepository(AvalRepository):
    """Aval repository whose inserts always raise the given error."""

    def __init__(self, inner: AvalRepository, error: Exception):
        self._inner = inner
        self._error = error

    async def get(self, aval_id):
        return await self._inner.get(aval_id)

    async def get_for_update(self, aval_id):
        return await self._inner.get_for_update(aval_id)

    async def add(self, aval: Aval) -> Aval:
        raise self._error

    async def delete(self, aval_id):
        return await self._inner.delete(aval_id)


class AvalDeleteFailingRepository(SqlAvalRepository):
    """Aval repository whose deletes fail after the earlier deletes ran."""

    async def delete(self, aval_id):
        raise IntegrityError("DELETE FROM avales", {}, Exception("simulated failure"))


class RecordingClientRepository(SqlClientRepository):
    def __init__(self, session, calls: list):
        super().__init__(session)
        self._calls = calls

    async def get_for_update(self, client_id):
        self._calls.append(("lock_client", client_id))
        return await super().get_for_update(client_id)

    async def delete(self, client_id):
        self._calls.append(("delete_client", client_id))
        return await super().delete(client_id)


class RecordingAvalRepository(SqlAvalRepository):
    def __init__(self, session, calls: list):
        super().__init__(session)
        self._calls = calls

    async def get_for_update(self, aval_id):
        self._calls.append(("lock_aval", aval_id))
        return await super().get_for_update(aval_id)

    async def delete(self, aval_id):
        self._calls.append(("delete_aval", aval_id))
        return await super().delete(aval_id)


class RecordingContractRepository(SqlContractRepository):
    def __init__(self, session, calls: list):
        super().__init__(session)
        self._calls = calls

    async def get_for_update(self, contract_id):
        self._calls.append(("lock_contract", contract_id))
        return await super().get_for_update(contract_id)

    async def delete(self, contract_id):
        self._calls.append(("delete_contract", contract_id))
        return await super().delete(contract_id)

    async def count_by_client(self, client_id):
        self._calls.append(("count_client", client_id))
        return await super().count_by_client(client_id)

    async def count_by_aval(self, aval_id):
        self._calls.append(("count_aval", aval_id))
        return await super().count_by_aval(aval_id)


class FixedFolioGenerator(FolioGenerator):
    """Always hands out the same folio."""

    def generate(self) -> str:
        return "CTR-DUPLICATE"


def service_with(test_session, folio_generator, aval_repository=None) -> ContractService:
    return ContractService(
        client_repository=SqlClientRepository(test_session),
        aval_repository=aval_repository or SqlAvalRepository(test_session),
        contract_repository=SqlContractRepository(test_session),
        unit_of_work=SqlAlchemyUnitOfWork(test_session),
        folio_generator=folio_generator,
    )


async def store_counts(row_count) -> tuple:
    return (
        await row_count(ClientModel),
        await row_count(AvalModel),
        await row_count(ContractModel),
    )


# =============================================================================
# Create
# =============================================================================

class TestCreateContract:
    """Tests for the atomic client + aval + contract insert."""

    @pytest.mark.asyncio
    async def test_creates_one_of_each(self, contract_service, contract_request, row_count):
        created = await contract_service.create_contract(contract_request)

        assert await store_counts(row_count) == (1, 1, 1)
        assert created.contract_id > 0
        assert created.folio == "CTR-TEST000001"

        contract = await contract_service.get_contract(created.contract_id)
        assert contract.client_id == created.client_id
        assert contract.aval_id == created.aval_id
        assert contract.client_name == "María López"
        assert contract.client_cellphone == "5511111111"
        assert contract.status == "activo"

    @pytest.mark.asyncio
    async def test_weekly_payment_computed_when_omitted(
        self,
        contract_service,
        contract_request,
    ):
        created = await contract_service.create_contract(contract_request)

        assert created.weekly_payment == 229.65

    @pytest.mark.asyncio
    async def test_weekly_payment_kept_when_given(self, contract_service, contract_request):
        created = await contract_service.create_contract(
            replace(contract_request, weekly_payment=250.0, status="pendiente")
        )

        contract = await contract_service.get_contract(created.contract_id)
        assert contract.weekly_payment == 250.0
        assert contract.status == "pendiente"

    @pytest.mark.asyncio
    async def test_folios_are_unique(self, contract_service, contract_request):
        folios = {
            (await contract_service.create_contract(contract_request)).folio
            for _ in range(3)
        }

        assert len(folios) == 3

    @pytest.mark.asyncio
    async def test_aval_insert_failure_leaves_nothing(
        self,
        test_session,
        folio_generator,
        contract_request,
        row_count,
    ):
        """The client insert already succeeded; it must be rolled back too."""
        failing = FailingAvalRepository(
            SqlAvalRepository(test_session),
            IntegrityError("INSERT INTO avales", {}, Exception("simulated failure")),
        )
        service = service_with(test_session, folio_generator, failing)

        with pytest.raises(TransactionalFailureException) as exc_info:
            await service.create_contract(contract_request)

        assert exc_info.value.code == "TRANSACTION_FAILED"
        assert await store_counts(row_count) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_lost_connection_reports_store_unavailable(
        self,
        test_session,
        folio_generator,
        contract_request,
        row_count,
    ):
        failing = FailingAvalRepository(
            SqlAvalRepository(test_session),
            OperationalError("INSERT INTO avales", {}, Exception("connection refused")),
        )
        service = service_with(test_session, folio_generator, failing)

        with pytest.raises(StoreUnavailableException):
            await service.create_contract(contract_request)

        assert await store_counts(row_count) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_unexpected_error_still_rolls_back(
        self,
        test_session,
        folio_generator,
        contract_request,
        row_count,
    ):
        failing = FailingAvalRepository(SqlAvalRepository(test_session), RuntimeError("boom"))
        service = service_with(test_session, folio_generator, failing)

        with pytest.raises(RuntimeError, match="boom"):
            await service.create_contract(contract_request)

        assert await store_counts(row_count) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_duplicate_folio_rolls_back_client_and_aval(
        self,
        test_session,
        contract_request,
        row_count,
    ):
        service = service_with(test_session, FixedFolioGenerator())
        await service.create_contract(contract_request)

        with pytest.raises(TransactionalFailureException):
            await service.create_contract(contract_request)

        assert await store_counts(row_count) == (1, 1, 1)

    @pytest.mark.asyncio
    async def test_invalid_request_writes_nothing(
        self,
        contract_service,
        contract_request,
        row_count,
    ):
        bad_client = replace(contract_request.client, name="   ")

        with pytest.raises(InvalidRequestException, match="client.name"):
            await contract_service.create_contract(replace(contract_request, client=bad_client))

        with pytest.raises(InvalidRequestException, match="term_weeks"):
            await contract_service.create_contract(replace(contract_request, term_weeks=0))

        assert await store_counts(row_count) == (0, 0, 0)


# =============================================================================
# Delete
# =============================================================================

class TestDeleteContract:
    """Tests for reference-counted deletion."""

    @pytest.mark.asyncio
    async def test_delete_removes_orphaned_client_and_aval(
        self,
        contract_service,
        contract_request,
        row_count,
    ):
        created = await contract_service.create_contract(contract_request)

        with capture_logs() as logs:
            result = await contract_service.delete_contract(created.contract_id)

        assert result.client_removed is True
        events = [entry["event"] for entry in logs]
        assert events[-3:] == [
            "orphan_client_deleted",
            "orphan_aval_deleted",
            "contract_deleted",
        ]
        assert result.aval_removed is True
        assert await store_counts(row_count) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_shared_client_survives(
        self,
        test_session,
        contract_service,
        contract_request,
        row_count,
    ):
        first = await contract_service.create_contract(contract_request)
        second = await contract_service.create_contract(contract_request)

        # A third contract reusing the first client with the second aval
        await SqlContractRepository(test_session).add(
            Contract(
                folio="CTR-SHARED",
                client_id=first.client_id,
                aval_id=second.aval_id,
                amount=5000,
                interest_rate=0,
                term_weeks=10,
                weekly_payment=500,
                start_date=date(2025, 2, 3),
            )
        )
        await test_session.commit()

        result = await contract_service.delete_contract(first.contract_id)

        assert result.client_removed is False
        assert result.aval_removed is True
        assert await SqlClientRepository(test_session).get(first.client_id) is not None
        assert await SqlAvalRepository(test_session).get(first.aval_id) is None
        assert await store_counts(row_count) == (2, 1, 2)

    @pytest.mark.asyncio
    async def test_client_and_aval_counted_independently(
        self,
        test_session,
        contract_service,
        contract_request,
    ):
        """Client 1 stays referenced; aval 1 does not, even though id 1 is still in use."""
        first = await contract_service.create_contract(contract_request)
        second = await contract_service.create_contract(contract_request)
        assert first.client_id == first.aval_id

        await SqlContractRepository(test_session).add(
            Contract(
                folio="CTR-CROSS",
                client_id=first.client_id,
                aval_id=second.aval_id,
                amount=1000,
                interest_rate=10,
                term_weeks=4,
                weekly_payment=251.44,
                start_date=date(2025, 3, 3),
            )
        )
        await test_session.commit()

        result = await contract_service.delete_contract(first.contract_id)

        assert result.client_removed is False
        assert result.aval_removed is True

    @pytest.mark.asyncio
    async def test_last_reference_removes_shared_client(
        self,
        test_session,
        contract_service,
        contract_request,
        row_count,
    ):
        first = await contract_service.create_contract(contract_request)
        extra = await SqlContractRepository(test_session).add(
            Contract(
                folio="CTR-EXTRA",
                client_id=first.client_id,
                aval_id=first.aval_id,
                amount=2000,
                interest_rate=0,
                term_weeks=2,
                weekly_payment=1000,
                start_date=date(2025, 1, 13),
            )
        )
        await test_session.commit()

        first_result = await contract_service.delete_contract(first.contract_id)
        last_result = await contract_service.delete_contract(extra.id)

        assert (first_result.client_removed, first_result.aval_removed) == (False, False)
        assert (last_result.client_removed, last_result.aval_removed) == (True, True)
        assert await store_counts(row_count) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_cleanup_failure_rolls_back_whole_delete(
        self,
        test_session,
        folio_generator,
        contract_service,
        contract_request,
        row_count,
    ):
        """The contract and client deletes already ran when the aval delete fails."""
        created = await contract_service.create_contract(contract_request)
        service = service_with(
            test_session,
            folio_generator,
            AvalDeleteFailingRepository(test_session),
        )

        with capture_logs() as logs, pytest.raises(TransactionalFailureException):
            await service.delete_contract(created.contract_id)

        assert await store_counts(row_count) == (1, 1, 1)
        events = [entry["event"] for entry in logs]
        assert "transaction_rolled_back" in events
        assert "orphan_client_deleted" not in events
        assert "orphan_aval_deleted" not in events
        contract = await contract_service.get_contract(created.contract_id)
        assert contract.client_id == created.client_id

    @pytest.mark.asyncio
    async def test_client_and_aval_locked_before_counting(
        self,
        test_session,
        folio_generator,
        contract_service,
        contract_request,
    ):
        created = await contract_service.create_contract(contract_request)
        calls = []
        service = ContractService(
            client_repository=RecordingClientRepository(test_session, calls),
            aval_repository=RecordingAvalRepository(test_session, calls),
            contract_repository=RecordingContractRepository(test_session, calls),
            unit_of_work=SqlAlchemyUnitOfWork(test_session),
            folio_generator=folio_generator,
        )

        await service.delete_contract(created.contract_id)

        assert calls == [
            ("lock_contract", created.contract_id),
            ("lock_client", created.client_id),
            ("lock_aval", created.aval_id),
            ("delete_contract", created.contract_id),
            ("count_client", created.client_id),
            ("delete_client", created.client_id),
            ("count_aval", created.aval_id),
            ("delete_aval", created.aval_id),
        ]

    @pytest.mark.asyncio
    async def test_locking_lookups(self, test_session, contract_service, contract_request):
        created = await contract_service.create_contract(contract_request)
        clients = SqlClientRepository(test_session)
        avales = SqlAvalRepository(test_session)

        client = await clients.get_for_update(created.client_id)
        aval = await avales.get_for_update(created.aval_id)

        assert client.name == "María López"
        assert aval.group == "A"
        assert await clients.get_for_update(999) is None
        assert await avales.get_for_update(999) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_contract_changes_nothing(
        self,
        contract_service,
        contract_request,
        row_count,
    ):
        await contract_service.create_contract(contract_request)
        before = await store_counts(row_count)

        with pytest.raises(ContractNotFoundException) as exc_info:
            await contract_service.delete_contract(999)

        assert exc_info.value.code == "CONTRACT_NOT_FOUND"
        assert await store_counts(row_count) == before


# =============================================================================
# Queries
# =============================================================================

class TestQueryContracts:

    @pytest.mark.asyncio
    async def test_list_newest_first(self, contract_service, contract_request):
        ids = [
            (await contract_service.create_contract(contract_request)).contract_id
            for _ in range(3)
        ]

        contracts = await contract_service.list_contracts()

        assert [c.id for c in contracts] == list(reversed(ids))

    @pytest.mark.asyncio
    async def test_list_filters(self, contract_service, contract_request):
        await contract_service.create_contract(contract_request)
        await contract_service.create_contract(replace(contract_request, status="completado"))

        assert len(await contract_service.list_contracts(status="completado")) == 1
        assert len(await contract_service.list_contracts(search="CTR-TEST000002")) == 1
        assert len(await contract_service.list_contracts(search="maría")) == 2
        assert await contract_service.list_contracts(search="nadie") == []

    @pytest.mark.asyncio
    async def test_get_unknown_contract(self, contract_service):
        with pytest.raises(ContractNotFoundException):
            await contract_service.get_contract(42)

    def test_quote(self, contract_service):
        quote = contract_service.quote(10000, 36, 52)

        assert quote.weekly_payment_rounded == 229.65
        assert quote.total_repayment == pytest.approx(quote.weekly_payment * 52, abs=0.01)
        assert quote.total_interest == pytest.approx(quote.total_repayment - 10000, abs=0.01)

    def test_quote_rejects_zero_term(self, contract_service):
        with pytest.raises(InvalidRequestException):
            contract_service.quote(10000, 36, 0)
