"""Contract service - orchestrates the contract lifecycle use cases."""

from typing import List, Optional

import structlog

from src.application.dto import (
    ContractCreated,
    ContractCreateRequest,
    ContractDeleted,
    ContractResponse,
    PaymentQuote,
)
from src.domain.entities import Contract
from src.domain.exceptions import ContractNotFoundException, InvalidRequestException
from src.domain.interfaces import (
    AvalRepository,
    ClientRepository,
    ContractRepository,
    FolioGenerator,
    UnitOfWork,
)
from src.service.lending import (
    LendingSettings,
    compute_weekly_payment,
    lending_settings,
    round_currency,
    total_repayment,
)

logger = structlog.get_logger(__name__)


class ContractService:
    """
    Application service for loan contract use cases.

    Contracts own their client and aval: both are inserted together with
    the contract in one transaction, and each is deleted in the same
    transaction as the last contract that references it.
    """

    def __init__(
        self,
        client_repository: ClientRepository,
        aval_repository: AvalRepository,
        contract_repository: ContractRepository,
        unit_of_work: UnitOfWork,
        folio_generator: FolioGenerator,
        settings: LendingSettings = lending_settings,
    ):
        self._client_repo = client_repository
        self._aval_repo = aval_repository
        self._contract_repo = contract_repository
        self._uow = unit_of_work
        self._folios = folio_generator
        self._settings = settings

    async def create_contract(self, request: ContractCreateRequest) -> ContractCreated:
        """
        Create a client, an aval and a contract as one atomic unit.

        Args:
            request: Client, aval and contract fields

        Returns:
            ContractCreated with the new contract id and folio

        Raises:
            InvalidRequestException: If request validation fails
            TransactionalFailureException: If any insert fails (nothing persists)
            StoreUnavailableException: If the store cannot be reached
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        weekly_payment = request.weekly_payment
        if weekly_payment is None:
            weekly_payment = round_currency(
                compute_weekly_payment(
                    request.amount,
                    request.interest_rate,
                    request.term_weeks,
                    self._settings,
                ),
                self._settings,
            )

        folio = self._folios.generate()
        log = logger.bind(folio=folio, amount=request.amount)
        log.info("contract_requested")

        async with self._uow.transaction("create contract"):
            client = await self._client_repo.add(request.client.to_entity())
            aval = await self._aval_repo.add(request.aval.to_entity())
            contract = await self._contract_repo.add(
                Contract(
                    folio=folio,
                    client_id=client.id,
                    aval_id=aval.id,
                    amount=request.amount,
                    interest_rate=request.interest_rate,
                    term_weeks=request.term_weeks,
                    weekly_payment=weekly_payment,
                    start_date=request.start_date,
                    status=request.status or self._settings.default_status,
                )
            )

        log.info(
            "contract_created",
            contract_id=contract.id,
            client_id=client.id,
            aval_id=aval.id,
            weekly_payment=weekly_payment,
        )

        return ContractCreated(
            contract_id=contract.id,
            folio=folio,
            client_id=client.id,
            aval_id=aval.id,
            weekly_payment=weekly_payment,
        )

    async def delete_contract(self, contract_id: int) -> ContractDeleted:
        """
        Delete a contract and any client/aval it leaves unreferenced.

        The client and the aval are reference-counted independently, each
        against its own foreign-key column. Their rows are locked (client
        first, then aval) before counting, so two deletes sharing a client
        or aval serialize and the last one sees a count of zero.

        Raises:
            ContractNotFoundException: If no contract has this id (no writes)
            TransactionalFailureException: If any step fails (nothing is deleted)
        """
        log = logger.bind(contract_id=contract_id)

        async with self._uow.transaction("delete contract"):
            contract = await self._contract_repo.get_for_update(contract_id)
            if contract is None:
                log.warning("contract_not_found")
                raise ContractNotFoundException(contract_id)

            await self._client_repo.get_for_update(contract.client_id)
            await self._aval_repo.get_for_update(contract.aval_id)

            await self._contract_repo.delete(contract_id)

            client_removed = False
            if await self._contract_repo.count_by_client(contract.client_id) == 0:
                client_removed = await self._client_repo.delete(contract.client_id)

            aval_removed = False
            if await self._contract_repo.count_by_aval(contract.aval_id) == 0:
                aval_removed = await self._aval_repo.delete(contract.aval_id)

        if client_removed:
            log.info("orphan_client_deleted", client_id=contract.client_id)
        if aval_removed:
            log.info("orphan_aval_deleted", aval_id=contract.aval_id)

        log.info(
            "contract_deleted",
            folio=contract.folio,
            client_removed=client_removed,
            aval_removed=aval_removed,
        )

        return ContractDeleted(
            contract_id=contract_id,
            client_removed=client_removed,
            aval_removed=aval_removed,
        )

    async def get_contract(self, contract_id: int) -> ContractResponse:
        """
        Retrieve a contract by ID.

        Raises:
            ContractNotFoundException: If contract not found
        """
        contract = await self._contract_repo.get(contract_id)

        if contract is None:
            logger.warning("contract_not_found", contract_id=contract_id)
            raise ContractNotFoundException(contract_id)

        return ContractResponse.from_entity(contract)

    async def list_contracts(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[ContractResponse]:
        """List contracts, newest first."""
        contracts = await self._contract_repo.list(status=status, search=search)

        logger.info("contracts_listed", count=len(contracts), status=status)

        return [ContractResponse.from_entity(c) for c in contracts]

    def quote(self, amount: float, interest_rate: float, term_weeks: int) -> PaymentQuote:
        """
        Price a prospective contract without persisting anything.

        Raises:
            InvalidRequestException: If the terms are out of range
        """
        try:
            payment = compute_weekly_payment(amount, interest_rate, term_weeks, self._settings)
        except ValueError as exc:
            raise InvalidRequestException(str(exc)) from exc

        total = total_repayment(payment, term_weeks)

        return PaymentQuote(
            amount=amount,
            interest_rate=interest_rate,
            term_weeks=term_weeks,
            weekly_payment=payment,
            weekly_payment_rounded=round_currency(payment, self._settings),
            total_repayment=round_currency(total, self._settings),
            total_interest=round_currency(total - amount, self._settings),
        )
