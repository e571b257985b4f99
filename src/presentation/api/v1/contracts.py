"""Contract API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from src.application.dto import AvalData, ClientData, ContractCreateRequest
from src.application.services import ContractService
from src.core.dependencies import get_contract_service
from src.core.metrics import (
    record_contract_created,
    record_contract_deleted,
    record_contract_failure,
)
from src.domain.exceptions import ContractNotFoundException, DomainException
from src.presentation.schemas import (
    ContractCreateSchema,
    ContractCreatedSchema,
    ContractSchema,
    Envelope,
    ErrorResponseSchema,
    QuoteRequestSchema,
    QuoteSchema,
)

contract_router = APIRouter(
    prefix="/contracts",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Contract not found"},
        409: {"model": ErrorResponseSchema, "description": "Store transaction rolled back"},
        503: {"model": ErrorResponseSchema, "description": "Store unavailable"},
    },
)

ContractServiceDep = Annotated[ContractService, Depends(get_contract_service)]
ContractId = Annotated[int, Path(ge=1, description="Contract id")]


@contract_router.get(
    "",
    response_model=Envelope[list[ContractSchema]],
    summary="List Contracts",
    description="List contracts, newest first, with the client's name and cellphone.",
)
async def list_contracts(
    contract_service: ContractServiceDep,
    status: Annotated[Optional[str], Query(max_length=50, description="Filter by status")] = None,
    search: Annotated[
        Optional[str],
        Query(max_length=255, description="Substring of the folio or client name"),
    ] = None,
) -> Envelope[list[ContractSchema]]:
    contracts = await contract_service.list_contracts(status=status, search=search)

    return Envelope(data=[ContractSchema.model_validate(c) for c in contracts])


@contract_router.post(
    "/quote",
    response_model=Envelope[QuoteSchema],
    summary="Quote Weekly Payment",
    description="""
    Compute the weekly payment for a prospective contract.

    Uses the fixed-payment annuity formula with a weekly rate of
    annual_rate / 100 / 52, or an even split when the rate is zero.
    """,
)
async def quote_contract(
    request: QuoteRequestSchema,
    contract_service: ContractServiceDep,
) -> Envelope[QuoteSchema]:
    quote = contract_service.quote(request.amount, request.interest_rate, request.term_weeks)

    return Envelope(data=QuoteSchema.model_validate(quote))


@contract_router.get(
    "/{contract_id}",
    response_model=Envelope[ContractSchema],
    summary="Get Contract",
)
async def get_contract(
    contract_id: ContractId,
    contract_service: ContractServiceDep,
) -> Envelope[ContractSchema]:
    contract = await contract_service.get_contract(contract_id)

    return Envelope(data=ContractSchema.model_validate(contract))


@contract_router.post(
    "",
    response_model=Envelope[ContractCreatedSchema],
    status_code=201,
    summary="Create Contract",
    description="""
    Create a contract together with its client and aval.

    The three records are stored in a single transaction: if any insert
    fails nothing is stored.
    """,
    responses={
        201: {"description": "Contract, client and aval created"},
    },
)
async def create_contract(
    request: ContractCreateSchema,
    contract_service: ContractServiceDep,
) -> Envelope[ContractCreatedSchema]:
    dto = ContractCreateRequest(
        client=ClientData(**request.client.model_dump()),
        aval=AvalData(**request.aval.model_dump()),
        amount=request.amount,
        interest_rate=request.interest_rate,
        term_weeks=request.term_weeks,
        start_date=request.start_date,
        weekly_payment=request.weekly_payment,
        status=request.status,
    )

    try:
        created = await contract_service.create_contract(dto)
    except DomainException:
        record_contract_failure("create")
        raise

    record_contract_created(request.amount)

    return Envelope(
        data=ContractCreatedSchema(
            id=created.contract_id,
            folio=created.folio,
            client_id=created.client_id,
            aval_id=created.aval_id,
            weekly_payment=created.weekly_payment,
        ),
        message="Contrato creado correctamente",
    )


@contract_router.delete(
    "/{contract_id}",
    response_model=Envelope[None],
    summary="Delete Contract",
    description="""
    Delete a contract.

    Its client and aval are deleted too when no other contract
    references them.
    """,
)
async def delete_contract(
    contract_id: ContractId,
    contract_service: ContractServiceDep,
) -> Envelope[None]:
    try:
        result = await contract_service.delete_contract(contract_id)
    except ContractNotFoundException:
        record_contract_failure("delete", outcome="not_found")
        raise
    except DomainException:
        record_contract_failure("delete")
        raise

    record_contract_deleted(result.client_removed, result.aval_removed)

    return Envelope(message="Contrato eliminado correctamente")
