"""Transaction API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from src.application.services import TransactionService
from src.core.dependencies import get_transaction_service
from src.core.metrics import record_transaction_recorded
from src.domain.entities import TransactionType
from src.presentation.schemas import (
    CreatedSchema,
    Envelope,
    ErrorResponseSchema,
    TransactionCreateSchema,
    TransactionSchema,
)

transaction_router = APIRouter(
    prefix="/transactions",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Transaction not found"},
    },
)

TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
TransactionId = Annotated[int, Path(ge=1, description="Transaction id")]


@transaction_router.get(
    "",
    response_model=Envelope[list[TransactionSchema]],
    summary="List Transactions",
    description="List transactions, newest date first.",
)
async def list_transactions(
    transaction_service: TransactionServiceDep,
    week_id: Annotated[Optional[int], Query(ge=1, description="Only this week")] = None,
    type: Annotated[Optional[TransactionType], Query(description="income or expense")] = None,
) -> Envelope[list[TransactionSchema]]:
    transactions = await transaction_service.list_transactions(week_id=week_id, type=type)

    return Envelope(data=[TransactionSchema.model_validate(t) for t in transactions])


@transaction_router.get(
    "/{transaction_id}",
    response_model=Envelope[TransactionSchema],
    summary="Get Transaction",
)
async def get_transaction(
    transaction_id: TransactionId,
    transaction_service: TransactionServiceDep,
) -> Envelope[TransactionSchema]:
    transaction = await transaction_service.get_transaction(transaction_id)

    return Envelope(data=TransactionSchema.model_validate(transaction))


@transaction_router.post(
    "",
    response_model=Envelope[CreatedSchema],
    status_code=201,
    summary="Create Transaction",
    responses={
        409: {"model": ErrorResponseSchema, "description": "Unknown category or week"},
    },
)
async def create_transaction(
    request: TransactionCreateSchema,
    transaction_service: TransactionServiceDep,
) -> Envelope[CreatedSchema]:
    transaction = await transaction_service.create_transaction(
        date=request.date,
        description=request.description,
        type=request.type,
        category_id=request.category_id,
        amount=request.amount,
        week_id=request.week_id,
    )

    record_transaction_recorded(transaction.type.value)

    return Envelope(
        data=CreatedSchema(id=transaction.id),
        message="Transacción creada correctamente",
    )


@transaction_router.delete(
    "/{transaction_id}",
    response_model=Envelope[None],
    summary="Delete Transaction",
)
async def delete_transaction(
    transaction_id: TransactionId,
    transaction_service: TransactionServiceDep,
) -> Envelope[None]:
    await transaction_service.delete_transaction(transaction_id)

    return Envelope(message="Transacción eliminada correctamente")
