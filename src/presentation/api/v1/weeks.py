"""Budget week API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from src.application.services import WeekService
from src.core.dependencies import get_week_service
from src.presentation.schemas import (
    CreatedSchema,
    Envelope,
    ErrorResponseSchema,
    WeekCreateSchema,
    WeekSchema,
    WeekSummarySchema,
)

week_router = APIRouter(
    prefix="/weeks",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Week not found"},
    },
)

WeekServiceDep = Annotated[WeekService, Depends(get_week_service)]
WeekId = Annotated[int, Path(ge=1, description="Week id")]


@week_router.get(
    "",
    response_model=Envelope[list[WeekSchema]],
    summary="List Weeks",
    description="List budget weeks, most recent start date first.",
)
async def list_weeks(week_service: WeekServiceDep) -> Envelope[list[WeekSchema]]:
    weeks = await week_service.list_weeks()

    return Envelope(data=[WeekSchema.model_validate(w) for w in weeks])


@week_router.get(
    "/current",
    response_model=Envelope[WeekSchema],
    summary="Get Current Week",
    description="""
    Return the week containing today's date, or the most recent week
    when none covers today.
    """,
)
async def get_current_week(week_service: WeekServiceDep) -> Envelope[WeekSchema]:
    week = await week_service.get_current_week()

    return Envelope(data=WeekSchema.model_validate(week))


@week_router.get(
    "/{week_id}",
    response_model=Envelope[WeekSchema],
    summary="Get Week",
)
async def get_week(week_id: WeekId, week_service: WeekServiceDep) -> Envelope[WeekSchema]:
    week = await week_service.get_week(week_id)

    return Envelope(data=WeekSchema.model_validate(week))


@week_router.get(
    "/{week_id}/summary",
    response_model=Envelope[WeekSummarySchema],
    summary="Get Week Summary",
    description="""
    Weekly dashboard: income, expenses, balance (income - expenses),
    remaining budget (budget - expenses) and the five newest transactions.
    """,
)
async def get_week_summary(
    week_id: WeekId,
    week_service: WeekServiceDep,
) -> Envelope[WeekSummarySchema]:
    summary = await week_service.summarize_week(week_id)

    return Envelope(data=WeekSummarySchema.model_validate(summary))


@week_router.post(
    "",
    response_model=Envelope[CreatedSchema],
    status_code=201,
    summary="Create Week",
)
async def create_week(
    request: WeekCreateSchema,
    week_service: WeekServiceDep,
) -> Envelope[CreatedSchema]:
    week = await week_service.create_week(request.start_date, request.budget)

    return Envelope(data=CreatedSchema(id=week.id), message="Semana creada correctamente")


@week_router.delete(
    "/{week_id}",
    response_model=Envelope[None],
    summary="Delete Week",
    responses={
        409: {"model": ErrorResponseSchema, "description": "Week still has transactions"},
    },
)
async def delete_week(week_id: WeekId, week_service: WeekServiceDep) -> Envelope[None]:
    await week_service.delete_week(week_id)

    return Envelope(message="Semana eliminada correctamente")
