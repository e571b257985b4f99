"""Category API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from src.application.services import CategoryService
from src.core.dependencies import get_category_service
from src.domain.entities import TransactionType
from src.presentation.schemas import (
    CategoryCreateSchema,
    CategorySchema,
    CreatedSchema,
    Envelope,
    ErrorResponseSchema,
)

category_router = APIRouter(
    prefix="/categories",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Category not found"},
    },
)

CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
CategoryId = Annotated[int, Path(ge=1, description="Category id")]


@category_router.get(
    "",
    response_model=Envelope[list[CategorySchema]],
    summary="List Categories",
    description="List categories ordered by type, then name.",
)
async def list_categories(
    category_service: CategoryServiceDep,
    type: Annotated[Optional[TransactionType], Query(description="income or expense")] = None,
) -> Envelope[list[CategorySchema]]:
    categories = await category_service.list_categories(type=type)

    return Envelope(data=[CategorySchema.model_validate(c) for c in categories])


@category_router.get(
    "/{category_id}",
    response_model=Envelope[CategorySchema],
    summary="Get Category",
)
async def get_category(
    category_id: CategoryId,
    category_service: CategoryServiceDep,
) -> Envelope[CategorySchema]:
    category = await category_service.get_category(category_id)

    return Envelope(data=CategorySchema.model_validate(category))


@category_router.post(
    "",
    response_model=Envelope[CreatedSchema],
    status_code=201,
    summary="Create Category",
)
async def create_category(
    request: CategoryCreateSchema,
    category_service: CategoryServiceDep,
) -> Envelope[CreatedSchema]:
    category = await category_service.create_category(request.name, request.type)

    return Envelope(data=CreatedSchema(id=category.id), message="Categoría creada correctamente")


@category_router.delete(
    "/{category_id}",
    response_model=Envelope[None],
    summary="Delete Category",
    responses={
        409: {"model": ErrorResponseSchema, "description": "Category still in use"},
    },
)
async def delete_category(
    category_id: CategoryId,
    category_service: CategoryServiceDep,
) -> Envelope[None]:
    await category_service.delete_category(category_id)

    return Envelope(message="Categoría eliminada correctamente")
