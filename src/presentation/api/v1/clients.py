"""Client API endpoints (read-only)."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from src.application.services import ClientService
from src.core.dependencies import get_client_service
from src.presentation.schemas import ClientSchema, Envelope, ErrorResponseSchema

client_router = APIRouter(prefix="/clients")


@client_router.get(
    "",
    response_model=Envelope[list[ClientSchema]],
    summary="List Clients",
    description="""
    List clients ordered by name.

    Clients are created with their first contract and removed with their
    last one, so there is no create/delete endpoint here.
    """,
)
async def list_clients(
    client_service: Annotated[ClientService, Depends(get_client_service)],
    search: Annotated[
        Optional[str],
        Query(max_length=255, description="Substring of the client name"),
    ] = None,
) -> Envelope[list[ClientSchema]]:
    clients = await client_service.list_clients(search=search)

    return Envelope(data=[ClientSchema.model_validate(c) for c in clients])


@client_router.get(
    "/{client_id}",
    response_model=Envelope[ClientSchema],
    summary="Get Client",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Client not found"},
    },
)
async def get_client(
    client_id: Annotated[int, Path(ge=1, description="Client id")],
    client_service: Annotated[ClientService, Depends(get_client_service)],
) -> Envelope[ClientSchema]:
    client = await client_service.get_client(client_id)

    return Envelope(data=ClientSchema.model_validate(client))
