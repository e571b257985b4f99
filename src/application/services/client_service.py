"""Client service - read access to borrowers."""

from typing import List, Optional

from src.domain.entities import Client
from src.domain.exceptions import ClientNotFoundException
from src.domain.interfaces import ClientRepository


class ClientService:
    """
    Application service for client lookups.

    Clients are created and removed only through ContractService.
    """

    def __init__(self, client_repository: ClientRepository):
        self._client_repo = client_repository

    async def list_clients(self, search: Optional[str] = None) -> List[Client]:
        return await self._client_repo.list(search=search)

    async def get_client(self, client_id: int) -> Client:
        client = await self._client_repo.get(client_id)

        if client is None:
            raise ClientNotFoundException(client_id)

        return client
