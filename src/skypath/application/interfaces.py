"""
Interfaces/Contratos para Application Layer
"""
from typing import Protocol
from ..domain.models import Query, SearchResult


class SearchGatewayInterface(Protocol):
    """Interface para o serviço remoto de busca"""

    async def search(self, query: Query) -> SearchResult:
        """Busca itinerários.

        Raises:
            SearchServiceError: status de erro do serviço
            SearchTransportError: falha de rede ou corpo indecifrável
        """
        ...

    async def health(self) -> bool:
        """Verifica se o serviço está no ar"""
        ...
