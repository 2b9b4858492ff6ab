"""
Factory para criar instâncias configuradas dos serviços
"""
from typing import Optional

import httpx

from ..application.services import SearchForm
from .config import Config
from .search_client import HttpSearchGateway


class SearchFormFactory:
    """Factory para criar o formulário de busca configurado"""

    @staticmethod
    def create(
        config: Config = None,
        client: Optional[httpx.AsyncClient] = None,
        **fields: str,
    ) -> SearchForm:
        """Cria o formulário ligado ao gateway HTTP"""
        if config is None:
            config = Config()

        gateway = SearchFormFactory.create_gateway(config, client)
        return SearchForm(gateway, **fields)

    @staticmethod
    def create_gateway(config: Config, client: Optional[httpx.AsyncClient] = None) -> HttpSearchGateway:
        return HttpSearchGateway(config, client=client)
