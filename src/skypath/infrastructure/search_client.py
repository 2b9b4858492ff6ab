"""
Cliente HTTP do serviço de busca SkyPath
"""
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..application.exceptions import (
    GENERIC_API_ERROR,
    UNREACHABLE_MESSAGE,
    SearchServiceError,
    SearchTransportError,
)
from ..domain.models import Query, SearchResult
from .config import Config
from .logging import logger


class HttpSearchGateway:
    """Gateway para o endpoint /api/search"""

    name = "SkyPath"

    def __init__(self, config: Config = None, client: Optional[httpx.AsyncClient] = None):
        self._config = config or Config()
        self._client = client

    async def search(self, query: Query) -> SearchResult:
        """Executa uma única requisição de busca"""
        try:
            response = await self._get(self._config.get_search_url(), params=query.as_params())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("search_transport_failed", error=str(e), **query.as_params())
            raise SearchTransportError(UNREACHABLE_MESSAGE) from e

        if not response.is_success:
            try:
                body: Any = response.json()
            except ValueError as e:
                # Corpo de erro indecifrável conta como falha de transporte
                logger.warning(
                    "search_error_body_undecodable",
                    status_code=response.status_code,
                    error=str(e),
                )
                raise SearchTransportError(UNREACHABLE_MESSAGE) from e
            message = self._error_message(body)
            logger.info(
                "search_service_error",
                status_code=response.status_code,
                message=message,
            )
            raise SearchServiceError(message, response.status_code)

        try:
            return SearchResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # Corpo não é JSON ou viola o formato esperado
            logger.warning("search_response_undecodable", error=str(e))
            raise SearchTransportError(UNREACHABLE_MESSAGE) from e

    async def health(self) -> bool:
        """Verifica /api/health; nunca lança exceção"""
        try:
            response = await self._get(self._config.get_health_url())
            return response.is_success and bool(response.json().get("ok"))
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, AttributeError) as e:
            logger.debug("health_check_failed", error=str(e))
            return False

    async def _get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url, params=params)
        async with httpx.AsyncClient(timeout=self._config.REQUEST_TIMEOUT) as client:
            return await client.get(url, params=params)

    def _error_message(self, body: Any) -> str:
        """Mensagem do corpo de erro, ou a genérica"""
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return GENERIC_API_ERROR
