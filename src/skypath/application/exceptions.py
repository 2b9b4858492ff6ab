"""
Exceptions da fronteira com o serviço de busca
"""


class SearchGatewayError(Exception):
    """Falha de uma tentativa de busca"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SearchServiceError(SearchGatewayError):
    """O serviço respondeu com status de erro"""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class SearchTransportError(SearchGatewayError):
    """Serviço inalcançável ou resposta indecifrável"""


GENERIC_API_ERROR = "API error"
UNREACHABLE_MESSAGE = "Failed to reach backend. Is the search service running?"
