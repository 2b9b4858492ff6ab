"""
Application Services - Orquestração do formulário de busca
"""
from typing import Callable, List

from ..domain.models import (
    Error,
    ErrorSource,
    Idle,
    Loading,
    Rejection,
    RequestState,
    Success,
)
from ..domain.validation import is_submittable, validate_for_submit
from ..infrastructure.logging import logger
from .exceptions import UNREACHABLE_MESSAGE, SearchServiceError, SearchTransportError
from .interfaces import SearchGatewayInterface

StateListener = Callable[[RequestState], None]


class SearchForm:
    """Formulário de busca e sua máquina de estados.

    Único dono do ``RequestState``: Idle -> Loading -> Error | Success.
    Cada transição notifica os listeners, que re-derivam a visão inteira.
    """

    def __init__(
        self,
        gateway: SearchGatewayInterface,
        origin: str = "JFK",
        destination: str = "LAX",
        date: str = "2024-03-15",
    ):
        self._gateway = gateway
        self.origin = origin
        self.destination = destination
        self.date = date
        self._state: RequestState = Idle()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def can_search(self) -> bool:
        """Botão de busca habilitado"""
        return is_submittable(self.origin, self.destination, self.date) and not self.is_loading

    async def check_health(self) -> bool:
        """Serviço de busca no ar"""
        return await self._gateway.health()

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def update(self, origin: str = None, destination: str = None, date: str = None) -> None:
        """Atualiza os campos do formulário"""
        if origin is not None:
            self.origin = origin
        if destination is not None:
            self.destination = destination
        if date is not None:
            self.date = date

    async def submit(self) -> RequestState:
        """Valida e envia a consulta atual"""
        if self.is_loading:
            logger.warning("submit_ignored_while_loading")
            return self._state

        query = validate_for_submit(self.origin, self.destination, self.date)
        if isinstance(query, Rejection):
            logger.info("submit_rejected", reason=query.message)
            self._set_state(Error(message=query.message, source=ErrorSource.VALIDATION))
            return self._state

        self._set_state(Loading())
        logger.info("search_started", **query.as_params())
        try:
            result = await self._gateway.search(query)
        except SearchServiceError as e:
            self._set_state(Error(message=e.message, source=ErrorSource.SERVICE))
        except SearchTransportError as e:
            self._set_state(Error(message=e.message, source=ErrorSource.TRANSPORT))
        except Exception:
            logger.exception("search_failed_unexpectedly", **query.as_params())
            self._set_state(Error(message=UNREACHABLE_MESSAGE, source=ErrorSource.TRANSPORT))
        else:
            logger.info("search_succeeded", count=result.count)
            self._set_state(Success(result=result))
        finally:
            # Nunca permanece em Loading após a conclusão
            if self.is_loading:
                self._set_state(Idle())

        return self._state

    def _set_state(self, state: RequestState) -> None:
        self._state = state
        for listener in self._listeners:
            listener(state)
