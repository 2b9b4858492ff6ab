"""
Domain Models - Entidades de negócio puras
"""
from enum import Enum
from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Query(BaseModel):
    """Consulta normalizada pronta para envio"""
    model_config = ConfigDict(frozen=True)

    origin: str = Field(..., description="IATA código origem (maiúsculas)")
    destination: str = Field(..., description="IATA código destino (maiúsculas)")
    date: str = Field(..., description="Data de partida YYYY-MM-DD")

    def as_params(self) -> Dict[str, str]:
        """Parâmetros de query string para o serviço de busca"""
        return {
            "origin": self.origin,
            "destination": self.destination,
            "date": self.date,
        }


class Rejection(BaseModel):
    """Motivo de rejeição de uma consulta inválida"""
    model_config = ConfigDict(frozen=True)

    message: str


class Segment(BaseModel):
    """Segmento de voo individual"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    origin: str = Field(..., description="IATA código origem")
    destination: str = Field(..., description="IATA código destino")
    departure_local: str = Field(..., alias="departureLocal", description="Partida, hora local")
    arrival_local: str = Field(..., alias="arrivalLocal", description="Chegada, hora local")
    flight_number: str = Field(..., alias="flightNumber")
    airline: str = ""
    aircraft: str = ""
    price: float = Field(0.0, ge=0)


class Itinerary(BaseModel):
    """Opção de viagem completa: segmentos e conexões entre eles"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    segments: List[Segment] = Field(..., min_length=1)
    layovers_minutes: List[int] = Field(default_factory=list, alias="layoversMinutes")
    total_duration_minutes: int = Field(..., alias="totalDurationMinutes")
    total_price: float = Field(..., alias="totalPrice", ge=0)

    @model_validator(mode="after")
    def _check_layovers(self) -> "Itinerary":
        # Uma conexão entre cada par consecutivo de segmentos
        if len(self.layovers_minutes) != len(self.segments) - 1:
            raise ValueError(
                f"expected {len(self.segments) - 1} layovers for "
                f"{len(self.segments)} segments, got {len(self.layovers_minutes)}"
            )
        return self


class SearchResult(BaseModel):
    """Resultado de uma busca"""
    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=0)
    itineraries: List[Itinerary] = Field(default_factory=list)
    origin: Optional[str] = None
    destination: Optional[str] = None
    date: Optional[str] = None

    @model_validator(mode="after")
    def _check_count(self) -> "SearchResult":
        if self.count != len(self.itineraries):
            raise ValueError(
                f"count {self.count} does not match {len(self.itineraries)} itineraries"
            )
        return self

    @property
    def is_empty(self) -> bool:
        return self.count == 0


class ErrorSource(str, Enum):
    """Origem de um erro exibido no formulário"""
    VALIDATION = "validation"
    SERVICE = "service"
    TRANSPORT = "transport"


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class Error(BaseModel):
    """Tentativa encerrada com erro (validação, serviço ou transporte)"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str
    source: ErrorSource


class Success(BaseModel):
    """Tentativa encerrada com resultado"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    result: SearchResult


RequestState = Union[Idle, Loading, Error, Success]
