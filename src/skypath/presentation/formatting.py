"""
Formatação de resultados - strings prontas para exibição
"""
import math
from typing import Optional

from babel.numbers import format_currency as babel_format_currency
from pydantic import BaseModel, ConfigDict

from ..domain.models import Itinerary, Segment

CURRENCY = "USD"
DEFAULT_LOCALE = "en_US"


class Layover(BaseModel):
    """Conexão após um segmento, no aeroporto de chegada dele"""
    model_config = ConfigDict(frozen=True)

    airport: str
    minutes: int

    @property
    def label(self) -> str:
        return f"Layover at {self.airport}: {format_duration(self.minutes)}"


def format_duration(total_minutes: int) -> str:
    """Formata minutos como "2h 5m", "1h" ou "45m"."""
    hours = math.floor(total_minutes / 60)
    if hours <= 0:
        # Totais negativos mantêm o sinal do resto: -30 -> "-30m"
        return f"{int(math.fmod(total_minutes, 60))}m"
    rest = total_minutes % 60
    if rest == 0:
        return f"{hours}h"
    return f"{hours}h {rest}m"


def format_currency(amount: float, locale: Optional[str] = None) -> str:
    """Valor em dólares no formato monetário do locale"""
    locale = (locale or DEFAULT_LOCALE).replace("-", "_")
    return babel_format_currency(amount, CURRENCY, locale=locale)


def format_segment_line(segment: Segment) -> str:
    return (
        f"{segment.origin} → {segment.destination} • "
        f"{segment.departure_local} → {segment.arrival_local} • "
        f"{segment.flight_number}"
    )


def format_segment_details(segment: Segment, locale: Optional[str] = None) -> str:
    return f"{segment.airline} • {segment.aircraft} • {format_currency(segment.price, locale)}"


def stop_count(itinerary: Itinerary) -> int:
    return max(0, len(itinerary.segments) - 1)


def layover_for_segment_index(itinerary: Itinerary, index: int) -> Optional[Layover]:
    """Conexão que segue o segmento ``index``.

    Pareamento posicional: a conexão i ocorre no destino do segmento i.
    """
    if index < 0 or index >= len(itinerary.layovers_minutes):
        return None
    return Layover(
        airport=itinerary.segments[index].destination,
        minutes=itinerary.layovers_minutes[index],
    )
