"""
Validação de consultas - regras de envio do formulário
"""
import re
from typing import Union

from .models import Query, Rejection

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

CODE_LENGTH_MESSAGE = "Airport codes must be 3 letters"
SAME_AIRPORT_MESSAGE = "Origin and destination cannot be the same"
DATE_FORMAT_MESSAGE = "Date must be YYYY-MM-DD"


def _is_day(date: str) -> bool:
    return DATE_PATTERN.fullmatch(date) is not None


def is_submittable(origin: str, destination: str, date: str) -> bool:
    """Verificação rápida para habilitar o botão de busca.

    Apenas comprimento dos códigos como digitados e formato da data;
    maiúsculas, igualdade e validade de calendário ficam para o envio.
    """
    # Sem trim: " JFK" desabilita a busca, mesmo sendo aceito por validate_for_submit
    return len(origin) == 3 and len(destination) == 3 and _is_day(date)


def validate_for_submit(origin: str, destination: str, date: str) -> Union[Query, Rejection]:
    """Normaliza e valida a consulta no momento do envio.

    A primeira regra violada define a rejeição. Não há checagem de
    calendário: "2024-13-32" é aceito.
    """
    o = origin.strip().upper()
    d = destination.strip().upper()

    if len(o) != 3 or len(d) != 3:
        return Rejection(message=CODE_LENGTH_MESSAGE)
    if o == d:
        return Rejection(message=SAME_AIRPORT_MESSAGE)
    if not _is_day(date):
        return Rejection(message=DATE_FORMAT_MESSAGE)

    return Query(origin=o, destination=d, date=date)
