"""
View model - tudo que a tela exibe, derivado do RequestState
"""
from typing import List, Optional

from pydantic import BaseModel

from ..application.services import SearchForm
from ..domain.models import Error, Itinerary, Loading, SearchResult, Success
from .formatting import (
    format_currency,
    format_duration,
    format_segment_details,
    format_segment_line,
    layover_for_segment_index,
    stop_count,
)

EMPTY_MESSAGE = "No itineraries found for this search."
TIP = "Try JFK → LAX or SFO → NRT for 2024-03-15."


class SegmentView(BaseModel):
    title: str
    details: str
    layover: Optional[str] = None


class ItineraryView(BaseModel):
    duration: str
    price: str
    stops: int
    segments: List[SegmentView]


class SearchView(BaseModel):
    """Estado de tela completo do formulário"""
    submit_label: str
    submit_enabled: bool
    error: Optional[str] = None
    empty_message: Optional[str] = None
    results_title: Optional[str] = None
    itineraries: List[ItineraryView] = []


def build_itinerary_view(itinerary: Itinerary, locale: Optional[str] = None) -> ItineraryView:
    segments = []
    for i, segment in enumerate(itinerary.segments):
        layover = layover_for_segment_index(itinerary, i)
        segments.append(SegmentView(
            title=format_segment_line(segment),
            details=format_segment_details(segment, locale),
            layover=layover.label if layover else None,
        ))
    return ItineraryView(
        duration=format_duration(itinerary.total_duration_minutes),
        price=format_currency(itinerary.total_price, locale),
        stops=stop_count(itinerary),
        segments=segments,
    )


def build_view(form: SearchForm, locale: Optional[str] = None) -> SearchView:
    """Re-deriva a visão inteira a partir do estado atual"""
    state = form.state
    loading = isinstance(state, Loading)
    view = SearchView(
        submit_label="Searching…" if loading else "Search",
        submit_enabled=form.can_search,
    )

    if isinstance(state, Error):
        view.error = state.message
    elif isinstance(state, Success):
        result: SearchResult = state.result
        if result.is_empty:
            view.empty_message = EMPTY_MESSAGE
        else:
            view.results_title = f"Results ({result.count})"
            view.itineraries = [build_itinerary_view(it, locale) for it in result.itineraries]

    return view
