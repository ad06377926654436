from datetime import date, datetime, time
from typing import Iterable, List, Optional, Union

from inflation_basket.models.date_range import DateWindow
from inflation_basket.models.history import HistoricalPoint
from inflation_basket.core.date_window import END_OF_DAY

def _at_start_of_day(day: date, like: datetime) -> datetime:
    return datetime.combine(day, time.min, tzinfo=like.tzinfo)

def _as_instant(at: Union[date, datetime]) -> datetime:
    """A bare calendar day means the whole of that day"""
    if isinstance(at, datetime):
        return at
    return datetime.combine(at, END_OF_DAY)

def sort_history(history: Optional[Iterable[HistoricalPoint]]) -> List[HistoricalPoint]:
    """Chronological copy of a history; same-day points keep their input order"""
    return sorted(history or (), key=lambda p: p.date)

def latest_on_or_before(
    history: Optional[Iterable[HistoricalPoint]],
    at: Union[date, datetime]
) -> Optional[float]:
    """
    Value of the most recent observation at or before ``at``.

    The history may be unsorted and is never mutated. When several points share
    a date, the one appearing last in the input wins.

    :return: The value, or None if nothing was observed by ``at``
    """
    at = _as_instant(at)
    eligible = [p for p in sort_history(history) if _at_start_of_day(p.date, at) <= at]
    if not eligible:
        return None
    return eligible[-1].value

def earliest_value(history: Optional[Iterable[HistoricalPoint]]) -> Optional[float]:
    """Value of the chronologically first observation, or None for an empty history"""
    ordered = sort_history(history)
    return ordered[0].value if ordered else None

def filter_history(history: Optional[Iterable[HistoricalPoint]], window: DateWindow) -> List[HistoricalPoint]:
    """Chronological points on or after the window start, for charting a period"""
    ordered = sort_history(history)
    if window.is_all_time:
        return ordered
    return [p for p in ordered if _at_start_of_day(p.date, window.start_date) >= window.start_date]
