from datetime import date

from inflation_basket.models.history import HistoricalPoint

def point(day: str, value: float) -> HistoricalPoint:
    return HistoricalPoint(date=date.fromisoformat(day), value=value)
