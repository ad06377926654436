import math
from datetime import date, datetime
from typing import Optional, Union
from pydantic import TypeAdapter, ValidationError

from inflation_basket.exceptions import InvalidPriceEntryError
from inflation_basket.models.history import BasketItem, HistoricalPoint
from inflation_basket.core.lookup import sort_history

# Same date parsing as HistoricalPoint.date
_DATE = TypeAdapter(date)

def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def is_valid_price(value) -> bool:
    return _is_number(value) and math.isfinite(value) and value > 0

def is_valid_quantity(value) -> bool:
    return _is_number(value) and math.isfinite(value) and value >= 0

def is_valid_date_iso(value) -> bool:
    if isinstance(value, date):
        return True
    try:
        _DATE.validate_python(value)
    except ValidationError:
        return False
    return True

def is_not_future_date(value: Union[str, date], today: Optional[date] = None) -> bool:
    if isinstance(value, datetime):
        day = value.date()
    elif isinstance(value, date):
        day = value
    else:
        day = _DATE.validate_python(value)
    return day <= (today or date.today())

def record_price(
    item: BasketItem,
    price: float,
    on: Union[str, date],
    today: Optional[date] = None
) -> BasketItem:
    """
    Return a copy of ``item`` with a price observed on a given day.

    An existing observation for the same day is replaced. The item's current
    price, trend and since-first-observation inflation rate follow the new entry.

    :raises InvalidPriceEntryError: for a non-positive or non-finite price,
                                    an unparseable date, or a future date
    """
    if not is_valid_price(price):
        raise InvalidPriceEntryError(f"Invalid price for {item.id}: {price!r}")
    if not is_valid_date_iso(on):
        raise InvalidPriceEntryError(f"Invalid date for {item.id}: {on!r}")
    if not is_not_future_date(on, today):
        raise InvalidPriceEntryError(f"Future date for {item.id}: {on}")

    entry = HistoricalPoint(date=on, value=price)
    history = sort_history([p for p in item.history if p.date != entry.date] + [entry])

    first_price = history[0].value
    inflation_rate = 0.0 if first_price == 0 else round((price - first_price) / first_price * 100, 1)

    if price > item.price:
        trend = 'up'
    elif price < item.price:
        trend = 'down'
    else:
        trend = 'stable'

    return item.model_copy(update={
        'price': price,
        'history': tuple(history),
        'inflation_rate': inflation_rate,
        'trend': trend
    })
