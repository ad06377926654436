import logging
from typing import Optional, Tuple

from inflation_basket.models.date_range import DateWindow
from inflation_basket.models.history import PricedEntity
from inflation_basket.core.lookup import earliest_value, latest_on_or_before

logger = logging.getLogger(__name__)

def boundary_prices(entity: PricedEntity, window: DateWindow) -> Tuple[Optional[float], Optional[float]]:
    """Start and end prices of an entity for a window. ALL starts at the first recorded price."""
    if window.is_all_time:
        start_price = earliest_value(entity.history)
    else:
        start_price = latest_on_or_before(entity.history, window.start_date)
    end_price = latest_on_or_before(entity.history, window.end_date)
    return start_price, end_price

def rate_of(entity: PricedEntity, window: DateWindow) -> Optional[float]:
    """
    Fractional price change of one entity across a window.

    :return: (end - start) / start, or None when the entity has no price at
             either boundary or a non-positive start price
    """
    start_price, end_price = boundary_prices(entity, window)

    if start_price is None or end_price is None:
        logger.debug(f"Excluding {entity.id}: no price at window boundary")
        return None
    if start_price <= 0:
        logger.debug(f"Excluding {entity.id}: non-positive start price {start_price}")
        return None

    return (end_price - start_price) / start_price
