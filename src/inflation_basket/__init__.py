"""Personal inflation and return calculations over sparse price histories."""

from inflation_basket.exceptions import InflationBasketError, InvalidPriceEntryError, UnknownRangeError
from inflation_basket.models.date_range import DateRange, DateWindow, EPOCH
from inflation_basket.models.engine_config import EngineConfig
from inflation_basket.models.history import BasketItem, HistoricalPoint, Investment, PricedEntity
from inflation_basket.models.summary import InflationSummary
from inflation_basket.core.date_window import resolve_window
from inflation_basket.core.lookup import earliest_value, filter_history, latest_on_or_before
from inflation_basket.core.rate_calculator import rate_of
from inflation_basket.core.aggregator import nominal_return_pct, summarize, weighted_aggregate
from inflation_basket.core.price_entries import record_price
from inflation_basket.data.history_frame import breakdown_frame, category_spend_frame, history_to_series, portfolio_value, total_spend
from inflation_basket.core.engine import InflationEngine

__all__ = [
    "InflationBasketError",
    "InvalidPriceEntryError",
    "UnknownRangeError",
    "DateRange",
    "DateWindow",
    "EPOCH",
    "EngineConfig",
    "BasketItem",
    "HistoricalPoint",
    "Investment",
    "PricedEntity",
    "InflationSummary",
    "resolve_window",
    "earliest_value",
    "filter_history",
    "latest_on_or_before",
    "rate_of",
    "nominal_return_pct",
    "summarize",
    "weighted_aggregate",
    "record_price",
    "breakdown_frame",
    "category_spend_frame",
    "history_to_series",
    "portfolio_value",
    "total_spend",
    "InflationEngine",
]
