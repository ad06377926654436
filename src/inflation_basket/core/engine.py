import logging
from datetime import datetime
from typing import List, Optional, Sequence, Union

import pandas as pd

from inflation_basket.models.date_range import DateRange
from inflation_basket.models.engine_config import EngineConfig
from inflation_basket.models.history import BasketItem, HistoricalPoint, PricedEntity
from inflation_basket.models.summary import InflationSummary
from inflation_basket.core.aggregator import nominal_return_pct, summarize, weighted_aggregate
from inflation_basket.core.date_window import resolve_window
from inflation_basket.core.lookup import filter_history
from inflation_basket.core.rate_calculator import rate_of
from inflation_basket.data.history_frame import breakdown_frame, category_spend_frame

class InflationEngine:
    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Entry point bundling configuration and logging around the calculation functions.

        Holds no state between calls; every method is a function of its arguments.

        :param config: Engine configuration (default: EngineConfig())
        :param logger: Optional custom logger
        """
        self.config = config or EngineConfig()
        self.logger = logger or logging.getLogger(__name__)

    def personal_inflation(
        self,
        entities: Sequence[PricedEntity],
        token: Union[DateRange, str],
        now: Optional[datetime] = None
    ) -> float:
        result = weighted_aggregate(entities, token, now)
        self.logger.debug(f"Personal inflation over {token}: {result:.2f}% from {len(entities)} entities")
        return result

    def item_rate(
        self,
        entity: PricedEntity,
        token: Union[DateRange, str],
        now: Optional[datetime] = None
    ) -> Optional[float]:
        return rate_of(entity, resolve_window(token, now))

    def nominal_return(
        self,
        entity: PricedEntity,
        token: Union[DateRange, str],
        now: Optional[datetime] = None
    ) -> float:
        return nominal_return_pct(entity, token, now)

    def summary(
        self,
        entities: Sequence[PricedEntity],
        token: Union[DateRange, str],
        now: Optional[datetime] = None
    ) -> InflationSummary:
        result = summarize(entities, token, now, self.config)
        if not result.has_data and entities:
            self.logger.info(f"No usable price data for {len(entities)} entities over {result.range.value}")
        return result

    def breakdown(
        self,
        entities: Sequence[PricedEntity],
        token: Union[DateRange, str],
        now: Optional[datetime] = None
    ) -> pd.DataFrame:
        return breakdown_frame(entities, token, now)

    def chart_history(
        self,
        entity: PricedEntity,
        token: Union[DateRange, str],
        now: Optional[datetime] = None
    ) -> List[HistoricalPoint]:
        """History points of an entity inside the range, oldest first"""
        return filter_history(entity.history, resolve_window(token, now))

    def category_spend(self, items: Sequence[BasketItem]) -> pd.DataFrame:
        return category_spend_frame(items)
