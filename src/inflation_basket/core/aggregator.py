import logging
from datetime import datetime
from typing import Iterator, Optional, Sequence, Tuple, Union

from inflation_basket.models.date_range import DateRange, DateWindow
from inflation_basket.models.engine_config import EngineConfig
from inflation_basket.models.history import PricedEntity
from inflation_basket.models.summary import InflationSummary
from inflation_basket.ranges import RangeRegistry
from inflation_basket.core.date_window import resolve_window
from inflation_basket.core.lookup import latest_on_or_before
from inflation_basket.core.rate_calculator import rate_of

logger = logging.getLogger(__name__)

def contributing_rates(
    entities: Sequence[PricedEntity],
    window: DateWindow
) -> Iterator[Tuple[PricedEntity, float, float]]:
    """
    Yield (entity, rate, weight) for every entity that counts toward the aggregate.

    Weight is the end-of-window price, a proxy for spend. Entities without a
    rate or with a non-positive weight are skipped.
    """
    for entity in entities:
        rate = rate_of(entity, window)
        if rate is None:
            continue

        weight = latest_on_or_before(entity.history, window.end_date)
        if weight <= 0:
            logger.debug(f"Excluding {entity.id}: non-positive weight {weight}")
            continue

        yield entity, rate, weight

def _aggregate(entities: Sequence[PricedEntity], window: DateWindow) -> Tuple[float, int]:
    total_weight = 0.0
    weighted_sum = 0.0
    count = 0

    for _, rate, weight in contributing_rates(entities, window):
        weighted_sum += rate * weight
        total_weight += weight
        count += 1

    if total_weight == 0:
        logger.info(f"No entity contributed to the aggregate for {window.start_date:%Y-%m-%d}..{window.end_date:%Y-%m-%d}")
        return 0.0, 0

    return (weighted_sum / total_weight) * 100, count

def weighted_aggregate(
    entities: Sequence[PricedEntity],
    token: Union[DateRange, str],
    now: Optional[datetime] = None
) -> float:
    """
    Price-weighted average change of a collection over a range, in percent.

    Returns 0 for an empty collection or when every entity is excluded.
    """
    if not entities:
        return 0.0

    window = resolve_window(token, now)
    result, _ = _aggregate(entities, window)
    return result

def nominal_return_pct(
    entity: PricedEntity,
    token: Union[DateRange, str],
    now: Optional[datetime] = None
) -> float:
    """Percent change of a single entity over a range, 0 when it cannot be computed"""
    rate = rate_of(entity, resolve_window(token, now))
    return rate * 100 if rate is not None else 0.0

def classify_inflation(inflation_pct: float, config: EngineConfig) -> str:
    if inflation_pct >= config.high_threshold_pct:
        return 'high'
    if inflation_pct > 0:
        return 'moderate'
    return 'deflation'

def summarize(
    entities: Sequence[PricedEntity],
    token: Union[DateRange, str],
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None
) -> InflationSummary:
    """Aggregate plus sample count, level label and distance from the benchmark"""
    config = config or EngineConfig()
    token = RangeRegistry.coerce(token)
    window = resolve_window(token, now)
    inflation_pct, sample_count = _aggregate(entities, window)

    return InflationSummary(
        range=token,
        start_date=window.start_date,
        end_date=window.end_date,
        inflation_pct=inflation_pct,
        sample_count=sample_count,
        level=classify_inflation(inflation_pct, config),
        benchmark_pct=config.benchmark_inflation_pct,
        vs_benchmark_pct=inflation_pct - config.benchmark_inflation_pct
    )
