from datetime import datetime
from typing import Iterable, Optional, Sequence, Union
import numpy as np
import pandas as pd

from inflation_basket.models.date_range import DateRange
from inflation_basket.models.history import BasketItem, HistoricalPoint, Investment, PricedEntity
from inflation_basket.core.date_window import resolve_window
from inflation_basket.core.lookup import sort_history
from inflation_basket.core.rate_calculator import boundary_prices, rate_of

BREAKDOWN_COLUMNS = ['id', 'start_price', 'end_price', 'rate', 'weight', 'contribution']
CATEGORY_COLUMNS = ['category', 'spend']

def history_to_series(history: Iterable[HistoricalPoint]) -> pd.Series:
    """Price history as a float Series on a DatetimeIndex, oldest first"""
    points = sort_history(history)
    index = pd.DatetimeIndex([pd.Timestamp(p.date) for p in points], name='date')
    return pd.Series([p.value for p in points], index=index, name='value', dtype=float)

def breakdown_frame(
    entities: Sequence[PricedEntity],
    token: Union[DateRange, str],
    now: Optional[datetime] = None
) -> pd.DataFrame:
    """
    Per-entity view of the weighted aggregate.

    Excluded entities keep their row with NaN rate, weight and contribution,
    so ``contribution`` sums to the aggregate percentage.
    """
    window = resolve_window(token, now)

    rows = []
    for entity in entities:
        start_price, end_price = boundary_prices(entity, window)
        rate = rate_of(entity, window)
        counts = rate is not None and end_price > 0
        rows.append({
            'id': entity.id,
            'start_price': np.nan if start_price is None else start_price,
            'end_price': np.nan if end_price is None else end_price,
            'rate': rate if counts else np.nan,
            'weight': end_price if counts else np.nan
        })

    df = pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
    if df.empty:
        return df

    total_weight = df['weight'].sum()
    if total_weight > 0:
        df['contribution'] = df['rate'] * df['weight'] / total_weight * 100
    else:
        df['contribution'] = np.nan
    return df

def category_spend_frame(items: Iterable[BasketItem]) -> pd.DataFrame:
    """Current spend per category, largest first; categories with no spend are dropped"""
    df = pd.DataFrame([{'category': item.category, 'spend': item.price} for item in items], columns=CATEGORY_COLUMNS)
    if df.empty:
        return df

    spend = df.groupby('category')['spend'].sum()
    spend = spend[spend > 0].sort_values(ascending=False, kind='stable')
    return spend.reset_index()

def total_spend(items: Iterable[BasketItem]) -> float:
    return float(sum(item.price for item in items))

def portfolio_value(investments: Iterable[Investment]) -> float:
    """Sum of quantity times current price over all holdings"""
    return float(sum(inv.market_value for inv in investments))
