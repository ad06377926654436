import numpy as np
import pandas as pd
import pytest

from inflation_basket.core.aggregator import weighted_aggregate
from inflation_basket.data.history_frame import (
    BREAKDOWN_COLUMNS,
    CATEGORY_COLUMNS,
    breakdown_frame,
    category_spend_frame,
    history_to_series,
    portfolio_value,
    total_spend,
)
from inflation_basket.models.date_range import DateRange
from inflation_basket.models.history import BasketItem, Investment
from tests.helpers import point

def test_history_to_series_is_chronological():
    series = history_to_series([point("2024-03-01", 3.0), point("2024-01-01", 1.0), point("2024-02-01", 2.0)])

    assert isinstance(series.index, pd.DatetimeIndex)
    assert series.name == 'value'
    assert series.dtype == float
    assert series.tolist() == [1.0, 2.0, 3.0]
    assert series.index[0] == pd.Timestamp("2024-01-01")

def test_history_to_series_empty():
    series = history_to_series([])
    assert series.empty
    assert series.dtype == float

def test_breakdown_contributions_sum_to_aggregate(now, create_item, mock_history):
    items = [
        create_item('rent', 1100, mock_history(1000, 40, 1100)),
        create_item('gum', 2, mock_history(1, 40, 2)),
        create_item('new', 55, mock_history(50, 1, 55)),
    ]
    df = breakdown_frame(items, DateRange.ONE_MONTH, now)

    assert list(df.columns) == BREAKDOWN_COLUMNS
    assert df['id'].tolist() == ['rent', 'gum', 'new']
    assert df['contribution'].sum() == pytest.approx(weighted_aggregate(items, DateRange.ONE_MONTH, now))

def test_breakdown_keeps_excluded_rows_as_nan(now, create_item, mock_history):
    items = [
        create_item('zero', 100, mock_history(0, 40, 100)),
        create_item('empty', 0, []),
    ]
    df = breakdown_frame(items, DateRange.ONE_MONTH, now).set_index('id')

    assert df.loc['zero', 'start_price'] == 0
    assert df.loc['zero', 'end_price'] == 100
    assert np.isnan(df.loc['zero', 'rate'])
    assert df.loc['empty', ['start_price', 'end_price', 'rate', 'weight', 'contribution']].isna().all()
    assert df['contribution'].sum() == 0

def test_breakdown_of_nothing_is_empty(now):
    df = breakdown_frame([], DateRange.ONE_YEAR, now)
    assert df.empty
    assert list(df.columns) == BREAKDOWN_COLUMNS

def test_category_spend_is_grouped_and_sorted():
    items = [
        BasketItem(id='1', category='Groceries', price=40.0),
        BasketItem(id='2', category='Housing', price=1000.0),
        BasketItem(id='3', category='Groceries', price=25.0),
        BasketItem(id='4', category='Transport', price=0.0),
    ]
    df = category_spend_frame(items)

    assert list(df.columns) == CATEGORY_COLUMNS
    assert df['category'].tolist() == ['Housing', 'Groceries']
    assert df['spend'].tolist() == [1000.0, 65.0]

def test_category_spend_of_nothing_is_empty():
    df = category_spend_frame([])
    assert df.empty
    assert list(df.columns) == CATEGORY_COLUMNS

def test_total_spend_and_portfolio_value():
    items = [BasketItem(id='1', price=40.0), BasketItem(id='2', price=2.5)]
    holdings = [
        Investment(id='a', symbol='AAPL', quantity=3, current_price=10.0),
        Investment(id='b', symbol='BTC', type='crypto', quantity=0.5, current_price=100.0),
    ]
    assert total_spend(items) == 42.5
    assert portfolio_value(holdings) == 80.0
    assert portfolio_value([]) == 0.0
