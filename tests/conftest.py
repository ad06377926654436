from datetime import datetime, timedelta

import pytest

from inflation_basket.models.history import BasketItem, HistoricalPoint

NOW = datetime(2024, 6, 15, 12, 0)

@pytest.fixture
def now():
    return NOW

@pytest.fixture
def mock_history():
    """Two-point history: start value some days before NOW, end value on NOW's day"""
    def _mock_history(start_val, days_ago_start, end_val):
        today = NOW.date()
        return [
            HistoricalPoint(date=today - timedelta(days=days_ago_start), value=start_val),
            HistoricalPoint(date=today, value=end_val),
        ]
    return _mock_history

@pytest.fixture
def create_item():
    def _create_item(item_id, price, history):
        return BasketItem(
            id=item_id,
            name=f"Item {item_id}",
            category="Test",
            price=price,
            history=history,
        )
    return _create_item

