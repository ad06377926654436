from datetime import datetime, timedelta
import pandas as pd

from inflation_basket.models.date_range import DateRange, EPOCH
from .registry import RangeRegistry

def _calendar_back(end: datetime, **offset) -> datetime:
    """Calendar-aware rollback; pandas clamps to the last valid day of the shorter month"""
    return (pd.Timestamp(end) - pd.DateOffset(**offset)).to_pydatetime()

@RangeRegistry.register(DateRange.ONE_WEEK)
def one_week(end: datetime) -> datetime:
    return end - timedelta(days=7)

@RangeRegistry.register(DateRange.ONE_MONTH)
def one_month(end: datetime) -> datetime:
    return _calendar_back(end, months=1)

@RangeRegistry.register(DateRange.THREE_MONTHS)
def three_months(end: datetime) -> datetime:
    return _calendar_back(end, months=3)

@RangeRegistry.register(DateRange.ONE_YEAR)
def one_year(end: datetime) -> datetime:
    return _calendar_back(end, years=1)

@RangeRegistry.register(DateRange.YEAR_TO_DATE)
def year_to_date(end: datetime) -> datetime:
    return end.replace(month=1, day=1)

@RangeRegistry.register(DateRange.ALL)
def all_time(end: datetime) -> datetime:
    return EPOCH.replace(tzinfo=end.tzinfo)
