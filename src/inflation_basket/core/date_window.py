from datetime import datetime, time
from typing import Optional, Union

from inflation_basket.models.date_range import DateRange, DateWindow
from inflation_basket.ranges import RangeRegistry

END_OF_DAY = time(23, 59, 59, 999000)

def resolve_window(token: Union[DateRange, str], now: Optional[datetime] = None) -> DateWindow:
    """
    Resolve a range token to a concrete window ending on the day of ``now``.

    :param token: Range token (``DateRange`` member or its string value)
    :param now: Anchor instant (default: the current local time)
    :return: DateWindow with end at end-of-day and start at start-of-day,
             except ALL whose start is the epoch sentinel
    :raises UnknownRangeError: if the token is not supported
    """
    token = RangeRegistry.coerce(token)
    offset = RangeRegistry.get_offset(token)

    now = now or datetime.now()
    end = datetime.combine(now.date(), END_OF_DAY, tzinfo=now.tzinfo)
    start = offset(end)

    if token is DateRange.ALL:
        return DateWindow(start_date=start, end_date=end, all_time=True)

    start = datetime.combine(start.date(), time.min, tzinfo=start.tzinfo)
    return DateWindow(start_date=start, end_date=end)
