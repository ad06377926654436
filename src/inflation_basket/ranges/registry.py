from datetime import datetime
from typing import Callable, Dict, List, Union

from inflation_basket.exceptions import UnknownRangeError
from inflation_basket.models.date_range import DateRange

StartOffset = Callable[[datetime], datetime]

class RangeRegistry:
    """Registry of start-date offsets, one per range token"""
    _offsets: Dict[DateRange, StartOffset] = {}

    @classmethod
    def register(cls, token: DateRange):
        """Decorator to register how a token derives its start from the window end"""
        def decorator(func: StartOffset) -> StartOffset:
            cls._offsets[DateRange(token)] = func
            return func
        return decorator

    @classmethod
    def coerce(cls, token: Union[DateRange, str]) -> DateRange:
        try:
            return DateRange(token)
        except ValueError:
            raise UnknownRangeError(f"Unknown date range: {token!r}") from None

    @classmethod
    def get_offset(cls, token: Union[DateRange, str]) -> StartOffset:
        """Get the start-date offset for a token; unknown tokens fail loudly"""
        token = cls.coerce(token)
        if token not in cls._offsets:
            raise UnknownRangeError(f"No offset registered for date range: {token.value}")
        return cls._offsets[token]

    @classmethod
    def list_ranges(cls) -> List[DateRange]:
        """List all registered range tokens"""
        return list(cls._offsets.keys())
