class InflationBasketError(Exception):
    """Base class for errors raised by inflation_basket"""


class UnknownRangeError(InflationBasketError, ValueError):
    """Raised when a date range token is not one of the supported values"""


class InvalidPriceEntryError(InflationBasketError, ValueError):
    """Raised when a price entry fails validation"""
