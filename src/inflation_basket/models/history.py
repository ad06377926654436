import datetime
from typing import Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

class HistoricalPoint(BaseModel):
    """Single price observation for one calendar day"""
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    value: float

    @field_validator('date', mode='before')
    @classmethod
    def drop_time_of_day(cls, v):
        if isinstance(v, datetime.datetime):
            return v.date()
        return v

class PricedEntity(BaseModel):
    """Anything with an id and a price history: a basket item or an investment"""
    model_config = ConfigDict(frozen=True, extra='allow')

    id: str = Field(..., description="Opaque identifier")
    history: Tuple[HistoricalPoint, ...] = Field(default=(), description="Price observations, any order")

class BasketItem(PricedEntity):
    name: str = ""
    category: str = ""
    price: float = 0.0
    inflation_rate: float = Field(0.0, description="Change since first observation, in percent")
    trend: Literal['up', 'down', 'stable'] = 'stable'
    image: Optional[str] = None

class Investment(PricedEntity):
    symbol: str = ""
    name: str = ""
    type: Literal['stock', 'etf', 'crypto', 'bond', 'commodity', 'fx'] = Field('stock', description="Asset class")
    quantity: float = 0.0
    current_price: float = 0.0
    day_change_pct: float = 0.0

    @property
    def market_value(self) -> float:
        return self.quantity * self.current_price
