from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field

from inflation_basket.models.date_range import DateRange

class InflationSummary(BaseModel):
    """Personal inflation for one range, with enough context to tell 'no data' from 'no change'"""
    range: DateRange
    start_date: datetime
    end_date: datetime
    inflation_pct: float
    sample_count: int = Field(0, description="Entities that contributed to the aggregate")
    level: Literal['high', 'moderate', 'deflation']
    benchmark_pct: float
    vs_benchmark_pct: float

    @property
    def has_data(self) -> bool:
        return self.sample_count > 0
