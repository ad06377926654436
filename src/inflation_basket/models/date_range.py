import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

# Start of the ALL window. Not day-normalized; marks "from the first recorded price".
EPOCH = datetime.datetime(1970, 1, 1)

class DateRange(str, Enum):
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    ONE_YEAR = "1Y"
    YEAR_TO_DATE = "YTD"
    ALL = "ALL"

class DateWindow(BaseModel):
    """Inclusive [start_date, end_date] window at day granularity"""
    model_config = ConfigDict(frozen=True)

    start_date: datetime.datetime
    end_date: datetime.datetime
    all_time: bool = Field(False, description="Starts at the first recorded price rather than start_date")

    @property
    def is_all_time(self) -> bool:
        return self.all_time
