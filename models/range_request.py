""" Model for the input of the range picker builder """
from datetime import date, datetime, time
from typing import Optional

from pydantic import ConfigDict, ValidationInfo, field_validator, model_validator
from pydantic.dataclasses import dataclass


def _start_tzinfo(info: ValidationInfo):
    start = info.data.get('start')
    return start.tzinfo if isinstance(start, datetime) else None


@dataclass(config=ConfigDict(validate_assignment=True))
class RangeRequestModel:
    """Class representing the active period a range set is built around.

    Plain dates are widened to datetimes in the timezone of ``start``:
    ``end`` to the last instant of its day, every other date to midnight.
    """
    start: datetime
    end: datetime
    first: datetime
    view_range: str
    is_custom_range: bool = False
    today: Optional[datetime] = None
    now: Optional[datetime] = None

    @field_validator('start', 'first', 'today', 'now', mode='before')
    @classmethod
    def start_of_day(cls, value, info: ValidationInfo):
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min, tzinfo=_start_tzinfo(info))
        return value

    @field_validator('end', mode='before')
    @classmethod
    def end_of_day(cls, value, info: ValidationInfo):
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.max, tzinfo=_start_tzinfo(info))
        return value

    @model_validator(mode='after')
    def check_order(self):
        if self.start > self.end:
            raise ValueError(f"start {self.start} cannot be later than end {self.end}")
        return self
