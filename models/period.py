""" Model for date ranges """
from datetime import datetime
from typing import List

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

DATE_FORMAT = '%Y-%m-%d'


@dataclass(frozen=True, config=ConfigDict(validate_assignment=True))
class PeriodModel:
    """Class representing a closed (start, end) date range.

    Ordering is checked where periods are derived, see
    ``utils.range_set_builder.make_period``. The "everything" range is the
    exception: it runs from the first record to now, even when that record
    is dated in the future.
    """
    start: datetime
    end: datetime

    def as_strings(self) -> List[str]:
        return [self.start.strftime(DATE_FORMAT), self.end.strftime(DATE_FORMAT)]
