""" Period arithmetic for the supported view ranges """
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from models.view_range import ViewRange
from utils.exceptions import UnsupportedGranularityException

# month based steps are clamped to the last day of shorter months
_STEPS = {
    ViewRange.DAY: relativedelta(days=1),
    ViewRange.WEEK: relativedelta(weeks=1),
    ViewRange.MONTH: relativedelta(months=1),
    ViewRange.QUARTER: relativedelta(months=3),
    ViewRange.HALF_YEAR: relativedelta(months=6),
    ViewRange.YEAR: relativedelta(years=1),
}


def _step(view_range) -> relativedelta:
    view_range = ViewRange.parse(view_range)
    try:
        return _STEPS[view_range]
    except KeyError:
        raise UnsupportedGranularityException(
            f"'{view_range.value}' has no natural period boundaries"
        )


class Navigation:
    """Computes natural periods, their neighbours and their labels.

    All methods are pure and return new datetimes, keeping the tzinfo of the
    given moment.
    """

    def start_of(self, moment: datetime, view_range) -> datetime:
        """Returns midnight of the first day of the period containing ``moment``."""
        view_range = ViewRange.parse(view_range)
        # rejects view ranges without natural boundaries
        _step(view_range)
        day = moment.replace(hour=0, minute=0, second=0, microsecond=0)

        if view_range is ViewRange.DAY:
            return day
        if view_range is ViewRange.WEEK:
            return day - timedelta(days=day.weekday())
        if view_range is ViewRange.MONTH:
            return day.replace(day=1)
        if view_range is ViewRange.QUARTER:
            return day.replace(month=3 * ((day.month - 1) // 3) + 1, day=1)
        if view_range is ViewRange.HALF_YEAR:
            return day.replace(month=1 if day.month <= 6 else 7, day=1)
        return day.replace(month=1, day=1)

    def end_of(self, moment: datetime, view_range) -> datetime:
        """Returns the last microsecond of the period containing ``moment``."""
        return self.start_of(moment, view_range) + _step(view_range) - timedelta(microseconds=1)

    def add(self, moment: datetime, view_range, periods: int = 1) -> datetime:
        return moment + _step(view_range) * periods

    def subtract(self, moment: datetime, view_range, periods: int = 1) -> datetime:
        return moment - _step(view_range) * periods

    def label_for(self, moment: datetime, view_range) -> str:
        """Returns the human readable name of the period containing ``moment``."""
        view_range = ViewRange.parse(view_range)
        _step(view_range)

        if view_range is ViewRange.DAY:
            return moment.strftime('%B %d, %Y').replace(' 0', ' ')
        if view_range is ViewRange.WEEK:
            year, week, _ = moment.isocalendar()
            return f"Week {week}, {year}"
        if view_range is ViewRange.MONTH:
            return moment.strftime('%B %Y')
        if view_range is ViewRange.QUARTER:
            return f"Q{(moment.month - 1) // 3 + 1} {moment.year}"
        if view_range is ViewRange.HALF_YEAR:
            return f"H{1 if moment.month <= 6 else 2} {moment.year}"
        return str(moment.year)
