""" Builds the labeled ranges offered by the range picker widget """
from datetime import datetime
from typing import Dict, Optional

from pydantic import ValidationError

from config.settings import settings
from models.period import PeriodModel
from models.range_request import RangeRequestModel
from models.range_set import RangeSetModel, UiStringsModel
from scripts.logging_config import setup_logger
from utils.exceptions import InvalidRangeException
from utils.navigation import Navigation
from utils.translator import Translator

logger = setup_logger(__name__)


def make_period(start: datetime, end: datetime) -> PeriodModel:
    """Creates a period, reporting a reversed range as InvalidRangeException."""
    if start > end:
        raise InvalidRangeException(f"start {start} cannot be later than end {end}")
    return PeriodModel(start, end)


class RangeSetBuilder:
    """Assembles the range picker configuration around the active period.

    The builder relies on an injected period calculator exposing
    ``start_of``, ``end_of``, ``add``, ``subtract`` and ``label_for``.
    Entries are inserted in a fixed order into an ordinary dict: current
    range, enclosing period (custom ranges only), previous period, next
    period, today, everything. When two entries share a label the later one
    replaces the period of the earlier one and the label keeps its original
    position, so callers must not expect every computed range to survive.
    """

    def __init__(
        self,
        calculator: Optional[Navigation] = None,
        translator: Optional[Translator] = None,
        title_format: Optional[str] = None,
    ):
        self.calculator = calculator or Navigation()
        self.translator = translator or Translator.from_file(settings.TRANSLATIONS_PATH)
        self.title_format = title_format or settings.MONTH_AND_DAY_FORMAT

    def format_title(self, start: datetime, end: datetime) -> str:
        return f"{self._format_day(start)} - {self._format_day(end)}"

    def _format_day(self, moment: datetime) -> str:
        return moment.strftime(self.title_format).replace(" 0", " ")

    def _natural_period(self, moment: datetime, view_range: str) -> tuple[str, PeriodModel]:
        period_start = self.calculator.start_of(moment, view_range)
        period_end = self.calculator.end_of(period_start, view_range)
        label = self.calculator.label_for(period_start, view_range)
        return label, make_period(period_start, period_end)

    def build(
        self,
        start,
        end,
        first,
        view_range: str,
        is_custom_range: bool = False,
        today=None,
        now=None,
    ) -> RangeSetModel:
        """
        Builds the ordered label to period mapping for the range picker.

        Args:
            start: Start of the active period (date or datetime).
            end: End of the active period (date or datetime).
            first: Date of the earliest record, lower bound of "everything".
            view_range (str): The preferred period size, e.g. '1M'.
            is_custom_range (bool): Whether start and end were picked by hand.
            today: The current date, defaults to the current time.
            now: Upper bound of "everything", defaults to the current time.

        Returns:
            RangeSetModel: Title, ranges and UI strings for the picker.

        Raises:
            InvalidRangeException: If start is later than end.
            UnsupportedGranularityException: If the calculator cannot handle view_range.
        """
        try:
            request = RangeRequestModel(
                start=start,
                end=end,
                first=first,
                view_range=view_range,
                is_custom_range=is_custom_range,
                today=today,
                now=now,
            )
        except ValidationError as error:
            raise InvalidRangeException(str(error))

        view_range = request.view_range
        today = request.today or datetime.now(request.start.tzinfo)
        logger.debug(f"viewRange is {view_range}")
        logger.debug(f"isCustom is {request.is_custom_range}")

        title = self.format_title(request.start, request.end)
        ranges: Dict[str, PeriodModel] = {title: make_period(request.start, request.end)}

        # a custom selection offers a jump back to the period enclosing it
        if request.is_custom_range:
            label, period = self._natural_period(request.start, view_range)
            ranges[label] = period

        previous_date = self.calculator.subtract(request.start, view_range)
        label, period = self._natural_period(previous_date, view_range)
        ranges[label] = period

        # the next period is relative to the normalized current start
        normalized_start = self.calculator.start_of(request.start, view_range)
        next_date = self.calculator.add(normalized_start, view_range, 1)
        label, period = self._natural_period(next_date, view_range)
        ranges[label] = period

        today_start = self.calculator.start_of(today, view_range)
        today_end = self.calculator.end_of(today_start, view_range)
        if today_start != request.start or today_end != request.end:
            label = self.translator.translate('firefly.today')
            ranges[label[:1].upper() + label[1:]] = make_period(today_start, today_end)

        # the only entry bounded by an instant instead of a period boundary,
        # a first record dated after now is kept as is
        now = request.now or datetime.now(request.first.tzinfo)
        ranges[self.translator.translate('firefly.everything')] = PeriodModel(request.first, now)

        return RangeSetModel(
            title=title,
            ranges=ranges,
            ui_strings=UiStringsModel(
                apply=self.translator.translate('firefly.apply'),
                cancel=self.translator.translate('firefly.cancel'),
                from_label=self.translator.translate('firefly.from'),
                to_label=self.translator.translate('firefly.to'),
                custom_range=self.translator.translate('firefly.customRange'),
            ),
            start=request.start,
            end=request.end,
        )


def build_range_set(start, end, first, view_range: str, is_custom_range: bool = False, today=None, now=None) -> RangeSetModel:
    """Builds a range set with the default navigation and translations."""
    return RangeSetBuilder().build(start, end, first, view_range, is_custom_range, today, now)
