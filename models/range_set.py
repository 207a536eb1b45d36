""" Model for the range picker configuration """
from datetime import datetime
from typing import Dict

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

from models.period import DATE_FORMAT, PeriodModel


@dataclass(frozen=True, config=ConfigDict(validate_assignment=True))
class UiStringsModel:
    """Localized labels shown by the range picker widget"""
    apply: str
    cancel: str
    from_label: str
    to_label: str
    custom_range: str


@dataclass(frozen=True, config=ConfigDict(validate_assignment=True))
class RangeSetModel:
    """Class representing the labeled ranges offered by the range picker.

    ``ranges`` keeps insertion order. The first key is the title of the
    current range unless a later entry reused that label.
    """
    title: str
    ranges: Dict[str, PeriodModel]
    ui_strings: UiStringsModel
    start: datetime
    end: datetime

    def to_payload(self) -> dict:
        """Returns the JSON-ready structure consumed by the date picker."""
        return {
            'title': self.title,
            'configuration': {
                'apply': self.ui_strings.apply,
                'cancel': self.ui_strings.cancel,
                'from': self.ui_strings.from_label,
                'to': self.ui_strings.to_label,
                'customRange': self.ui_strings.custom_range,
                'start': self.start.strftime(DATE_FORMAT),
                'end': self.end.strftime(DATE_FORMAT),
                'ranges': {label: period.as_strings() for label, period in self.ranges.items()},
            },
        }
