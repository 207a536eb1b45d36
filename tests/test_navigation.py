from datetime import datetime, timedelta, timezone

import pytest

from models.view_range import ViewRange
from utils.exceptions import UnsupportedGranularityException

from conftest import day_end, day_start


@pytest.mark.parametrize(
    "view_range, expected_start, expected_end",
    [
        ("1D", day_start(2024, 3, 13), day_end(2024, 3, 13)),
        ("1W", day_start(2024, 3, 11), day_end(2024, 3, 17)),
        ("1M", day_start(2024, 3, 1), day_end(2024, 3, 31)),
        ("3M", day_start(2024, 1, 1), day_end(2024, 3, 31)),
        ("6M", day_start(2024, 1, 1), day_end(2024, 6, 30)),
        ("1Y", day_start(2024, 1, 1), day_end(2024, 12, 31)),
    ],
)
def test_natural_period_boundaries(navigation, view_range, expected_start, expected_end):
    moment = datetime(2024, 3, 13, 15, 42, 7)

    assert navigation.start_of(moment, view_range) == expected_start
    assert navigation.end_of(moment, view_range) == expected_end


def test_second_half_year_and_fourth_quarter(navigation):
    moment = datetime(2023, 11, 2)

    assert navigation.start_of(moment, "6M") == day_start(2023, 7, 1)
    assert navigation.end_of(moment, "6M") == day_end(2023, 12, 31)
    assert navigation.start_of(moment, "3M") == day_start(2023, 10, 1)
    assert navigation.end_of(moment, "quarterly") == day_end(2023, 12, 31)


def test_subtract_month_clamps_to_leap_day(navigation):
    assert navigation.subtract(datetime(2024, 3, 31), "1M") == datetime(2024, 2, 29)
    assert navigation.subtract(datetime(2023, 3, 31), "1M") == datetime(2023, 2, 28)


def test_add_steps_forward(navigation):
    assert navigation.add(datetime(2024, 1, 31), "1M") == datetime(2024, 2, 29)
    assert navigation.add(datetime(2024, 3, 11), "1W") == datetime(2024, 3, 18)
    assert navigation.add(datetime(2024, 1, 1), "3M", 2) == datetime(2024, 7, 1)
    assert navigation.add(datetime(2024, 12, 31), "1D") == datetime(2025, 1, 1)


@pytest.mark.parametrize(
    "view_range, label",
    [
        ("1D", "March 5, 2024"),
        ("1W", "Week 10, 2024"),
        ("1M", "March 2024"),
        ("3M", "Q1 2024"),
        ("6M", "H1 2024"),
        ("1Y", "2024"),
    ],
)
def test_label_for(navigation, view_range, label):
    assert navigation.label_for(datetime(2024, 3, 5), view_range) == label


def test_aliases_and_enum_members_are_accepted(navigation):
    moment = datetime(2024, 3, 13)

    assert navigation.start_of(moment, "monthly") == navigation.start_of(moment, ViewRange.MONTH)
    assert ViewRange.parse("half-year") is ViewRange.HALF_YEAR
    assert ViewRange.parse("1m") is ViewRange.MONTH


@pytest.mark.parametrize("view_range", ["custom", "fortnight", ""])
def test_unsupported_view_range(navigation, view_range):
    moment = datetime(2024, 3, 13)

    with pytest.raises(UnsupportedGranularityException):
        navigation.start_of(moment, view_range)
    with pytest.raises(UnsupportedGranularityException):
        navigation.end_of(moment, view_range)
    with pytest.raises(UnsupportedGranularityException):
        navigation.add(moment, view_range)
    with pytest.raises(UnsupportedGranularityException):
        navigation.subtract(moment, view_range)
    with pytest.raises(UnsupportedGranularityException):
        navigation.label_for(moment, view_range)


def test_timezone_is_kept(navigation):
    moment = datetime(2024, 3, 13, 8, 30, tzinfo=timezone(timedelta(hours=1)))

    assert navigation.start_of(moment, "1M").tzinfo is moment.tzinfo
