from datetime import date, datetime, time

import pytest

from config.settings import settings
from utils.navigation import Navigation
from utils.range_set_builder import RangeSetBuilder
from utils.translator import Translator


@pytest.fixture
def navigation():
    return Navigation()


@pytest.fixture
def translator():
    return Translator.from_file(settings.TRANSLATIONS_PATH)


@pytest.fixture
def builder(navigation, translator):
    return RangeSetBuilder(calculator=navigation, translator=translator, title_format="%B %d, %Y")


def day_start(year: int, month: int, day: int) -> datetime:
    return datetime.combine(date(year, month, day), time.min)


def day_end(year: int, month: int, day: int) -> datetime:
    return datetime.combine(date(year, month, day), time.max)
