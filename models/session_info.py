""" Model for the session state of the range picker """
from datetime import date, datetime
from typing import Union

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass


@dataclass(config=ConfigDict(validate_assignment=True))
class SessionModel:
    """Class representing the period a user currently browses"""
    start: Union[datetime, date]
    end: Union[datetime, date]
    first: Union[datetime, date]
    is_custom_range: bool = False
