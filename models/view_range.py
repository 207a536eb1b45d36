""" View range (period granularity) tokens """
from enum import Enum

from utils.exceptions import UnsupportedGranularityException


class ViewRange(str, Enum):
    """Period size a user browses their finances by"""
    DAY = '1D'
    WEEK = '1W'
    MONTH = '1M'
    QUARTER = '3M'
    HALF_YEAR = '6M'
    YEAR = '1Y'
    CUSTOM = 'custom'

    @classmethod
    def parse(cls, token) -> "ViewRange":
        """Returns the view range for a token such as '1M' or 'monthly'.

        Raises:
            UnsupportedGranularityException: If the token is not a known view range.
        """
        if isinstance(token, cls):
            return token
        try:
            key = str(token).strip().lower()
            return cls(_ALIASES.get(key, key))
        except ValueError:
            raise UnsupportedGranularityException(f"'{token}' is not a known view range")


_ALIASES = {
    '1d': '1D',
    'daily': '1D',
    '1w': '1W',
    'weekly': '1W',
    '1m': '1M',
    'monthly': '1M',
    '3m': '3M',
    'quarterly': '3M',
    '6m': '6M',
    'half-year': '6M',
    '1y': '1Y',
    'yearly': '1Y',
}
