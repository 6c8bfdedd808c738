"""
Timezone and date utilities.

Provides "today" in the journal's timezone and lenient date parsing for
imported drafts.
"""

from datetime import date, datetime

import pytz
from dateutil import parser


def today_in_timezone(timezone_str: str = "UTC") -> date:
    """
    Get the current calendar date in a timezone.

    Args:
        timezone_str: Timezone string (e.g., "America/New_York").

    Returns:
        Today's date as seen in that timezone.
    """
    tz = pytz.timezone(timezone_str)
    return datetime.now(pytz.utc).astimezone(tz).date()


def parse_entry_date(value: str) -> date:
    """
    Parse a date string in any common format into a calendar date.

    Args:
        value: Date string (e.g., "2024-01-15", "01/15/2024", "Jan 15 2024").

    Returns:
        Parsed calendar date. Any time component is discarded.

    Raises:
        ValueError: If the string is not a recognizable date.
    """
    try:
        return parser.parse(value.strip()).date()
    except (parser.ParserError, OverflowError) as e:
        raise ValueError(f"Unrecognized date: {value!r}") from e


def coerce_entry_date(value: date | str) -> date:
    """
    Coerce an entry key to a date.

    Args:
        value: A date, or an ISO 8601 ``YYYY-MM-DD`` string.

    Returns:
        Calendar date.

    Raises:
        ValueError: If a string is not a valid ISO date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())
