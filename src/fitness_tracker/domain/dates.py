"""Calendar-day helpers.

Dates travel as fixed-width ``YYYY-MM-DD`` strings so that lexical and
chronological order coincide; every sort in the stats layer relies on it.
"""

import re
from datetime import date

_DAY_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def today_iso() -> str:
    """Return the local calendar day as ``YYYY-MM-DD``."""
    return date.today().isoformat()


def parse_day(value: object) -> date | None:
    """Parse a fixed-width day string, returning None when it is not a real day."""
    if not isinstance(value, str):
        return None
    match = _DAY_PATTERN.fullmatch(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None
