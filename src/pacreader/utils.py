import datetime
import logging
import re

from dateutil import tz
from dateutil.parser import parse as parse_date

logger = logging.getLogger(__name__)

_URL_FRIENDLY_RE = re.compile(r"[A-Za-z0-9\-._~]+")


def _resolve_tz(name: str | None, offset: int | None) -> datetime.tzinfo | None:
    # pacman prints dates in the local zone, so an abbreviation the tz database
    # does not know (CEST, PDT, ...) is taken to mean the local zone
    if offset is not None:
        return tz.tzoffset(name, offset)
    if not name:
        return None
    return tz.gettz(name) or tz.tzlocal()


def try_parse_date(date_str: str | None) -> datetime.datetime | None:
    """Try to parse a date string into a timezone-aware timestamp.

    Args:
        date_str: The date string to parse (e.g., pacman's "Mon 01 Jan 2024 10:00:00 AM CET")

    Returns:
        The parsed timestamp, or None if parsing failed or date_str is None.
        Dates without any zone are returned naive.
    """

    try:
        return parse_date(date_str, tzinfos=_resolve_tz) if date_str else None
    except (ValueError, OverflowError) as e:
        logger.debug(f"Failed to parse date '{date_str}': {e}")
        return None


def is_url_friendly(name: str) -> bool:
    """Return True if name only uses characters that are safe in a URL path segment."""
    return _URL_FRIENDLY_RE.fullmatch(name) is not None
