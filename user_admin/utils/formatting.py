"""
Display formatting helpers
"""

import logging
import re
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"

# Seconds fraction of any length, fromisoformat before 3.11 only takes 3 or 6 digits
_FRACTION = re.compile(r'(\d{2}:\d{2}:\d{2})\.(\d+)')


def _normalize_fraction(match: re.Match) -> str:
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp as sent by the API

    Args:
        value: Timestamp string, a trailing 'Z' and any number of
            fractional second digits are accepted

    Returns:
        datetime: Parsed value or None if missing or unparseable
    """
    if not value:
        return None
    normalized = _FRACTION.sub(_normalize_fraction, value.strip().replace('Z', '+00:00'))
    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        logger.debug(f"Unparseable timestamp: {value!r}")
        return None


def format_created(value: Optional[str], date_format: Optional[str] = None) -> str:
    """
    Format a created_at timestamp for the Created column

    The date is taken as written in the timestamp, no timezone conversion.

    Args:
        value: Timestamp string, None when the server sent none
        date_format: strftime pattern, None renders M/D/YYYY

    Returns:
        str: Formatted date or 'Invalid Date'
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return INVALID_DATE
    if date_format:
        return parsed.strftime(date_format)
    return f"{parsed.month}/{parsed.day}/{parsed.year}"
