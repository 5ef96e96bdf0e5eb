"""Shared validation utilities"""

import re
from datetime import time
from typing import Optional

# Shape only: calendar validity (e.g. 2025-02-30) is left to the store
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}", re.ASCII)
TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?", re.ASCII)


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty or whitespace-only values"""
    return value is None or not str(value).strip()


def validate_date_format(value: Optional[str]) -> bool:
    """Validate the YYYY-MM-DD shape of a date string"""
    if not value:
        return False
    return bool(DATE_PATTERN.fullmatch(value))


def parse_time(value: Optional[str]) -> Optional[time]:
    """
    Parse an HH:MM or HH:MM:SS time-of-day string.

    Args:
        value: Time string as sent by the booking form

    Returns:
        The parsed time, or None if the string is not a valid clock time
    """
    if not value:
        return None

    match = TIME_PATTERN.fullmatch(value.strip())
    if not match:
        return None

    hour, minute, second = (int(part) if part else 0 for part in match.groups())
    if hour > 23 or minute > 59 or second > 59:
        return None

    return time(hour, minute, second)


def format_time(value: time) -> str:
    """Render a time as HH:MM, keeping seconds only when they are set"""
    if value.second:
        return value.strftime("%H:%M:%S")
    return value.strftime("%H:%M")
