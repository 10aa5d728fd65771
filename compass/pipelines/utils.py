"""
Shared parsing utilities for the batch pipeline
compass/pipelines/utils.py

Lenient conversions used by the normalizer, status detector and trend
aggregator. None of these raise on bad input; they return None and let the
caller apply its documented default.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Missing date components resolve to January 1st
_DATE_DEFAULT = datetime(1970, 1, 1)


def strip_wrapping_quotes(value: str) -> str:
    """Remove one leading and one trailing double quote, independently."""
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def parse_leading_int(value: Optional[str]) -> Optional[int]:
    """Parse the integer prefix of a string ("12abc" -> 12)."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def parse_leading_float(value: Optional[str]) -> Optional[float]:
    """Parse the float prefix of a string; NaN and infinities are rejected."""
    if not value:
        return None
    match = _LEADING_FLOAT.match(value)
    if not match:
        return None
    number = float(match.group(1))
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a calendar date leniently, or None when it cannot be read."""
    if not value or not value.strip():
        return None
    try:
        return date_parser.parse(value.strip(), default=_DATE_DEFAULT)
    except (ValueError, OverflowError):
        return None


def parse_year(value: Optional[str]) -> Optional[int]:
    parsed = parse_date(value)
    return parsed.year if parsed else None


def format_month_year(value: Optional[str]) -> str:
    """Format a date as MM/YYYY, or "" when it cannot be parsed."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return f"{parsed.month:02d}/{parsed.year}"
