# -*- coding: utf-8 -*-
"""
Date Extraction

Finds an explicit date anywhere in a line. Two formats, tried in order:
- ISO: YYYY-MM-DD
- Day first: DD.MM.YYYY (rewritten as YYYY-MM-DD)

Lines without a date are booked on "today" in the configured timezone.
"""

import re
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from vatbot.config import TIMEZONE

_ISO_DATE_PATTERN = re.compile(r"\b(\d{4})-(\d{2})-(\d{2})\b")
_DOTTED_DATE_PATTERN = re.compile(r"\b(\d{2})\.(\d{2})\.(\d{4})\b")
_CANONICAL_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today(tz: Optional[str] = None) -> date:
    """Current calendar date in the bot's timezone."""
    return datetime.now(ZoneInfo(tz or TIMEZONE)).date()


def detect_explicit_date(text: Optional[str]) -> Optional[str]:
    """
    Return the first explicit date found in text as "YYYY-MM-DD".

    The match is not checked against the calendar here; to_iso() does that.
    """
    if not text:
        return None

    match = _ISO_DATE_PATTERN.search(text)
    if match:
        return f"{match.group(1)}-{match.group(2)}-{match.group(3)}"

    match = _DOTTED_DATE_PATTERN.search(text)
    if match:
        return f"{match.group(3)}-{match.group(2)}-{match.group(1)}"

    return None


def to_iso(value, context_date: Optional[date] = None) -> str:
    """
    Normalize to a canonical ISO date string. Never raises.

    A real calendar date already written as YYYY-MM-DD passes through;
    anything else (None, "2025-13-40", other formats) becomes context_date,
    or today when no context date is given.
    """
    if isinstance(value, str) and _CANONICAL_PATTERN.match(value):
        try:
            date.fromisoformat(value)
            return value
        except ValueError:
            pass
    return (context_date or today()).isoformat()
