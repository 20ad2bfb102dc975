# -*- coding: utf-8 -*-
"""
Sign, amount and currency extraction for a single line.

Accepted prefix: "+" or "-", then an amount of digits, spaces, "." and ",",
then an optional 3-letter currency code (only codes listed in vat_rules.yaml).

    +1000 eur sold site   -> (+, 1000, EUR, "sold site")
    -1 200,50 rent        -> (-, 1200.50, None, "rent")
    -200 tax              -> (-, 200, None, "tax")
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from vatbot.rules import known_currencies

# Spaces inside the amount are only accepted before a group of three digits
# ("1 000,50"), so a date typed after the amount is not glued onto it.
_PREFIX_PATTERN = re.compile(r"^([+-])\s*(\d[\d.,]*(?:\s+\d{3}\b[\d.,]*)*|[.,]\d+)")
_CURRENCY_PATTERN = re.compile(r"\s*([A-Za-z]{3})\b")
# Longest leading decimal number once spaces are removed and "," became "."
_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?|\.\d+")


def parse_amount(raw_amount: str) -> Optional[Decimal]:
    """
    Parse the numeric part of a line.

    Spaces are stripped and commas become dots; the longest leading decimal
    number is used, so "1.000.5" reads as 1.000. Returns None when there is
    no digit to read.
    """
    normalized = re.sub(r"\s+", "", raw_amount or "").replace(",", ".")
    match = _NUMBER_PATTERN.match(normalized)
    if not match:
        return None
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None


def extract_prefix(line: str) -> Optional[Tuple[str, Decimal, Optional[str], str]]:
    """
    Split a line into (sign, amount, currency, rest).

    Returns None if the line has no leading sign or no readable amount.
    """
    match = _PREFIX_PATTERN.match(line)
    if not match:
        return None

    amount = parse_amount(match.group(2))
    if amount is None:
        return None

    end = match.end()
    currency = None
    currency_match = _CURRENCY_PATTERN.match(line, end)
    if currency_match and currency_match.group(1).upper() in known_currencies():
        currency = currency_match.group(1).upper()
        end = currency_match.end()

    rest = line[end:].strip()
    return match.group(1), amount, currency, rest
