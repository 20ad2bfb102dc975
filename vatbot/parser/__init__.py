# -*- coding: utf-8 -*-
"""
Line Tokenizer

Turns a raw multi-line message into provisional lines. Lines without a
leading sign or without a readable amount are dropped silently; an empty
result means "nothing to book" and the caller replies with a format hint.

Usage:
    from vatbot.parser import tokenize
    lines = tokenize("+1000 eur з ПДВ\n-200 інтернет без ПДВ")
"""

import logging

from vatbot.parser.types import EntryType, AmountType, ProvisionalLine
from vatbot.parser.extract_amount import extract_prefix
from vatbot.parser.split_lines import split_lines

logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[ProvisionalLine]:
    """
    Tokenize a message into ProvisionalLine records, in input order.

    Args:
        text: the message as typed by the user

    Returns:
        list[ProvisionalLine]: possibly empty
    """
    lines: list[ProvisionalLine] = []
    for raw in split_lines(text):
        parts = extract_prefix(raw)
        if parts is None:
            logger.debug(f"Skipping line without sign/amount: {raw!r}")
            continue

        sign, amount, currency, rest = parts
        lines.append(
            ProvisionalLine(
                type=EntryType.from_sign(sign),
                amount=amount,
                currency=currency,
                rest=rest,
                raw=raw,
            )
        )

    return lines


# Export
__all__ = [
    "tokenize",
    "EntryType",
    "AmountType",
    "ProvisionalLine",
]
