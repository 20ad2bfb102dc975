# -*- coding: utf-8 -*-
"""
Line Splitting

One transaction per line; blank lines are ignored.
"""


def split_lines(text: str) -> list[str]:
    """
    Split a message into lines.

    Args:
        text: raw message text

    Returns:
        list[str]: stripped, non-empty lines
    """
    if not text:
        return []

    results = []
    for part in text.splitlines():
        clean_part = part.strip()
        if clean_part:
            results.append(clean_part)

    return results
