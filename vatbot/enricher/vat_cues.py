# -*- coding: utf-8 -*-
"""
Explicit VAT phrasing in the typed line ("з ПДВ", "без ПДВ", "no VAT", ...).

Patterns come from vat_rules.yaml. "Without" wins over "with", since
"без ПДВ" also ends in "з ПДВ".
"""

from typing import Optional

from vatbot.rules import with_vat_patterns, without_vat_patterns

WITH_VAT = "with"
WITHOUT_VAT = "without"


def detect_vat_cue(text: str) -> Optional[str]:
    """Return WITHOUT_VAT, WITH_VAT or None."""
    if not text:
        return None
    if any(p.search(text) for p in without_vat_patterns()):
        return WITHOUT_VAT
    if any(p.search(text) for p in with_vat_patterns()):
        return WITH_VAT
    return None
