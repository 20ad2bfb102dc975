# -*- coding: utf-8 -*-
"""
VAT rules loader.

Reads data/vat_rules.yaml: the closed category set, category synonyms,
"with/without VAT" phrasing and the currency codes the tokenizer accepts.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

import yaml

FALLBACK_CATEGORY = "other"


@lru_cache(maxsize=1)
def load_rules() -> dict:
    """Load the full rules file (cached)."""
    rules_path = Path(__file__).resolve().parent / "data" / "vat_rules.yaml"
    if not rules_path.exists():
        return {}

    with open(rules_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def allowed_categories() -> tuple[str, ...]:
    categories = load_rules().get("categories") or []
    result = tuple(str(c).strip().lower() for c in categories if str(c).strip())
    return result or (FALLBACK_CATEGORY,)


@lru_cache(maxsize=1)
def category_aliases() -> dict[str, str]:
    aliases = load_rules().get("category_aliases") or {}
    return {str(k).strip().lower(): str(v).strip().lower() for k, v in aliases.items()}


@lru_cache(maxsize=1)
def known_currencies() -> frozenset[str]:
    return frozenset(str(c).strip().upper() for c in load_rules().get("currencies") or [])


def _compile(patterns) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns or [])


@lru_cache(maxsize=1)
def with_vat_patterns() -> tuple[re.Pattern[str], ...]:
    cues = load_rules().get("vat_cues") or {}
    return _compile(cues.get("with"))


@lru_cache(maxsize=1)
def without_vat_patterns() -> tuple[re.Pattern[str], ...]:
    cues = load_rules().get("vat_cues") or {}
    return _compile(cues.get("without"))
