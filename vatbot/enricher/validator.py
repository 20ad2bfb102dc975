# -*- coding: utf-8 -*-
"""
Validation helpers for classifier results.
"""

import logging
from typing import Optional

from vatbot.rules import FALLBACK_CATEGORY, allowed_categories, category_aliases

logger = logging.getLogger(__name__)


def validate_category(category: Optional[str]) -> str:
    """
    Validate a category against the closed set.

    Known synonyms are mapped onto the closed set; anything else
    becomes "other".
    """
    if not category or not category.strip():
        return FALLBACK_CATEGORY

    normalized = category.strip().lower()
    categories = allowed_categories()

    if normalized in categories:
        return normalized

    alias = category_aliases().get(normalized)
    if alias in categories:
        logger.info(f"Category '{category}' normalized to '{alias}'")
        return alias

    logger.warning(f"Unknown category '{category}', using '{FALLBACK_CATEGORY}'")
    return FALLBACK_CATEGORY
