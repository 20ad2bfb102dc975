# -*- coding: utf-8 -*-
"""
AI Enrichment Module

Classifies tokenized lines and settles their VAT treatment:
- explicit phrasing (з ПДВ / без ПДВ) comes first
- then the GPT classification
- then defaults by entry type
"""

from .enricher import build_entry, enrich_lines
from .gpt_client import classify_line, unavailable_classifier
from .resolver import resolve_classification
from .types import ClassifierFields, Classified, Unavailable, Resolution

__all__ = [
    "build_entry",
    "enrich_lines",
    "classify_line",
    "unavailable_classifier",
    "resolve_classification",
    "ClassifierFields",
    "Classified",
    "Unavailable",
    "Resolution",
]
