# -*- coding: utf-8 -*-
"""
Classifier result types.

The external classifier either answered (Classified) or did not
(Unavailable). Callers never see an exception from it.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Union

from vatbot.parser.types import AmountType, EntryType


@dataclass(frozen=True)
class ClassifierFields:
    """Best-effort fields from the classifier; None means unknown."""
    type: Optional[EntryType] = None
    amount_type: AmountType = AmountType.UNKNOWN
    vat_applicable: Optional[bool] = None
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None


@dataclass(frozen=True)
class Classified:
    fields: ClassifierFields


@dataclass(frozen=True)
class Unavailable:
    reason: str = ""
    fields: ClassifierFields = field(default_factory=ClassifierFields)


ClassifierResult = Union[Classified, Unavailable]


@dataclass(frozen=True)
class Resolution:
    """Final classification of one line after cues, classifier and defaults."""
    amount_type: AmountType
    vat_applicable: bool
    vat_rate: Decimal           # 0 when VAT is not applicable
    category: str
    description: str
    date: str
