# -*- coding: utf-8 -*-
"""
Shared enums and the tokenizer output type.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class EntryType(Enum):
    """Entry direction, taken from the sign"""

    INCOME = "income"     # "+" lines
    EXPENSE = "expense"   # "-" lines

    @classmethod
    def from_sign(cls, sign: str) -> "EntryType":
        return cls.INCOME if sign == "+" else cls.EXPENSE


class AmountType(Enum):
    """Whether the typed amount already includes VAT."""

    NET = "net"
    GROSS = "gross"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value) -> "AmountType":
        """Lenient conversion; anything unrecognised is UNKNOWN."""
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.UNKNOWN


@dataclass(frozen=True)
class ProvisionalLine:
    """One tokenized line, consumed by the entry builder."""

    type: EntryType
    amount: Decimal
    currency: Optional[str]     # 3-letter code typed after the amount
    rest: str                   # free text after the amount/currency prefix
    raw: str                    # the whole stripped line
