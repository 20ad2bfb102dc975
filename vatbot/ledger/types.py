# -*- coding: utf-8 -*-
"""
Ledger Types

Entry is what gets booked; PeriodSummary is derived on demand and never
stored. Money fields are Decimals rounded to 2 places.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from vatbot.config import DEFAULT_CURRENCY, DEFAULT_VAT_RATE
from vatbot.parser.types import AmountType, EntryType

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class Entry:
    """
    One booked ledger entry (immutable).

    vat_collected is nonzero only for income; vat_deductible only for an
    expense with VAT applicable.
    """
    type: EntryType
    category: str
    description: str
    date: str                       # YYYY-MM-DD
    currency: str
    net: Decimal
    vat: Decimal
    gross: Decimal
    vat_collected: Decimal = ZERO
    vat_deductible: Decimal = ZERO

    # === Resolution details ===
    amount_type: AmountType = AmountType.GROSS
    vat_applicable: bool = True

    @property
    def is_income(self) -> bool:
        return self.type == EntryType.INCOME

    def to_dict(self) -> dict:
        """Plain dict with money as 2-decimal strings"""
        return {
            "type": self.type.value,
            "category": self.category,
            "description": self.description,
            "date": self.date,
            "currency": self.currency,
            "net": str(self.net),
            "vat": str(self.vat),
            "gross": str(self.gross),
            "vat_collected": str(self.vat_collected),
            "vat_deductible": str(self.vat_deductible),
            "amount_type": self.amount_type.value,
            "vat_applicable": self.vat_applicable,
        }


@dataclass(frozen=True)
class PeriodSummary:
    income_gross: Decimal = ZERO
    expense_gross: Decimal = ZERO
    income_vat: Decimal = ZERO
    expense_vat: Decimal = ZERO
    profit_gross: Decimal = ZERO
    vat_due: Decimal = ZERO
    net_after_vat: Decimal = ZERO

    def to_dict(self) -> dict:
        return {name: str(getattr(self, name)) for name in self.__dataclass_fields__}


@dataclass
class Settings:
    """Per-session settings; survive /reset."""
    currency: str = DEFAULT_CURRENCY
    vat_rate: Decimal = DEFAULT_VAT_RATE


@dataclass
class Session:
    ledger: list[Entry] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)
