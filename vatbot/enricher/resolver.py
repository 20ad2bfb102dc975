# -*- coding: utf-8 -*-
"""
Classification Resolver

Decides amount type, VAT applicability, category, description and date for
one line. Sources, strongest first:

1. explicit VAT phrasing in the line (see vat_cues)
2. classifier output, field by field
3. defaults by entry type

The sign typed by the user is authoritative: the classifier's "type" is
never used. Its "date" is not trusted either; only a date written in the
line counts, otherwise the entry is booked today.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from vatbot.parser.extract_date import detect_explicit_date, to_iso
from vatbot.parser.types import AmountType, EntryType, ProvisionalLine
from .types import ClassifierResult, Resolution
from .validator import validate_category
from .vat_cues import WITH_VAT, WITHOUT_VAT, detect_vat_cue


def resolve_vat_treatment(
    entry_type: EntryType,
    cue: Optional[str],
    amount_type: AmountType,
    vat_applicable: Optional[bool],
) -> tuple[AmountType, bool]:
    if cue == WITHOUT_VAT:
        return AmountType.NET, False
    if cue == WITH_VAT:
        return AmountType.GROSS, True

    if vat_applicable is None:
        vat_applicable = True

    if amount_type == AmountType.UNKNOWN:
        if entry_type == EntryType.INCOME:
            amount_type = AmountType.GROSS
        else:
            amount_type = AmountType.GROSS if vat_applicable else AmountType.NET

    return amount_type, vat_applicable


def resolve_classification(
    line: ProvisionalLine,
    result: ClassifierResult,
    vat_rate: Decimal,
    context_date: Optional[date] = None,
) -> Resolution:
    fields = result.fields
    cue = detect_vat_cue(f"{line.raw} {line.rest}")

    amount_type, vat_applicable = resolve_vat_treatment(
        line.type, cue, fields.amount_type, fields.vat_applicable
    )

    explicit = detect_explicit_date(line.raw) or detect_explicit_date(line.rest)

    return Resolution(
        amount_type=amount_type,
        vat_applicable=vat_applicable,
        vat_rate=vat_rate if vat_applicable else Decimal(0),
        category=validate_category(fields.category),
        description=fields.description or line.rest or "",
        date=to_iso(explicit, context_date),
    )
