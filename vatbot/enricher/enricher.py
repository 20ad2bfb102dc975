# -*- coding: utf-8 -*-
"""
Entry Builder

Provisional line -> classifier -> resolver -> VAT triplet -> Entry.
"""

import logging
from datetime import date
from typing import Callable, Iterable, Iterator, Optional

from vatbot.ledger.types import Entry, Settings, ZERO
from vatbot.ledger.vat import compute_triplet
from vatbot.parser.types import EntryType, ProvisionalLine
from .gpt_client import classify_line
from .resolver import resolve_classification
from .types import ClassifierResult

logger = logging.getLogger(__name__)

Classifier = Callable[[ProvisionalLine, str, object], ClassifierResult]


def build_entry(
    line: ProvisionalLine,
    settings: Settings,
    *,
    classifier: Optional[Classifier] = None,
    context_date: Optional[date] = None,
) -> Entry:
    """
    Build one booked entry. The classifier is called exactly once.

    Args:
        line: tokenizer output
        settings: session currency and VAT rate
        classifier: defaults to the OpenAI classifier
        context_date: "today" for lines without an explicit date
    """
    classify = classifier or classify_line
    result = classify(line, settings.currency, settings.vat_rate)
    resolution = resolve_classification(line, result, settings.vat_rate, context_date)

    triplet = compute_triplet(
        line.amount,
        resolution.amount_type,
        resolution.vat_rate,
        resolution.vat_applicable,
    )

    is_income = line.type == EntryType.INCOME
    entry = Entry(
        type=line.type,
        category=resolution.category,
        description=resolution.description,
        date=resolution.date,
        currency=(line.currency or settings.currency).upper(),
        net=triplet.net,
        vat=triplet.vat,
        gross=triplet.gross,
        vat_collected=triplet.vat if is_income else ZERO,
        vat_deductible=triplet.vat if not is_income and resolution.vat_applicable else ZERO,
        amount_type=resolution.amount_type,
        vat_applicable=resolution.vat_applicable,
    )

    logger.info(
        f"Built {entry.type.value} entry: gross={entry.gross} vat={entry.vat} "
        f"{entry.currency} category={entry.category} date={entry.date}"
    )
    return entry


def enrich_lines(
    lines: Iterable[ProvisionalLine],
    settings: Settings,
    *,
    classifier: Optional[Classifier] = None,
    context_date: Optional[date] = None,
) -> Iterator[Entry]:
    """Yield entries one line at a time, in input order."""
    for line in lines:
        yield build_entry(line, settings, classifier=classifier, context_date=context_date)
