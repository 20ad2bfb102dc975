# -*- coding: utf-8 -*-
"""
Message Processor

Ingestion entry point shared by the LINE handler and the CLI:
tokenize -> build each entry in order -> append to the session -> summaries.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from vatbot.enricher import build_entry, unavailable_classifier
from vatbot.enricher.enricher import Classifier
from vatbot.ledger.aggregator import current_month, current_year, month_totals, year_totals
from vatbot.ledger.store import SessionStore
from vatbot.ledger.types import Entry, PeriodSummary
from vatbot.parser import tokenize
from vatbot.parser.extract_date import today

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    entries: list[Entry] = field(default_factory=list)
    month: str = ""
    year: str = ""
    month_summary: Optional[PeriodSummary] = None
    year_summary: Optional[PeriodSummary] = None

    @property
    def has_entries(self) -> bool:
        """False means nothing parsed: reply with the format hint."""
        return bool(self.entries)


def summarize(store: SessionStore, session_key: str, context_date: date) -> tuple[str, PeriodSummary, str, PeriodSummary]:
    """Current month and year summaries for a session."""
    entries = store.entries(session_key)
    month = current_month(context_date)
    year = current_year(context_date)
    return month, month_totals(entries, month), year, year_totals(entries, year)


def process_message(
    text: str,
    session_key: str,
    *,
    store: SessionStore,
    classifier: Optional[Classifier] = None,
    skip_gpt: bool = False,
    context_date: Optional[date] = None,
) -> IngestResult:
    """
    Book every parseable line of a message into the session ledger.

    Args:
        text: message body
        session_key: chat/user identifier
        store: session store
        classifier: override for the OpenAI classifier (tests)
        skip_gpt: never call OpenAI; every line uses defaults
        context_date: "today" (defaults to the configured timezone's today)

    Returns:
        IngestResult; has_entries is False when no line matched.

    Entries are appended one by one, so if line N raises, lines before N
    stay booked.
    """
    now = context_date or today()
    lines = tokenize(text)
    if not lines:
        logger.info(f"No bookkeeping lines in message from {session_key}")
        return IngestResult()

    if skip_gpt:
        classifier = unavailable_classifier

    settings = store.settings(session_key)
    added: list[Entry] = []
    for line in lines:
        entry = build_entry(line, settings, classifier=classifier, context_date=now)
        store.append(session_key, entry)
        added.append(entry)

    logger.info(f"Added {len(added)} entries for {session_key}")

    month, month_summary, year, year_summary = summarize(store, session_key, now)
    return IngestResult(
        entries=added,
        month=month,
        year=year,
        month_summary=month_summary,
        year_summary=year_summary,
    )
