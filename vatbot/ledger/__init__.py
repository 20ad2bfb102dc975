# -*- coding: utf-8 -*-
"""
Ledger Module

Entries, VAT arithmetic, period summaries and the session store.
"""

from .types import Entry, PeriodSummary, Session, Settings
from .vat import Triplet, compute_triplet, round2
from .aggregator import totals, period_totals, month_totals, year_totals
from .store import SessionStore, InMemorySessionStore

__all__ = [
    "Entry",
    "PeriodSummary",
    "Session",
    "Settings",
    "Triplet",
    "compute_triplet",
    "round2",
    "totals",
    "period_totals",
    "month_totals",
    "year_totals",
    "SessionStore",
    "InMemorySessionStore",
]
