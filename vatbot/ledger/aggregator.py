# -*- coding: utf-8 -*-
"""
Period aggregation.

Summaries are recomputed from the ledger on every call; nothing is cached,
so overlapping queries (a month and its year) never double-count.
"""

import logging
import re
from datetime import date
from decimal import Decimal, localcontext
from typing import Iterable, Optional

from vatbot.ledger.types import Entry, PeriodSummary
from vatbot.ledger.vat import MONEY_PRECISION, round2

logger = logging.getLogger(__name__)

_MONTH_ARG_PATTERN = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")
_YEAR_ARG_PATTERN = re.compile(r"^\d{4}$")


def month_of(date_str: Optional[str]) -> Optional[str]:
    return date_str[:7] if date_str else None


def year_of(date_str: Optional[str]) -> Optional[str]:
    return date_str[:4] if date_str else None


def totals(entries: Iterable[Entry]) -> PeriodSummary:
    """Reduce entries to turnover and VAT totals in a single pass."""
    inc_gross = exp_gross = inc_vat = exp_vat = Decimal(0)

    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        for entry in entries:
            if entry.is_income:
                inc_gross += entry.gross
                inc_vat += entry.vat_collected
            else:
                exp_gross += entry.gross
                exp_vat += entry.vat_deductible

        profit_gross = round2(inc_gross - exp_gross)
        vat_due = round2(inc_vat - exp_vat)
        net_after_vat = round2(profit_gross - vat_due)

    return PeriodSummary(
        income_gross=round2(inc_gross),
        expense_gross=round2(exp_gross),
        income_vat=round2(inc_vat),
        expense_vat=round2(exp_vat),
        profit_gross=profit_gross,
        vat_due=vat_due,
        net_after_vat=net_after_vat,
    )


def period_totals(entries: Iterable[Entry], period: str) -> PeriodSummary:
    """
    Totals for entries dated in a year ("YYYY") or a month ("YYYY-MM").
    """
    if len(period) == 7:
        selected = [e for e in entries if month_of(e.date) == period]
    else:
        selected = [e for e in entries if year_of(e.date) == period]
    return totals(selected)


def month_totals(entries: Iterable[Entry], yyyymm: str) -> PeriodSummary:
    return period_totals(entries, yyyymm)


def year_totals(entries: Iterable[Entry], yyyy: str) -> PeriodSummary:
    return period_totals(entries, yyyy)


def current_month(today: date) -> str:
    return f"{today.year:04d}-{today.month:02d}"


def current_year(today: date) -> str:
    return f"{today.year:04d}"


def resolve_month_arg(arg: Optional[str], today: date) -> str:
    """Explicit YYYY-MM if well formed, otherwise the current month."""
    if arg:
        arg = arg.strip()
        if _MONTH_ARG_PATTERN.match(arg):
            return arg
        logger.warning(f"Malformed month argument {arg!r}, using current month")
    return current_month(today)


def resolve_year_arg(arg: Optional[str], today: date) -> str:
    """Explicit YYYY if well formed, otherwise the current year."""
    if arg:
        arg = arg.strip()
        if _YEAR_ARG_PATTERN.match(arg):
            return arg
        logger.warning(f"Malformed year argument {arg!r}, using current year")
    return current_year(today)
