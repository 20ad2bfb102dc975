# -*- coding: utf-8 -*-
"""
Unit tests for period totals.
"""

from datetime import date
from decimal import Decimal

from vatbot.ledger.aggregator import (
    current_month,
    current_year,
    month_totals,
    period_totals,
    resolve_month_arg,
    resolve_year_arg,
    totals,
    year_totals,
)
from vatbot.parser.types import EntryType
from tests.test_utils import make_entry

INCOME = EntryType.INCOME
EXPENSE = EntryType.EXPENSE


def _ledger():
    return [
        make_entry(INCOME, "1000.00", "166.67", "2026-03-02"),
        make_entry(EXPENSE, "240.00", "40.00", "2026-03-10"),
        make_entry(EXPENSE, "200.00", "0.00", "2026-03-11", vat_applicable=False),
        make_entry(INCOME, "600.00", "100.00", "2026-01-20"),
        make_entry(EXPENSE, "120.00", "20.00", "2025-12-31"),
    ]


class TestTotals:

    def test_empty(self):
        s = totals([])
        assert s.income_gross == Decimal("0.00")
        assert s.vat_due == Decimal("0.00")
        assert s.net_after_vat == Decimal("0.00")

    def test_month(self):
        s = month_totals(_ledger(), "2026-03")
        assert s.income_gross == Decimal("1000.00")
        assert s.expense_gross == Decimal("440.00")
        assert s.income_vat == Decimal("166.67")
        assert s.expense_vat == Decimal("40.00")
        assert s.profit_gross == Decimal("560.00")
        assert s.vat_due == Decimal("126.67")
        assert s.net_after_vat == Decimal("433.33")

    def test_derived_fields_are_exact_differences(self):
        s = month_totals(_ledger(), "2026-03")
        assert s.profit_gross == s.income_gross - s.expense_gross
        assert s.vat_due == s.income_vat - s.expense_vat
        assert s.net_after_vat == s.profit_gross - s.vat_due

    def test_year(self):
        s = year_totals(_ledger(), "2026")
        assert s.income_gross == Decimal("1600.00")
        assert s.vat_due == Decimal("226.67")

    def test_period_totals_dispatches_on_length(self):
        ledger = _ledger()
        assert period_totals(ledger, "2026-03") == month_totals(ledger, "2026-03")
        assert period_totals(ledger, "2025") == year_totals(ledger, "2025")

    def test_months_sum_to_year(self):
        ledger = _ledger()
        monthly = sum(
            (month_totals(ledger, f"2026-{m:02d}").vat_due for m in range(1, 13)),
            Decimal(0),
        )
        assert monthly == year_totals(ledger, "2026").vat_due

    def test_repeated_queries_do_not_accumulate(self):
        ledger = _ledger()
        first = year_totals(ledger, "2026")
        month_totals(ledger, "2026-03")
        assert year_totals(ledger, "2026") == first

    def test_other_periods_empty(self):
        assert month_totals(_ledger(), "2024-03").income_gross == Decimal("0.00")

    def test_month_and_year_accept_generators(self):
        assert month_totals((e for e in _ledger()), "2026-03").income_gross == Decimal("1000.00")
        assert year_totals((e for e in _ledger()), "2025").expense_gross == Decimal("120.00")

    def test_sums_beyond_default_decimal_precision(self):
        big = "9" * 27
        ledger = [
            make_entry(INCOME, big, "0.00", "2026-03-01", vat_applicable=False),
            make_entry(INCOME, "1.00", "0.00", "2026-03-02", vat_applicable=False),
        ]
        assert month_totals(ledger, "2026-03").income_gross == Decimal("1" + "0" * 27)


class TestPeriodArguments:

    def test_current_period(self):
        today = date(2026, 3, 5)
        assert current_month(today) == "2026-03"
        assert current_year(today) == "2026"

    def test_valid_month_arg(self):
        assert resolve_month_arg("2025-11", date(2026, 3, 5)) == "2025-11"

    def test_malformed_month_arg_falls_back(self):
        today = date(2026, 3, 5)
        assert resolve_month_arg("2025-13", today) == "2026-03"
        assert resolve_month_arg("March", today) == "2026-03"
        assert resolve_month_arg(None, today) == "2026-03"

    def test_year_arg(self):
        today = date(2026, 3, 5)
        assert resolve_year_arg("2024", today) == "2024"
        assert resolve_year_arg("24", today) == "2026"
        assert resolve_year_arg("", today) == "2026"
