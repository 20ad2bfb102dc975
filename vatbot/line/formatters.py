# -*- coding: utf-8 -*-
"""
Reply message formatters (Ukrainian, as the bot's users write).
"""

from vatbot.ledger.types import Entry, PeriodSummary, Settings
from vatbot.processor import IngestResult

FORMAT_HINT = "⚠️ Формат: +1000 eur з ПДВ або -200 інтернет без ПДВ"
RESET_DONE = "✅ Дані очищено"
GENERIC_ERROR = "❌ Сталася помилка, спробуйте ще раз."

HELP_TEXT = """👋 Привіт! Я ПДВ-бот.

Вводь короткі записи:
• Доходи: +1000 з ПДВ
• Витрати: -200 інтернет без ПДВ
• Дата (необовʼязково): -150 оренда 05.03.2025

Команди:
/balance — Загальні дані доходу
/vatmonth [YYYY-MM] — Підсумок ПДВ за поточний або вказаний місяць
/vatyear [YYYY] — Підсумок ПДВ за поточний або вказаний рік
/currency [XXX] — Валюта за замовчуванням
/vatrate [N] — Ставка ПДВ у відсотках
/reset — Очистити всі збережені дані"""


def _money(value) -> str:
    return f"{value:.2f}"


def format_entry(entry: Entry) -> str:
    icon = "🟢 Дохід" if entry.is_income else "🔴 Витрата"
    return "\n".join([
        f"{icon}   •   📅 {entry.date}",
        f"💰 Сума: {_money(entry.gross)} {entry.currency}",
        f"⚖️ ПДВ: {_money(entry.vat)}",
        f"📁 Категорія: {entry.category}",
        f"✍️ Опис: {entry.description or '—'}",
        "",
    ])


def format_summary_block(title: str, summary: PeriodSummary) -> str:
    return "\n".join([
        f"📊 {title}",
        f"— Оборот: доходи {_money(summary.income_gross)} − витрати {_money(summary.expense_gross)} = {_money(summary.profit_gross)}",
        f"— ПДВ: зібрано {_money(summary.income_vat)} − сплачено {_money(summary.expense_vat)} = {_money(summary.vat_due)}",
        f"— Чистий після ПДВ: {_money(summary.net_after_vat)}",
    ])


def format_balance(month: str, month_summary: PeriodSummary, year: str, year_summary: PeriodSummary) -> str:
    return "\n\n".join([
        format_summary_block(f"Місяць {month}", month_summary),
        format_summary_block(f"Рік {year}", year_summary),
    ])


def format_ingest_result(result: IngestResult) -> str:
    """Reply for a message that produced entries (or the format hint)."""
    if not result.has_entries:
        return FORMAT_HINT

    out = ["✅ Додано записи:", ""]
    out.extend(format_entry(e) for e in result.entries)
    out.append(format_balance(result.month, result.month_summary, result.year, result.year_summary))
    return "\n".join(out)


def format_vat_month(month: str, summary: PeriodSummary) -> str:
    return f"⚖️ ПДВ за {month}: {_money(summary.vat_due)}"


def format_vat_year(year: str, summary: PeriodSummary) -> str:
    return f"⚖️ ПДВ за {year} рік: {_money(summary.vat_due)}"


def format_currency(settings: Settings, changed: bool = False) -> str:
    prefix = "✅ Валюту змінено" if changed else "💱 Валюта"
    return f"{prefix}: {settings.currency}"


def format_vat_rate(settings: Settings, changed: bool = False) -> str:
    prefix = "✅ Ставку ПДВ змінено" if changed else "⚖️ Ставка ПДВ"
    return f"{prefix}: {settings.vat_rate}%"
