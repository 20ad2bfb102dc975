# -*- coding: utf-8 -*-
"""
Chat command handling.

/start, /help        help text
/reset               clear the ledger (settings kept)
/balance             current month and year summaries
/vatmonth [YYYY-MM]  VAT due for a month (bad argument -> current month)
/vatyear [YYYY]      VAT due for a year (bad argument -> current year)
/currency [XXX]      show or set the session currency
/vatrate [N]         show or set the session VAT rate
"""

import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from vatbot.errors import BotError, BotErrorCode
from vatbot.ledger.aggregator import month_totals, resolve_month_arg, resolve_year_arg, year_totals
from vatbot.ledger.store import SessionStore
from vatbot.line import formatters
from vatbot.parser.extract_date import today
from vatbot.processor import summarize

logger = logging.getLogger(__name__)

# "/vatmonth@my_bot 2025-03" -> ("vatmonth", "2025-03")
_RE_COMMAND = re.compile(r"^/(?P<name>[A-Za-z_]+)(?:@\S+)?(?:\s+(?P<arg>.*))?$", re.DOTALL)
_RE_CURRENCY = re.compile(r"^[A-Za-z]{3}$")


def parse_command(text: str) -> Optional[tuple[str, Optional[str]]]:
    """Split "/name arg" into (name, arg); None if text is not a command."""
    match = _RE_COMMAND.match((text or "").strip())
    if not match:
        return None
    arg = (match.group("arg") or "").strip() or None
    return match.group("name").lower(), arg


def parse_vat_rate(arg: str) -> Decimal:
    value = arg.strip().rstrip("%").strip().replace(",", ".")
    try:
        rate = Decimal(value)
    except InvalidOperation:
        raise BotError.from_code(BotErrorCode.INVALID_VAT_RATE, value=arg)
    if not rate.is_finite() or rate < 0 or rate > 100:
        raise BotError.from_code(BotErrorCode.INVALID_VAT_RATE, value=arg)
    return rate


def parse_currency(arg: str) -> str:
    value = arg.strip()
    if not _RE_CURRENCY.match(value):
        raise BotError.from_code(BotErrorCode.INVALID_CURRENCY, value=arg)
    return value.upper()


def _cmd_help(session_key, arg, store, now) -> str:
    return formatters.HELP_TEXT


def _cmd_reset(session_key, arg, store, now) -> str:
    store.reset(session_key)
    return formatters.RESET_DONE


def _cmd_balance(session_key, arg, store, now) -> str:
    month, month_summary, year, year_summary = summarize(store, session_key, now)
    return formatters.format_balance(month, month_summary, year, year_summary)


def _cmd_vatmonth(session_key, arg, store, now) -> str:
    month = resolve_month_arg(arg, now)
    return formatters.format_vat_month(month, month_totals(store.entries(session_key), month))


def _cmd_vatyear(session_key, arg, store, now) -> str:
    year = resolve_year_arg(arg, now)
    return formatters.format_vat_year(year, year_totals(store.entries(session_key), year))


def _cmd_currency(session_key, arg, store, now) -> str:
    if not arg:
        return formatters.format_currency(store.settings(session_key))
    settings = store.update_settings(session_key, currency=parse_currency(arg))
    return formatters.format_currency(settings, changed=True)


def _cmd_vatrate(session_key, arg, store, now) -> str:
    if not arg:
        return formatters.format_vat_rate(store.settings(session_key))
    settings = store.update_settings(session_key, vat_rate=parse_vat_rate(arg))
    return formatters.format_vat_rate(settings, changed=True)


_COMMANDS = {
    "start": _cmd_help,
    "help": _cmd_help,
    "reset": _cmd_reset,
    "balance": _cmd_balance,
    "vatmonth": _cmd_vatmonth,
    "vatyear": _cmd_vatyear,
    "currency": _cmd_currency,
    "vatrate": _cmd_vatrate,
}


def handle_command(
    text: str,
    session_key: str,
    *,
    store: SessionStore,
    context_date: Optional[date] = None,
) -> Optional[str]:
    """
    Run a chat command and return the reply text.

    Returns None when text is not a command, so the caller books it as
    entries instead. Invalid settings arguments reply with the error text.
    """
    parsed = parse_command(text)
    if parsed is None:
        return None

    name, arg = parsed
    now = context_date or today()
    handler = _COMMANDS.get(name)

    try:
        if handler is None:
            raise BotError.from_code(BotErrorCode.UNKNOWN_COMMAND, value=f"/{name}")
        logger.info(f"Command /{name} from {session_key} (arg={arg!r})")
        return handler(session_key, arg, store, now)
    except BotError as e:
        logger.warning(f"Command error for {session_key}: {e.code.value}")
        return e.message
