# -*- coding: utf-8 -*-
"""Local VAT bot CLI.

Runs messages through the same command/ingestion path as the LINE webhook,
with an in-memory store, and prints the reply. Handy for trying the
tokenizer and the VAT resolution without a LINE channel.

    python -m vatbot.cli --no-llm "+1000 eur з ПДВ" "-200 інтернет без ПДВ" /balance
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import Any

from vatbot.commands import handle_command
from vatbot.ledger.store import InMemorySessionStore, SessionStore
from vatbot.line.formatters import format_ingest_result
from vatbot.processor import process_message


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def run_message(
    text: str,
    *,
    store: SessionStore,
    session: str,
    no_llm: bool,
    as_json: bool,
    context_date: date | None = None,
) -> None:
    reply = handle_command(text, session, store=store, context_date=context_date)
    if reply is not None:
        if as_json:
            _print_json({"status": "command", "reply": reply})
        else:
            print(reply)
        return

    result = process_message(text, session, store=store, skip_gpt=no_llm, context_date=context_date)
    if not as_json:
        print(format_ingest_result(result))
        return

    if not result.has_entries:
        _print_json({"status": "no_entries", "reply": format_ingest_result(result)})
        return

    _print_json(
        {
            "status": "ok",
            "entries": [e.to_dict() for e in result.entries],
            "month": {"period": result.month, **result.month_summary.to_dict()},
            "year": {"period": result.year, **result.year_summary.to_dict()},
        }
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vatbot", description="VAT bookkeeping bot, local mode")
    parser.add_argument("messages", nargs="*", help="Messages or /commands; read stdin lines if omitted")
    parser.add_argument("--session", default="local", help="Session key")
    parser.add_argument("--no-llm", action="store_true", help="Never call OpenAI (defaults only)")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print JSON instead of chat text")
    parser.add_argument("--verbose", action="store_true", help="Enable INFO logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    store = InMemorySessionStore()
    messages = args.messages or [line.rstrip("\n") for line in sys.stdin]
    for text in messages:
        if not text.strip():
            continue
        run_message(text, store=store, session=args.session, no_llm=args.no_llm, as_json=args.as_json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
