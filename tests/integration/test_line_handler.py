# -*- coding: utf-8 -*-
"""
LINE handler: command routing, ingestion replies and delivery failures.
"""

from types import SimpleNamespace
from unittest.mock import Mock, patch

from vatbot.line.formatters import FORMAT_HINT, GENERIC_ERROR, HELP_TEXT, RESET_DONE
from vatbot.line_handler import handle_text_message, session_key_for


def _event(text, user_id="U123", group_id=None):
    return SimpleNamespace(
        message=SimpleNamespace(text=text),
        reply_token="reply-token",
        source=SimpleNamespace(user_id=user_id, group_id=group_id),
    )


def _reply_text(line_bot_api):
    token, message = line_bot_api.reply_message.call_args[0]
    assert token == "reply-token"
    return message.text


class TestSessionKey:

    def test_user_chat(self):
        assert session_key_for(_event("x")) == "U123"

    def test_group_chat_shares_one_ledger(self):
        assert session_key_for(_event("x", group_id="G9")) == "G9"


class TestHandleTextMessage:

    def test_entry_reply(self, store):
        api = Mock()
        handle_text_message(_event("+1000 eur з ПДВ"), api, store)

        reply = _reply_text(api)
        assert reply.startswith("✅ Додано записи:")
        assert "💰 Сума: 1000.00 EUR" in reply
        assert "⚖️ ПДВ: 166.67" in reply
        assert "✍️ Опис: з ПДВ" in reply
        assert len(store.entries("U123")) == 1

    def test_format_hint(self, store):
        api = Mock()
        handle_text_message(_event("hello"), api, store)
        assert _reply_text(api) == FORMAT_HINT
        assert store.entries("U123") == []

    def test_commands(self, store):
        api = Mock()
        handle_text_message(_event("+10 x"), api, store)
        handle_text_message(_event("/reset"), api, store)
        assert _reply_text(api) == RESET_DONE
        assert store.entries("U123") == []

        handle_text_message(_event("/start"), api, store)
        assert _reply_text(api) == HELP_TEXT

    def test_unexpected_error_replies_generic(self, store):
        api = Mock()
        with patch("vatbot.line_handler.process_message", side_effect=RuntimeError("boom")):
            handle_text_message(_event("+10 x"), api, store)
        assert _reply_text(api) == GENERIC_ERROR

    def test_delivery_failure_keeps_ledger(self, store):
        api = Mock()
        api.reply_message.side_effect = RuntimeError("LINE down")

        handle_text_message(_event("+10 x"), api, store)

        assert len(store.entries("U123")) == 1
