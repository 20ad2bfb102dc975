# -*- coding: utf-8 -*-
"""
LINE Message Handler Module

Routes a text message to a command or to entry ingestion and replies.
"""

import logging
from linebot import LineBotApi
from linebot.models import MessageEvent, TextSendMessage

from vatbot.commands import handle_command
from vatbot.ledger.store import SessionStore
from vatbot.line.formatters import GENERIC_ERROR, format_ingest_result
from vatbot.processor import process_message

logger = logging.getLogger(__name__)


def session_key_for(event: MessageEvent) -> str:
    """One ledger per chat: group, room, or 1:1 user."""
    source = event.source
    for attr in ("group_id", "room_id", "user_id"):
        value = getattr(source, attr, None)
        if value:
            return value
    return "anonymous"


def build_reply(text: str, session_key: str, store: SessionStore) -> str:
    """Command reply if text is a command, otherwise the ingestion reply."""
    reply_text = handle_command(text, session_key, store=store)
    if reply_text is not None:
        return reply_text

    result = process_message(text, session_key, store=store)
    return format_ingest_result(result)


def handle_text_message(event: MessageEvent, line_bot_api: LineBotApi, store: SessionStore) -> None:
    """
    Handle text message main flow

    Flow:
    1. Receive user message
    2. Command -> run it against the session
    3. Otherwise tokenize, classify and book every line
    4. Reply with the result (or the format hint)

    Args:
        event: LINE MessageEvent
        line_bot_api: LINE Bot API client
        store: session store shared by the process
    """
    user_message = (event.message.text or "").strip()
    reply_token = event.reply_token
    session_key = session_key_for(event)

    logger.info(f"Received message from {session_key}: {user_message}")

    try:
        reply_text = build_reply(user_message, session_key, store)
    except Exception as e:
        logger.exception(f"Error handling message from {session_key}: {e}")
        reply_text = GENERIC_ERROR

    try:
        logger.info(f"Sending reply to LINE: {reply_text[:100]}")
        line_bot_api.reply_message(
            reply_token,
            TextSendMessage(text=reply_text)
        )
    except Exception as e:
        # Delivery failures do not touch the ledger
        logger.error(f"Failed to send LINE reply to {session_key}: {e}")
