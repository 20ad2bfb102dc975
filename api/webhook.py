# -*- coding: utf-8 -*-
"""
Vercel Serverless Function - LINE Bot Webhook Entry Point

This module handles:
1. Receive Webhook POST requests from LINE Platform
2. Validate X-Line-Signature
3. Route text messages to commands or VAT entry ingestion
4. Return 200 OK to LINE (required for webhook acknowledgment)
"""

import sys
from pathlib import Path

# Add project root to sys.path for local development
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
from flask import Flask, request, abort
from linebot import LineBotApi, WebhookHandler
from linebot.exceptions import InvalidSignatureError
from linebot.models import MessageEvent, TextMessage

from vatbot.config import LINE_CHANNEL_ACCESS_TOKEN, LINE_CHANNEL_SECRET, validate_required_config
from vatbot.ledger.store import InMemorySessionStore
from vatbot.line_handler import handle_text_message

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

validate_required_config()

# Initialize Flask app
app = Flask(__name__)

# Ledgers live only as long as this process
session_store = InMemorySessionStore()

# Global variables for lazy initialization (Vercel serverless requirement)
_line_bot_api = None
_handler = None


def get_line_bot_api():
    """Get or initialize LINE Bot API client (lazy initialization)"""
    global _line_bot_api
    if _line_bot_api is None:
        logger.info("Initializing LineBotApi")
        _line_bot_api = LineBotApi(LINE_CHANNEL_ACCESS_TOKEN)
    return _line_bot_api


def get_handler():
    """Get or initialize Webhook Handler (lazy initialization)"""
    global _handler
    if _handler is None:
        logger.info("Initializing WebhookHandler")
        _handler = WebhookHandler(LINE_CHANNEL_SECRET)

        @_handler.add(MessageEvent, message=TextMessage)
        def message_text(event):
            """Handle text message events"""
            try:
                handle_text_message(event, get_line_bot_api(), session_store)
            except Exception as e:
                logger.error(f"Error in message_text handler: {e}")

        logger.info("Event handlers registered (text)")

    return _handler


@app.route("/api/webhook", methods=['GET'])
def webhook_health():
    """Health check endpoint for GET requests"""
    return 'VAT bot is running!', 200


@app.route("/api/webhook", methods=['POST'])
def webhook():
    """
    LINE Webhook entry function

    Returns:
        str: Always returns 'OK' to acknowledge receipt to LINE
    """
    signature = request.headers.get('X-Line-Signature')
    if not signature:
        logger.warning("Missing X-Line-Signature header")
        abort(400)

    body = request.get_data(as_text=True)
    logger.info(f"Request body: {body}")

    handler = get_handler()

    try:
        handler.handle(body, signature)
    except InvalidSignatureError:
        logger.error("Invalid signature")
        abort(400)
    except Exception as e:
        # Even on error, return 200 to prevent LINE from retrying
        logger.error(f"Error handling webhook: {e}")

    return 'OK'


# Local development entry point
if __name__ == "__main__":
    app.run(debug=True, port=5000)
