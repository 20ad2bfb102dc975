# -*- coding: utf-8 -*-
"""
Environment configuration module
Loads environment variables and exposes session defaults.
"""

import os
from decimal import Decimal
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# Required for the webhook entry point
LINE_CHANNEL_ACCESS_TOKEN = os.getenv('LINE_CHANNEL_ACCESS_TOKEN')
LINE_CHANNEL_SECRET = os.getenv('LINE_CHANNEL_SECRET')
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')

# Optional environment variables (with defaults)
GPT_MODEL = os.getenv('GPT_MODEL', 'gpt-4o-mini')
GPT_TEMPERATURE = float(os.getenv('GPT_TEMPERATURE', '0.1'))
CLASSIFIER_TIMEOUT = float(os.getenv('CLASSIFIER_TIMEOUT', '20'))

# Settings for newly created sessions
DEFAULT_CURRENCY = os.getenv('DEFAULT_CURRENCY', 'EUR').upper()
DEFAULT_VAT_RATE = Decimal(os.getenv('DEFAULT_VAT_RATE', '20'))

# "Today" and the current month/year are taken in this timezone
TIMEZONE = os.getenv('TIMEZONE', 'Europe/Kyiv')


def validate_required_config() -> None:
    """Raise ValueError if a variable the webhook needs is missing."""
    required_vars = {
        'LINE_CHANNEL_ACCESS_TOKEN': LINE_CHANNEL_ACCESS_TOKEN,
        'LINE_CHANNEL_SECRET': LINE_CHANNEL_SECRET,
        'OPENAI_API_KEY': OPENAI_API_KEY,
    }

    missing_vars = [var_name for var_name, var_value in required_vars.items() if not var_value]

    if missing_vars:
        raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")
