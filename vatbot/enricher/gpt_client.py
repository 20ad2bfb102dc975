# -*- coding: utf-8 -*-
"""
GPT Client for line classification

Wraps the OpenAI call that guesses amount type, VAT applicability, category
and description for one bookkeeping line. classify_line() never raises:
timeouts, API errors and malformed JSON all become Unavailable.
"""

import json
import logging
from typing import Any

from openai import OpenAI

from vatbot.config import CLASSIFIER_TIMEOUT, GPT_MODEL, GPT_TEMPERATURE, OPENAI_API_KEY
from vatbot.errors import ClassifierError
from vatbot.parser.types import AmountType, EntryType, ProvisionalLine
from vatbot.rules import allowed_categories
from vatbot.schemas import CLASSIFIER_RESPONSE_SCHEMA
from .types import ClassifierFields, Classified, ClassifierResult, Unavailable

logger = logging.getLogger(__name__)


def build_system_prompt() -> str:
    categories = "|".join(allowed_categories())
    return f"""Ти — помічник з обліку ПДВ для ФОП.
На вхід дається короткий рядок у стилі "+1000 eur сайт" або "-200 інтернет без ПДВ".
Відповідай лише JSON:
{{
  "type": "income"|"expense",
  "amount_type": "net"|"gross"|"unknown",
  "vat_applicable": boolean,
  "category": "{categories}",
  "description": "коротко",
  "date": "YYYY-MM-DD"
}}"""


def build_user_prompt(raw_line: str, currency: str, vat_rate) -> str:
    return f"Рядок: {raw_line}. Валюта: {currency}, ставка ПДВ: {vat_rate}%"


def call_gpt_classification(
    raw_line: str,
    currency: str,
    vat_rate,
    *,
    api_key: str | None = None,
    model: str | None = None,
    timeout: float | None = None,
) -> dict[str, Any]:
    """
    Call the GPT API to classify one bookkeeping line.

    Args:
        raw_line: the line as typed
        currency: session currency
        vat_rate: session VAT rate in percent

    Returns:
        the parsed JSON object

    Raises:
        ClassifierError: no API key, API failure, empty or non-object reply
    """
    key = api_key or OPENAI_API_KEY
    if not key:
        raise ClassifierError("OPENAI_API_KEY is not set")

    try:
        client = OpenAI(
            api_key=key,
            timeout=timeout if timeout is not None else CLASSIFIER_TIMEOUT,
            max_retries=0,
        )
        completion = client.chat.completions.create(
            model=model or GPT_MODEL,
            temperature=GPT_TEMPERATURE,
            messages=[
                {"role": "system", "content": build_system_prompt()},
                {"role": "user", "content": build_user_prompt(raw_line, currency, vat_rate)},
            ],
            response_format={
                "type": "json_schema",
                "json_schema": CLASSIFIER_RESPONSE_SCHEMA,
            },
        )
        response_text = completion.choices[0].message.content
    except Exception as e:
        raise ClassifierError(f"GPT classification failed: {e}") from e

    if not response_text:
        raise ClassifierError("Empty GPT response")

    try:
        result = json.loads(response_text)
    except json.JSONDecodeError as e:
        raise ClassifierError(f"GPT response is not JSON: {e}") from e

    if not isinstance(result, dict):
        raise ClassifierError(f"GPT response is not an object: {type(result).__name__}")

    logger.debug(f"GPT classification response: {result}")
    return result


def _optional_str(value) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_fields(data: dict) -> ClassifierFields:
    """Read classifier fields leniently; wrong types count as unknown."""
    entry_type = None
    raw_type = _optional_str(data.get("type"))
    if raw_type:
        try:
            entry_type = EntryType(raw_type.lower())
        except ValueError:
            entry_type = None

    vat_applicable = data.get("vat_applicable")
    return ClassifierFields(
        type=entry_type,
        amount_type=AmountType.parse(data.get("amount_type")),
        vat_applicable=vat_applicable if isinstance(vat_applicable, bool) else None,
        category=_optional_str(data.get("category")),
        description=_optional_str(data.get("description")),
        date=_optional_str(data.get("date")),
    )


def classify_line(line: ProvisionalLine, currency: str, vat_rate) -> ClassifierResult:
    """Classify one line; any failure is reported as Unavailable."""
    try:
        data = call_gpt_classification(line.raw, currency, vat_rate)
    except ClassifierError as e:
        logger.warning(f"Classifier unavailable for {line.raw!r}: {e}")
        return Unavailable(reason=str(e))
    return Classified(fields=parse_fields(data))


def unavailable_classifier(line: ProvisionalLine, currency: str, vat_rate) -> ClassifierResult:
    """Stand-in used with skip_gpt: every field falls back to defaults."""
    return Unavailable(reason="skipped")
