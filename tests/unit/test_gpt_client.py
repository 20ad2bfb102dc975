# -*- coding: utf-8 -*-
"""
Unit tests for the OpenAI classifier wrapper.
"""

from decimal import Decimal
from unittest.mock import patch

import pytest

from vatbot.enricher.gpt_client import call_gpt_classification, classify_line, parse_fields
from vatbot.enricher.types import Classified, Unavailable
from vatbot.errors import ClassifierError
from vatbot.parser import tokenize
from vatbot.parser.types import AmountType, EntryType
from vatbot.schemas import CLASSIFIER_RESPONSE_SCHEMA
from tests.test_utils import make_openai_client_with_json, set_openai_mock_content


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr("vatbot.enricher.gpt_client.OPENAI_API_KEY", "sk-test")


@pytest.fixture
def line():
    return tokenize("+1000 eur sold site")[0]


class TestClassifyLine:

    @patch('vatbot.enricher.gpt_client.OpenAI')
    def test_parses_json_reply(self, mock_openai, api_key, line):
        mock_openai.return_value = make_openai_client_with_json({
            "type": "income",
            "amount_type": "gross",
            "vat_applicable": True,
            "category": "sales",
            "description": "website sale",
            "date": "2026-03-01",
        })

        result = classify_line(line, "EUR", Decimal("20"))

        assert isinstance(result, Classified)
        assert result.fields.type == EntryType.INCOME
        assert result.fields.amount_type == AmountType.GROSS
        assert result.fields.vat_applicable is True
        assert result.fields.category == "sales"
        assert result.fields.description == "website sale"

    @patch('vatbot.enricher.gpt_client.OpenAI')
    def test_request_contract(self, mock_openai, api_key, line):
        client = set_openai_mock_content(mock_openai, "{}")

        classify_line(line, "EUR", Decimal("20"))

        _, kwargs = mock_openai.call_args
        assert kwargs["max_retries"] == 0
        assert kwargs["timeout"] > 0

        _, create_kwargs = client.chat.completions.create.call_args
        response_format = create_kwargs["response_format"]
        assert response_format["type"] == "json_schema"
        assert response_format["json_schema"] is CLASSIFIER_RESPONSE_SCHEMA
        assert response_format["json_schema"]["strict"] is False
        assert "other" in CLASSIFIER_RESPONSE_SCHEMA["schema"]["properties"]["category"]["enum"]
        user_prompt = create_kwargs["messages"][1]["content"]
        assert "+1000 eur sold site" in user_prompt
        assert "EUR" in user_prompt
        assert "20%" in user_prompt
        client.chat.completions.create.assert_called_once()

    @patch('vatbot.enricher.gpt_client.OpenAI')
    def test_non_json_reply_is_unavailable(self, mock_openai, api_key, line):
        set_openai_mock_content(mock_openai, "sure! it's income")
        assert isinstance(classify_line(line, "EUR", Decimal("20")), Unavailable)

    @patch('vatbot.enricher.gpt_client.OpenAI')
    def test_json_array_is_unavailable(self, mock_openai, api_key, line):
        set_openai_mock_content(mock_openai, "[1, 2]")
        assert isinstance(classify_line(line, "EUR", Decimal("20")), Unavailable)

    @patch('vatbot.enricher.gpt_client.OpenAI')
    def test_empty_reply_is_unavailable(self, mock_openai, api_key, line):
        set_openai_mock_content(mock_openai, "")
        assert isinstance(classify_line(line, "EUR", Decimal("20")), Unavailable)

    @patch('vatbot.enricher.gpt_client.OpenAI')
    def test_api_error_is_unavailable_and_not_retried(self, mock_openai, api_key, line):
        client = set_openai_mock_content(mock_openai, "{}")
        client.chat.completions.create.side_effect = TimeoutError("timed out")

        result = classify_line(line, "EUR", Decimal("20"))

        assert isinstance(result, Unavailable)
        assert "timed out" in result.reason
        assert client.chat.completions.create.call_count == 1

    @patch('vatbot.enricher.gpt_client.OpenAI')
    def test_missing_api_key_is_unavailable(self, mock_openai, line):
        result = classify_line(line, "EUR", Decimal("20"))
        assert isinstance(result, Unavailable)
        mock_openai.assert_not_called()


class TestCallGptClassification:

    @patch('vatbot.enricher.gpt_client.OpenAI')
    def test_raises_classifier_error_on_bad_json(self, mock_openai):
        set_openai_mock_content(mock_openai, "{not json")
        with pytest.raises(ClassifierError):
            call_gpt_classification("+1 x", "EUR", 20, api_key="sk-test")


class TestParseFields:

    def test_wrong_types_are_unknown(self):
        fields = parse_fields({
            "type": "transfer",
            "amount_type": 5,
            "vat_applicable": "yes",
            "category": "",
            "description": None,
        })
        assert fields.type is None
        assert fields.amount_type == AmountType.UNKNOWN
        assert fields.vat_applicable is None
        assert fields.category is None
        assert fields.description is None

    def test_unknown_amount_type(self):
        assert parse_fields({"amount_type": "unknown"}).amount_type == AmountType.UNKNOWN
        assert parse_fields({"amount_type": "NET"}).amount_type == AmountType.NET

    def test_false_is_kept(self):
        assert parse_fields({"vat_applicable": False}).vat_applicable is False
