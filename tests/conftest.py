from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from vatbot.ledger.store import InMemorySessionStore


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        group = _top_level_tests_group(Path(str(item.fspath)))
        if group == "unit":
            item.add_marker(pytest.mark.unit)
        elif group == "integration":
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def no_openai_key(monkeypatch):
    """Tests never reach OpenAI unless they patch the client themselves."""
    monkeypatch.setattr("vatbot.enricher.gpt_client.OPENAI_API_KEY", "")


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def kyiv_today():
    return date(2026, 3, 15)
