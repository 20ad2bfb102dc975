# -*- coding: utf-8 -*-
"""
Session Store

Maps a session key (LINE user, group or room id) to its ledger and settings.
Sessions are created on first use, cleared only by reset(), never evicted.
Everything lives in process memory; a restart loses all ledgers.
"""

import logging
from dataclasses import replace
from typing import Iterator

from vatbot.ledger.types import Entry, Session, Settings

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Interface injected into the processor and command handlers.

    Subclasses implement _load() and _save(); the ledger/settings operations
    are shared.
    """

    def _load(self, key: str):
        raise NotImplementedError

    def _save(self, key: str, session: Session) -> None:
        raise NotImplementedError

    def keys(self) -> Iterator[str]:
        raise NotImplementedError

    def get(self, key: str) -> Session:
        """Return the session for key, creating it with default settings."""
        session = self._load(key)
        if session is None:
            session = Session(settings=Settings())
            self._save(key, session)
            logger.info(f"Created session {key}")
        return session

    def entries(self, key: str) -> list[Entry]:
        """Snapshot of the ledger in ingestion order."""
        return list(self.get(key).ledger)

    def settings(self, key: str) -> Settings:
        return self.get(key).settings

    def append(self, key: str, entry: Entry) -> None:
        session = self.get(key)
        session.ledger.append(entry)
        self._save(key, session)

    def reset(self, key: str) -> None:
        """Clear the ledger; settings are kept."""
        session = self.get(key)
        session.ledger.clear()
        self._save(key, session)
        logger.info(f"Reset ledger for session {key}")

    def update_settings(self, key: str, **changes) -> Settings:
        session = self.get(key)
        session.settings = replace(session.settings, **changes)
        self._save(key, session)
        logger.info(f"Updated settings for session {key}: {changes}")
        return session.settings


class InMemorySessionStore(SessionStore):
    """Dict-backed store; the default for the webhook and the CLI."""

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def _load(self, key: str):
        return self._sessions.get(key)

    def _save(self, key: str, session: Session) -> None:
        self._sessions[key] = session

    def keys(self) -> Iterator[str]:
        return iter(list(self._sessions))

    def __contains__(self, key: str) -> bool:
        return key in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
