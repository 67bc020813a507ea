"""Session-backed flash message queue.

Messages are grouped by type and stored encoded in the session under a single
reserved key::

    session["flash"] == {"info": ["ZW1haWwgc2VudA=="], "error": [...]}

Reading a type consumes it, so every message is shown once.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from flashq.codec import decode, encode
from flashq.errors import ConfigurationError
from flashq.formatting import format_message
from flashq.settings import settings

logger = logging.getLogger(__name__)

FLASH_KEY = settings.flash_session_key


class FlashQueue:
    """Flash messages stored in the session of a calling context.

    ``context`` is any mapping that exposes the session under ``"session"``,
    typically an ASGI scope. The session is looked up on every call.
    """

    def __init__(self, context: Mapping[str, Any], key: str = FLASH_KEY) -> None:
        self.context = context
        self.key = key

    @classmethod
    def for_session(cls, session: MutableMapping[str, Any], key: str = FLASH_KEY) -> FlashQueue:
        return cls({"session": session}, key=key)

    def _session(self) -> MutableMapping[str, Any]:
        session = self.context.get("session")
        if session is None:
            raise ConfigurationError("flash messages require sessions")
        return session

    def _load(self) -> tuple[MutableMapping[str, Any], dict[str, list[str]]]:
        session = self._session()
        return session, session.get(self.key) or {}

    def push(self, type: str, message: str, *args: Any) -> int:
        """Queue ``message`` under ``type`` and return how many are queued there.

        Extra ``args`` are substituted into ``message`` printf-style::

            flash.push("info", "email sent to %s", user.email)
        """
        if args:
            message = format_message(message, *args)
        encoded = encode(message)
        session, table = self._load()
        messages = table.setdefault(type, [])
        messages.append(encoded)
        # Cookie sessions only persist top-level writes
        session[self.key] = table
        logger.debug("Queued flash message type=%s count=%d", type, len(messages))
        return len(messages)

    def push_many(self, type: str, messages: Iterable[str]) -> int:
        encoded = [encode(message) for message in messages]
        session, table = self._load()
        queued = table.setdefault(type, [])
        queued.extend(encoded)
        session[self.key] = table
        logger.debug("Queued flash batch type=%s count=%d", type, len(queued))
        return len(queued)

    def drain(self, type: str) -> list[str]:
        """Remove and return the decoded messages queued under ``type``."""
        session, table = self._load()
        if type not in table:
            return []
        messages = table.pop(type)
        session[self.key] = table
        logger.debug("Drained flash messages type=%s count=%d", type, len(messages))
        return [decode(message) for message in messages]

    def drain_all(self) -> dict[str, list[str]]:
        """Reset the table and return what it held, messages still encoded."""
        session, table = self._load()
        session[self.key] = {}
        logger.debug("Reset flash table types=%d", len(table))
        return table

    def peek(self, type: str) -> list[str]:
        _, table = self._load()
        return [decode(message) for message in table.get(type, [])]

    def count(self) -> int:
        """Total number of queued messages across all types."""
        _, table = self._load()
        return sum(len(messages) for messages in table.values())

    def __len__(self) -> int:
        return self.count()

    def __call__(self, type: str | None = None, message: Any = None, *args: Any) -> Any:
        """Single entry point: push, push a batch, drain one type or drain all.

        A list or tuple ``message`` with no ``args`` is a batch. With ``args``
        the message is always a template, and a plain string is never a batch.
        """
        if type is None:
            return self.drain_all()
        if message is None:
            return self.drain(type)
        if not args and isinstance(message, (list, tuple)):
            return self.push_many(type, message)
        return self.push(type, message, *args)

    def __repr__(self) -> str:
        return f"FlashQueue(key={self.key!r})"
