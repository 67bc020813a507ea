"""Root conftest — session-backed flash queue fixtures."""

from __future__ import annotations

import copy

import pytest

from flashq.queue import FlashQueue


@pytest.fixture()
def session() -> dict:
    return {}


@pytest.fixture()
def flash(session: dict) -> FlashQueue:
    return FlashQueue.for_session(session)


class CookieSession(dict):
    """Session that only persists top-level writes, as cookie sessions do."""

    def __init__(self) -> None:
        super().__init__()
        self.saved: dict = {}

    def __setitem__(self, key, value) -> None:
        super().__setitem__(key, value)
        self.saved = copy.deepcopy(dict(self))


@pytest.fixture()
def cookie_session() -> CookieSession:
    return CookieSession()
