"""Attach a FlashQueue to every request.

Pure ASGI middleware: the queue is stored in ``scope["state"]`` so handlers
reach it as ``request.state.flash``. It reads the session lazily, so the
middleware may sit on either side of ``SessionMiddleware``.
"""
from __future__ import annotations

import logging

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from flashq.codec import decode
from flashq.queue import FlashQueue
from flashq.settings import settings

logger = logging.getLogger(__name__)

STATE_ATTR = "flash"


def attach_flash(scope: Scope, unsafe: bool = False) -> FlashQueue:
    """Attach a queue to ``scope`` and return the one in place afterwards.

    Unless ``unsafe`` is set, an already attached queue is kept.
    """
    state = scope.setdefault("state", {})
    existing = state.get(STATE_ATTR)
    if existing is not None and not unsafe:
        return existing
    state[STATE_ATTR] = FlashQueue(scope)
    logger.debug("Attached flash queue to %s %s", scope["type"], scope.get("path", ""))
    return state[STATE_ATTR]


class FlashMiddleware:
    def __init__(self, app: ASGIApp, unsafe: bool | None = None) -> None:
        self.app = app
        self.unsafe = settings.flash_unsafe if unsafe is None else unsafe

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] in ("http", "websocket"):
            attach_flash(scope, unsafe=self.unsafe)
        await self.app(scope, receive, send)


def get_flash(request: Request) -> FlashQueue:
    """FastAPI dependency: the attached queue, or one bound to this request."""
    queue = getattr(request.state, STATE_ATTR, None)
    if queue is None:
        queue = FlashQueue(request.scope)
    return queue


def get_flashed_messages(request: Request) -> list[dict[str, str]]:
    snapshot = get_flash(request).drain_all()
    return [
        {"category": category, "message": decode(message)}
        for category, messages in snapshot.items()
        for message in messages
    ]
