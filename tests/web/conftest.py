"""Web test fixtures — TestClient over the demo app with cookie sessions."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient


@pytest.fixture()
def client():
    from web.app import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def sessionless_client():
    """An app that attaches flash queues but has no session layer."""
    from fastapi import FastAPI

    from web.app import register_routes
    from web.flash import FlashMiddleware

    app = FastAPI()
    app.add_middleware(FlashMiddleware)
    register_routes(app)
    return TestClient(app, raise_server_exceptions=False)
