from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel
from starlette.middleware.sessions import SessionMiddleware

from flashq.errors import ConfigurationError
from flashq.logging import configure_logging
from flashq.queue import FlashQueue
from flashq.settings import settings
from web.flash import FlashMiddleware, get_flash, get_flashed_messages

configure_logging()
logger = logging.getLogger(__name__)


class FlashIn(BaseModel):
    message: str | list[str]
    args: list[Any] = []


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Application started")
    yield


def install_flash(app: FastAPI) -> None:
    app.add_middleware(FlashMiddleware)
    app.add_middleware(SessionMiddleware, secret_key=settings.get_secret_key())


def register_routes(app: FastAPI) -> None:
    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error("Misconfigured request %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse({"detail": "Internal Server Error"}, status_code=500)

    @app.post("/flash/{type}")
    async def push(type: str, body: FlashIn, flash: FlashQueue = Depends(get_flash)):
        if isinstance(body.message, list) and not body.args:
            count = flash.push_many(type, body.message)
        else:
            count = flash.push(type, body.message, *body.args)
        return {"type": type, "count": count}

    @app.get("/flash/{type}")
    async def drain(type: str, flash: FlashQueue = Depends(get_flash)):
        return {"type": type, "messages": flash.drain(type)}

    @app.get("/flash")
    async def drain_all(flash: FlashQueue = Depends(get_flash)):
        return flash.drain_all()

    @app.get("/messages")
    async def messages(request: Request):
        return get_flashed_messages(request)

    @app.post("/redirect/{type}")
    async def push_and_redirect(type: str, body: FlashIn, flash: FlashQueue = Depends(get_flash)):
        flash(type, body.message, *body.args)
        return RedirectResponse("/messages", status_code=303)


app = FastAPI(docs_url=None, redoc_url=None, lifespan=lifespan)
install_flash(app)
register_routes(app)
