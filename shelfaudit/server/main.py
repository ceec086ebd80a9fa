"""FastAPI server adapter for the ShelfAudit core engine."""

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Settings are cached on first use, so .env must be loaded before they are read.
load_dotenv(Path(__file__).resolve().parents[2] / ".env")

from ..config import get_settings
from ..core.errors import FeedError
from .routers import api

settings = get_settings()
logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)


async def _feed_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info("Rejected feed on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        summary="Audit e-commerce catalog feeds for content, data and SEO problems",
        version="1.0.0",
    )
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.add_exception_handler(FeedError, _feed_error_handler)
    fastapi_app.include_router(api.router)
    return fastapi_app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("shelfaudit.server.main:app", host=settings.host, port=settings.port, reload=settings.debug)


__all__ = ["app", "create_app", "logger", "run", "settings"]
