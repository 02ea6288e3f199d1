"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasky import __version__
from tasky.server.api import routers
from tasky.server.config import Settings
from tasky.server.database import init_db, make_engine, make_sessionmaker

logger = logging.getLogger(__name__)


def _first_violation(exc: RequestValidationError) -> str:
    """Human-readable text for the first failed field."""
    errors = exc.errors()
    if not errors:
        return "Invalid payload"
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    message = error.get("msg", "Invalid payload")
    return f"{'.'.join(loc)}: {message}" if loc else message


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": _first_violation(exc)}, status_code=status.HTTP_400_BAD_REQUEST)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the API app. Tables are created on startup if missing."""
    settings = settings or Settings()
    engine = engine or make_engine(settings.DATABASE_URL)
    init_db(engine)

    app = FastAPI(title="tasky", version=__version__)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = make_sessionmaker(engine)

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)

    for router in routers:
        app.include_router(router)

    @app.get("/health")
    def health():
        return {"ok": True}

    logger.info("tasky API ready (database %s)", engine.url.render_as_string(hide_password=True))
    return app


def serve(settings: Settings) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    app = create_app(settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
