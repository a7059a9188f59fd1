"""FastAPI application factory.

Usage:
    uvicorn gym_api.app:create_app --factory
"""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from gym_api.config import DATABASE_URL, LOG_LEVEL
from gym_api.routes import InvalidQueryError, router
from gym_engine import ProgressiveOverloadAdvisor
from gym_engine.registry import session_registry
from training_store import init_db, make_engine, make_session_factory

logger = logging.getLogger(__name__)


def create_app(session_factory: Callable[[], Session] | None = None) -> FastAPI:
    """Build the API. Without *session_factory* the app opens ``DATABASE_URL``."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if session_factory is None:
        engine = make_engine(DATABASE_URL)
        init_db(engine)
        session_factory = make_session_factory(engine)

    app = FastAPI(title="Gym Engine API")
    app.state.session_factory = session_factory
    # Rule discovery scans packages, so it runs once per app
    app.state.advisor = ProgressiveOverloadAdvisor()
    app.state.session_rules = session_registry()
    app.include_router(router)

    @app.exception_handler(InvalidQueryError)
    async def invalid_query(request: Request, exc: InvalidQueryError) -> JSONResponse:
        logger.info("Rejected %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"success": False, "error": str(exc)})

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    return app
