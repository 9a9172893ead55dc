"""
FastAPI application bootstrap with: \n
- Lifespan-managed logging setup and schema creation \n
- CORS configured for the admin frontend \n
- The customer / pay / job router \n
- Exception handlers mapping persistence failures to HTTP status codes \n

Environment contract (from `settings`): \n
- LOG_LEVEL: root log level. \n
- FRONTEND_URL: allowed CORS origin. \n
- DB_*: database connection, see `timeclock.database.config.config`. \n

Run with ``uvicorn timeclock.main:app``.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, MultipleResultsFound, NoResultFound
from sqlalchemy.orm.exc import StaleDataError

from timeclock.api.fast_api import router
from timeclock.database.config.config import settings
from timeclock.database.helpers.schema import create_schema
from timeclock.exceptions import BuilderStateError, EntityNotFoundError, EntityValidationError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """
    Configure the root logger from `settings.LOG_LEVEL`.

    Format: ``%(asctime)s [%(levelname)s] %(name)s: %(message)s``. SQL echo is
    controlled by `DB_ECHO`, so the engine logger is kept at WARNING here.
    """
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    App lifespan manager.

    - On startup: configure logging, create missing tables.
    - On shutdown: log and return; the engine pool is released at exit.
    """
    setup_logging()
    create_schema()
    logger.info("TimeClock backend started")
    try:
        yield
    finally:
        logger.info("TimeClock backend shutting down")


def _error(status_code: int, error: str, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map failures surfaced by the service layer to HTTP responses:

    - NoResultFound / EntityNotFoundError → 404
    - MultipleResultsFound                → 409 (ambiguous business key)
    - StaleDataError                      → 409 (re-read and retry)
    - IntegrityError                      → 409 (constraint violated)
    - EntityValidationError / BuilderStateError → 422
    """

    @app.exception_handler(NoResultFound)
    async def handle_no_result(request: Request, exc: NoResultFound):
        return _error(404, "not_found", exc)

    @app.exception_handler(EntityNotFoundError)
    async def handle_entity_not_found(request: Request, exc: EntityNotFoundError):
        return _error(404, "not_found", exc)

    @app.exception_handler(MultipleResultsFound)
    async def handle_multiple_results(request: Request, exc: MultipleResultsFound):
        return _error(409, "non_unique", exc)

    @app.exception_handler(StaleDataError)
    async def handle_stale_data(request: Request, exc: StaleDataError):
        logger.warning("Rejected stale write on %s %s", request.method, request.url.path)
        return _error(409, "conflict", exc)

    @app.exception_handler(IntegrityError)
    async def handle_integrity_error(request: Request, exc: IntegrityError):
        logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(status_code=409, content={"error": "constraint_violation", "detail": str(exc.orig)})

    @app.exception_handler(EntityValidationError)
    async def handle_validation_error(request: Request, exc: EntityValidationError):
        return JSONResponse(status_code=422, content={"error": "validation_error", "detail": exc.message, "field": exc.field})

    @app.exception_handler(BuilderStateError)
    async def handle_builder_state(request: Request, exc: BuilderStateError):
        return _error(422, "validation_error", exc)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(title="TimeClock", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    register_exception_handlers(app)
    return app


app = create_app()
"""The ASGI application served by uvicorn."""
