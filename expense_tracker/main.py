"""
Expense Tracker: FastAPI Application.

This is the entry point for the application. create_app() wires
the routers, middleware and the database lifecycle: the store is
opened and the bootstrap admin ensured at startup, and the store
is disposed at shutdown.
"""

import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from expense_tracker.config import DEFAULT_SECRET_KEY, Settings, get_settings
from expense_tracker.logging_config import configure_logging
from expense_tracker.models.base import Database
from expense_tracker.services.auth_service import AuthService
from expense_tracker.api.health import router as health_router
from expense_tracker.api.auth import router as auth_router
from expense_tracker.api.accounts import router as accounts_router
from expense_tracker.api.lookups import router as lookups_router
from expense_tracker.api.expenses import router as expenses_router

logger = structlog.get_logger(__name__)


def bootstrap(database: Database, settings: Settings) -> None:
    """Create tables if missing and make sure the admin account exists."""
    database.create_all()
    db = database.SessionLocal()
    try:
        AuthService(db, settings).bootstrap_admin(
            settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, settings.ADMIN_NAME
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, debug=settings.DEBUG)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.SECRET_KEY == DEFAULT_SECRET_KEY:
            logger.warning("insecure_secret_key", hint="set SECRET_KEY")

        database = Database(settings.DATABASE_URL)
        bootstrap(database, settings)
        app.state.database = database
        logger.info("startup_complete", port=settings.PORT)
        try:
            yield
        finally:
            database.dispose()
            logger.info("shutdown_complete")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Multi-account personal expense tracker",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=str(uuid.uuid4()))
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return response

    # Malformed input is a plain 400, like every other validation failure
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": jsonable_errors(exc)},
        )

    # Register routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(accounts_router)
    app.include_router(lookups_router)
    app.include_router(expenses_router)

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold exception objects, which JSON can't carry
    return [
        {
            "loc": list(err.get("loc", ())),
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]


app = create_app()
