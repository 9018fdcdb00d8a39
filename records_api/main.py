"""
Records API - FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn records_api.main:app) and by tests.
When:  Once at server startup; the returned app handles all requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes (enabled per ENABLED_RESOURCES):            │
    │  authors │ books │ products │ students │ classrooms │
    │  + GET /health                                      │
    │                                                     │
    │  Exception Handlers → {success: false, msg, error?} │
    │  Validation→400 │ Conflict→400 │ NotFound→404 │ →500│
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create missing tables (DB_AUTO_CREATE); a failure is logged and the
       server starts anyway, every record endpoint then answers 500 until
       the database is reachable
    Shutdown:
    1. Dispose database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from records_api import __version__
from records_api.config import settings
from records_api.database import dispose_engine, init_models
from records_api.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    RecordsAPIError,
    ValidationError,
)
from records_api.middleware.logging import RequestLoggingMiddleware
from records_api.middleware.request_id import RequestIDMiddleware, request_id_var
from records_api.routes import RESOURCE_ROUTERS, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Third-party loggers that log every operation at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Records API starting up...")
    logger.info("Enabled resources: %s", ", ".join(app.state.resources) or "(none)")

    if settings.db_auto_create:
        try:
            await init_models()
        except Exception as e:
            # Not fatal: the pool reconnects on the next request
            logger.error("Database initialization failed: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Records API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _envelope(status_code: int, msg: str, error: Optional[str] = None) -> JSONResponse:
    content = {"success": False, "msg": msg}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turns the first Pydantic error into a one-line message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)
    if not field:
        return f"Invalid request body: {first.get('msg', 'invalid value')}"
    return f"Invalid value for {field}: {first.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers that render the failure envelope.

    Handler hierarchy:
        ValidationError          → 400 {success: false, msg}
        RequestValidationError   → 400 {success: false, msg}
        ConflictError            → 400 {success: false, msg}
        NotFoundError            → 404 {success: false, msg}
        DatabaseError            → 500 {success: false, msg: "Server error", error}
        RecordsAPIError (base)   → exc.status_code
        HTTPException            → exc.status_code {success: false, msg: detail}
        Exception (fallback)     → 500 {success: false, msg: "Server error", error}
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return _envelope(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        msg = _describe_validation_error(exc)
        logger.warning("[%s] Request validation error on %s: %s", rid, request.url.path, msg)
        return _envelope(400, msg)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        rid = request_id_var.get("")
        logger.warning("[%s] Conflict: %s | Context: %s", rid, exc.message, exc.context)
        return _envelope(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s (id=%s)", rid, exc.message, exc.resource_id)
        return _envelope(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.detail, exc.context)
        return _envelope(500, exc.message, error=exc.detail)

    @app.exception_handler(RecordsAPIError)
    async def handle_records_api_error(request: Request, exc: RecordsAPIError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return _envelope(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Unknown paths and disallowed methods
        return _envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _envelope(500, "Server error", error=str(exc))


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(resources: Optional[List[str]] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        resources: Entity routers to mount (names from config.KNOWN_RESOURCES).
                   Defaults to settings.enabled_resources_list.

    Returns: Fully configured FastAPI instance.
    """
    if resources is None:
        resources = settings.enabled_resources_list
    unknown = [name for name in resources if name not in RESOURCE_ROUTERS]
    if unknown:
        raise ValueError(f"Unknown resources: {unknown}")

    app = FastAPI(
        title="Records API",
        description=(
            "CRUD endpoints for authors, books, products, students and classrooms. "
            "Every response is a {success, msg, data|error} envelope."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.resources = list(resources)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for name in resources:
        app.include_router(RESOURCE_ROUTERS[name])
    app.include_router(health.router)

    return app


# uvicorn expects `records_api.main:app` to be importable
app = create_app()
