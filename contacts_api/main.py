"""
Contacts API — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() returns a configured FastAPI instance; `app` at module
       level is what uvicorn serves (uvicorn contacts_api.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐         │
    │  │  Req ID  │→│ Logging │→│ GZip │→│ CORS │         │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘         │
    │                                                     │
    │  Routes:                                            │
    │  ┌───────────┐ ┌───────────────┐ ┌───────────────┐  │
    │  │ /contacts │ │ /professional │ │ / and /health │  │
    │  └───────────┘ └───────────────┘ └───────────────┘  │
    │  Docs: /api-docs (Swagger UI), /openapi.json        │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Database→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging → build store (unless one was injected)
              → ping store (failure is logged, not fatal)
    Shutdown: close the store if this app built it
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional, Sequence

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from contacts_api import __version__
from contacts_api.config import settings
from contacts_api.database import build_store, check_store
from contacts_api.exceptions import (
    ContactsAPIError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from contacts_api.middleware.logging import RequestLoggingMiddleware
from contacts_api.middleware.request_id import RequestIDMiddleware, request_id_var
from contacts_api.routes import contacts, health, professional
from contacts_api.storage import DocumentStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] contacts_api.access: GET /contacts 200 3.1ms ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # contacts_api.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Contacts API %s starting up...", __version__)

    owns_store = app.state.store is None
    if owns_store:
        app.state.store = build_store(settings)
    await check_store(app.state.store)

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("API docs: http://%s:%d/api-docs", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info("Contacts API shutting down...")
    if owns_store:
        await app.state.store.close()
        app.state.store = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def _error(status_code: int, message: str, request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "request_id": _request_id(request)},
    )


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Turn pydantic error dicts into one readable sentence.

    Missing fields are grouped ("Missing required field(s): email, birthday");
    every other problem is reported as "<field>: <pydantic message>".
    """
    missing: List[str] = []
    problems: List[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        if error.get("type") == "json_invalid":
            problems.append("Request body is not valid JSON")
        elif error.get("type") == "missing":
            missing.append(field or "body")
        elif error.get("type") == "extra_forbidden":
            problems.append(f"{field}: field is not allowed")
        elif field:
            problems.append(f"{field}: {error.get('msg', 'invalid value')}")
        else:
            problems.append(str(error.get("msg", "Invalid request body")))

    parts = []
    if missing:
        parts.append("Missing required field(s): " + ", ".join(missing))
    parts.extend(problems)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes.

    Handler hierarchy:
        RequestValidationError  → 400 (FastAPI body/path validation)
        ValidationError         → 400
        NotFoundError           → 404
        DatabaseError           → 500 with the store's error message
        ContactsAPIError (base) → 500
        Exception (fallback)    → 500 with a generic message
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        message = describe_validation_errors(exc.errors())
        logger.warning("[%s] Request validation failed: %s", _request_id(request), message)
        return _error(400, message, request)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", _request_id(request), exc.message)
        return _error(400, exc.message, request)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, exc.message, request)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s", _request_id(request), exc.message, exc.context
        )
        return _error(500, exc.message, request)

    @app.exception_handler(ContactsAPIError)
    async def handle_app_error(request: Request, exc: ContactsAPIError):
        logger.error("[%s] Application error: %s", _request_id(request), exc.message)
        return _error(500, exc.message, request)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", _request_id(request), exc, exc_info=True)
        return _error(500, "An unexpected error occurred. Please try again later.", request)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: DocumentStore to serve from. When omitted, the lifespan handler
               builds one from settings at startup. Tests pass an
               InMemoryDocumentStore here.
    """
    servers = [{"url": settings.public_url}] if settings.public_url else None
    app = FastAPI(
        title="Contacts API",
        description=(
            "Manage contacts (name, email, favorite color, birthday) and read the "
            "professional profile. Backed by MongoDB."
        ),
        version=__version__,
        docs_url="/api-docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        servers=servers,
        lifespan=lifespan,
    )
    app.state.store = store

    # Last added = first to execute: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(contacts.router)
    app.include_router(professional.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on HOST:PORT."""
    uvicorn.run(
        "contacts_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
