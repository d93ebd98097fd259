"""
Contacts API — Health Routes
==============================

What:  GET / (human-readable banner) and GET /health (JSON status for probes).
How:   /health pings the document store. An unreachable store reports
       "degraded" but still answers 200: the service itself is up and keeps
       serving the profile fallback and the docs.
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from contacts_api import __version__
from contacts_api.database import get_store
from contacts_api.schemas.common import HealthResponse
from contacts_api.storage import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

ROOT_MESSAGE = "Contacts API is running. Visit /api-docs for Swagger documentation."

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Service banner")
async def root() -> str:
    return ROOT_MESSAGE


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports the store backend, its connectivity, and service uptime.",
)
async def health_check(store: DocumentStore = Depends(get_store)) -> HealthResponse:
    connected = await store.ping()
    if not connected:
        logger.warning("Health check: document store unreachable (backend=%s)", store.backend)

    return HealthResponse(
        status="healthy" if connected else "degraded",
        version=__version__,
        store_backend=store.backend,
        store="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
