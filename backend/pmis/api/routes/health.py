"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/health/ always returns 200 if the process is up (liveness)
    - GET /api/health/ready returns 503 if the storage backend is unreachable
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pmis.api.dependencies import get_app_settings, get_storage
from pmis.config import Settings
from pmis.infrastructure.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": settings.app_name}


@router.get("/ready")
async def readiness_check(storage: Storage = Depends(get_storage)):
    """Readiness probe — includes storage connectivity."""
    if not await storage.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "storage_unavailable"},
        )
    return {"status": "ready", "checks": {"storage": storage.backend}}
