"""Dashboard Routes — aggregate figures for the dashboard cards."""

from fastapi import APIRouter, Depends

from pmis.api.dependencies import get_storage
from pmis.infrastructure.storage import Storage
from pmis.schemas.dashboard import DashboardStats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(storage: Storage = Depends(get_storage)):
    return DashboardStats(**await storage.dashboard_stats())
