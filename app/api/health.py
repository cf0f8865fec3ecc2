from fastapi import APIRouter, Depends
from datetime import datetime, timezone
import logging

from app.schemas.common import ApiResponse
from app.schemas.asset import HealthStatus
from app.services.asset_service import AssetService, AssetServiceError
from app.api.assets import get_asset_service
from app.api.responses import envelope, service_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=ApiResponse[HealthStatus])
async def health_check(service: AssetService = Depends(get_asset_service)):
    """Health check endpoint - probes the database and reports the asset count"""
    try:
        await service.ping()
        total = await service.count()
    except AssetServiceError as e:
        logger.error(f"Health check failed: {e}")
        raise service_error("Database ping failed", e)

    return envelope(
        "API is healthy",
        HealthStatus(
            status="ok",
            timestamp=datetime.now(timezone.utc),
            database="connected",
            total_assets=total,
        ),
    )
