"""
Dashboard API endpoint.
"""

from fastapi import APIRouter, HTTPException
from orgstructure.schemas.response import DashboardOverview, ItemResponse
from orgstructure.services.dashboard_service import dashboard_service
from orgstructure.core.exceptions import AppException
from orgstructure.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/dashboard", response_model=ItemResponse[DashboardOverview])
async def get_dashboard():
    """Department count, role count and current headcount."""
    try:
        overview = await dashboard_service.overview()
        return ItemResponse[DashboardOverview](data=overview)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error building dashboard", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
