"""
Headcount calculator API endpoint.
"""

from fastapi import APIRouter, HTTPException
from orgstructure.organizational.headcount_calculator import HeadcountInputs
from orgstructure.schemas.request import HeadcountRequest
from orgstructure.schemas.response import HeadcountEstimate, ItemResponse
from orgstructure.services.headcount_service import default_inputs, headcount_service
from orgstructure.core.exceptions import AppException
from orgstructure.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/headcount/calculate", response_model=ItemResponse[HeadcountEstimate])
async def calculate_headcount(request: HeadcountRequest):
    """
    Estimate the FTE every role needs for a work volume.

    Args:
        request: Work orders and complaints per week or month, hours per FTE
            and manager span of control

    Returns:
        ItemResponse: Per-role breakdown, direct, manager and total FTE
    """
    try:
        inputs = HeadcountInputs(
            work_orders=request.work_orders,
            complaints=request.complaints,
            time_period=request.time_period,
            hours_per_fte=request.hours_per_fte,
            manager_span=request.manager_span,
        )
        estimate = await headcount_service.calculate(inputs)
        return ItemResponse[HeadcountEstimate](data=estimate)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error calculating headcount", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Headcount calculation failed: {str(e)}")


@router.get("/headcount/defaults", response_model=HeadcountRequest)
async def get_headcount_defaults():
    """Configured default calculator inputs."""
    inputs = default_inputs()
    return HeadcountRequest(
        work_orders=inputs.work_orders,
        complaints=inputs.complaints,
        time_period=inputs.time_period,
        hours_per_fte=inputs.hours_per_fte,
        manager_span=inputs.manager_span,
    )
