"""
Gap analysis API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from orgstructure.schemas.request import GapAnalysisRequest, RunGapAnalysisRequest
from orgstructure.schemas.response import (
    GapAnalysis,
    GapAnalysisRun,
    ItemResponse,
    ListResponse,
    MessageResponse,
)
from orgstructure.services.gap_analysis_service import gap_analysis_service
from orgstructure.core.exceptions import AppException
from orgstructure.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/gap-analyses", response_model=ListResponse[GapAnalysis])
async def list_gap_analyses():
    """List gap analyses, most recently updated first."""
    try:
        analyses = await gap_analysis_service.list_analyses()
        return ListResponse[GapAnalysis](data=analyses, total=len(analyses))

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error listing gap analyses", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to list gap analyses: {str(e)}")


@router.get("/gap-analyses/{analysis_id}", response_model=ItemResponse[GapAnalysis])
async def get_gap_analysis(analysis_id: str):
    try:
        analysis = await gap_analysis_service.get_analysis(analysis_id)
        return ItemResponse[GapAnalysis](data=analysis)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error getting gap analysis", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/gap-analyses", response_model=ItemResponse[GapAnalysis], status_code=201)
async def create_gap_analysis(request: GapAnalysisRequest):
    """
    Create a gap analysis.

    Only the targets matching analysisType are stored.
    """
    try:
        analysis = await gap_analysis_service.create_analysis(request.to_document())
        return ItemResponse[GapAnalysis](data=analysis)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error creating gap analysis", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create gap analysis: {str(e)}")


@router.put("/gap-analyses/{analysis_id}", response_model=ItemResponse[GapAnalysis])
async def update_gap_analysis(analysis_id: str, request: GapAnalysisRequest):
    try:
        analysis = await gap_analysis_service.update_analysis(analysis_id, request.to_document())
        return ItemResponse[GapAnalysis](data=analysis)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error updating gap analysis", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update gap analysis: {str(e)}")


@router.delete("/gap-analyses/{analysis_id}", response_model=MessageResponse)
async def delete_gap_analysis(analysis_id: str):
    try:
        await gap_analysis_service.delete_analysis(analysis_id)
        return MessageResponse(message="Gap analysis deleted")

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error deleting gap analysis", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to delete gap analysis: {str(e)}")


@router.post("/gap-analyses/{analysis_id}/run", response_model=ItemResponse[GapAnalysisRun])
async def run_gap_analysis(analysis_id: str, request: Optional[RunGapAnalysisRequest] = None):
    """
    Run a gap analysis against a set of roles.

    Args:
        analysis_id: Analysis to run
        request: Selected role IDs; a process analysis without roles uses all roles

    Returns:
        ItemResponse: The analysis with its stored gap count, severity and
        progress, and the met and gap items
    """
    try:
        role_ids = request.role_ids if request is not None else []
        run = await gap_analysis_service.run_analysis(analysis_id, role_ids)
        return ItemResponse[GapAnalysisRun](data=run)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error running gap analysis", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Gap analysis failed: {str(e)}")
