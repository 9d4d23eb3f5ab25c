"""
Responsibility matrix API endpoints.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from orgstructure.schemas.request import (
    CycleAssignmentRequest,
    MatrixRequest,
    SetAssignmentRequest,
)
from orgstructure.schemas.response import (
    AssignmentResult,
    ItemResponse,
    ListResponse,
    Matrix,
    MatrixDetail,
    MessageResponse,
)
from orgstructure.services.matrix_service import matrix_service
from orgstructure.core.exceptions import AppException
from orgstructure.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/matrices", response_model=ListResponse[Matrix])
async def list_matrices():
    """List matrices ordered by name."""
    try:
        matrices = await matrix_service.list_matrices()
        return ListResponse[Matrix](data=matrices, total=len(matrices))

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error listing matrices", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to list matrices: {str(e)}")


@router.get("/matrices/{matrix_id}", response_model=ItemResponse[Matrix])
async def get_matrix(matrix_id: str):
    try:
        matrix = await matrix_service.get_matrix(matrix_id)
        return ItemResponse[Matrix](data=matrix)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error getting matrix", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/matrices/{matrix_id}/detail", response_model=ItemResponse[MatrixDetail])
async def get_matrix_detail(matrix_id: str):
    """
    Get a matrix with its roles and responsibilities resolved.

    Returns:
        ItemResponse: Matrix, roles by title, responsibilities by name,
        per-role workload and accountability issues
    """
    try:
        detail = await matrix_service.get_detail(matrix_id)
        return ItemResponse[MatrixDetail](data=detail)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error getting matrix detail", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/matrices/{matrix_id}/export")
async def export_matrix(matrix_id: str):
    """Download the matrix as CSV."""
    try:
        content = await matrix_service.export_csv(matrix_id)
        return Response(
            content=content,
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="matrix-{matrix_id}.csv"'},
        )

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error exporting matrix", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Export failed: {str(e)}")


@router.post("/matrices", response_model=ItemResponse[Matrix], status_code=201)
async def create_matrix(request: MatrixRequest):
    try:
        matrix = await matrix_service.create_matrix(request.to_document())
        return ItemResponse[Matrix](data=matrix)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error creating matrix", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create matrix: {str(e)}")


@router.put("/matrices/{matrix_id}", response_model=ItemResponse[Matrix])
async def update_matrix(matrix_id: str, request: MatrixRequest):
    try:
        matrix = await matrix_service.update_matrix(matrix_id, request.to_document())
        return ItemResponse[Matrix](data=matrix)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error updating matrix", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update matrix: {str(e)}")


@router.delete("/matrices/{matrix_id}", response_model=MessageResponse)
async def delete_matrix(matrix_id: str):
    try:
        await matrix_service.delete_matrix(matrix_id)
        return MessageResponse(message="Matrix deleted")

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error deleting matrix", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to delete matrix: {str(e)}")


@router.post("/matrices/{matrix_id}/assignments/cycle", response_model=ItemResponse[AssignmentResult])
async def cycle_assignment(matrix_id: str, request: CycleAssignmentRequest):
    """
    Advance one cell to the next RACI value.

    Returns:
        ItemResponse: The cell and its new value
    """
    try:
        value = await matrix_service.cycle_assignment(
            matrix_id, request.role_id, request.responsibility_id
        )
        return ItemResponse[AssignmentResult](
            data=AssignmentResult(
                role_id=request.role_id,
                responsibility_id=request.responsibility_id,
                value=value,
            )
        )

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error cycling assignment", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update assignment: {str(e)}")


@router.put("/matrices/{matrix_id}/assignments", response_model=ItemResponse[AssignmentResult])
async def set_assignment(matrix_id: str, request: SetAssignmentRequest):
    try:
        value = await matrix_service.set_assignment(
            matrix_id, request.role_id, request.responsibility_id, request.value
        )
        return ItemResponse[AssignmentResult](
            data=AssignmentResult(
                role_id=request.role_id,
                responsibility_id=request.responsibility_id,
                value=value,
            )
        )

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error setting assignment", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update assignment: {str(e)}")
