"""
Department API endpoints.
"""

from fastapi import APIRouter, HTTPException
from orgstructure.schemas.request import DepartmentRequest
from orgstructure.schemas.response import Department, ItemResponse, ListResponse, MessageResponse
from orgstructure.services.department_service import department_service
from orgstructure.core.exceptions import AppException
from orgstructure.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/departments", response_model=ListResponse[Department])
async def list_departments():
    """List departments ordered by name."""
    try:
        departments = await department_service.list_departments()
        return ListResponse[Department](data=departments, total=len(departments))

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error listing departments", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to list departments: {str(e)}")


@router.get("/departments/{department_id}", response_model=ItemResponse[Department])
async def get_department(department_id: str):
    try:
        department = await department_service.get_department(department_id)
        return ItemResponse[Department](data=department)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error getting department", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/departments", response_model=ItemResponse[Department], status_code=201)
async def create_department(request: DepartmentRequest):
    """
    Create a department.

    Args:
        request: Department name and color

    Returns:
        ItemResponse: The created department with roleCount 0
    """
    try:
        department = await department_service.create_department(request.to_document())
        return ItemResponse[Department](data=department)

    except AppException:
        # Custom exceptions are handled by error_handler_middleware
        raise
    except Exception as e:
        logger.error("Unexpected error creating department", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create department: {str(e)}")


@router.put("/departments/{department_id}", response_model=ItemResponse[Department])
async def update_department(department_id: str, request: DepartmentRequest):
    """Update a department's name and color."""
    try:
        department = await department_service.update_department(
            department_id, request.to_document()
        )
        return ItemResponse[Department](data=department)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error updating department", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update department: {str(e)}")


@router.delete("/departments/{department_id}", response_model=MessageResponse)
async def delete_department(department_id: str):
    try:
        await department_service.delete_department(department_id)
        return MessageResponse(message="Department deleted")

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error deleting department", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to delete department: {str(e)}")
