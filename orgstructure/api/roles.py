"""
Role API endpoints.

Creating, moving and deleting roles keeps the departments' roleCount in step.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from orgstructure.schemas.request import RoleRequest
from orgstructure.schemas.response import ItemResponse, ListResponse, MessageResponse, Role
from orgstructure.services.role_service import role_service
from orgstructure.core.exceptions import AppException
from orgstructure.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/roles", response_model=ListResponse[Role])
async def list_roles(
    department: Optional[str] = Query(None, description="Only roles of this department name")
):
    """List roles ordered by title."""
    try:
        roles = await role_service.list_roles(department=department)
        return ListResponse[Role](data=roles, total=len(roles))

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error listing roles", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to list roles: {str(e)}")


@router.get("/roles/{role_id}", response_model=ItemResponse[Role])
async def get_role(role_id: str):
    try:
        role = await role_service.get_role(role_id)
        return ItemResponse[Role](data=role)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error getting role", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/roles", response_model=ItemResponse[Role], status_code=201)
async def create_role(request: RoleRequest):
    """
    Create a role and count it in its department.

    Returns:
        ItemResponse: The created role
    """
    try:
        role = await role_service.create_role(request.to_document())
        return ItemResponse[Role](data=role)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error creating role", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create role: {str(e)}")


@router.put("/roles/{role_id}", response_model=ItemResponse[Role])
async def update_role(role_id: str, request: RoleRequest):
    try:
        role = await role_service.update_role(role_id, request.to_document())
        return ItemResponse[Role](data=role)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error updating role", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update role: {str(e)}")


@router.delete("/roles/{role_id}", response_model=MessageResponse)
async def delete_role(role_id: str):
    try:
        await role_service.delete_role(role_id)
        return MessageResponse(message="Role deleted")

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error deleting role", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to delete role: {str(e)}")
