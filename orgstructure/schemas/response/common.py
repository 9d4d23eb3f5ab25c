"""
Common response schemas used across all API endpoints.
"""
from typing import Any, Dict, Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field


T = TypeVar('T')


class ErrorDetail(BaseModel):
    """Error detail information."""
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Dict[str, Any] = Field(default_factory=dict, description="Additional error context")
    trace_id: Optional[str] = Field(None, description="Request trace ID for debugging")


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "ROLE_NOT_FOUND",
                    "message": "Role 'abc123' not found",
                    "details": {},
                    "trace_id": "abc-def-123"
                }
            }
        }
    }


class ItemResponse(BaseModel, Generic[T]):
    """Single document response wrapper."""
    success: bool = Field(True, description="Indicates successful operation")
    data: T = Field(..., description="Response payload")


class ListResponse(BaseModel, Generic[T]):
    """Collection response wrapper."""
    success: bool = Field(True, description="Indicates successful operation")
    data: List[T] = Field(..., description="List of items")
    total: int = Field(..., description="Number of items")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "data": [],
                "total": 0
            }
        }
    }


class MessageResponse(BaseModel):
    """Simple message response."""
    success: bool = Field(True, description="Indicates successful operation")
    message: str = Field(..., description="Success message")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "message": "Department deleted"
            }
        }
    }
