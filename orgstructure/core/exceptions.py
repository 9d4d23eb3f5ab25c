"""
Core exceptions for the org-structure service.

This module defines a hierarchy of custom exceptions used throughout the application.
All exceptions inherit from AppException which provides consistent error handling.
"""

from typing import Optional, Dict, Any


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code (e.g., "ROLE_NOT_FOUND")
        status_code: HTTP status code to return
        details: Additional error details/context
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error": {"code": self.error_code, "message": self.message, "details": self.details}
        }


# Resource Not Found Exceptions
class ResourceNotFoundException(AppException):
    """Base exception for resource not found errors."""

    error_prefix = "RESOURCE"

    def __init__(self, resource_type: str, resource_id: str, **kwargs):
        super().__init__(
            message=f"{resource_type} '{resource_id}' not found",
            error_code=f"{self.error_prefix}_NOT_FOUND",
            status_code=404,
            **kwargs,
        )


class DepartmentNotFoundException(ResourceNotFoundException):
    """Raised when a department is not found."""

    error_prefix = "DEPARTMENT"

    def __init__(self, department_id: str):
        super().__init__(resource_type="Department", resource_id=department_id)


class RoleNotFoundException(ResourceNotFoundException):
    """Raised when a role is not found."""

    error_prefix = "ROLE"

    def __init__(self, role_id: str):
        super().__init__(resource_type="Role", resource_id=role_id)


class StandardSkillNotFoundException(ResourceNotFoundException):
    error_prefix = "STANDARD_SKILL"

    def __init__(self, skill_id: str):
        super().__init__(resource_type="Standard skill", resource_id=skill_id)


class StandardResponsibilityNotFoundException(ResourceNotFoundException):
    error_prefix = "STANDARD_RESPONSIBILITY"

    def __init__(self, responsibility_id: str):
        super().__init__(resource_type="Standard responsibility", resource_id=responsibility_id)


class ProcessNotFoundException(ResourceNotFoundException):
    """Raised when a process is not found."""

    error_prefix = "PROCESS"

    def __init__(self, process_id: str):
        super().__init__(resource_type="Process", resource_id=process_id)


class MatrixNotFoundException(ResourceNotFoundException):
    """Raised when a responsibility matrix is not found."""

    error_prefix = "MATRIX"

    def __init__(self, matrix_id: str):
        super().__init__(resource_type="Matrix", resource_id=matrix_id)


class GapAnalysisNotFoundException(ResourceNotFoundException):
    """Raised when a gap analysis is not found."""

    error_prefix = "GAP_ANALYSIS"

    def __init__(self, analysis_id: str):
        super().__init__(resource_type="Gap analysis", resource_id=analysis_id)


# Validation Exceptions
class ValidationException(AppException):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        super().__init__(
            message=message,
            error_code=kwargs.pop("error_code", "VALIDATION_ERROR"),
            status_code=422,
            details=details,
            **kwargs,
        )


class InvalidAssignmentException(ValidationException):
    """Raised when a matrix cell value is not one of R, A, C, I or empty."""

    def __init__(self, value: str):
        super().__init__(
            message=f"Invalid assignment '{value}'. Expected one of R, A, C, I or empty",
            field="value",
            error_code="INVALID_ASSIGNMENT",
        )


# Business Logic Exceptions
class BusinessLogicException(AppException):
    """Base exception for business logic errors."""

    def __init__(self, message: str, error_code: str, **kwargs):
        super().__init__(message=message, error_code=error_code, status_code=400, **kwargs)


class InvalidImportFileException(BusinessLogicException):
    """Raised when an uploaded library CSV cannot be used."""

    def __init__(self, filename: str, reason: str):
        super().__init__(
            message=f"Cannot import '{filename}': {reason}",
            error_code="INVALID_IMPORT_FILE",
            details={"filename": filename},
        )


# Server Exceptions
class DatabaseException(AppException):
    """Raised when the document database rejects or fails an operation."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Database operation '{operation}' failed",
            error_code="DATABASE_ERROR",
            status_code=503,
            details={"operation": operation, "reason": reason},
        )


class InternalServerException(AppException):
    """Raised for unexpected internal server errors."""

    def __init__(self, message: str = "An unexpected error occurred", **kwargs):
        super().__init__(
            message=message, error_code="INTERNAL_SERVER_ERROR", status_code=500, **kwargs
        )
