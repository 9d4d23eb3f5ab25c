"""Core module initialization."""

from orgstructure.core.exceptions import (
    AppException,
    ResourceNotFoundException,
    DepartmentNotFoundException,
    RoleNotFoundException,
    StandardSkillNotFoundException,
    StandardResponsibilityNotFoundException,
    ProcessNotFoundException,
    MatrixNotFoundException,
    GapAnalysisNotFoundException,
    ValidationException,
    InvalidAssignmentException,
    BusinessLogicException,
    InvalidImportFileException,
    DatabaseException,
    InternalServerException,
)

__all__ = [
    "AppException",
    "ResourceNotFoundException",
    "DepartmentNotFoundException",
    "RoleNotFoundException",
    "StandardSkillNotFoundException",
    "StandardResponsibilityNotFoundException",
    "ProcessNotFoundException",
    "MatrixNotFoundException",
    "GapAnalysisNotFoundException",
    "ValidationException",
    "InvalidAssignmentException",
    "BusinessLogicException",
    "InvalidImportFileException",
    "DatabaseException",
    "InternalServerException",
]
