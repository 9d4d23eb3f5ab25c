"""Repositories package initialization."""

from orgstructure.repositories.base import DocumentRepository
from orgstructure.repositories.department_repository import (
    DepartmentRepository,
    department_repository,
)
from orgstructure.repositories.role_repository import RoleRepository, role_repository
from orgstructure.repositories.library_repository import (
    StandardItemRepository,
    StandardSkillRepository,
    StandardResponsibilityRepository,
    standard_skill_repository,
    standard_responsibility_repository,
)
from orgstructure.repositories.process_repository import ProcessRepository, process_repository
from orgstructure.repositories.matrix_repository import MatrixRepository, matrix_repository
from orgstructure.repositories.gap_analysis_repository import (
    GapAnalysisRepository,
    gap_analysis_repository,
)

__all__ = [
    "DocumentRepository",
    "DepartmentRepository",
    "department_repository",
    "RoleRepository",
    "role_repository",
    "StandardItemRepository",
    "StandardSkillRepository",
    "StandardResponsibilityRepository",
    "standard_skill_repository",
    "standard_responsibility_repository",
    "ProcessRepository",
    "process_repository",
    "MatrixRepository",
    "matrix_repository",
    "GapAnalysisRepository",
    "gap_analysis_repository",
]
