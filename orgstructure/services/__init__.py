"""Services package initialization."""

from orgstructure.services.department_service import DepartmentService, department_service
from orgstructure.services.role_service import RoleService, role_service
from orgstructure.services.library_service import (
    StandardItemService,
    ProcessService,
    standard_skill_service,
    standard_responsibility_service,
    process_service,
)
from orgstructure.services.library_transfer_service import (
    LibraryTransferService,
    skill_transfer_service,
    responsibility_transfer_service,
)
from orgstructure.services.matrix_service import MatrixService, matrix_service
from orgstructure.services.gap_analysis_service import GapAnalysisService, gap_analysis_service
from orgstructure.services.headcount_service import HeadcountService, headcount_service
from orgstructure.services.dashboard_service import DashboardService, dashboard_service

__all__ = [
    "DepartmentService",
    "department_service",
    "RoleService",
    "role_service",
    "StandardItemService",
    "ProcessService",
    "standard_skill_service",
    "standard_responsibility_service",
    "process_service",
    "LibraryTransferService",
    "skill_transfer_service",
    "responsibility_transfer_service",
    "MatrixService",
    "matrix_service",
    "GapAnalysisService",
    "gap_analysis_service",
    "HeadcountService",
    "headcount_service",
    "DashboardService",
    "dashboard_service",
]
