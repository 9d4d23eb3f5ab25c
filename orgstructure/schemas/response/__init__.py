"""Response schemas initialization."""

from orgstructure.schemas.response.common import (
    ErrorDetail,
    ErrorResponse,
    ItemResponse,
    ListResponse,
    MessageResponse,
)
from orgstructure.schemas.response.documents import (
    Department,
    Role,
    StandardItem,
    Process,
    Matrix,
    GapAnalysis,
)
from orgstructure.schemas.response.views import (
    RoleWorkload,
    AccountabilityIssues,
    MatrixDetail,
    AssignmentResult,
    GapResult,
    GapAnalysisRun,
    HeadcountBreakdownItem,
    HeadcountEstimate,
    DepartmentSummary,
    DashboardOverview,
    ImportSummary,
)

__all__ = [
    # Common
    "ErrorDetail",
    "ErrorResponse",
    "ItemResponse",
    "ListResponse",
    "MessageResponse",
    # Documents
    "Department",
    "Role",
    "StandardItem",
    "Process",
    "Matrix",
    "GapAnalysis",
    # Views
    "RoleWorkload",
    "AccountabilityIssues",
    "MatrixDetail",
    "AssignmentResult",
    "GapResult",
    "GapAnalysisRun",
    "HeadcountBreakdownItem",
    "HeadcountEstimate",
    "DepartmentSummary",
    "DashboardOverview",
    "ImportSummary",
]
