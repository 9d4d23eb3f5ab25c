"""Request schemas initialization."""

from orgstructure.schemas.request.organization import DepartmentRequest, RoleRequest
from orgstructure.schemas.request.library import StandardItemRequest, ProcessRequest
from orgstructure.schemas.request.matrix import (
    MatrixRequest,
    CycleAssignmentRequest,
    SetAssignmentRequest,
)
from orgstructure.schemas.request.analysis import (
    GapAnalysisRequest,
    RunGapAnalysisRequest,
    HeadcountRequest,
)

__all__ = [
    "DepartmentRequest",
    "RoleRequest",
    "StandardItemRequest",
    "ProcessRequest",
    "MatrixRequest",
    "CycleAssignmentRequest",
    "SetAssignmentRequest",
    "GapAnalysisRequest",
    "RunGapAnalysisRequest",
    "HeadcountRequest",
]
