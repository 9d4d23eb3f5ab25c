"""
Response schemas for computed views: matrix detail, gap analysis runs,
headcount estimates, the dashboard and library imports.
"""
from typing import Dict, List
from pydantic import Field

from orgstructure.schemas.base import CamelModel
from orgstructure.schemas.response.documents import (
    GapAnalysis,
    Matrix,
    Role,
    StandardItem,
)


class RoleWorkload(CamelModel):
    r: int = Field(0, alias="R")
    a: int = Field(0, alias="A")
    c: int = Field(0, alias="C")
    i: int = Field(0, alias="I")
    total: int = 0


class AccountabilityIssues(CamelModel):
    missing_accountable: List[str] = Field(default_factory=list)
    multiple_accountable: List[str] = Field(default_factory=list)


class MatrixDetail(CamelModel):
    matrix: Matrix
    roles: List[Role]
    responsibilities: List[StandardItem]
    workload: Dict[str, RoleWorkload] = Field(default_factory=dict)
    accountability_issues: AccountabilityIssues = Field(default_factory=AccountabilityIssues)


class AssignmentResult(CamelModel):
    role_id: str
    responsibility_id: str
    value: str = Field("", description="New cell value; empty when cleared")


class GapResult(CamelModel):
    type: str
    target_items: List[StandardItem] = Field(default_factory=list)
    met_items: List[StandardItem] = Field(default_factory=list)
    gap_items: List[StandardItem] = Field(default_factory=list)
    coverage: float = 0.0
    severity: str = "Low"
    progress: int = 0
    warnings: List[str] = Field(default_factory=list)


class GapAnalysisRun(CamelModel):
    analysis: GapAnalysis
    result: GapResult


class HeadcountBreakdownItem(CamelModel):
    role_id: str
    role_title: str
    fte_needed: float


class HeadcountEstimate(CamelModel):
    breakdown: List[HeadcountBreakdownItem] = Field(default_factory=list)
    total_direct_fte: float = Field(0.0, alias="totalDirectFTE")
    total_manager_fte: int = Field(0, alias="totalManagerFTE")
    total_fte: float = Field(0.0, alias="totalFTE")


class DepartmentSummary(CamelModel):
    department_id: str
    name: str
    color: str = ""
    role_count: int = 0
    actual_roles: int = 0


class DashboardOverview(CamelModel):
    department_count: int = 0
    role_count: int = 0
    current_headcount: int = 0
    departments: List[DepartmentSummary] = Field(default_factory=list)


class ImportSummary(CamelModel):
    imported: int = 0
    skipped: int = 0
    items: List[StandardItem] = Field(default_factory=list)
