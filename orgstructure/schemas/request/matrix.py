"""
Request schemas for responsibility matrices.
"""

from typing import Annotated, List, Literal, Optional
from pydantic import Field, StringConstraints

from orgstructure.schemas.base import CamelModel


MatrixType = Literal["RACI", "RAPID", "Custom"]

# Cells are addressed as "assignments.<roleId>.<responsibilityId>"
CellId = Annotated[str, StringConstraints(min_length=1, pattern=r"^[^.]+$")]


class MatrixRequest(CamelModel):
    """Request schema for creating or updating a matrix."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Onboarding RACI"])
    type: MatrixType = Field(default="RACI")
    linked_project: Optional[str] = Field(default=None, max_length=100)
    included_role_ids: List[CellId] = Field(default_factory=list)
    included_responsibility_ids: List[CellId] = Field(default_factory=list)


class CycleAssignmentRequest(CamelModel):
    """Request schema for advancing one matrix cell."""

    role_id: CellId
    responsibility_id: CellId


class SetAssignmentRequest(CycleAssignmentRequest):
    """Request schema for writing one matrix cell; an empty value clears it."""

    value: str = Field(default="", description="One of R, A, C, I or empty", examples=["A"])
