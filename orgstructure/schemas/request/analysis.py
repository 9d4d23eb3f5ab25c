"""
Request schemas for gap analyses and the headcount calculator.
"""

from typing import List, Literal, Optional
from pydantic import Field, model_validator

from orgstructure.schemas.base import CamelModel


AnalysisType = Literal["skill", "responsibility", "process"]


class GapAnalysisRequest(CamelModel):
    """Request schema for creating or updating a gap analysis."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Q3 skills review"])
    description: Optional[str] = Field(default=None, max_length=500)
    analysis_type: AnalysisType = Field(..., examples=["skill"])
    target_skill_ids: List[str] = Field(default_factory=list)
    target_responsibility_ids: List[str] = Field(default_factory=list)
    process_id: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def validate_targets(self) -> "GapAnalysisRequest":
        """Each analysis type needs its own kind of target."""
        if self.analysis_type == "skill" and not self.target_skill_ids:
            raise ValueError("Select at least one target skill")
        if self.analysis_type == "responsibility" and not self.target_responsibility_ids:
            raise ValueError("Select at least one target responsibility")
        if self.analysis_type == "process" and not self.process_id:
            raise ValueError("Select a process")
        return self


class RunGapAnalysisRequest(CamelModel):
    """Roles to compare against; empty means all roles for process analyses."""

    role_ids: List[str] = Field(default_factory=list)


class HeadcountRequest(CamelModel):
    """Request schema for the headcount calculator."""

    work_orders: float = Field(default=1000, ge=0, description="Work orders per period")
    complaints: float = Field(default=500, ge=0, description="Complaints per period")
    time_period: Literal["week", "month"] = Field(default="month")
    hours_per_fte: float = Field(
        default=160, ge=0, alias="hoursPerFTE", description="Working hours of one FTE per month"
    )
    manager_span: float = Field(default=8, ge=0, description="Direct reports per manager")
