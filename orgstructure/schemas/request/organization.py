"""
Request schemas for departments and roles.
"""

from typing import List, Optional
from pydantic import Field, field_validator

from orgstructure.schemas.base import CamelModel


HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class DepartmentRequest(CamelModel):
    """Request schema for creating or updating a department."""

    name: str = Field(
        ...,
        min_length=2,
        description="Department name, referenced by roles",
        examples=["Customer Service"],
    )
    color: str = Field(
        ...,
        pattern=HEX_COLOR_PATTERN,
        description="Display color as #RRGGBB",
        examples=["#3b82f6"],
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Department name must be at least 2 characters")
        return v


class RoleRequest(CamelModel):
    """Request schema for creating or updating a role."""

    title: str = Field(..., min_length=3, description="Role title", examples=["Service Technician"])
    level: str = Field(..., min_length=1, description="Seniority level", examples=["Senior"])
    department: str = Field(
        ...,
        min_length=1,
        description="Name of the department the role belongs to",
        examples=["Customer Service"],
    )
    responsibility_ids: List[str] = Field(default_factory=list)
    skill_ids: List[str] = Field(default_factory=list)
    handles_complaints: bool = Field(
        default=False,
        description="Complaint handlers are sized by complaints per FTE instead of work-order hours",
    )
    complaints_per_fte: Optional[float] = Field(
        default=None,
        alias="complaintsPerFTE",
        ge=0,
        description="Complaints one FTE handles per month",
    )
    hours_per_work_order: Optional[float] = Field(
        default=None,
        ge=0,
        description="Hours this role spends on each work order",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Service Technician",
                    "level": "Mid",
                    "department": "Field Operations",
                    "responsibilityIds": [],
                    "skillIds": [],
                    "handlesComplaints": False,
                    "hoursPerWorkOrder": 1.5,
                }
            ]
        }
    }
