"""
Response schemas for stored documents.
"""
from typing import Dict, List, Optional
from pydantic import Field

from orgstructure.schemas.base import CamelModel


class Department(CamelModel):
    id: str
    name: str
    color: str = ""
    role_count: int = Field(0, description="Number of roles assigned to the department")


class Role(CamelModel):
    id: str
    title: str
    level: str = ""
    department: str = ""
    responsibility_ids: List[str] = Field(default_factory=list)
    skill_ids: List[str] = Field(default_factory=list)
    handles_complaints: bool = False
    complaints_per_fte: Optional[float] = Field(None, alias="complaintsPerFTE")
    hours_per_work_order: Optional[float] = None


class StandardItem(CamelModel):
    """A standard skill or responsibility."""
    id: str
    name: str
    description: Optional[str] = None


class Process(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    responsibility_ids: List[str] = Field(default_factory=list)


class Matrix(CamelModel):
    id: str
    name: str
    type: str = "RACI"
    linked_project: Optional[str] = None
    last_updated: Optional[str] = None
    included_role_ids: List[str] = Field(default_factory=list)
    included_responsibility_ids: List[str] = Field(default_factory=list)
    assignments: Dict[str, Dict[str, str]] = Field(default_factory=dict)


class GapAnalysis(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    analysis_type: str
    target_skill_ids: List[str] = Field(default_factory=list)
    target_responsibility_ids: List[str] = Field(default_factory=list)
    process_id: Optional[str] = None
    last_updated: Optional[str] = None
    gap_count: int = 0
    severity: str = "Low"
    progress: int = Field(0, ge=0, le=100)
