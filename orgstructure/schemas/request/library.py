"""
Request schemas for standard skills, standard responsibilities and processes.
"""

from typing import List, Optional
from pydantic import Field

from orgstructure.schemas.base import CamelModel


class StandardItemRequest(CamelModel):
    """Request schema for a standard skill or responsibility."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Customer communication"])
    description: Optional[str] = Field(default=None, max_length=500)


class ProcessRequest(CamelModel):
    """Request schema for creating or updating a business process."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Complaint resolution"])
    description: Optional[str] = Field(default=None, max_length=500)
    responsibility_ids: List[str] = Field(
        ...,
        min_length=1,
        description="Standard responsibilities the process requires",
    )
