"""
Shared base model for API schemas.

Documents are stored with camelCase field names; schemas declare snake_case
attributes and read/write the camelCase aliases.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Field values keyed by their stored (camelCase) names."""
        return self.model_dump(by_alias=True)
