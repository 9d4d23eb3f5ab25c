"""
Service layer for the standard item libraries and business processes.

Standard skills and standard responsibilities behave identically, so one
service class serves both with its own repository and not-found error.
"""

from typing import Any, Dict, List, Type

from orgstructure.core.exceptions import (
    ProcessNotFoundException,
    ResourceNotFoundException,
    StandardResponsibilityNotFoundException,
    StandardSkillNotFoundException,
)
from orgstructure.core.logging import get_logger
from orgstructure.repositories import (
    process_repository,
    standard_responsibility_repository,
    standard_skill_repository,
)
from orgstructure.repositories.base import DocumentRepository

logger = get_logger(__name__)


class StandardItemService:
    """CRUD for one library of named items."""

    def __init__(
        self,
        repository: DocumentRepository,
        not_found: Type[ResourceNotFoundException],
        kind: str,
    ):
        self.repository = repository
        self.not_found = not_found
        self.kind = kind

    def _fields(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {"name": data["name"], "description": data.get("description")}

    async def list_items(self) -> List[Dict[str, Any]]:
        """All items ordered by name."""
        return self.repository.list_all()

    async def get_item(self, item_id: str) -> Dict[str, Any]:
        item = self.repository.get(item_id)
        if item is None:
            raise self.not_found(item_id)
        return item

    async def create_item(self, data: Dict[str, Any]) -> Dict[str, Any]:
        item = self.repository.create(self._fields(data))
        logger.info("Library item created", kind=self.kind, item_id=item["id"])
        return item

    async def update_item(self, item_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        if not self.repository.update(item_id, self._fields(data)):
            raise self.not_found(item_id)
        logger.info("Library item updated", kind=self.kind, item_id=item_id)
        return await self.get_item(item_id)

    async def delete_item(self, item_id: str) -> None:
        if not self.repository.delete(item_id):
            raise self.not_found(item_id)
        logger.info("Library item deleted", kind=self.kind, item_id=item_id)


class ProcessService(StandardItemService):
    """CRUD for business processes, which also list required responsibilities."""

    def __init__(self):
        super().__init__(process_repository, ProcessNotFoundException, "process")

    def _fields(self, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = super()._fields(data)
        fields["responsibilityIds"] = list(data.get("responsibilityIds") or [])
        return fields


# Singleton instances
standard_skill_service = StandardItemService(
    standard_skill_repository, StandardSkillNotFoundException, "skill"
)
standard_responsibility_service = StandardItemService(
    standard_responsibility_repository, StandardResponsibilityNotFoundException, "responsibility"
)
process_service = ProcessService()
