"""
Repositories for the standard item libraries.

Standard skills and standard responsibilities share one document shape
(name, description) and differ only in their collection.
"""

from typing import Dict, Optional

from orgstructure.repositories.base import DocumentRepository


class StandardItemRepository(DocumentRepository):
    """Base repository for a library of named items."""

    order_field = "name"
    field_defaults = {"description": None}

    def names(self) -> Dict[str, str]:
        """Map of casefolded item name to item ID."""
        return {
            str(item.get("name", "")).casefold(): item["id"] for item in self.list_all()
        }

    def find_by_name(self, name: str) -> Optional[dict]:
        wanted = name.casefold()
        for item in self.list_all():
            if str(item.get("name", "")).casefold() == wanted:
                return item
        return None


class StandardSkillRepository(StandardItemRepository):
    collection = "standardSkills"


class StandardResponsibilityRepository(StandardItemRepository):
    collection = "standardResponsibilities"


# Singleton instances
standard_skill_repository = StandardSkillRepository()
standard_responsibility_repository = StandardResponsibilityRepository()
