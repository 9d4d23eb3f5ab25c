"""
Repository for department documents.

Roles point at departments by name, so lookups by name are the common path.
"""

from typing import Any, Dict, Optional

from orgstructure.persistence import Increment
from orgstructure.repositories.base import DocumentRepository


class DepartmentRepository(DocumentRepository):
    """Repository for the departments collection."""

    collection = "departments"
    order_field = "name"
    field_defaults = {"roleCount": 0}

    def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Find the first department with an exact name match.

        Args:
            name: Department name as stored on roles

        Returns:
            Department document or None
        """
        if not name:
            return None
        matches = self.store.list(self.collection, where={"name": name})
        return self.normalize(matches[0]) if matches else None

    def adjust_role_count(self, department_id: str, delta: int) -> bool:
        """
        Add ``delta`` to a department's role counter.

        Returns:
            False if the department does not exist
        """
        return self.update(department_id, self.role_count_change(delta))

    @staticmethod
    def role_count_change(delta: int) -> Dict[str, Any]:
        """Update payload for a counter change, usable inside a batch."""
        return {"roleCount": Increment(delta)}


# Singleton instance
department_repository = DepartmentRepository()
