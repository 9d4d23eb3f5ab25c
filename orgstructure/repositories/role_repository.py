"""Repository for role documents."""

from typing import Any, Dict, List

from orgstructure.repositories.base import DocumentRepository


class RoleRepository(DocumentRepository):
    """Repository for the roles collection."""

    collection = "roles"
    order_field = "title"
    field_defaults = {
        "responsibilityIds": [],
        "skillIds": [],
        "handlesComplaints": False,
        "complaintsPerFTE": None,
        "hoursPerWorkOrder": None,
    }

    def list_by_department(self, department_name: str) -> List[Dict[str, Any]]:
        """Roles whose department field equals ``department_name``."""
        return self.list_all(where={"department": department_name})


# Singleton instance
role_repository = RoleRepository()
