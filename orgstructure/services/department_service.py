"""
Service layer for departments.
"""

from typing import Any, Dict, List

from orgstructure.core.exceptions import DepartmentNotFoundException
from orgstructure.core.logging import get_logger
from orgstructure.repositories import department_repository

logger = get_logger(__name__)


class DepartmentService:
    """Service for department CRUD."""

    def __init__(self):
        self.repository = department_repository

    async def list_departments(self) -> List[Dict[str, Any]]:
        """All departments ordered by name."""
        return self.repository.list_all()

    async def get_department(self, department_id: str) -> Dict[str, Any]:
        """
        Get a department.

        Raises:
            DepartmentNotFoundException: If the department does not exist
        """
        department = self.repository.get(department_id)
        if department is None:
            raise DepartmentNotFoundException(department_id)
        return department

    async def create_department(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a department. The role counter always starts at 0.

        Args:
            data: Department fields (name, color)

        Returns:
            The created department
        """
        department = self.repository.create(
            {"name": data["name"], "color": data["color"], "roleCount": 0}
        )
        logger.info("Department created", department_id=department["id"], name=department["name"])
        return department

    async def update_department(self, department_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a department's name and color.

        The role counter is maintained by role changes only and is never
        taken from the request.

        Raises:
            DepartmentNotFoundException: If the department does not exist
        """
        fields = {"name": data["name"], "color": data["color"]}
        if not self.repository.update(department_id, fields):
            raise DepartmentNotFoundException(department_id)

        logger.info("Department updated", department_id=department_id)
        return await self.get_department(department_id)

    async def delete_department(self, department_id: str) -> None:
        """
        Delete a department.

        Raises:
            DepartmentNotFoundException: If the department does not exist
        """
        if not self.repository.delete(department_id):
            raise DepartmentNotFoundException(department_id)
        logger.info("Department deleted", department_id=department_id)


# Singleton instance
department_service = DepartmentService()
