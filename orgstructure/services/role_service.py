"""
Service layer for roles.

Roles reference their department by name. Every role change that moves a
role in or out of a department also adjusts that department's roleCount.
"""

from typing import Any, Dict, List, Optional

from orgstructure.core.exceptions import DepartmentNotFoundException, RoleNotFoundException
from orgstructure.core.logging import get_logger
from orgstructure.persistence import DocumentNotFoundError
from orgstructure.repositories import department_repository, role_repository
from orgstructure.repositories.department_repository import DepartmentRepository

logger = get_logger(__name__)

ROLE_FIELDS = (
    "title",
    "level",
    "department",
    "responsibilityIds",
    "skillIds",
    "handlesComplaints",
    "complaintsPerFTE",
    "hoursPerWorkOrder",
)


def prepare_role_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Select the stored role fields and apply the staffing-rate rule.

    A complaint handler never has hours per work order, and any other role
    never has complaints per FTE.
    """
    fields = {key: data.get(key) for key in ROLE_FIELDS}
    fields["responsibilityIds"] = list(fields["responsibilityIds"] or [])
    fields["skillIds"] = list(fields["skillIds"] or [])
    fields["handlesComplaints"] = bool(fields["handlesComplaints"])
    if fields["handlesComplaints"]:
        fields["hoursPerWorkOrder"] = None
    else:
        fields["complaintsPerFTE"] = None
    return fields


class RoleService:
    """Service for role CRUD and department role counters."""

    def __init__(self):
        self.repository = role_repository
        self.department_repository = department_repository

    async def list_roles(self, department: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Roles ordered by title.

        Args:
            department: Only roles of the department with this name
        """
        if department:
            return self.repository.list_by_department(department)
        return self.repository.list_all()

    async def get_role(self, role_id: str) -> Dict[str, Any]:
        role = self.repository.get(role_id)
        if role is None:
            raise RoleNotFoundException(role_id)
        return role

    async def create_role(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a role and increment its department's counter.

        A department name with no matching department leaves the counters
        untouched and is logged as a warning.
        """
        role = self.repository.create(prepare_role_fields(data))
        logger.info("Role created", role_id=role["id"], department=role["department"])

        department = self.department_repository.find_by_name(role["department"])
        if department is None:
            logger.warning(
                "Department not found for role, counter not updated",
                role_id=role["id"],
                department=role["department"],
            )
        else:
            self.department_repository.adjust_role_count(department["id"], 1)
        return role

    async def update_role(self, role_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a role.

        When the department changes, the role update and both counter
        changes are committed in one batch.

        Raises:
            RoleNotFoundException: If the role does not exist or disappears
                before the batch commits
            DepartmentNotFoundException: If a department disappears before
                the batch commits
        """
        existing = await self.get_role(role_id)
        fields = prepare_role_fields(data)

        old_name = existing.get("department")
        new_name = fields["department"]
        if old_name == new_name:
            self.repository.update(role_id, fields)
            logger.info("Role updated", role_id=role_id)
            return await self.get_role(role_id)

        old_department = self.department_repository.find_by_name(old_name)
        new_department = self.department_repository.find_by_name(new_name)

        departments = self.department_repository.collection
        try:
            with self.repository.store.batch() as batch:
                batch.update(self.repository.collection, role_id, fields)
                if old_department is not None:
                    batch.update(
                        departments, old_department["id"], DepartmentRepository.role_count_change(-1)
                    )
                else:
                    logger.warning(
                        "Previous department not found", role_id=role_id, department=old_name
                    )
                if new_department is not None:
                    batch.update(
                        departments, new_department["id"], DepartmentRepository.role_count_change(1)
                    )
                else:
                    logger.warning("New department not found", role_id=role_id, department=new_name)
        except DocumentNotFoundError as e:
            if e.collection == departments:
                raise DepartmentNotFoundException(e.doc_id) from e
            raise RoleNotFoundException(role_id) from e

        logger.info(
            "Role moved between departments",
            role_id=role_id,
            from_department=old_name,
            to_department=new_name,
        )
        return await self.get_role(role_id)

    async def delete_role(self, role_id: str) -> None:
        """
        Delete a role after decrementing its department's counter.

        Raises:
            RoleNotFoundException: If the role does not exist
        """
        role = await self.get_role(role_id)

        department = self.department_repository.find_by_name(role.get("department"))
        if department is None:
            logger.warning(
                "Department not found for role, counter not updated",
                role_id=role_id,
                department=role.get("department"),
            )
        else:
            self.department_repository.adjust_role_count(department["id"], -1)

        self.repository.delete(role_id)
        logger.info("Role deleted", role_id=role_id)


# Singleton instance
role_service = RoleService()
