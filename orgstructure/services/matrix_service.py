"""
Service layer for responsibility matrices.

A matrix selects a set of roles and responsibilities and stores one
R/A/C/I letter per (role, responsibility) cell.
"""

from typing import Any, Dict, List

import pandas as pd

from orgstructure.core.exceptions import (
    InvalidAssignmentException,
    MatrixNotFoundException,
    ValidationException,
)
from orgstructure.core.logging import get_logger
from orgstructure.organizational.raci import (
    accountability_issues,
    get_assignment,
    is_valid_assignment,
    next_assignment,
    role_workload,
)
from orgstructure.repositories import (
    matrix_repository,
    role_repository,
    standard_responsibility_repository,
)
from orgstructure.utils.common import dataframe_to_csv, today_iso

logger = get_logger(__name__)

MATRIX_FIELDS = ("name", "type", "linkedProject", "includedRoleIds", "includedResponsibilityIds")


class MatrixService:
    """Service for matrix CRUD and cell assignments."""

    def __init__(self):
        self.repository = matrix_repository
        self.role_repository = role_repository
        self.responsibility_repository = standard_responsibility_repository

    def _fields(self, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = {key: data.get(key) for key in MATRIX_FIELDS}
        fields["type"] = fields["type"] or "RACI"
        fields["includedRoleIds"] = list(fields["includedRoleIds"] or [])
        fields["includedResponsibilityIds"] = list(fields["includedResponsibilityIds"] or [])
        fields["lastUpdated"] = today_iso()
        return fields

    async def list_matrices(self) -> List[Dict[str, Any]]:
        return self.repository.list_all()

    async def get_matrix(self, matrix_id: str) -> Dict[str, Any]:
        matrix = self.repository.get(matrix_id)
        if matrix is None:
            raise MatrixNotFoundException(matrix_id)
        return matrix

    async def create_matrix(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a matrix with no assignments."""
        fields = self._fields(data)
        fields["assignments"] = {}
        matrix = self.repository.create(fields)
        logger.info("Matrix created", matrix_id=matrix["id"], type=matrix["type"])
        return matrix

    async def update_matrix(self, matrix_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Update matrix settings; existing assignments are kept."""
        if not self.repository.update(matrix_id, self._fields(data)):
            raise MatrixNotFoundException(matrix_id)
        logger.info("Matrix updated", matrix_id=matrix_id)
        return await self.get_matrix(matrix_id)

    async def delete_matrix(self, matrix_id: str) -> None:
        if not self.repository.delete(matrix_id):
            raise MatrixNotFoundException(matrix_id)
        logger.info("Matrix deleted", matrix_id=matrix_id)

    async def get_detail(self, matrix_id: str) -> Dict[str, Any]:
        """
        Matrix with its roles and responsibilities resolved.

        Included IDs that no longer resolve to a document are left out.
        Roles come sorted by title and responsibilities by name.
        """
        matrix = await self.get_matrix(matrix_id)
        role_ids = set(matrix["includedRoleIds"])
        responsibility_ids = set(matrix["includedResponsibilityIds"])

        roles = [role for role in self.role_repository.list_all() if role["id"] in role_ids]
        responsibilities = [
            item
            for item in self.responsibility_repository.list_all()
            if item["id"] in responsibility_ids
        ]

        resolved_role_ids = [role["id"] for role in roles]
        resolved_responsibility_ids = [item["id"] for item in responsibilities]
        return {
            "matrix": matrix,
            "roles": roles,
            "responsibilities": responsibilities,
            "workload": role_workload(matrix["assignments"], resolved_role_ids),
            "accountabilityIssues": accountability_issues(
                matrix["assignments"], resolved_role_ids, resolved_responsibility_ids
            ),
        }

    def _check_cell(self, matrix: Dict[str, Any], role_id: str, responsibility_id: str) -> None:
        if role_id not in matrix["includedRoleIds"]:
            raise ValidationException(
                f"Role '{role_id}' is not included in matrix '{matrix['id']}'", field="roleId"
            )
        if responsibility_id not in matrix["includedResponsibilityIds"]:
            raise ValidationException(
                f"Responsibility '{responsibility_id}' is not included in matrix '{matrix['id']}'",
                field="responsibilityId",
            )

    async def cycle_assignment(self, matrix_id: str, role_id: str, responsibility_id: str) -> str:
        """
        Advance one cell through '' -> R -> A -> C -> I -> ''.

        Returns:
            The new cell value ('' when the cell was cleared)
        """
        matrix = await self.get_matrix(matrix_id)
        self._check_cell(matrix, role_id, responsibility_id)

        current = get_assignment(matrix["assignments"], role_id, responsibility_id)
        value = next_assignment(current)
        self.repository.set_assignment(matrix_id, role_id, responsibility_id, value)

        logger.info(
            "Assignment cycled",
            matrix_id=matrix_id,
            role_id=role_id,
            responsibility_id=responsibility_id,
            previous=current,
            value=value,
        )
        return value

    async def set_assignment(
        self, matrix_id: str, role_id: str, responsibility_id: str, value: str
    ) -> str:
        """
        Write one cell explicitly.

        Raises:
            InvalidAssignmentException: If value is not R, A, C, I or empty
        """
        value = (value or "").strip().upper()
        if not is_valid_assignment(value):
            raise InvalidAssignmentException(value)

        matrix = await self.get_matrix(matrix_id)
        self._check_cell(matrix, role_id, responsibility_id)
        self.repository.set_assignment(matrix_id, role_id, responsibility_id, value)

        logger.info(
            "Assignment set",
            matrix_id=matrix_id,
            role_id=role_id,
            responsibility_id=responsibility_id,
            value=value,
        )
        return value

    async def export_csv(self, matrix_id: str) -> str:
        """
        Matrix as CSV: one row per responsibility, one column per role title.
        """
        detail = await self.get_detail(matrix_id)
        assignments = detail["matrix"]["assignments"]

        roles = detail["roles"]
        rows = [
            [item["name"]] + [get_assignment(assignments, role["id"], item["id"]) for role in roles]
            for item in detail["responsibilities"]
        ]

        # Titles are not unique, so cells are placed by position
        columns = ["Responsibility"] + [role["title"] for role in roles]
        return dataframe_to_csv(pd.DataFrame(rows, columns=columns))


# Singleton instance
matrix_service = MatrixService()
