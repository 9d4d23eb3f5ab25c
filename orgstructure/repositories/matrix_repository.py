"""
Repository for responsibility matrix documents.

Assignments live in a nested map on the matrix document:
``assignments[roleId][responsibilityId] = "R" | "A" | "C" | "I"``.
"""

from orgstructure.persistence import DELETE_FIELD
from orgstructure.repositories.base import DocumentRepository


class MatrixRepository(DocumentRepository):
    """Repository for the matrices collection."""

    collection = "matrices"
    order_field = "name"
    field_defaults = {
        "linkedProject": None,
        "includedRoleIds": [],
        "includedResponsibilityIds": [],
        "assignments": {},
    }

    def set_assignment(
        self, matrix_id: str, role_id: str, responsibility_id: str, value: str
    ) -> bool:
        """
        Write one matrix cell.

        An empty value removes the cell so the map only holds real assignments.

        Returns:
            False if the matrix does not exist
        """
        field_path = f"assignments.{role_id}.{responsibility_id}"
        return self.update(matrix_id, {field_path: value if value else DELETE_FIELD})


# Singleton instance
matrix_repository = MatrixRepository()
