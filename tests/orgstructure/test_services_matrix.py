"""
Tests for orgstructure/services/matrix_service.py
"""
import io

import pandas as pd
import pytest

from orgstructure.core.exceptions import (
    InvalidAssignmentException,
    MatrixNotFoundException,
    ValidationException,
)
from orgstructure.repositories import (
    matrix_repository,
    role_repository,
    standard_responsibility_repository,
)
from orgstructure.services.matrix_service import MatrixService


@pytest.fixture
def service(store):
    return MatrixService()


@pytest.fixture
def matrix(service, store):
    """A matrix over two roles and two responsibilities, one dangling ID each."""
    roles = [
        role_repository.create({"title": "Technician"}),
        role_repository.create({"title": "Agent"}),
    ]
    items = [
        standard_responsibility_repository.create({"name": "Resolve complaints"}),
        standard_responsibility_repository.create({"name": "Approve refunds"}),
    ]
    return {
        "roles": roles,
        "items": items,
        "matrix": matrix_repository.create(
            {
                "name": "Support RACI",
                "type": "RACI",
                "includedRoleIds": [r["id"] for r in roles] + ["ghost-role"],
                "includedResponsibilityIds": [i["id"] for i in items] + ["ghost-item"],
                "assignments": {},
            }
        ),
    }


class TestMatrixService:
    @pytest.mark.asyncio
    async def test_create_stamps_date_and_empty_assignments(self, service):
        matrix = await service.create_matrix({"name": "M1", "type": None})

        assert matrix["assignments"] == {}
        assert matrix["type"] == "RACI"
        assert len(matrix["lastUpdated"]) == 10

    @pytest.mark.asyncio
    async def test_get_missing_raises(self, service):
        with pytest.raises(MatrixNotFoundException):
            await service.get_matrix("missing")

    @pytest.mark.asyncio
    async def test_detail_resolves_and_sorts(self, service, matrix):
        detail = await service.get_detail(matrix["matrix"]["id"])

        assert [r["title"] for r in detail["roles"]] == ["Agent", "Technician"]
        assert [i["name"] for i in detail["responsibilities"]] == [
            "Approve refunds",
            "Resolve complaints",
        ]
        assert set(detail["workload"]) == {r["id"] for r in matrix["roles"]}

    @pytest.mark.asyncio
    async def test_cycle_rotates_through_all_states(self, service, matrix):
        matrix_id = matrix["matrix"]["id"]
        role_id = matrix["roles"][0]["id"]
        item_id = matrix["items"][0]["id"]

        values = [await service.cycle_assignment(matrix_id, role_id, item_id) for _ in range(5)]

        assert values == ["R", "A", "C", "I", ""]
        stored = (await service.get_matrix(matrix_id))["assignments"]
        assert item_id not in stored.get(role_id, {})

    @pytest.mark.asyncio
    async def test_cycle_rejects_cells_outside_matrix(self, service, matrix):
        with pytest.raises(ValidationException) as exc_info:
            await service.cycle_assignment(
                matrix["matrix"]["id"], "stranger", matrix["items"][0]["id"]
            )
        assert exc_info.value.details["field"] == "roleId"

    @pytest.mark.asyncio
    async def test_set_assignment_normalizes_case(self, service, matrix):
        value = await service.set_assignment(
            matrix["matrix"]["id"], matrix["roles"][1]["id"], matrix["items"][1]["id"], "a"
        )
        assert value == "A"

    @pytest.mark.asyncio
    async def test_set_assignment_rejects_unknown_letter(self, service, matrix):
        with pytest.raises(InvalidAssignmentException):
            await service.set_assignment(
                matrix["matrix"]["id"], matrix["roles"][1]["id"], matrix["items"][1]["id"], "X"
            )

    @pytest.mark.asyncio
    async def test_update_keeps_assignments(self, service, matrix):
        matrix_id = matrix["matrix"]["id"]
        role_id = matrix["roles"][0]["id"]
        item_id = matrix["items"][0]["id"]
        await service.set_assignment(matrix_id, role_id, item_id, "R")

        updated = await service.update_matrix(
            matrix_id,
            {
                "name": "Renamed",
                "type": "RAPID",
                "includedRoleIds": [role_id],
                "includedResponsibilityIds": [item_id],
            },
        )

        assert updated["name"] == "Renamed"
        assert updated["assignments"][role_id][item_id] == "R"

    @pytest.mark.asyncio
    async def test_export_csv(self, service, matrix):
        matrix_id = matrix["matrix"]["id"]
        technician, agent = matrix["roles"]
        complaints, refunds = matrix["items"]
        await service.set_assignment(matrix_id, agent["id"], refunds["id"], "A")
        await service.set_assignment(matrix_id, technician["id"], complaints["id"], "C")

        df = pd.read_csv(io.StringIO(await service.export_csv(matrix_id)), keep_default_na=False)

        assert list(df.columns) == ["Responsibility", "Agent", "Technician"]
        rows = df.set_index("Responsibility")
        assert rows.loc["Approve refunds", "Agent"] == "A"
        assert rows.loc["Resolve complaints", "Technician"] == "C"
        assert rows.loc["Resolve complaints", "Agent"] == ""

    @pytest.mark.asyncio
    async def test_export_csv_keeps_roles_with_same_title(self, service, store):
        first = role_repository.create({"title": "Technician"})
        second = role_repository.create({"title": "Technician"})
        refunds = standard_responsibility_repository.create({"name": "Approve refunds"})
        matrix = matrix_repository.create(
            {
                "name": "Field RACI",
                "includedRoleIds": [first["id"], second["id"]],
                "includedResponsibilityIds": [refunds["id"]],
                "assignments": {},
            }
        )
        await service.set_assignment(matrix["id"], first["id"], refunds["id"], "A")
        await service.set_assignment(matrix["id"], second["id"], refunds["id"], "C")

        lines = (await service.export_csv(matrix["id"])).splitlines()

        assert lines == ["Responsibility,Technician,Technician", "Approve refunds,A,C"]
