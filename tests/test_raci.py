"""
Tests for orgstructure/organizational/raci.py
"""

import pytest

from orgstructure.organizational.raci import (
    RACI_CYCLE,
    accountability_issues,
    get_assignment,
    is_valid_assignment,
    next_assignment,
    role_workload,
)


class TestCycle:
    def test_rotation(self):
        assert [next_assignment(v) for v in ["", "R", "A", "C", "I"]] == ["R", "A", "C", "I", ""]

    def test_five_steps_return_to_start(self):
        for start in RACI_CYCLE:
            value = start
            for _ in range(5):
                value = next_assignment(value)
            assert value == start

    @pytest.mark.parametrize("value", [None, "X", "r", 3])
    def test_unknown_values_restart(self, value):
        assert next_assignment(value) == "R"

    @pytest.mark.parametrize("value, valid", [("R", True), ("", True), ("I", True), ("S", False), (None, False)])
    def test_validity(self, value, valid):
        assert is_valid_assignment(value) is valid


class TestMatrixSummaries:
    @pytest.fixture
    def assignments(self):
        return {
            "r1": {"p1": "A", "p2": "R", "p3": "A"},
            "r2": {"p1": "C", "p3": "A"},
            "r3": {"p2": "bogus"},
        }

    def test_get_assignment(self, assignments):
        assert get_assignment(assignments, "r1", "p1") == "A"
        assert get_assignment(assignments, "r2", "p2") == ""
        assert get_assignment(assignments, "r3", "p2") == ""
        assert get_assignment(assignments, "r9", "p1") == ""

    def test_workload(self, assignments):
        workload = role_workload(assignments, ["r1", "r2", "r3", "r4"])

        assert workload["r1"] == {"R": 1, "A": 2, "C": 0, "I": 0, "total": 3}
        assert workload["r2"]["total"] == 2
        assert workload["r3"]["total"] == 0
        assert workload["r4"]["total"] == 0

    def test_accountability_issues(self, assignments):
        issues = accountability_issues(assignments, ["r1", "r2", "r3"], ["p1", "p2", "p3"])

        assert issues == {"missingAccountable": ["p2"], "multipleAccountable": ["p3"]}
