"""
Tests for orgstructure/organizational/org_metrics.py
"""

from orgstructure.organizational.org_metrics import dashboard_stats, roles_by_department


def test_dashboard_stats(departments, roles):
    assert dashboard_stats(departments, roles) == {
        "departmentCount": 3,
        "roleCount": 3,
        "currentHeadcount": 3,
    }


def test_dashboard_ignores_non_numeric_counters():
    departments = [{"roleCount": "4"}, {"roleCount": True}, {"roleCount": 2}]
    assert dashboard_stats(departments, [])["currentHeadcount"] == 2


def test_roles_by_department(departments, roles):
    summary = {d["name"]: d for d in roles_by_department(departments, roles)}

    assert summary["Support"]["actualRoles"] == 2
    assert summary["Support"]["roleCount"] == 2
    assert summary["Empty"]["roleCount"] == 0
    assert summary["Empty"]["actualRoles"] == 0
