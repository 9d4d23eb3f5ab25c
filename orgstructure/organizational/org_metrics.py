"""
Organization-level metrics for the dashboard.
"""

from typing import Any, Dict, List


def _count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def dashboard_stats(departments: List[Dict[str, Any]], roles: List[Dict[str, Any]]) -> Dict[str, int]:
    """
    Headline counts.

    Args:
        departments: Department documents
        roles: Role documents

    Returns:
        departmentCount, roleCount and currentHeadcount (sum of the
        departments' role counters)
    """
    return {
        "departmentCount": len(departments),
        "roleCount": len(roles),
        "currentHeadcount": sum(_count(dept.get("roleCount")) for dept in departments),
    }


def roles_by_department(
    departments: List[Dict[str, Any]], roles: List[Dict[str, Any]]
) -> List[Dict[str, Any]]:
    """Per department, the stored role counter next to the actual number of roles."""
    actual: Dict[str, int] = {}
    for role in roles:
        name = role.get("department")
        actual[name] = actual.get(name, 0) + 1

    return [
        {
            "departmentId": dept.get("id"),
            "name": dept.get("name"),
            "color": dept.get("color"),
            "roleCount": _count(dept.get("roleCount")),
            "actualRoles": actual.get(dept.get("name"), 0),
        }
        for dept in departments
    ]
