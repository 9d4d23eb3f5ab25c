"""
RACI matrix helpers

Assignments are stored as ``{roleId: {responsibilityId: letter}}`` where a
missing cell means no involvement.
"""

from typing import Any, Dict, Iterable, List

RACI_CYCLE = ("", "R", "A", "C", "I")
RACI_LETTERS = RACI_CYCLE[1:]


def is_valid_assignment(value: Any) -> bool:
    return value in RACI_CYCLE


def next_assignment(current: Any) -> str:
    """Next value in the '' -> R -> A -> C -> I -> '' rotation."""
    if current not in RACI_CYCLE:
        current = ""
    index = RACI_CYCLE.index(current)
    return RACI_CYCLE[(index + 1) % len(RACI_CYCLE)]


def get_assignment(assignments: Dict[str, Dict[str, str]], role_id: str, responsibility_id: str) -> str:
    """Cell value, '' when unset."""
    value = (assignments.get(role_id) or {}).get(responsibility_id, "")
    return value if value in RACI_CYCLE else ""


def role_workload(
    assignments: Dict[str, Dict[str, str]], role_ids: Iterable[str]
) -> Dict[str, Dict[str, int]]:
    """
    Count R/A/C/I assignments per role.

    Returns:
        {roleId: {"R": n, "A": n, "C": n, "I": n, "total": n}}
    """
    workload = {}
    for role_id in role_ids:
        counts = {letter: 0 for letter in RACI_LETTERS}
        for value in (assignments.get(role_id) or {}).values():
            if value in counts:
                counts[value] += 1
        counts["total"] = sum(counts[letter] for letter in RACI_LETTERS)
        workload[role_id] = counts
    return workload


def accountability_issues(
    assignments: Dict[str, Dict[str, str]],
    role_ids: Iterable[str],
    responsibility_ids: Iterable[str],
) -> Dict[str, List[str]]:
    """
    Responsibilities whose accountability is unclear.

    A responsibility should have exactly one accountable role.

    Returns:
        {"missingAccountable": [...], "multipleAccountable": [...]}
    """
    role_ids = list(role_ids)
    missing, multiple = [], []
    for responsibility_id in responsibility_ids:
        accountable = sum(
            1 for role_id in role_ids
            if get_assignment(assignments, role_id, responsibility_id) == "A"
        )
        if accountable == 0:
            missing.append(responsibility_id)
        elif accountable > 1:
            multiple.append(responsibility_id)
    return {"missingAccountable": missing, "multipleAccountable": multiple}
