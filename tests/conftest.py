"""
Shared test fixtures.

In-memory documents shaped like the stored collections, for the pure
organizational computations.
"""

import pytest


# ==================== Library fixtures ====================


@pytest.fixture
def skill_catalog():
    """Standard skills"""
    return [
        {"id": "s-diag", "name": "Diagnostics"},
        {"id": "s-comm", "name": "Customer communication"},
        {"id": "s-sched", "name": "Scheduling"},
        {"id": "s-weld", "name": "Welding"},
    ]


@pytest.fixture
def responsibility_catalog():
    """Standard responsibilities"""
    return [
        {"id": "p-dispatch", "name": "Dispatch technicians"},
        {"id": "p-refund", "name": "Approve refunds"},
        {"id": "p-escalate", "name": "Handle escalations"},
    ]


# ==================== Organization fixtures ====================


@pytest.fixture
def roles():
    """Roles with skills, responsibilities and staffing rates"""
    return [
        {
            "id": "r-tech",
            "title": "Technician",
            "department": "Field",
            "skillIds": ["s-diag", "s-weld"],
            "responsibilityIds": ["p-dispatch"],
            "handlesComplaints": False,
            "complaintsPerFTE": None,
            "hoursPerWorkOrder": 2,
        },
        {
            "id": "r-agent",
            "title": "Complaint Agent",
            "department": "Support",
            "skillIds": ["s-comm"],
            "responsibilityIds": ["p-refund"],
            "handlesComplaints": True,
            "complaintsPerFTE": 100,
            "hoursPerWorkOrder": None,
        },
        {
            "id": "r-lead",
            "title": "Team Lead",
            "department": "Support",
            "skillIds": [],
            "responsibilityIds": [],
            "handlesComplaints": False,
            "complaintsPerFTE": None,
            "hoursPerWorkOrder": None,
        },
    ]


@pytest.fixture
def departments():
    """Departments with stored role counters"""
    return [
        {"id": "d-field", "name": "Field", "color": "#112233", "roleCount": 1},
        {"id": "d-support", "name": "Support", "color": "#445566", "roleCount": 2},
        {"id": "d-empty", "name": "Empty", "color": "#778899"},
    ]
