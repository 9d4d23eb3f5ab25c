"""
Service layer for the dashboard overview.
"""

from typing import Any, Dict

from orgstructure.organizational.org_metrics import dashboard_stats, roles_by_department
from orgstructure.repositories import department_repository, role_repository


class DashboardService:
    """Aggregates headline numbers across departments and roles."""

    def __init__(self):
        self.department_repository = department_repository
        self.role_repository = role_repository

    async def overview(self) -> Dict[str, Any]:
        departments = self.department_repository.list_all()
        roles = self.role_repository.list_all()
        stats = dashboard_stats(departments, roles)
        stats["departments"] = roles_by_department(departments, roles)
        return stats


# Singleton instance
dashboard_service = DashboardService()
