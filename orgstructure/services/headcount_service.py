"""
Service layer for the headcount calculator.
"""

from typing import Any, Dict, Optional

from orgstructure.core.logging import get_logger
from orgstructure.core.settings import get_settings
from orgstructure.organizational.headcount_calculator import HeadcountInputs, calculate_headcount
from orgstructure.repositories import role_repository

logger = get_logger(__name__)


def default_inputs() -> HeadcountInputs:
    """Calculator inputs from the configured defaults."""
    settings = get_settings().headcount
    return HeadcountInputs(
        work_orders=settings.work_orders,
        complaints=settings.complaints,
        time_period=settings.time_period,
        hours_per_fte=settings.hours_per_fte,
        manager_span=settings.manager_span,
    )


class HeadcountService:
    """Service estimating staffing needs for all roles."""

    def __init__(self):
        self.repository = role_repository

    async def calculate(self, inputs: Optional[HeadcountInputs] = None) -> Dict[str, Any]:
        """
        Estimate FTE per role and in total.

        Args:
            inputs: Volumes and assumptions; configured defaults when None

        Returns:
            Breakdown and totals as a dict
        """
        inputs = inputs or default_inputs()
        roles = self.repository.list_all()
        result = calculate_headcount(roles, inputs)

        logger.info(
            "Headcount calculated",
            roles=len(roles),
            time_period=inputs.time_period,
            total_fte=result.total_fte,
        )
        return result.to_dict()


# Singleton instance
headcount_service = HeadcountService()
