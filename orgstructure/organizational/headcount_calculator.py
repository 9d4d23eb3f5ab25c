"""
Headcount calculator

Estimates the FTE each role needs for a given work volume, then adds the
managers required by the span of control.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

WEEKS_PER_MONTH = 4.33

WEEK = "week"
MONTH = "month"


@dataclass(frozen=True)
class HeadcountInputs:
    """Volume and staffing assumptions for one estimate."""

    work_orders: float = 1000
    complaints: float = 500
    time_period: str = MONTH
    hours_per_fte: float = 160
    manager_span: float = 8


@dataclass
class HeadcountResult:
    """Per-role FTE breakdown and totals."""

    breakdown: List[Dict[str, Any]] = field(default_factory=list)
    total_direct_fte: float = 0.0
    total_manager_fte: int = 0
    total_fte: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "breakdown": self.breakdown,
            "totalDirectFTE": self.total_direct_fte,
            "totalManagerFTE": self.total_manager_fte,
            "totalFTE": self.total_fte,
        }


def _positive(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def normalize_to_monthly(volume: float, period: str) -> float:
    """Convert a weekly volume to a monthly one; monthly volumes pass through."""
    if period == WEEK:
        return volume * WEEKS_PER_MONTH
    return volume


def role_fte(
    role: Dict[str, Any],
    monthly_work_orders: float,
    monthly_complaints: float,
    hours_per_fte: float,
) -> float:
    """
    FTE a single role needs for the monthly volume.

    Complaint handlers are sized by complaints per FTE, every other role by
    hours spent per work order. Missing or non-positive rates give 0.
    """
    if role.get("handlesComplaints"):
        rate = role.get("complaintsPerFTE")
        if _positive(rate) and monthly_complaints > 0:
            return monthly_complaints / rate
        return 0.0

    hours = role.get("hoursPerWorkOrder")
    if _positive(hours) and monthly_work_orders > 0 and hours_per_fte > 0:
        return monthly_work_orders * hours / hours_per_fte
    return 0.0


def calculate_headcount(roles: Iterable[Dict[str, Any]], inputs: HeadcountInputs) -> HeadcountResult:
    """
    Estimate headcount for all roles.

    Args:
        roles: Role documents
        inputs: Volumes and staffing assumptions

    Returns:
        HeadcountResult sorted by FTE needed, largest first
    """
    monthly_work_orders = normalize_to_monthly(inputs.work_orders, inputs.time_period)
    monthly_complaints = normalize_to_monthly(inputs.complaints, inputs.time_period)

    breakdown = []
    total_direct = 0.0
    for role in roles:
        fte = role_fte(role, monthly_work_orders, monthly_complaints, inputs.hours_per_fte)
        if fte <= 0:
            continue
        total_direct += fte
        breakdown.append(
            {
                "roleId": role.get("id"),
                "roleTitle": role.get("title", ""),
                "fteNeeded": round(fte, 2),
            }
        )

    breakdown.sort(key=lambda entry: entry["fteNeeded"], reverse=True)

    managers = math.ceil(total_direct / inputs.manager_span) if inputs.manager_span > 0 else 0

    return HeadcountResult(
        breakdown=breakdown,
        total_direct_fte=round(total_direct, 2),
        total_manager_fte=managers,
        total_fte=round(total_direct + managers, 2),
    )
