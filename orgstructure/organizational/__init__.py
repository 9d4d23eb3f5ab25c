"""
Organizational computations.

Pure functions over in-memory documents: gap analysis, headcount
estimation, RACI matrix helpers and dashboard metrics.
"""

__all__ = [
    "GapAnalyzer",
    "GapResult",
    "HeadcountInputs",
    "HeadcountResult",
    "calculate_headcount",
    "next_assignment",
    "dashboard_stats",
]

from orgstructure.organizational.gap_analyzer import GapAnalyzer, GapResult
from orgstructure.organizational.headcount_calculator import (
    HeadcountInputs,
    HeadcountResult,
    calculate_headcount,
)
from orgstructure.organizational.raci import next_assignment
from orgstructure.organizational.org_metrics import dashboard_stats
