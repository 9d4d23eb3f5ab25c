"""
Gap analysis engine

Compares the items an analysis targets with the capabilities the selected
roles already cover, and splits the targets into met and gap items.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from orgstructure.core.logging import get_logger

logger = get_logger(__name__)

SKILL = "skill"
RESPONSIBILITY = "responsibility"
PROCESS = "process"
NONE = "none"

ANALYSIS_TYPES = (SKILL, RESPONSIBILITY, PROCESS)

# Role field that holds each kind of capability
CAPABILITY_FIELDS = {
    SKILL: "skillIds",
    RESPONSIBILITY: "responsibilityIds",
}


def effective_kind(analysis_type: str) -> str:
    """Catalog kind an analysis type is measured against."""
    if analysis_type == SKILL:
        return SKILL
    if analysis_type in (RESPONSIBILITY, PROCESS):
        return RESPONSIBILITY
    return NONE


def collect_capabilities(roles: Iterable[Dict[str, Any]], kind: str) -> Set[str]:
    """
    Union of the item IDs the given roles cover.

    Args:
        roles: Role documents
        kind: "skill" or "responsibility"

    Returns:
        Set of covered item IDs
    """
    field_name = CAPABILITY_FIELDS.get(kind)
    if field_name is None:
        return set()

    current: Set[str] = set()
    for role in roles:
        current.update(role.get(field_name) or [])
    return current


def compute_gaps(target_ids: Iterable[str], current_ids: Set[str]) -> Tuple[List[str], List[str]]:
    """
    Partition targets into met and gap IDs.

    Target order is kept; a repeated target only counts once.

    Returns:
        (met_ids, gap_ids)
    """
    met: List[str] = []
    gap: List[str] = []
    seen: Set[str] = set()
    for target_id in target_ids:
        if target_id in seen:
            continue
        seen.add(target_id)
        (met if target_id in current_ids else gap).append(target_id)
    return met, gap


def severity_for(gap_count: int, target_count: int) -> str:
    """Severity label for a gap ratio."""
    if target_count <= 0:
        return "Low"
    ratio = gap_count / target_count
    if ratio >= 0.5:
        return "High"
    if ratio >= 0.25:
        return "Medium"
    return "Low"


@dataclass
class GapResult:
    """Outcome of one gap analysis run."""

    type: str
    target_items: List[Dict[str, Any]] = field(default_factory=list)
    met_items: List[Dict[str, Any]] = field(default_factory=list)
    gap_items: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def coverage(self) -> float:
        if not self.target_items:
            return 0.0
        return len(self.met_items) / len(self.target_items)

    @property
    def severity(self) -> str:
        return severity_for(len(self.gap_items), len(self.target_items))

    @property
    def progress(self) -> int:
        return round(self.coverage * 100)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "targetItems": self.target_items,
            "metItems": self.met_items,
            "gapItems": self.gap_items,
            "coverage": self.coverage,
            "severity": self.severity,
            "progress": self.progress,
            "warnings": self.warnings,
        }


class GapAnalyzer:
    """Runs gap analyses against role capabilities."""

    @staticmethod
    def target_ids(analysis: Dict[str, Any], process: Optional[Dict[str, Any]] = None) -> List[str]:
        """Target item IDs of an analysis according to its type."""
        analysis_type = analysis.get("analysisType")
        if analysis_type == SKILL:
            return list(analysis.get("targetSkillIds") or [])
        if analysis_type == RESPONSIBILITY:
            return list(analysis.get("targetResponsibilityIds") or [])
        if analysis_type == PROCESS and process is not None:
            return list(process.get("responsibilityIds") or [])
        return []

    def analyze(
        self,
        analysis: Dict[str, Any],
        roles: List[Dict[str, Any]],
        catalog: List[Dict[str, Any]],
        process: Optional[Dict[str, Any]] = None,
    ) -> GapResult:
        """
        Compute met and gap items for an analysis.

        Args:
            analysis: Gap analysis document
            roles: Roles whose capabilities count as current
            catalog: Standard items of the analysis' effective kind
            process: Process document for process analyses

        Returns:
            GapResult with items resolved from the catalog
        """
        kind = effective_kind(analysis.get("analysisType"))
        if kind == NONE or not catalog:
            return GapResult(type=NONE)

        items_by_id = {item["id"]: item for item in catalog}
        targets = [tid for tid in self.target_ids(analysis, process) if tid in items_by_id]
        current = collect_capabilities(roles, kind)
        met_ids, gap_ids = compute_gaps(targets, current)

        result = GapResult(
            type=kind,
            target_items=[items_by_id[tid] for tid in dict.fromkeys(targets)],
            met_items=[items_by_id[tid] for tid in met_ids],
            gap_items=[items_by_id[tid] for tid in gap_ids],
        )
        logger.debug(
            "Gap analysis computed",
            kind=kind,
            targets=len(result.target_items),
            gaps=len(result.gap_items),
        )
        return result
