"""
Service layer for gap analyses.

An analysis names the items an organization should cover (skills,
responsibilities, or the responsibilities of one process). Running it
compares those targets with what a set of roles covers today.
"""

from typing import Any, Dict, List, Optional

from orgstructure.core.exceptions import GapAnalysisNotFoundException
from orgstructure.core.logging import get_logger
from orgstructure.organizational.gap_analyzer import (
    PROCESS,
    RESPONSIBILITY,
    SKILL,
    GapAnalyzer,
    effective_kind,
)
from orgstructure.repositories import (
    gap_analysis_repository,
    process_repository,
    role_repository,
    standard_responsibility_repository,
    standard_skill_repository,
)
from orgstructure.utils.common import today_iso

logger = get_logger(__name__)


def prepare_analysis_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Select the stored analysis fields, keeping only the targets of its type.
    """
    analysis_type = data["analysisType"]
    fields = {
        "name": data["name"],
        "description": data.get("description"),
        "analysisType": analysis_type,
        "targetSkillIds": [],
        "targetResponsibilityIds": [],
        "processId": None,
        "lastUpdated": today_iso(),
    }
    if analysis_type == SKILL:
        fields["targetSkillIds"] = list(data.get("targetSkillIds") or [])
    elif analysis_type == RESPONSIBILITY:
        fields["targetResponsibilityIds"] = list(data.get("targetResponsibilityIds") or [])
    elif analysis_type == PROCESS:
        fields["processId"] = data.get("processId")
    return fields


class GapAnalysisService:
    """Service for gap analysis CRUD and runs."""

    def __init__(self):
        self.repository = gap_analysis_repository
        self.role_repository = role_repository
        self.skill_repository = standard_skill_repository
        self.responsibility_repository = standard_responsibility_repository
        self.process_repository = process_repository
        self.analyzer = GapAnalyzer()

    async def list_analyses(self) -> List[Dict[str, Any]]:
        """All analyses, most recently updated first."""
        return self.repository.list_all()

    async def get_analysis(self, analysis_id: str) -> Dict[str, Any]:
        analysis = self.repository.get(analysis_id)
        if analysis is None:
            raise GapAnalysisNotFoundException(analysis_id)
        return analysis

    async def create_analysis(self, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = prepare_analysis_fields(data)
        fields.update({"gapCount": 0, "severity": "Low", "progress": 0})
        analysis = self.repository.create(fields)
        logger.info(
            "Gap analysis created",
            analysis_id=analysis["id"],
            analysis_type=analysis["analysisType"],
        )
        return analysis

    async def update_analysis(self, analysis_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Update an analysis; results of the last run are kept."""
        if not self.repository.update(analysis_id, prepare_analysis_fields(data)):
            raise GapAnalysisNotFoundException(analysis_id)
        logger.info("Gap analysis updated", analysis_id=analysis_id)
        return await self.get_analysis(analysis_id)

    async def delete_analysis(self, analysis_id: str) -> None:
        if not self.repository.delete(analysis_id):
            raise GapAnalysisNotFoundException(analysis_id)
        logger.info("Gap analysis deleted", analysis_id=analysis_id)

    def _select_roles(self, analysis: Dict[str, Any], role_ids: List[str]) -> List[Dict[str, Any]]:
        roles = self.role_repository.list_all()
        if not role_ids:
            # a process analysis with no selection covers the whole organization
            return roles if analysis["analysisType"] == PROCESS else []
        selected = set(role_ids)
        return [role for role in roles if role["id"] in selected]

    def _catalog(self, kind: str) -> List[Dict[str, Any]]:
        if kind == SKILL:
            return self.skill_repository.list_all()
        if kind == RESPONSIBILITY:
            return self.responsibility_repository.list_all()
        return []

    async def run_analysis(
        self, analysis_id: str, role_ids: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Compare an analysis' targets with the capabilities of the given roles.

        The run's gap count, severity and progress are stored on the analysis.

        Args:
            analysis_id: Analysis identifier
            role_ids: Roles to compare against; unknown IDs are ignored

        Returns:
            Dict with the updated analysis and the computed result

        Raises:
            GapAnalysisNotFoundException: If the analysis does not exist
        """
        analysis = await self.get_analysis(analysis_id)
        roles = self._select_roles(analysis, list(role_ids or []))

        warnings = []
        process = None
        if analysis["analysisType"] == PROCESS:
            process_id = analysis.get("processId")
            process = self.process_repository.get(process_id) if process_id else None
            if process is None:
                logger.warning(
                    "Process for gap analysis not found",
                    analysis_id=analysis_id,
                    process_id=process_id,
                )
                warnings.append(f"Process '{process_id}' not found")

        catalog = self._catalog(effective_kind(analysis["analysisType"]))
        result = self.analyzer.analyze(analysis, roles, catalog, process)
        result.warnings.extend(warnings)

        run_fields = {
            "gapCount": len(result.gap_items),
            "severity": result.severity,
            "progress": result.progress,
            "lastUpdated": today_iso(),
        }
        self.repository.update(analysis_id, run_fields)
        analysis.update(run_fields)

        logger.info(
            "Gap analysis run",
            analysis_id=analysis_id,
            roles=len(roles),
            targets=len(result.target_items),
            gaps=run_fields["gapCount"],
            severity=run_fields["severity"],
        )
        return {"analysis": analysis, "result": result.to_dict()}


# Singleton instance
gap_analysis_service = GapAnalysisService()
