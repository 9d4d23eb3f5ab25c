"""Repository for gap analysis documents."""

from orgstructure.repositories.base import DocumentRepository


class GapAnalysisRepository(DocumentRepository):
    """Repository for the gapAnalyses collection, newest first."""

    collection = "gapAnalyses"
    order_field = "lastUpdated"
    descending = True
    field_defaults = {
        "description": None,
        "targetSkillIds": [],
        "targetResponsibilityIds": [],
        "processId": None,
        "gapCount": 0,
        "severity": "Low",
        "progress": 0,
    }


# Singleton instance
gap_analysis_repository = GapAnalysisRepository()
