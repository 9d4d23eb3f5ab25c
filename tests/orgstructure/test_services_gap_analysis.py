"""
Tests for orgstructure/services/gap_analysis_service.py
"""
import pytest

from orgstructure.core.exceptions import GapAnalysisNotFoundException
from orgstructure.repositories import (
    process_repository,
    role_repository,
    standard_responsibility_repository,
    standard_skill_repository,
)
from orgstructure.services.gap_analysis_service import (
    GapAnalysisService,
    prepare_analysis_fields,
)


@pytest.fixture
def service(store):
    return GapAnalysisService()


@pytest.fixture
def org(store):
    """Skills, responsibilities, a process and two roles."""
    skills = {
        name: standard_skill_repository.create({"name": name})["id"]
        for name in ["Diagnostics", "Scheduling", "Negotiation", "Welding"]
    }
    resps = {
        name: standard_responsibility_repository.create({"name": name})["id"]
        for name in ["Dispatch", "Refunds", "Escalations"]
    }
    process = process_repository.create(
        {"name": "Complaint handling", "responsibilityIds": [resps["Refunds"], resps["Escalations"]]}
    )
    tech = role_repository.create(
        {
            "title": "Technician",
            "skillIds": [skills["Diagnostics"], skills["Welding"]],
            "responsibilityIds": [resps["Dispatch"]],
        }
    )
    agent = role_repository.create(
        {
            "title": "Agent",
            "skillIds": [skills["Negotiation"]],
            "responsibilityIds": [resps["Refunds"]],
        }
    )
    return {"skills": skills, "resps": resps, "process": process, "tech": tech, "agent": agent}


class TestPrepareAnalysisFields:
    def test_skill_analysis_clears_other_targets(self):
        fields = prepare_analysis_fields(
            {
                "name": "A",
                "analysisType": "skill",
                "targetSkillIds": ["s1"],
                "targetResponsibilityIds": ["p1"],
                "processId": "proc1",
            }
        )
        assert fields["targetSkillIds"] == ["s1"]
        assert fields["targetResponsibilityIds"] == []
        assert fields["processId"] is None

    def test_process_analysis_keeps_only_process(self):
        fields = prepare_analysis_fields(
            {
                "name": "A",
                "analysisType": "process",
                "targetSkillIds": ["s1"],
                "processId": "proc1",
            }
        )
        assert fields["targetSkillIds"] == []
        assert fields["processId"] == "proc1"


class TestGapAnalysisService:
    @pytest.mark.asyncio
    async def test_create_starts_clean(self, service):
        analysis = await service.create_analysis(
            {"name": "Skills", "analysisType": "skill", "targetSkillIds": ["s1"]}
        )

        assert analysis["gapCount"] == 0
        assert analysis["severity"] == "Low"
        assert analysis["progress"] == 0

    @pytest.mark.asyncio
    async def test_run_skill_analysis_stores_results(self, service, org):
        skills = org["skills"]
        analysis = await service.create_analysis(
            {
                "name": "Skills",
                "analysisType": "skill",
                "targetSkillIds": [
                    skills["Diagnostics"],
                    skills["Scheduling"],
                    skills["Negotiation"],
                    "deleted-skill",
                ],
            }
        )

        run = await service.run_analysis(analysis["id"], [org["tech"]["id"], "unknown-role"])

        result = run["result"]
        assert result["type"] == "skill"
        assert [i["name"] for i in result["targetItems"]] == [
            "Diagnostics",
            "Scheduling",
            "Negotiation",
        ]
        assert [i["name"] for i in result["metItems"]] == ["Diagnostics"]
        assert [i["name"] for i in result["gapItems"]] == ["Scheduling", "Negotiation"]
        assert result["severity"] == "High"

        stored = await service.get_analysis(analysis["id"])
        assert stored["gapCount"] == 2
        assert stored["severity"] == "High"
        assert stored["progress"] == 33

    @pytest.mark.asyncio
    async def test_process_analysis_without_roles_uses_everyone(self, service, org):
        analysis = await service.create_analysis(
            {"name": "Process", "analysisType": "process", "processId": org["process"]["id"]}
        )

        run = await service.run_analysis(analysis["id"], [])

        result = run["result"]
        assert result["type"] == "responsibility"
        assert [i["name"] for i in result["metItems"]] == ["Refunds"]
        assert [i["name"] for i in result["gapItems"]] == ["Escalations"]
        assert run["analysis"]["progress"] == 50

    @pytest.mark.asyncio
    async def test_missing_process_is_a_warning(self, service, org):
        analysis = await service.create_analysis(
            {"name": "Process", "analysisType": "process", "processId": "gone"}
        )

        run = await service.run_analysis(analysis["id"])

        assert run["result"]["targetItems"] == []
        assert run["result"]["warnings"] == ["Process 'gone' not found"]
        assert run["analysis"]["gapCount"] == 0

    @pytest.mark.asyncio
    async def test_skill_analysis_without_roles_has_no_coverage(self, service, org):
        analysis = await service.create_analysis(
            {"name": "Skills", "analysisType": "skill", "targetSkillIds": [org["skills"]["Welding"]]}
        )

        run = await service.run_analysis(analysis["id"], [])

        assert run["result"]["metItems"] == []
        assert len(run["result"]["gapItems"]) == 1

    @pytest.mark.asyncio
    async def test_update_keeps_run_results(self, service, org):
        analysis = await service.create_analysis(
            {"name": "Skills", "analysisType": "skill", "targetSkillIds": [org["skills"]["Welding"]]}
        )
        await service.run_analysis(analysis["id"], [])

        updated = await service.update_analysis(
            analysis["id"],
            {"name": "Renamed", "analysisType": "skill", "targetSkillIds": [org["skills"]["Welding"]]},
        )

        assert updated["name"] == "Renamed"
        assert updated["gapCount"] == 1

    @pytest.mark.asyncio
    async def test_run_missing_analysis_raises(self, service):
        with pytest.raises(GapAnalysisNotFoundException):
            await service.run_analysis("missing", [])
