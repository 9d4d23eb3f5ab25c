"""
Tests for orgstructure/api/gap_analyses.py and headcount.py
"""
import pytest


class TestGapAnalysesApi:
    def test_skill_analysis_requires_targets(self, client):
        response = client.post(
            "/api/gap-analyses", json={"name": "Empty", "analysisType": "skill"}
        )
        assert response.status_code == 422

    def test_process_analysis_requires_process(self, client):
        response = client.post(
            "/api/gap-analyses", json={"name": "Empty", "analysisType": "process"}
        )
        assert response.status_code == 422

    def test_create_keeps_only_matching_targets(self, client):
        response = client.post(
            "/api/gap-analyses",
            json={
                "name": "Responsibilities",
                "analysisType": "responsibility",
                "targetSkillIds": ["s1"],
                "targetResponsibilityIds": ["p1"],
                "processId": "proc",
            },
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["targetSkillIds"] == []
        assert data["targetResponsibilityIds"] == ["p1"]
        assert data["processId"] is None
        assert data["severity"] == "Low"

    def test_run(self, client, department, library, make_role):
        skills = library["skills"]
        role = make_role("Technician", skillIds=[skills["Diagnostics"]["id"]])
        created = client.post(
            "/api/gap-analyses",
            json={
                "name": "Field skills",
                "analysisType": "skill",
                "targetSkillIds": [skills["Diagnostics"]["id"], skills["Scheduling"]["id"]],
            },
        ).json()["data"]

        response = client.post(
            f"/api/gap-analyses/{created['id']}/run", json={"roleIds": [role["id"]]}
        )

        assert response.status_code == 200
        run = response.json()["data"]
        assert run["result"]["coverage"] == 0.5
        assert [i["name"] for i in run["result"]["gapItems"]] == ["Scheduling"]
        assert run["analysis"]["gapCount"] == 1
        assert run["analysis"]["severity"] == "High"

        listed = client.get("/api/gap-analyses").json()["data"][0]
        assert listed["progress"] == 50

    def test_run_missing(self, client):
        response = client.post("/api/gap-analyses/missing/run", json={"roleIds": []})
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "GAP_ANALYSIS_NOT_FOUND"

    def test_delete(self, client):
        created = client.post(
            "/api/gap-analyses",
            json={"name": "Temp", "analysisType": "skill", "targetSkillIds": ["s1"]},
        ).json()["data"]

        assert client.delete(f"/api/gap-analyses/{created['id']}").status_code == 200
        assert client.get("/api/gap-analyses").json()["total"] == 0


class TestHeadcountApi:
    @pytest.fixture
    def staffed(self, department, make_role):
        make_role("Technician", hoursPerWorkOrder=2)
        make_role("Complaint Agent", handlesComplaints=True, complaintsPerFTE=100)
        make_role("Manager")

    def test_monthly_defaults(self, client, staffed):
        response = client.post("/api/headcount/calculate", json={})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["breakdown"] == [
            {"roleId": data["breakdown"][0]["roleId"], "roleTitle": "Technician", "fteNeeded": 12.5},
            {"roleId": data["breakdown"][1]["roleId"], "roleTitle": "Complaint Agent", "fteNeeded": 5.0},
        ]
        assert data["totalDirectFTE"] == 17.5
        assert data["totalManagerFTE"] == 3
        assert data["totalFTE"] == 20.5

    def test_weekly_volumes(self, client, staffed):
        response = client.post(
            "/api/headcount/calculate",
            json={"workOrders": 100, "complaints": 0, "timePeriod": "week", "managerSpan": 0},
        )

        data = response.json()["data"]
        assert [b["roleTitle"] for b in data["breakdown"]] == ["Technician"]
        assert data["breakdown"][0]["fteNeeded"] == 5.41
        assert data["totalManagerFTE"] == 0

    def test_negative_volume_rejected(self, client):
        response = client.post("/api/headcount/calculate", json={"workOrders": -1})
        assert response.status_code == 422

    def test_defaults_endpoint(self, client):
        data = client.get("/api/headcount/defaults").json()
        assert data["timePeriod"] == "month"
        assert data["hoursPerFTE"] == 160
