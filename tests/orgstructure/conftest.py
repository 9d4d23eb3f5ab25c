"""
Shared fixtures for API, service and repository tests.
"""
import pytest
from fastapi.testclient import TestClient

from orgstructure.main import app
from orgstructure.persistence import DocumentStore, set_document_store


@pytest.fixture
def store(tmp_path):
    """Fresh SQLite document store installed as the shared store."""
    document_store = DocumentStore(tmp_path / "test.db")
    set_document_store(document_store)
    yield document_store
    set_document_store(None)


@pytest.fixture
def client(store):
    """FastAPI test client backed by the temporary store."""
    return TestClient(app)


@pytest.fixture
def department(client):
    """A stored department."""
    response = client.post(
        "/api/departments", json={"name": "Customer Service", "color": "#3b82f6"}
    )
    return response.json()["data"]


@pytest.fixture
def library(client):
    """Stored standard skills and responsibilities keyed by name."""
    skills = {}
    for name in ["Diagnostics", "Customer communication", "Scheduling"]:
        skills[name] = client.post("/api/standard-skills", json={"name": name}).json()["data"]

    responsibilities = {}
    for name in ["Resolve complaints", "Dispatch technicians", "Approve refunds"]:
        responsibilities[name] = client.post(
            "/api/standard-responsibilities", json={"name": name}
        ).json()["data"]

    return {"skills": skills, "responsibilities": responsibilities}


@pytest.fixture
def make_role(client):
    """Factory creating roles through the API."""

    def _make_role(title, department="Customer Service", **fields):
        payload = {"title": title, "level": "Mid", "department": department}
        payload.update(fields)
        response = client.post("/api/roles", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make_role
