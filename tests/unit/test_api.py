# ============================================================================
# FILE: tests/unit/test_api.py
# ============================================================================
"""
Unit tests for the FastAPI endpoints
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app, get_pipeline
from prescription_ingestion.core import PrescriptionPipeline
from prescription_ingestion.inference import InferenceCascade


@pytest.fixture
def client():
    def heuristic_only_pipeline():
        cascade = InferenceCascade({"primary_model": "", "fallback_model": ""})
        return PrescriptionPipeline(cascade=cascade)

    app.dependency_overrides[get_pipeline] = heuristic_only_pipeline
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_analyze_text(client, scenario_text):
    response = client.post("/api/analyze/text", json={"text": scenario_text})

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "heuristic"
    assert data["degraded"] is True
    assert data["record"]["patientName"] == "John Doe"
    assert data["record"]["medications"][0]["name"] == "Amoxicillin"


def test_analyze_upload(client, scenario_text):
    response = client.post(
        "/api/analyze",
        files={"file": ("rx.txt", scenario_text.encode("utf-8"), "text/plain")},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["format"] == "plain_text"
    assert data["record"]["age"] == "45 years old"


def test_analyze_unsupported_format(client):
    response = client.post(
        "/api/analyze",
        files={"file": ("archive.zip", b"PK\x03\x04", "application/zip")},
    )

    assert response.status_code == 415
    detail = response.json()["detail"]
    assert detail["error"] == "unsupported_format"
    assert detail["format"] == "application/zip"


def test_analyze_extraction_failure(client):
    response = client.post(
        "/api/analyze",
        files={"file": ("rx.pdf", b"not a pdf", "application/pdf")},
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error"] == "extraction_failed"
    assert detail["cause"] == "pdf-parse-failed"


def test_interactions(client):
    response = client.post("/api/interactions", json={"drugs": ["Warfarin", "Tylenol"]})

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert data["interactions"][0]["severity"] == "high"
    assert data["interactions"][0]["drugs"] == ["warfarin", "aspirin"]


def test_dosage(client):
    response = client.post("/api/dosage", json={"medication": "Ibuprofen", "age": 8, "weight": 20})

    assert response.status_code == 200
    data = response.json()
    assert data["recommendedDose"] == "160.0 mg"
    assert data["warnings"] == ["Pediatric dosing - monitor closely"]


def test_dosage_invalid(client):
    response = client.post("/api/dosage", json={"medication": "", "age": 30, "weight": 70})

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "invalid_dosage_request"
