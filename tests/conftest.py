# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import io
import json
from typing import List, Union

import pytest

from prescription_ingestion.inference.base import BaseInferenceClient, GenerationParameters
from prescription_ingestion.utils.exceptions import InferenceError


SCENARIO_TEXT = (
    "Patient: John Doe, 45 years old Diagnosis: Bacterial infection "
    "Medications: 1. Amoxicillin 500mg three times daily"
)


class ScriptedClient(BaseInferenceClient):
    """
    Inference client that replays canned outcomes.

    Each item is either a string (returned as generated text) or an
    exception instance (raised). Calls are recorded for assertions.
    """

    def __init__(self, outcomes: List[Union[str, Exception]], model: str = "test/model"):
        super().__init__({})
        self._model = model
        self.outcomes = list(outcomes)
        self.calls = []

    @property
    def model_name(self) -> str:
        return self._model

    async def generate(self, prompt: str, parameters: GenerationParameters) -> str:
        self.calls.append((prompt, parameters))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def scenario_text():
    """Single-line prescription used across heuristic and cascade tests"""
    return SCENARIO_TEXT


@pytest.fixture
def model_record_dict():
    """Well-formed record as a model would return it"""
    return {
        "patientName": "Jane Smith",
        "age": "62",
        "diagnosis": ["Type 2 diabetes", "Hypertension"],
        "medications": [
            {
                "name": "Metformin",
                "dosage": "500mg",
                "frequency": "twice daily",
                "duration": "90 days",
                "instructions": "Take with meals",
            },
            {
                "name": "Lisinopril",
                "dosage": "10mg",
                "frequency": "once daily",
                "duration": "90 days",
                "instructions": "",
            },
        ],
        "medicalHistory": ["Hyperlipidemia"],
        "allergies": ["Sulfa drugs"],
        "interactions": [
            {
                "severity": "low",
                "description": "Monitor potassium levels",
                "drugs": ["Lisinopril"],
            }
        ],
        "recommendations": ["Check HbA1c in 3 months"],
    }


@pytest.fixture
def model_output(model_record_dict):
    """Model completion with the JSON wrapped in prose"""
    return (
        "Here is the structured analysis of the prescription:\n"
        f"{json.dumps(model_record_dict, indent=2)}\n"
        "Let me know if you need anything else."
    )


@pytest.fixture
def scripted_client():
    """Factory for ScriptedClient instances"""
    def _make(*outcomes, model="test/model"):
        return ScriptedClient(list(outcomes), model=model)
    return _make


@pytest.fixture
def service_unavailable():
    """Factory for the error a 503 from the inference service produces"""
    def _make(model="test/model"):
        return InferenceError(f"{model} returned status 503: loading", status=503)
    return _make


@pytest.fixture
def sample_pdf_bytes():
    """Single-page PDF with a text layer"""
    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    c.drawString(100, 750, "Patient: John Doe")
    c.drawString(100, 700, "Diagnosis: Bacterial infection")
    c.drawString(100, 650, "Amoxicillin 500mg three times daily")
    c.save()
    return buffer.getvalue()


@pytest.fixture
def blank_pdf_bytes():
    """PDF with a page but no text layer"""
    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    c.rect(100, 600, 200, 100)
    c.showPage()
    c.save()
    return buffer.getvalue()


@pytest.fixture
def sample_docx_bytes():
    """DOCX with paragraphs and a small table"""
    import docx

    document = docx.Document()
    document.add_paragraph("Patient: John Doe")
    document.add_paragraph("Diagnosis: Bacterial infection")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Amoxicillin 500mg"
    table.rows[0].cells[1].text = "three times daily"

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_png_bytes():
    """Small white PNG"""
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (200, 80), "white").save(buffer, format="PNG")
    return buffer.getvalue()
