# ============================================================================
# src/prescription_ingestion/inference/prompts.py
# ============================================================================
"""
Prompt templates for structured prescription extraction.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptTemplate:
    name: str
    template: str

    def render(self, text: str) -> str:
        # str.replace keeps the literal JSON braces intact
        return self.template.replace("{text}", text)


PRESCRIPTION_EXTRACTION_PROMPT = PromptTemplate(
    name="prescription_extraction",
    template="""Analyze the following medical prescription and extract structured information. Return a JSON object with the following structure:

{
  "patientName": "extracted patient name",
  "age": "extracted age",
  "diagnosis": ["list of diagnoses"],
  "medications": [
    {
      "name": "medication name",
      "dosage": "dosage information",
      "frequency": "frequency of administration",
      "duration": "duration of treatment",
      "instructions": "special instructions"
    }
  ],
  "medicalHistory": ["relevant medical history"],
  "allergies": ["known allergies"],
  "interactions": [
    {
      "severity": "high/medium/low",
      "description": "interaction description",
      "drugs": ["drugs involved"]
    }
  ],
  "recommendations": ["clinical recommendations"]
}

Prescription text:
{text}

Provide only the JSON response without any additional text.""",
)


def build_extraction_prompt(text: str) -> str:
    return PRESCRIPTION_EXTRACTION_PROMPT.render(text)
