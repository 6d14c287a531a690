# ============================================================================
# api/main.py
# ============================================================================
"""
FastAPI Backend for the Prescription Ingestion Engine

Provides REST endpoints for prescription analysis and the supplementary
interaction / dosage checkers.

Run with:
    uvicorn api.main:app --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from prescription_ingestion import __version__
from prescription_ingestion.checkers import DosageCalculator, DrugInteractionChecker
from prescription_ingestion.core import PrescriptionPipeline
from prescription_ingestion.utils import (
    ExtractionError,
    UnsupportedFormatError,
    setup_logging_from_settings,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging_from_settings()
    logger.info("Prescription Ingestion API started")
    yield


app = FastAPI(
    title="Prescription Ingestion Engine API",
    description="Structured extraction from prescription documents",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Request models
# ============================================================================

class TextAnalysisRequest(BaseModel):
    text: str


class InteractionRequest(BaseModel):
    drugs: List[str] = Field(default_factory=list)


class DosageRequest(BaseModel):
    medication: str
    age: int
    weight: float


# ============================================================================
# Dependencies
# ============================================================================

def get_pipeline() -> PrescriptionPipeline:
    return PrescriptionPipeline()


def get_interaction_checker() -> DrugInteractionChecker:
    return DrugInteractionChecker()


def get_dosage_calculator() -> DosageCalculator:
    return DosageCalculator()


def _document_error(e: Exception) -> HTTPException:
    if isinstance(e, UnsupportedFormatError):
        return HTTPException(
            status_code=415,
            detail={
                "error": "unsupported_format",
                "message": str(e),
                "format": e.format,
            },
        )
    return HTTPException(
        status_code=422,
        detail={
            "error": "extraction_failed",
            "message": str(e),
            "cause": getattr(e, "cause", None),
        },
    )


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/api/health")
async def health():
    """Health check for monitoring."""
    return {"status": "healthy", "version": __version__}


@app.post("/api/analyze")
async def analyze_upload(
    file: UploadFile = File(...),
    pipeline: PrescriptionPipeline = Depends(get_pipeline),
):
    """
    Analyze an uploaded prescription (text, PDF, DOCX or image).

    Returns the record plus provenance (source tier, degraded flag).
    """
    content = await file.read()
    try:
        result = await pipeline.analyze(
            content,
            mime_type=file.content_type or "",
            file_name=file.filename or "",
        )
    except (UnsupportedFormatError, ExtractionError) as e:
        logger.warning(f"Rejected upload '{file.filename}': {e}")
        raise _document_error(e) from e

    return result.to_dict()


@app.post("/api/analyze/text")
async def analyze_text(
    request: TextAnalysisRequest,
    pipeline: PrescriptionPipeline = Depends(get_pipeline),
):
    """Analyze pasted prescription text."""
    result = await pipeline.analyze(text=request.text)
    return result.to_dict()


@app.post("/api/interactions")
async def check_interactions(
    request: InteractionRequest,
    checker: DrugInteractionChecker = Depends(get_interaction_checker),
):
    """Screen drugs against the known-interaction table."""
    interactions = checker.check(request.drugs)
    return {
        "interactions": [i.model_dump(by_alias=True, mode="json") for i in interactions],
        "count": len(interactions),
    }


@app.post("/api/dosage")
async def calculate_dosage(
    request: DosageRequest,
    calculator: DosageCalculator = Depends(get_dosage_calculator),
):
    """Age- and weight-based dosage estimate."""
    try:
        result = calculator.calculate(request.medication, request.age, request.weight)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "invalid_dosage_request", "message": str(e)},
        ) from e
    return result.to_dict()
