# ============================================================================
# src/prescription_ingestion/config/inference_config.py
# ============================================================================
"""
Inference Configuration (hosted text-generation models)
- Endpoint and credentials
- Primary / fallback model identifiers
- Per-tier sampling parameters
- Timeout
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InferenceSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    HF_API_URL: str = Field(
        default="https://api-inference.huggingface.co/models",
        description="Base URL of the model-serving endpoint; the model id is appended"
    )
    HF_API_TOKEN: Optional[str] = Field(
        default=None,
        description="Bearer token sent with every inference request"
    )
    PRIMARY_MODEL: str = Field(
        default="ibm-granite/granite-3.1-3b-a800m-instruct",
        description="Primary structured-extraction model. Empty string disables the tier."
    )
    FALLBACK_MODEL: str = Field(
        default="microsoft/DialoGPT-medium",
        description="Fallback model used when the primary tier fails. Empty string disables the tier."
    )
    PRIMARY_MAX_NEW_TOKENS: int = Field(
        default=2048,
        gt=0,
        description="Output budget for the primary tier"
    )
    PRIMARY_TEMPERATURE: float = Field(
        default=0.1,
        ge=0.0, le=2.0,
        description="Sampling temperature for the primary tier (near-deterministic)"
    )
    FALLBACK_MAX_NEW_TOKENS: int = Field(
        default=1024,
        gt=0,
        description="Output budget for the fallback tier"
    )
    FALLBACK_TEMPERATURE: float = Field(
        default=0.7,
        ge=0.0, le=2.0,
        description="Sampling temperature for the fallback tier"
    )
    TOP_P: float = Field(
        default=0.9,
        gt=0.0, le=1.0,
        description="Nucleus sampling cutoff shared by both model tiers"
    )
    INFERENCE_TIMEOUT: int = Field(
        default=60,
        gt=0,
        description="Maximum seconds for a single inference request"
    )


inference_settings = InferenceSettings()
