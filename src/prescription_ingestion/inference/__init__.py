"""
Model inference: hosted clients, prompt, response parsing and the
primary -> fallback -> heuristic cascade.
"""

from .base import BaseInferenceClient, GenerationParameters
from .cascade import InferenceCascade, InferenceTier
from .huggingface_client import HuggingFaceInferenceClient
from .prompts import PRESCRIPTION_EXTRACTION_PROMPT, PromptTemplate, build_extraction_prompt
from .response_parser import ResponseParser, parse_response

__all__ = [
    "BaseInferenceClient",
    "GenerationParameters",
    "HuggingFaceInferenceClient",
    "InferenceCascade",
    "InferenceTier",
    "PromptTemplate",
    "PRESCRIPTION_EXTRACTION_PROMPT",
    "build_extraction_prompt",
    "ResponseParser",
    "parse_response",
]
