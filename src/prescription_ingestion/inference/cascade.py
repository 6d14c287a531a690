# ============================================================================
# src/prescription_ingestion/inference/cascade.py
# ============================================================================
"""
Inference Cascade

Turns document text into a PrescriptionRecord by trying tiers in order:

1. Primary model   (low temperature, large output budget)
2. Fallback model  (higher temperature, smaller budget)
3. Heuristic rules (always succeeds, degraded)

A model tier fails on any InferenceError (bad status, malformed body,
transport error, timeout) or ParseError (no usable JSON). Failure moves
straight on to the next tier. The heuristic tier is total, so infer()
never raises.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..config import inference_settings
from ..heuristics.heuristic_extractor import HeuristicExtractor
from ..models.prescription import PrescriptionRecord
from ..models.results import CascadeResult, ExtractionAttempt, ExtractionSource
from ..utils.exceptions import InferenceError, ParseError
from .base import BaseInferenceClient, GenerationParameters
from .huggingface_client import HuggingFaceInferenceClient
from .prompts import build_extraction_prompt
from .response_parser import ResponseParser


@dataclass(frozen=True)
class InferenceTier:
    """One model-backed stage of the cascade."""
    source: ExtractionSource
    client: BaseInferenceClient
    parameters: GenerationParameters


class InferenceCascade:
    """
    Ordered list of model tiers followed by the heuristic tier.

    Config options (override inference_settings):
        primary_model / fallback_model: Model ids; "" disables the tier
        api_url, api_token, timeout: Passed to the HTTP clients
        primary_max_new_tokens, primary_temperature
        fallback_max_new_tokens, fallback_temperature
        top_p

    primary_client / fallback_client replace the HTTP client of a tier
    (the tier's sampling parameters still come from config).
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        primary_client: Optional[BaseInferenceClient] = None,
        fallback_client: Optional[BaseInferenceClient] = None,
        parser: Optional[ResponseParser] = None,
        heuristic: Optional[HeuristicExtractor] = None,
    ):
        self.config = config or {}
        self.logger = logging.getLogger(__name__)
        self.parser = parser or ResponseParser()
        self.heuristic = heuristic or HeuristicExtractor()

        top_p = self.config.get('top_p', inference_settings.TOP_P)

        self.tiers: List[InferenceTier] = []
        primary = primary_client or self._build_client(
            self.config.get('primary_model', inference_settings.PRIMARY_MODEL)
        )
        if primary is not None:
            self.tiers.append(InferenceTier(
                source=ExtractionSource.PRIMARY_MODEL,
                client=primary,
                parameters=GenerationParameters(
                    max_new_tokens=self.config.get(
                        'primary_max_new_tokens', inference_settings.PRIMARY_MAX_NEW_TOKENS
                    ),
                    temperature=self.config.get(
                        'primary_temperature', inference_settings.PRIMARY_TEMPERATURE
                    ),
                    top_p=top_p,
                ),
            ))

        fallback = fallback_client or self._build_client(
            self.config.get('fallback_model', inference_settings.FALLBACK_MODEL)
        )
        if fallback is not None:
            self.tiers.append(InferenceTier(
                source=ExtractionSource.FALLBACK_MODEL,
                client=fallback,
                parameters=GenerationParameters(
                    max_new_tokens=self.config.get(
                        'fallback_max_new_tokens', inference_settings.FALLBACK_MAX_NEW_TOKENS
                    ),
                    temperature=self.config.get(
                        'fallback_temperature', inference_settings.FALLBACK_TEMPERATURE
                    ),
                    top_p=top_p,
                ),
            ))

        self.logger.debug(
            f"Cascade tiers: {[t.source.value for t in self.tiers] + [ExtractionSource.HEURISTIC.value]}"
        )

    def _build_client(self, model: Optional[str]) -> Optional[BaseInferenceClient]:
        if not model:
            return None
        client_config = {'model': model}
        for key in ('api_url', 'api_token', 'timeout'):
            if key in self.config:
                client_config[key] = self.config[key]
        return HuggingFaceInferenceClient(client_config)

    async def run(self, text: str) -> CascadeResult:
        """
        Run the cascade and keep the attempt log.

        Args:
            text: Extracted document text

        Returns:
            CascadeResult with the record and the tier that produced it
        """
        attempts: List[ExtractionAttempt] = []

        if text and text.strip():
            prompt = build_extraction_prompt(text)
            for tier in self.tiers:
                attempt = ExtractionAttempt(source=tier.source)
                attempts.append(attempt)
                try:
                    attempt.raw_output = await tier.client.generate(prompt, tier.parameters)
                    self.logger.debug(
                        f"{tier.source.value} raw output sample: {attempt.raw_output[:200]!r}"
                    )
                    record = self.parser.parse(attempt.raw_output)
                except (InferenceError, ParseError) as e:
                    attempt.error = f"{type(e).__name__}: {e}"
                    self.logger.warning(
                        f"{tier.source.value} tier ({tier.client.model_name}) failed: {e}; "
                        f"trying next tier"
                    )
                    continue

                attempt.succeeded = True
                self.logger.info(f"Record extracted by {tier.source.value} ({tier.client.model_name})")
                return CascadeResult(record=record, source=tier.source, attempts=attempts)
        else:
            self.logger.info("Blank input text; skipping model tiers")

        record = self.heuristic.extract(text)
        attempts.append(ExtractionAttempt(source=ExtractionSource.HEURISTIC, succeeded=True))
        self.logger.warning("Using heuristic extraction; record is degraded")
        return CascadeResult(record=record, source=ExtractionSource.HEURISTIC, attempts=attempts)

    async def infer(self, text: str) -> PrescriptionRecord:
        """Record only; never raises for model or parse failures."""
        result = await self.run(text)
        return result.record
