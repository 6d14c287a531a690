# ============================================================================
# src/prescription_ingestion/inference/base.py
# ============================================================================
"""
Base Inference Client Interface

Defines the abstract interface every text-generation backend implements.
The cascade only depends on this interface, so tests can substitute a
scripted client for the hosted service.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GenerationParameters:
    """Sampling parameters sent with a generation request."""
    max_new_tokens: int
    temperature: float
    top_p: float = 0.9
    do_sample: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class BaseInferenceClient(ABC):
    """
    Abstract base class for inference clients.

    All backends must implement:
    - model_name: identifier of the model being called
    - generate(): async text generation that returns the generated text
      or raises InferenceError
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

        self._inference_count = 0
        self._failure_count = 0
        self._total_inference_time = 0.0

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier."""
        pass

    @abstractmethod
    async def generate(self, prompt: str, parameters: GenerationParameters) -> str:
        """
        Generate a completion for a prompt.

        Args:
            prompt: Input text prompt
            parameters: Sampling parameters for this request

        Returns:
            Generated text (prompt echo removed)

        Raises:
            InferenceError: non-2xx status, malformed body, transport
                error or timeout
        """
        pass

    def get_statistics(self) -> Dict[str, Any]:
        """Return inference statistics."""
        avg_time = (
            self._total_inference_time / self._inference_count
            if self._inference_count > 0 else 0.0
        )
        return {
            "model": self.model_name,
            "inference_count": self._inference_count,
            "failure_count": self._failure_count,
            "total_inference_time": self._total_inference_time,
            "avg_inference_time": avg_time,
        }
