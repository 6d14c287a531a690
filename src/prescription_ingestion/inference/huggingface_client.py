# ============================================================================
# src/prescription_ingestion/inference/huggingface_client.py
# ============================================================================
"""
Hosted Inference Client (Hugging Face Inference API)

Calls a text-generation endpoint over HTTP:

    POST {api_url}/{model_id}
    Authorization: Bearer <token>
    {"inputs": "...", "parameters": {"max_new_tokens": ..., ...}}

A successful response is a JSON list of {"generated_text": "..."} objects.
Many hosted models echo the prompt at the start of generated_text; the
echo is stripped so the parser only sees the completion.

A fresh aiohttp session is opened per request, so an abandoned (cancelled)
request leaves no open connection behind.
"""

import asyncio
from datetime import datetime
from typing import Any, Dict, Optional

import aiohttp

from ..config import inference_settings
from ..utils.exceptions import ConfigurationError, InferenceError
from .base import BaseInferenceClient, GenerationParameters


class HuggingFaceInferenceClient(BaseInferenceClient):
    """
    Text-generation client for one hosted model.

    Config options:
        model: Model id appended to the API URL (required)
        api_url: Base URL (default: inference_settings.HF_API_URL)
        api_token: Bearer token (default: inference_settings.HF_API_TOKEN)
        timeout: Total request timeout in seconds
            (default: inference_settings.INFERENCE_TIMEOUT)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)

        self._model_name = self.config.get('model', '')
        if not self._model_name:
            raise ConfigurationError("HuggingFaceInferenceClient requires a 'model' id")

        self.api_url = self.config.get('api_url', inference_settings.HF_API_URL).rstrip('/')
        self.api_token = self.config.get('api_token', inference_settings.HF_API_TOKEN)
        self.timeout = self.config.get('timeout', inference_settings.INFERENCE_TIMEOUT)

        self.logger.debug(f"Initialized inference client: {self.endpoint}")

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/{self._model_name}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    async def generate(self, prompt: str, parameters: GenerationParameters) -> str:
        start_time = datetime.now()
        payload = {
            "inputs": prompt,
            "parameters": parameters.to_dict(),
        }

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.endpoint, json=payload, headers=self._headers()) as response:
                    if not 200 <= response.status < 300:
                        error_text = await response.text(errors="replace")
                        raise InferenceError(
                            f"{self._model_name} returned status {response.status}: {error_text[:200]}",
                            status=response.status,
                        )
                    try:
                        data = await response.json(content_type=None)
                    except ValueError as e:
                        raise InferenceError(
                            f"{self._model_name} returned a non-JSON body",
                            status=response.status,
                        ) from e
        except asyncio.TimeoutError as e:
            self._failure_count += 1
            raise InferenceError(
                f"{self._model_name} request timed out after {self.timeout}s"
            ) from e
        except aiohttp.ClientError as e:
            self._failure_count += 1
            raise InferenceError(f"{self._model_name} request failed: {e}") from e
        except InferenceError:
            self._failure_count += 1
            raise

        generated_text = self._generated_text(data, response.status)
        completion = self.strip_prompt_echo(generated_text, prompt)

        inference_time = (datetime.now() - start_time).total_seconds()
        self._inference_count += 1
        self._total_inference_time += inference_time

        self.logger.info(
            f"{self._model_name} generated {len(completion)} chars in {inference_time:.2f}s"
        )
        return completion

    def _generated_text(self, data: Any, status: int) -> str:
        """Pull generated_text out of the response body."""
        first = data[0] if isinstance(data, list) and data else data
        text = first.get('generated_text') if isinstance(first, dict) else None
        if not isinstance(text, str):
            self._failure_count += 1
            raise InferenceError(
                f"{self._model_name} response has no generated_text",
                status=status,
            )
        return text

    @staticmethod
    def strip_prompt_echo(generated_text: str, prompt: str) -> str:
        """Remove the prompt when the model echoes it back."""
        if prompt and generated_text.startswith(prompt):
            return generated_text[len(prompt):].lstrip()
        return generated_text
