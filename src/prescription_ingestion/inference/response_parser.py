# ============================================================================
# src/prescription_ingestion/inference/response_parser.py
# ============================================================================
"""
Response Parser

Recovers a PrescriptionRecord from free-form model output.

Models often wrap the JSON in prose ("Here is the analysis: {...}") or
emit slightly malformed JSON (single quotes, trailing commas). The parser:

1. Locates the outermost {...} span (first '{' to last '}')
2. Decodes it with json
3. On decode failure, retries the same span with json_repair
4. Requires a JSON object with at least one record key
5. Normalizes the object into a complete record
"""

import json
import logging
import re
from typing import Any, Dict

from json_repair import repair_json

from ..models.prescription import PrescriptionRecord
from ..normalization.normalizer import has_schema_keys, normalize
from ..utils.exceptions import ParseError

JSON_SPAN = re.compile(r"\{.*\}", re.DOTALL)


class ResponseParser:

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def parse(self, model_output: str) -> PrescriptionRecord:
        """
        Parse model output into a normalized record.

        Raises:
            ParseError: no JSON object with record keys is recoverable
        """
        data = self.extract_json(model_output)

        if not has_schema_keys(data):
            raise ParseError("JSON object contains none of the prescription record keys")

        return normalize(data)

    def extract_json(self, model_output: str) -> Dict[str, Any]:
        """Decode the outermost JSON object embedded in model output."""
        if not model_output or not model_output.strip():
            raise ParseError("Empty model output")

        match = JSON_SPAN.search(model_output)
        if match is None:
            raise ParseError("No JSON object found in model output")

        span = match.group(0)
        try:
            data = json.loads(span)
        except json.JSONDecodeError as e:
            self.logger.debug(f"json decode failed ({e}), trying json_repair")
            try:
                data = repair_json(span, return_objects=True)
            except Exception as repair_error:
                raise ParseError(f"Unrecoverable JSON in model output: {repair_error}") from repair_error
        except (ValueError, RecursionError) as e:
            # Oversized integer literals and runaway nesting
            raise ParseError(f"Undecodable JSON in model output: {type(e).__name__}") from e

        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

        return data


def parse_response(model_output: str) -> PrescriptionRecord:
    return ResponseParser().parse(model_output)
