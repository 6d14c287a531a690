# ============================================================================
# FILE: tests/unit/test_response_parser.py
# ============================================================================
"""
Unit tests for recovering records from model output
"""

import pytest

from prescription_ingestion.inference import ResponseParser, parse_response
from prescription_ingestion.normalization import normalize
from prescription_ingestion.utils.exceptions import ParseError


@pytest.fixture
def parser():
    return ResponseParser()


def test_record_embedded_in_prose(parser, model_output, model_record_dict):
    record = parser.parse(model_output)
    assert record == normalize(model_record_dict)


def test_serialized_record_round_trip(parser):
    record = normalize({"patientName": "Jane", "medications": [{"name": "Aspirin", "dosage": "81mg"}]})
    text = f"Sure! {record.to_json(indent=2)} Hope this helps."

    assert parser.parse(text) == record


def test_malformed_json_is_repaired(parser):
    output = "{'patientName': 'Jane Roe', 'diagnosis': ['Flu',], 'age': '30',}"
    record = parser.parse(output)

    assert record.patient_name == "Jane Roe"
    assert record.diagnosis == ("Flu",)
    assert record.age == "30"


def test_partial_object_is_normalized(parser):
    record = parser.parse('{"patientName": "Jane"}')

    assert record.patient_name == "Jane"
    assert record.allergies == ("None specified",)


@pytest.mark.parametrize("output", [
    "",
    "   ",
    "I could not find any prescription information.",
    "[1, 2, 3]",
])
def test_no_json_object(parser, output):
    with pytest.raises(ParseError):
        parser.parse(output)


def test_object_without_record_keys(parser):
    with pytest.raises(ParseError):
        parser.parse('Result: {"answer": "unknown", "confidence": 0.2}')


def test_module_level_parse(model_output):
    assert parse_response(model_output).patient_name == "Jane Smith"


def test_oversized_integer_literal(parser):
    output = '{"patientName": "A", "age": 1' + "0" * 5000 + "}"
    with pytest.raises(ParseError):
        parser.parse(output)


def test_deeply_nested_arrays(parser):
    output = '{"diagnosis": ' + "[" * 100000 + "]" * 100000 + "}"
    with pytest.raises(ParseError):
        parser.parse(output)
