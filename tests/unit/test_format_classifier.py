# ============================================================================
# FILE: tests/unit/test_format_classifier.py
# ============================================================================
"""
Unit tests for upload format classification
"""

import pytest

from prescription_ingestion.classifiers import FormatClassifier, classify
from prescription_ingestion.constants import DOCX_MIME_TYPE, FormatKind
from prescription_ingestion.utils.exceptions import UnsupportedFormatError


@pytest.fixture
def classifier():
    return FormatClassifier()


# ============================================================================
# MIME TYPE
# ============================================================================

@pytest.mark.parametrize("mime_type, expected", [
    ("text/plain", FormatKind.PLAIN_TEXT),
    ("application/pdf", FormatKind.PDF),
    (DOCX_MIME_TYPE, FormatKind.DOCX),
    ("image/png", FormatKind.IMAGE),
    ("image/jpeg", FormatKind.IMAGE),
    ("image/tiff", FormatKind.IMAGE),
])
def test_classify_by_mime_type(classifier, mime_type, expected):
    assert classifier.classify(mime_type, "") == expected


def test_mime_parameters_and_case_ignored(classifier):
    assert classifier.classify("Text/Plain; charset=UTF-8", "") == FormatKind.PLAIN_TEXT
    assert classifier.classify("APPLICATION/PDF", "") == FormatKind.PDF


@pytest.mark.parametrize("mime_type, file_name, expected", [
    ("text/plain", "notes.txt", FormatKind.PLAIN_TEXT),
    ("application/pdf", "rx.pdf", FormatKind.PDF),
    (DOCX_MIME_TYPE, "rx.docx", FormatKind.DOCX),
    ("image/png", "scan.png", FormatKind.IMAGE),
])
def test_mime_and_extension_agree(classifier, mime_type, file_name, expected):
    assert classifier.classify(mime_type, file_name) == expected
    assert classifier.classify("", file_name) == expected


def test_mime_wins_over_extension(classifier):
    assert classifier.classify("application/pdf", "scan.png") == FormatKind.PDF
    assert classifier.classify("image/jpeg", "notes.txt") == FormatKind.IMAGE


# ============================================================================
# EXTENSION FALLBACK
# ============================================================================

@pytest.mark.parametrize("mime_type", ["", "application/octet-stream", "application/x-unknown-thing"])
def test_extension_used_for_generic_or_unknown_mime(classifier, mime_type):
    assert classifier.classify(mime_type, "prescription.PDF") == FormatKind.PDF
    assert classifier.classify(mime_type, "photo.JPEG") == FormatKind.IMAGE
    assert classifier.classify(mime_type, "report.docx") == FormatKind.DOCX


def test_none_inputs_are_tolerated(classifier):
    assert classifier.classify(None, "a.bmp") == FormatKind.IMAGE
    assert classifier.classify(None, None) == FormatKind.UNSUPPORTED


@pytest.mark.parametrize("mime_type, file_name", [
    ("", ""),
    ("application/zip", "archive.zip"),
    ("application/msword", "legacy.doc"),
    ("", "noextension"),
    ("", "spreadsheet.xlsx"),
])
def test_unsupported(classifier, mime_type, file_name):
    assert classifier.classify(mime_type, file_name) == FormatKind.UNSUPPORTED


def test_module_level_classify():
    assert classify("", "rx.txt") == FormatKind.PLAIN_TEXT


# ============================================================================
# REQUIRE SUPPORTED
# ============================================================================

def test_require_supported_returns_kind(classifier):
    assert classifier.require_supported("application/pdf", "rx.pdf") == FormatKind.PDF


def test_require_supported_raises_with_mime(classifier):
    with pytest.raises(UnsupportedFormatError) as exc_info:
        classifier.require_supported("application/zip", "archive.zip")
    assert exc_info.value.format == "application/zip"


def test_require_supported_raises_with_extension(classifier):
    with pytest.raises(UnsupportedFormatError) as exc_info:
        classifier.require_supported("", "legacy.doc")
    assert exc_info.value.format == ".doc"


def test_require_supported_raises_unknown(classifier):
    with pytest.raises(UnsupportedFormatError) as exc_info:
        classifier.require_supported("", "")
    assert exc_info.value.format == "unknown"


def test_private_signals_return_none_when_silent(classifier):
    assert classifier._classify_by_mime("application/octet-stream") is None
    assert classifier._classify_by_mime("application/x-custom") is None
    assert classifier._classify_by_extension("README") is None
    assert classifier._classify_by_extension("scan.TIFF") == FormatKind.IMAGE
