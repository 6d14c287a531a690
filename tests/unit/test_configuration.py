# ============================================================================
# FILE: tests/unit/test_configuration.py
# ============================================================================
"""
Unit tests for settings and logging setup
"""

import json
import logging

import pytest
from pydantic import ValidationError

from prescription_ingestion.config import (
    ExtractionSettings,
    InferenceSettings,
    LoggingSettings,
    inference_settings,
)
from prescription_ingestion.utils import JsonFormatter, log_performance, setup_logging


def test_inference_defaults():
    settings = InferenceSettings(_env_file=None)

    assert settings.HF_API_URL == "https://api-inference.huggingface.co/models"
    assert settings.PRIMARY_MODEL == "ibm-granite/granite-3.1-3b-a800m-instruct"
    assert settings.FALLBACK_MODEL == "microsoft/DialoGPT-medium"
    assert settings.PRIMARY_MAX_NEW_TOKENS == 2048
    assert settings.PRIMARY_TEMPERATURE == 0.1
    assert settings.FALLBACK_MAX_NEW_TOKENS == 1024
    assert settings.FALLBACK_TEMPERATURE == 0.7
    assert settings.TOP_P == 0.9


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PRIMARY_MODEL", "org/other-model")
    monkeypatch.setenv("INFERENCE_TIMEOUT", "15")

    settings = InferenceSettings(_env_file=None)

    assert settings.PRIMARY_MODEL == "org/other-model"
    assert settings.INFERENCE_TIMEOUT == 15


def test_settings_validation():
    with pytest.raises(ValidationError):
        InferenceSettings(_env_file=None, TOP_P=1.5)
    with pytest.raises(ValidationError):
        ExtractionSettings(_env_file=None, PDF_MAX_PAGES=0)


def test_extraction_and_logging_defaults():
    assert ExtractionSettings(_env_file=None).OCR_LANGUAGE == "eng"
    assert LoggingSettings(_env_file=None).LOG_LEVEL == "INFO"


def test_singleton_is_loaded():
    assert isinstance(inference_settings, InferenceSettings)


def test_json_formatter():
    record = logging.LogRecord("prescription_ingestion.test", logging.WARNING, __file__, 1,
                               "tier %s failed", ("primary",), None)
    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["message"] == "tier primary failed"
    assert data["logger"] == "prescription_ingestion.test"


def test_setup_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "engine.log"
    try:
        setup_logging(level="DEBUG", log_file=log_file, format_json=True)
        logging.getLogger("prescription_ingestion.test").debug("hello")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert json.loads(log_file.read_text().splitlines()[0])["message"] == "hello"


def test_log_performance_sync_and_async(caplog):
    logger = logging.getLogger("prescription_ingestion.perf")

    @log_performance(logger, "sync op")
    def sync_op(x):
        return x * 2

    with caplog.at_level(logging.INFO):
        assert sync_op(2) == 4
    assert any("sync op completed" in r.message for r in caplog.records)


@pytest.mark.asyncio
async def test_log_performance_async_failure(caplog):
    logger = logging.getLogger("prescription_ingestion.perf")

    @log_performance(logger, "async op")
    async def failing():
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(RuntimeError):
            await failing()
    assert any("async op failed" in r.message for r in caplog.records)
