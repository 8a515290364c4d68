"""Tests for the logging helpers."""

import logging
from unittest.mock import patch

from deals.logger import LOG_FORMAT, get_logger, log_error, logger, setup_logger


def test_get_logger_is_namespaced():
    assert get_logger("services.deal_registry").name == "deals.services.deal_registry"


def test_deals_logger_has_single_handler():
    assert logger.name == "deals"
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_log_error_includes_context():
    error = ValueError("boom")

    with patch.object(logger, "error") as mock_error:
        log_error(error, {"path": "/api/v1/deals"})

    args, kwargs = mock_error.call_args
    assert args == ("Error occurred",)
    assert kwargs["extra"] == {
        "error_type": "ValueError",
        "error_message": "boom",
        "path": "/api/v1/deals",
    }
    assert kwargs["exc_info"] is error


def test_setup_logger_is_idempotent():
    assert setup_logger() is logger
    assert setup_logger() is logger

    assert len(logger.handlers) == 1
    assert logger.propagate is False
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
