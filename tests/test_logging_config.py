"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from customer_api.app.core.logging_config import _HANDLER_TAG, normalize_level, setup_logging


def _ours(root: logging.Logger) -> list:
    return [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]


@pytest.fixture
def clean_root():
    # Only touch handlers installed by setup_logging; pytest keeps its own.
    root = logging.getLogger()
    saved, saved_level = _ours(root), root.level
    for handler in saved:
        root.removeHandler(handler)
    yield root
    for handler in _ours(root):
        root.removeHandler(handler)
        handler.close()
    for handler in saved:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_is_idempotent(clean_root: logging.Logger) -> None:
    setup_logging("DEBUG")
    setup_logging("WARNING")

    assert len(_ours(clean_root)) == 1
    assert clean_root.level == logging.WARNING


def test_setup_logging_writes_to_file(clean_root: logging.Logger, tmp_path) -> None:
    logfile = tmp_path / "api.log"

    setup_logging("info", str(logfile))
    logging.getLogger("customer_api.test").info("hello")
    for handler in _ours(clean_root):
        handler.flush()

    assert "[INFO] customer_api.test: hello" in logfile.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(clean_root: logging.Logger) -> None:
    setup_logging("chatty")

    assert clean_root.level == logging.INFO


@pytest.mark.parametrize(
    "level, expected",
    [("debug", "DEBUG"), (" Warning ", "WARNING"), ("chatty", "INFO"), ("BASIC_FORMAT", "INFO"), ("", "INFO"), (None, "INFO")],
)
def test_normalize_level(level, expected: str) -> None:
    assert normalize_level(level) == expected


def test_normalized_level_is_accepted_by_uvicorn() -> None:
    from uvicorn.config import LOG_LEVELS

    assert normalize_level("chatty").lower() in LOG_LEVELS
    assert normalize_level("error").lower() in LOG_LEVELS
