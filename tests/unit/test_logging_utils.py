from __future__ import annotations

import logging
import logging.handlers

import pytest

from core import config
from utils import logging_utils


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    overlay = logging.getLogger("overlay")
    handlers, level, overlay_level = list(root.handlers), root.level, overlay.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    overlay.setLevel(overlay_level)


def test_setup_logging_console_only_by_default(restore_logging, monkeypatch) -> None:
    monkeypatch.setattr(config.settings, "log_dir", None)
    monkeypatch.setattr(config.settings, "log_level", "warning")
    monkeypatch.setattr(config.settings, "debug", False)

    logging_utils.setup_logging()

    assert len(restore_logging.handlers) == 1
    assert isinstance(restore_logging.handlers[0], logging.StreamHandler)
    assert restore_logging.level == logging.WARNING
    assert logging.getLogger("overlay").level == logging.WARNING


def test_setup_logging_writes_rotating_files(restore_logging, monkeypatch, tmp_path) -> None:
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(config.settings, "log_dir", str(log_dir))
    monkeypatch.setattr(config.settings, "log_level", "INFO")
    monkeypatch.setattr(config.settings, "debug", True)

    logging_utils.setup_logging()
    logging_utils.get_logger("overlay.services.test").error("zone lost")

    handler_types = [type(handler) for handler in restore_logging.handlers]
    assert logging.handlers.TimedRotatingFileHandler in handler_types
    assert logging.handlers.RotatingFileHandler in handler_types
    assert logging.getLogger("overlay").level == logging.DEBUG

    for handler in restore_logging.handlers:
        handler.flush()
    assert "zone lost" in (log_dir / "overlay.log").read_text(encoding="utf-8")
    assert "zone lost" in (log_dir / "overlay_errors.log").read_text(encoding="utf-8")


def test_get_logger_returns_named_logger() -> None:
    assert logging_utils.get_logger("overlay.services.projector").name == (
        "overlay.services.projector"
    )
