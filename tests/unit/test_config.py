from __future__ import annotations

from core.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("OVERLAY_LOG_DIR", raising=False)
    monkeypatch.delenv("OVERLAY_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.log_dir is None
    assert not settings.file_logging


def test_settings_read_prefixed_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("OVERLAY_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("overlay_log_dir", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.log_dir == str(tmp_path)
    assert settings.file_logging
