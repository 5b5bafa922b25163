from __future__ import annotations

import logging
from pathlib import Path

import config


def test_defaults(monkeypatch) -> None:
    for key in ("LOG_LEVEL", "LOG_FILE", "SEED_SAMPLE_DATA"):
        monkeypatch.delenv(key, raising=False)
    assert config.log_level() == logging.INFO
    assert config.log_file() is None
    assert config.seed_sample_data() is True


def test_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "catalog.log"))
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    assert config.log_level() == logging.DEBUG
    assert config.log_file() == Path(tmp_path / "catalog.log")
    assert config.seed_sample_data() is False


def test_unknown_level_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert config.log_level() == logging.INFO
