import logging
import pathlib

import pytest

from tick_index.config import (
    SNAPSHOT_DIR,
    Settings,
    apply_log_level,
    load_config_from_file,
    save_config_to_file,
)
from tick_index.logging import logger


def test_default_settings():
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.snapshot_dir == SNAPSHOT_DIR


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path):
    monkeypatch.setenv("TICK_INDEX_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("TICK_INDEX_SNAPSHOT_DIR", str(tmp_path))

    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.snapshot_dir == tmp_path


def test_save_and_load_config(tmp_path: pathlib.Path):
    config_path = tmp_path / "nested" / "config.toml"
    settings = Settings(log_level="DEBUG", snapshot_dir=tmp_path / "snapshots")

    save_config_to_file(settings, config_path)
    assert config_path.exists()
    assert f'snapshot_dir = "{(tmp_path / "snapshots").absolute()}"' in config_path.read_text()

    loaded = load_config_from_file(config_path)
    assert loaded.log_level == "DEBUG"
    assert loaded.snapshot_dir == tmp_path / "snapshots"


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValueError, match="log_level"):
        Settings(log_level="LOUD")


def test_apply_log_level():
    original_level = logger.level
    try:
        apply_log_level(Settings(log_level="ERROR"))
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(original_level)
