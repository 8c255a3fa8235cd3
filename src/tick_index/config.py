import tomllib
from pathlib import Path
from typing import Annotated, Literal

import tomlkit
from pydantic import PlainSerializer
from pydantic_settings import BaseSettings, SettingsConfigDict

from tick_index.logging import logger

CONFIG_DIR = Path.home() / ".config" / "tick_index"
CONFIG_FILE = CONFIG_DIR / "config.toml"
SNAPSHOT_DIR = CONFIG_DIR / "snapshots"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TICK_INDEX_")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Serialize the path as a string representation of the absolute path
    snapshot_dir: Annotated[
        Path,
        PlainSerializer(lambda path: str(path.expanduser().absolute()), return_type=str),
    ] = SNAPSHOT_DIR


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")


def apply_log_level(config: Settings) -> None:
    logger.setLevel(config.log_level)


settings = load_config_from_file(CONFIG_FILE) if CONFIG_FILE.exists() else Settings()
apply_log_level(settings)
