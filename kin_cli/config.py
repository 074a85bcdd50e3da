import os
import logging
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from kin_cli._jsonc import read_document

APP_NAME = "kin-cli"

# XDG Paths - Explicit XDG resolution so ~/.config/ is used even on macOS
# (platformdirs would resolve to ~/Library/Application Support/ on macOS)
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / APP_NAME
DATA_DIR = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share")) / APP_NAME
SETTINGS_FILE = CONFIG_DIR / "settings.json"

# Bootstrap pointer document naming where the full identity documents live
BOOTSTRAP_FILE = CONFIG_DIR / "instance.jsonc"


class Settings(BaseModel):
    # Identity resolution
    # None = BOOTSTRAP_FILE
    bootstrap_path: Optional[str] = Field(default=None)

    # Behavior
    theme: Literal["dark", "light"] = Field(default="light")
    log_level: str = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got: {v}")
        return level

    @model_validator(mode='before')
    @classmethod
    def fill_from_env(cls, data: dict) -> dict:
        """Env vars override all file-based values (highest precedence layer)."""
        env_map = {
            "bootstrap_path": "KIN_CLI_BOOTSTRAP_PATH",
            "theme": "KIN_CLI_THEME",
            "log_level": "KIN_CLI_LOG_LEVEL",
        }

        for field, env_var in env_map.items():
            val = os.getenv(env_var)
            if val:
                data[field] = val
        return data

    def resolved_bootstrap_path(self) -> Path:
        """Bootstrap document location, with ``~`` expanded."""
        if self.bootstrap_path:
            return Path(self.bootstrap_path).expanduser()
        return BOOTSTRAP_FILE


def find_project_config() -> Path | None:
    """Return .kin-cli/settings.json in cwd if it exists, else None."""
    candidate = Path.cwd() / ".kin-cli" / "settings.json"
    return candidate if candidate.is_file() else None


def _read_layer(path: Path, label: str) -> dict:
    """One settings layer as a dict; comments allowed, like identity documents."""
    read = read_document(path)
    if not read.found:
        return {}
    if not read.parseable or not isinstance(read.document, dict):
        print(f"Error loading {label} {path}: not a JSON object. Skipping.")
        return {}
    return read.document


def load_config() -> Settings:
    # Layers: user settings, then project settings (shallow merge), then env vars
    data = _read_layer(SETTINGS_FILE, "settings")
    project_config = find_project_config()
    if project_config is not None:
        data |= _read_layer(project_config, "project config")
    return Settings.model_validate(data)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Load settings on first call and reuse them afterwards."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def __getattr__(name: str):
    # ``from kin_cli.config import settings`` loads lazily
    if name == "settings":
        return get_settings()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
