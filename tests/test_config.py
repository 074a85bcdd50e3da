"""Functional tests for configuration precedence and validation.

Tests exercise real load_config() — no mocks.
"""

import json
import pytest
from pydantic import ValidationError

from kin_cli.config import BOOTSTRAP_FILE, load_config, Settings


def test_project_config_overrides_user(tmp_path, monkeypatch):
    """Project .kin-cli/settings.json overrides user settings for the same key."""
    user_settings = tmp_path / "user" / "settings.json"
    user_settings.parent.mkdir(parents=True)
    user_settings.write_text(json.dumps({"theme": "light", "log_level": "info"}))

    project_dir = tmp_path / "project" / ".kin-cli"
    project_dir.mkdir(parents=True)
    (project_dir / "settings.json").write_text(json.dumps({"theme": "dark"}))

    monkeypatch.setattr("kin_cli.config.SETTINGS_FILE", user_settings)
    monkeypatch.chdir(tmp_path / "project")

    settings = load_config()
    assert settings.theme == "dark"
    assert settings.log_level == "INFO"


def test_env_overrides_project_config(tmp_path, monkeypatch):
    """Environment variables override project config."""
    project_dir = tmp_path / ".kin-cli"
    project_dir.mkdir()
    (project_dir / "settings.json").write_text(json.dumps({"bootstrap_path": "/from/project.jsonc"}))

    monkeypatch.setattr("kin_cli.config.SETTINGS_FILE", tmp_path / "nonexistent.json")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("KIN_CLI_BOOTSTRAP_PATH", "/from/env.jsonc")

    settings = load_config()
    assert settings.bootstrap_path == "/from/env.jsonc"


def test_malformed_project_config_skipped(tmp_path, monkeypatch, capsys):
    """Malformed project settings.json is skipped gracefully."""
    project_dir = tmp_path / ".kin-cli"
    project_dir.mkdir()
    (project_dir / "settings.json").write_text("not json{{{")

    monkeypatch.setattr("kin_cli.config.SETTINGS_FILE", tmp_path / "nonexistent.json")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("KIN_CLI_THEME", raising=False)

    settings = load_config()
    assert settings.theme == "light"
    assert "Error loading project config" in capsys.readouterr().out


def test_bootstrap_path_defaults_to_config_dir(monkeypatch):
    monkeypatch.delenv("KIN_CLI_BOOTSTRAP_PATH", raising=False)
    assert Settings().resolved_bootstrap_path() == BOOTSTRAP_FILE


def test_bootstrap_path_expands_home(monkeypatch, tmp_path):
    monkeypatch.delenv("KIN_CLI_BOOTSTRAP_PATH", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    settings = Settings(bootstrap_path="~/identity/instance.jsonc")
    assert settings.resolved_bootstrap_path() == tmp_path / "identity" / "instance.jsonc"


def test_log_level_validation():
    """Level names are normalized; unknown names raise ValidationError."""
    assert Settings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError, match="log_level must be a logging level name"):
        Settings(log_level="chatty")


def test_theme_validation():
    with pytest.raises(ValidationError):
        Settings(theme="neon")


def test_settings_files_may_carry_comments(tmp_path, monkeypatch):
    user_settings = tmp_path / "settings.json"
    user_settings.write_text('{\n  // dark terminal\n  "theme": "dark"\n}\n')
    monkeypatch.setattr("kin_cli.config.SETTINGS_FILE", user_settings)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("KIN_CLI_THEME", raising=False)

    assert load_config().theme == "dark"
