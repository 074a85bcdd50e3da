"""End-to-end CLI tests through typer's CliRunner."""

import json

from typer.testing import CliRunner

from kin_cli.main import app, create_deps
from kin_cli.resolver import DEFAULT_IDENTITY

runner = CliRunner()


def test_show_prints_resolved_identity(identity_docs):
    result = runner.invoke(app, ["--bootstrap", str(identity_docs["bootstrap"]), "show"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["name"] == "Nova"
    assert payload["user"]["role"] == "Founder"
    assert payload["user"]["passions"] == ["gaming", "teaching"]
    assert payload["system_paths"]["user_config"] == str(identity_docs["user"])


def test_show_full_includes_raw_documents(identity_docs):
    result = runner.invoke(app, ["-b", str(identity_docs["bootstrap"]), "show", "--full"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["resolved"]["name"] == "Nova"
    assert payload["instance"]["thinking"]["problem_solving"] == "Root cause first"
    assert payload["user"]["faith"]["denomination"] == "Baptist"
    assert payload["instance"]["biblical_foundation"]["principle"] == "Excellence as worship"
    assert payload["instance"]["resonates"]["music"]["genres"] == ["lofi", "jazz"]
    assert payload["user"]["demographics"]["languages"] == ["English", "Spanish"]
    assert payload["user"]["contact"]["social"]["other"] == {"mastodon": "@sam@hachyderm.io"}
    assert payload["user"]["metadata"]["last_updated"] == "2026-01-02"


def test_show_never_fails_without_documents(tmp_path):
    result = runner.invoke(app, ["-b", str(tmp_path / "absent.jsonc"), "show"])

    assert result.exit_code == 0
    assert f'"name": "{DEFAULT_IDENTITY.name}"' in result.output


def test_status_reports_degradation(identity_docs):
    identity_docs["user"].unlink()

    result = runner.invoke(app, ["-b", str(identity_docs["bootstrap"]), "status"])

    assert result.exit_code == 0
    assert "Identity degraded: user_defaulted" in result.output


def test_status_full(identity_docs):
    result = runner.invoke(app, ["-b", str(identity_docs["bootstrap"]), "status"])

    assert result.exit_code == 0
    assert "Identity fully resolved" in result.output


def test_banner(identity_docs):
    result = runner.invoke(app, ["-b", str(identity_docs["bootstrap"]), "banner"])

    assert result.exit_code == 0
    assert "Nova - Assistant" in result.output


def test_statusline(identity_docs):
    result = runner.invoke(app, ["-b", str(identity_docs["bootstrap"]), "statusline"])

    assert result.exit_code == 0
    assert result.output.startswith("Nova | with Sam | ")


def test_where_prints_system_path(identity_docs):
    result = runner.invoke(app, ["-b", str(identity_docs["bootstrap"]), "where", "session_data"])

    assert result.exit_code == 0
    assert result.output.strip() == str(identity_docs["root"] / "data" / "session")


def test_where_unknown_key_exits_nonzero(identity_docs):
    result = runner.invoke(app, ["-b", str(identity_docs["bootstrap"]), "where", "nope"])

    assert result.exit_code == 1
    assert "Unknown system path: nope" in result.output


def test_create_deps_uses_settings_bootstrap(monkeypatch, tmp_path):
    monkeypatch.setattr("kin_cli.main.settings.bootstrap_path", str(tmp_path / "boot.jsonc"))

    deps = create_deps()

    assert deps.resolver.bootstrap_path == tmp_path / "boot.jsonc"
    assert deps.resolver.is_resolved is False
