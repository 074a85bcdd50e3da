"""Identity resolution health and status table rendering."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from rich.table import Table

from kin_cli.resolver import IdentityResolver, TierOutcome


_PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@dataclass
class StatusInfo:
    version: str
    bootstrap_path: str
    level: str  # DegradationLevel.value
    instance_name: str
    user_name: str
    tiers: list[TierOutcome]


def _version() -> str:
    try:
        return tomllib.loads(_PYPROJECT.read_text())["project"]["version"]
    except (OSError, tomllib.TOMLDecodeError, KeyError):
        return "unknown"


def get_status(resolver: IdentityResolver) -> StatusInfo:
    """Gather resolution status into a plain dataclass (no display side-effects)."""
    identity = resolver.get_resolved()
    diagnostics = resolver.diagnostics
    return StatusInfo(
        version=_version(),
        bootstrap_path=str(resolver.bootstrap_path),
        level=diagnostics.level.value,
        instance_name=identity.name,
        user_name=identity.user.display_name or identity.user.name,
        tiers=list(diagnostics.tiers),
    )


def render_status_table(info: StatusInfo) -> Table:
    """Build a Rich Table from StatusInfo using semantic styles."""
    table = Table(title=f"Kin Identity Status (v{info.version}, level: {info.level})")
    table.add_column("Tier", style="accent")
    table.add_column("Status", style="info")
    table.add_column("Details", style="path")

    attempted = {t.tier: t for t in info.tiers}
    for tier in ("bootstrap", "instance", "user"):
        outcome = attempted.get(tier)
        if outcome is None:
            table.add_row(tier.title(), "Skipped", "—")
        elif outcome.ok:
            table.add_row(tier.title(), "Loaded", outcome.path)
        else:
            reason = outcome.error.value.replace("_", " ") if outcome.error else "failed"
            table.add_row(tier.title(), f"Defaulted ({reason})", outcome.path or "—")

    table.add_row("Instance", "Active", info.instance_name)
    table.add_row("User", "Active", info.user_name)
    return table
