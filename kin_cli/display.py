"""Themed terminal output for identity commands, plus stderr logging."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.theme import Theme

from kin_cli.config import settings
from kin_cli.identity import DegradationLevel

# -- Theme palettes (keyed by theme name) ------------------------------------

_THEMES: dict[str, dict[str, str]] = {
    "dark":  {"info": "cyan", "accent": "bold cyan", "degraded": "orange3", "error": "bold red", "hint": "dim", "path": "green", "verse": "italic cyan"},
    "light": {"info": "blue", "accent": "bold blue", "degraded": "dark_orange", "error": "bold red", "hint": "dim", "path": "green", "verse": "italic blue"},
}

console = Console(theme=Theme(_THEMES.get(settings.theme, _THEMES["light"])))

# -- Indicators ------------------------------------------------------------

DEGRADED = "▸"
ERROR    = "✖"
RESOLVED = "◈"


def set_theme(name: str) -> None:
    """Swap the palette for the rest of the process (``--theme``)."""
    console.push_theme(Theme(_THEMES.get(name, _THEMES["light"])))


def setup_logging(level: str) -> None:
    """Route ``kin_cli`` log records to stderr through Rich (idempotent)."""
    logger = logging.getLogger("kin_cli")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(
            console=Console(stderr=True), show_path=False, show_time=False,
        ))


def display_resolution(level: DegradationLevel) -> None:
    """One line naming the degradation level the resolver reached."""
    if level is DegradationLevel.FULL:
        console.print(f"[info]{RESOLVED} Identity fully resolved[/info]")
    else:
        console.print(f"[degraded]{DEGRADED} Identity degraded: {level.value}[/degraded]")


def display_error(message: str, hint: str | None = None) -> None:
    body = f"[error]{ERROR} {message}[/error]"
    if hint:
        body += f"\n[hint]{hint}[/hint]"
    console.print(Panel(body, border_style="error", title="Error", title_align="left"))
