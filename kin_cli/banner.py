"""Session-start banner built from the identity's display preferences."""

from rich.align import Align
from rich.panel import Panel
from rich.text import Text

from kin_cli.display import console
from kin_cli.identity import ResolvedIdentity


def render_banner(identity: ResolvedIdentity) -> Panel:
    """Title in the border; tagline, then the quoted footer verse and its reference."""
    display = identity.display
    body = Text(justify="center")
    body.append(display.banner_tagline or identity.tagline, style="accent")
    if display.footer_verse_text:
        body.append(f'\n\n"{display.footer_verse_text}"', style="verse")
        if display.footer_verse_ref:
            body.append(f"\n- {display.footer_verse_ref}", style="hint")

    title = display.banner_title or identity.name
    return Panel(Align.center(body), title=title, border_style="accent", expand=True)


def display_welcome_banner(identity: ResolvedIdentity) -> None:
    console.print(render_banner(identity))
