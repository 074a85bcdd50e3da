"""One-line identity segment for shell prompts and editor status bars."""

from datetime import datetime

from kin_cli.identity import ResolvedIdentity

SEPARATOR = " | "


def build_statusline(identity: ResolvedIdentity, now: datetime | None = None) -> str:
    """Plain-text statusline: ``✨ Kin | with Operator | 🕐 Mon Jan 02 15:04:05``.

    Empty fields drop out rather than leaving stray separators.
    """
    parts: list[str] = []

    name = " ".join(p for p in (identity.emoji, identity.name) if p)
    if name:
        parts.append(name)

    partner = identity.user.display_name or identity.user.name
    if partner:
        parts.append(f"with {partner}")

    now = now or datetime.now()
    parts.append(f"🕐 {now.strftime('%a %b %d %H:%M:%S')}")

    return SEPARATOR.join(parts)
