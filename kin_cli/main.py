import json

import typer

from kin_cli.banner import display_welcome_banner
from kin_cli.config import settings
from kin_cli.deps import KinDeps
from kin_cli.display import console, display_error, display_resolution, set_theme, setup_logging
from kin_cli.identity import SystemPaths
from kin_cli.resolver import IdentityResolver
from kin_cli.status import get_status, render_status_table
from kin_cli.statusline import build_statusline

app = typer.Typer(
    help="Kin - Personal assistant identity resolution",
    context_settings={"help_option_names": ["--help", "-h"]},
    no_args_is_help=True,
)


def create_deps(bootstrap: str | None = None, theme: str | None = None) -> KinDeps:
    """Create deps from settings; CLI flags win over settings."""
    bootstrap_path = bootstrap or settings.resolved_bootstrap_path()
    return KinDeps(
        resolver=IdentityResolver(bootstrap_path),
        theme=theme or settings.theme,
    )


def _deps(ctx: typer.Context) -> KinDeps:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    bootstrap: str = typer.Option(None, "--bootstrap", "-b", help="Path to the bootstrap instance.jsonc"),
    theme: str = typer.Option(None, "--theme", "-t", help="Color theme: dark or light"),
):
    """Resolve and inspect the assistant's identity."""
    setup_logging(settings.log_level)
    if theme:
        set_theme(theme)
    ctx.obj = create_deps(bootstrap, theme)


@app.command()
def show(
    ctx: typer.Context,
    full: bool = typer.Option(False, "--full", "-f", help="Include the raw instance and user documents"),
):
    """Print the resolved identity as JSON."""
    resolver = _deps(ctx).resolver
    payload = resolver.get_resolved().model_dump(mode="json")
    if full:
        instance, user = resolver.full_instance, resolver.full_user
        payload = {
            "resolved": payload,
            "instance": instance.model_dump(mode="json") if instance else None,
            "user": user.model_dump(mode="json") if user else None,
        }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def banner(ctx: typer.Context):
    """Show the session-start banner."""
    display_welcome_banner(_deps(ctx).resolver.get_resolved())


@app.command()
def status(ctx: typer.Context):
    """Show which identity documents loaded and which fell back to defaults."""
    resolver = _deps(ctx).resolver
    console.print(render_status_table(get_status(resolver)))
    display_resolution(resolver.diagnostics.level)


@app.command()
def statusline(ctx: typer.Context):
    """Print a one-line identity segment for shell prompts."""
    typer.echo(build_statusline(_deps(ctx).resolver.get_resolved()))


@app.command()
def where(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="System path key, e.g. session_data"),
):
    """Print one path from the resolved system path table."""
    paths = _deps(ctx).resolver.get_resolved().system_paths
    if key not in SystemPaths.model_fields:
        display_error(
            f"Unknown system path: {key}",
            hint="Valid keys: " + ", ".join(SystemPaths.model_fields),
        )
        raise typer.Exit(code=1)
    typer.echo(getattr(paths, key))


if __name__ == "__main__":
    app()
