"""Theme commands.

Theme names are stored in the [theme] table of shadcn-ui.toml; colors are
computed by the theme crate in the consuming project.
"""

import click

from shadcn_ui.cli.error_boundary import cli_error_boundary
from shadcn_ui.cli.output import machine_output, user_output
from shadcn_ui.core.context import AppContext
from shadcn_ui.core.errors import ComponentIOError
from shadcn_ui.io.manifest import CONFIG_FILE_NAME

THEME_PRESETS = ("zinc", "slate", "stone", "gray", "neutral")


@click.group("theme")
def theme_group() -> None:
    """Manage themes."""


@theme_group.command("list")
@click.pass_obj
@cli_error_boundary
def list_themes(ctx: AppContext) -> None:
    """List available themes."""
    current = None
    if ctx.store.manifest_exists():
        current = ctx.store.load_manifest().config.get("theme", {}).get("base_color")

    for name in THEME_PRESETS:
        marker = " (current)" if name == current else ""
        machine_output(f"  {name}{marker}")


@theme_group.command("apply")
@click.argument("name", type=click.Choice(THEME_PRESETS))
@click.pass_obj
@cli_error_boundary
def apply_theme(ctx: AppContext, name: str) -> None:
    """Apply a theme to the project."""
    manifest = ctx.store.load_manifest()
    updated = manifest.with_config_value("theme", "base_color", name)
    try:
        ctx.store.save_manifest(updated)
    except OSError as e:
        raise ComponentIOError(ctx.store.resolve(CONFIG_FILE_NAME), "write manifest", e) from e

    user_output(f"✓ Applied theme {name}")
