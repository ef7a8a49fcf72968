"""Init command for creating shadcn-ui.toml."""

import click

from shadcn_ui.cli.commands.theme import THEME_PRESETS
from shadcn_ui.cli.error_boundary import cli_error_boundary
from shadcn_ui.cli.output import user_output
from shadcn_ui.core.context import AppContext
from shadcn_ui.io.manifest import CONFIG_FILE_NAME, DEFAULT_COMPONENTS_DIR, create_default_manifest
from shadcn_ui.operations.installer import initialize_project

RADIUS_CHOICES = ("none", "sm", "md", "lg", "full")


@click.command()
@click.option(
    "--components-dir",
    "-c",
    default=DEFAULT_COMPONENTS_DIR,
    show_default=True,
    help="Directory components are copied into, relative to the project",
)
@click.option(
    "--base-color",
    "-b",
    type=click.Choice(THEME_PRESETS),
    default="zinc",
    show_default=True,
    help="Base color theme",
)
@click.option(
    "--radius",
    "-r",
    type=click.Choice(RADIUS_CHOICES),
    default="md",
    show_default=True,
    help="Border radius style",
)
@click.option("--dark-mode/--light-mode", default=True, help="Enable dark mode support")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing shadcn-ui.toml")
@click.pass_obj
@cli_error_boundary
def init(
    ctx: AppContext,
    components_dir: str,
    base_color: str,
    radius: str,
    dark_mode: bool,
    force: bool,
) -> None:
    """Initialize shadcn-ui in your project.

    Creates shadcn-ui.toml and the components directory.

    Examples:

        # Initialize with defaults
        shadcn-ui init

        # Use a custom components directory and theme
        shadcn-ui init --components-dir src/ui --base-color slate
    """
    manifest = create_default_manifest(
        components_dir=components_dir,
        base_color=base_color,
        radius=radius,
        dark_mode=dark_mode,
    )
    initialize_project(ctx.store, manifest, force=force)

    user_output(f"✓ Created {CONFIG_FILE_NAME}")
    user_output(f"  Components directory: {components_dir}")
    user_output(f"  Theme: {base_color} (radius {radius}, {'dark' if dark_mode else 'light'} mode)")
    user_output()
    user_output("Add components with `shadcn-ui add <component...>`.")
