import logging
import os
from pathlib import Path

import click

from shadcn_ui.cli.commands.add import add
from shadcn_ui.cli.commands.diff import diff
from shadcn_ui.cli.commands.init import init
from shadcn_ui.cli.commands.list_cmd import list_components_cmd
from shadcn_ui.cli.commands.remove import remove
from shadcn_ui.cli.commands.theme import theme_group
from shadcn_ui.cli.commands.update import update
from shadcn_ui.cli.error_boundary import cli_error_boundary
from shadcn_ui.core.context import create_context
from shadcn_ui.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV_VAR = "SHADCN_UI_DEBUG"


def configure_logging(debug: bool) -> None:
    """Enable debug logging for --debug or when SHADCN_UI_DEBUG is set."""
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--project-dir",
    "-C",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory containing shadcn-ui.toml (defaults to the current directory)",
)
@click.option(
    "--registry",
    "registry_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Load components from a YAML/JSON registry snapshot instead of the bundled one",
)
@click.option("--debug", is_flag=True, help="Log debug output and tracebacks")
@click.pass_context
@cli_error_boundary
def cli(
    ctx: click.Context,
    project_dir: Path | None,
    registry_path: Path | None,
    debug: bool,
) -> None:
    """Add beautiful UI components to your GPUI project."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(project_dir or Path.cwd(), registry_path)


cli.add_command(init)
cli.add_command(add)
cli.add_command(list_components_cmd)
cli.add_command(remove)
cli.add_command(diff)
cli.add_command(update)
cli.add_command(theme_group)


def main() -> None:
    """CLI entry point used by the `shadcn-ui` console script."""
    cli()


if __name__ == "__main__":
    main()
