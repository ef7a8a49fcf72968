"""Update command for refreshing installed components from the registry."""

import click

from shadcn_ui.cli.error_boundary import cli_error_boundary
from shadcn_ui.cli.output import user_output
from shadcn_ui.core.context import AppContext
from shadcn_ui.operations.installer import update_components


@click.command()
@click.argument("components", nargs=-1)
@click.pass_obj
@cli_error_boundary
def update(ctx: AppContext, components: tuple[str, ...]) -> None:
    """Update components to the latest registry version.

    Installed files are overwritten; local edits are lost. Run
    `shadcn-ui diff` first to review them.

    Examples:

        # Update every installed component
        shadcn-ui update

        # Update one component (and its installed dependencies)
        shadcn-ui update dialog
    """
    manifest = ctx.store.load_manifest()
    result = update_components(ctx.registry, ctx.store, manifest, components or None)

    if not result.updated:
        user_output("No installed components to update.")

    for change in result.updated:
        if change.version_changed:
            user_output(f"  ✓ Updated {change.name}: {change.old_version} → {change.new_version}")
        else:
            user_output(f"  ✓ Refreshed {change.name} (v{change.new_version})")
    if result.updated:
        user_output(
            click.style("Note: ", fg="yellow")
            + "local edits to updated files were overwritten with registry content."
        )

    if result.unknown:
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"not in registry, left untouched: {', '.join(result.unknown)}"
        )

    if result.missing_dependencies:
        missing = " ".join(result.missing_dependencies)
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"missing dependencies: {missing}\n  Run `shadcn-ui add {missing}` to install them."
        )
