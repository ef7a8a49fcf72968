"""Remove command for deleting installed components."""

import click

from shadcn_ui.cli.error_boundary import cli_error_boundary
from shadcn_ui.cli.output import user_output
from shadcn_ui.core.context import AppContext
from shadcn_ui.operations.installer import remove_components


@click.command()
@click.argument("components", nargs=-1, required=True)
@click.pass_obj
@cli_error_boundary
def remove(ctx: AppContext, components: tuple[str, ...]) -> None:
    """Remove components from your project.

    Refuses to remove a component that another installed component still
    depends on; remove the dependents first or in the same command.

    Examples:

        # Remove a dialog and the button it uses
        shadcn-ui remove dialog button
    """
    manifest = ctx.store.load_manifest()
    result = remove_components(ctx.registry, ctx.store, manifest, components)

    for name in result.removed:
        user_output(f"  - Removed {name} v{manifest.installed[name]}")

    user_output()
    user_output(f"Removed {len(result.removed)} component(s).")
    if result.already_missing:
        user_output(
            f"  Note: file(s) for {', '.join(result.already_missing)} were already deleted",
        )
