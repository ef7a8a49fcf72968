"""Add command for copying components into a project."""

import click

from shadcn_ui.cli.error_boundary import cli_error_boundary
from shadcn_ui.cli.output import user_output
from shadcn_ui.core.context import AppContext
from shadcn_ui.operations.installer import AddOptions, add_components
from shadcn_ui.operations.resolver import ResolutionPlan, resolve, resolve_all
from shadcn_ui.registry.registry import Registry


@click.command()
@click.argument("components", nargs=-1)
@click.option("--all", "-a", "add_all", is_flag=True, help="Install all components")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite components that are already installed",
)
@click.pass_obj
@cli_error_boundary
def add(ctx: AppContext, components: tuple[str, ...], add_all: bool, force: bool) -> None:
    """Add components to your project.

    Dependencies of the requested components are added too.

    Examples:

        # Add a dialog (and the button it depends on)
        shadcn-ui add dialog

        # Add everything, replacing installed copies
        shadcn-ui add --all --force
    """
    if not components and not add_all:
        user_output(
            click.style("Error: ", fg="red")
            + "Please specify component names or use --all.\n\n"
            + "Usage: shadcn-ui add <component...>\n"
            + "       shadcn-ui add --all"
        )
        raise SystemExit(1)

    manifest = ctx.store.load_manifest()
    plan = resolve_all(ctx.registry) if add_all else resolve(ctx.registry, components)

    result = add_components(ctx.registry, ctx.store, manifest, plan, AddOptions(force=force))

    added = set(result.added)
    for name in plan:
        if name in added:
            suffix = ""
            if plan.is_dependency(name):
                suffix = f" (dependency of {find_dependent(ctx.registry, plan, name)})"
            user_output(f"  + Added {name}{suffix}")
        else:
            user_output(f"  - Skipped {name} (already installed)")

    user_output()
    if result.added:
        user_output(f"Added {len(result.added)} component(s) to {manifest.components_dir}.")
    if result.skipped:
        user_output(f"Skipped {len(result.skipped)} component(s) (use --force to overwrite).")


def find_dependent(registry: Registry, plan: ResolutionPlan, dep_name: str) -> str:
    """Find the first component in the plan that directly depends on `dep_name`."""
    for name in plan:
        meta = registry.lookup(name)
        if meta is not None and dep_name in meta.dependencies:
            return name
    return "unknown"
