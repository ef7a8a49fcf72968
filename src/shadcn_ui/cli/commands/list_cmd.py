"""List command for showing available and installed components."""

import click

from shadcn_ui.cli.error_boundary import cli_error_boundary
from shadcn_ui.cli.output import machine_output, user_output
from shadcn_ui.core.context import AppContext
from shadcn_ui.operations.installer import ComponentStatus, ListOptions, list_components


@click.command(name="list")
@click.option("--installed", "-i", is_flag=True, help="Show installed components only")
@click.pass_obj
@cli_error_boundary
def list_components_cmd(ctx: AppContext, installed: bool) -> None:
    """List available components.

    Works outside an initialized project; installed markers then stay empty.
    """
    manifest = ctx.store.load_manifest() if ctx.store.manifest_exists() else None
    statuses = list_components(ctx.registry, manifest, ListOptions(installed_only=installed))

    if installed:
        _show_installed(statuses)
        return

    by_category: dict[str, list[ComponentStatus]] = {}
    for status in statuses:
        category = status.category.display_name if status.category is not None else "Other"
        by_category.setdefault(category, []).append(status)

    machine_output(f"Available components (v{ctx.registry.version}):")
    machine_output()
    for category in sorted(by_category):
        machine_output(f"  {category}:")
        for status in by_category[category]:
            machine_output(f"    {status.name:<16} {status.description}{_marker(status)}")
        machine_output()

    installed_count = sum(1 for s in statuses if s.is_installed)
    machine_output(f"{len(statuses)} component(s) available, {installed_count} installed.")


def _show_installed(statuses: list[ComponentStatus]) -> None:
    if not statuses:
        user_output("No components installed.")
        user_output()
        user_output(
            "Run `shadcn-ui init` to set up your project, "
            "then use `shadcn-ui add <component>` to install components."
        )
        return

    machine_output("Installed components:")
    machine_output()
    for status in statuses:
        if status.is_known:
            line = f"  {status.name:<16} {status.installed_version:<8} {status.description}"
            machine_output(line + _marker(status, show_installed=False))
        else:
            machine_output(f"  {status.name:<16} {status.installed_version:<8} (unknown component)")
    machine_output()
    machine_output(f"{len(statuses)} component(s) installed.")


def _marker(status: ComponentStatus, show_installed: bool = True) -> str:
    if status.is_outdated:
        return f" [installed v{status.installed_version}, v{status.registry_version} available]"
    if status.is_installed and show_installed:
        return " [installed]"
    return ""
