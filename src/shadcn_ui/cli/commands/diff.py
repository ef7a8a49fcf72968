"""Diff command for comparing local components with the registry."""

import click

from shadcn_ui.cli.error_boundary import cli_error_boundary
from shadcn_ui.cli.output import machine_output, user_output
from shadcn_ui.core.context import AppContext
from shadcn_ui.models.diff import DiffReport, DiffStatus
from shadcn_ui.operations.diff import diff_components


@click.command()
@click.argument("components", nargs=-1)
@click.pass_obj
@cli_error_boundary
def diff(ctx: AppContext, components: tuple[str, ...]) -> None:
    """Compare local components with the registry.

    Lines prefixed with - exist only in your copy; lines prefixed with + are
    what `shadcn-ui update` would write. Compares every installed component
    when no names are given.
    """
    manifest = ctx.store.load_manifest()
    reports = diff_components(ctx.registry, ctx.store, manifest, components or None)

    if not reports:
        user_output("No components installed.")
        return

    for report in reports:
        _show_report(report)

    changed = sum(1 for r in reports if r.has_changes)
    user_output()
    if changed == 0:
        user_output(f"All {len(reports)} component(s) match the registry.")
    else:
        user_output(f"{changed} of {len(reports)} component(s) differ from the registry.")


def _show_report(report: DiffReport) -> None:
    if report.status is DiffStatus.UNCHANGED:
        machine_output(click.style("✓ ", fg="green") + f"{report.name} is up to date")
        return
    if report.status is DiffStatus.MISSING_LOCALLY:
        machine_output(click.style("! ", fg="yellow") + f"{report.name}: missing locally")
        return
    if report.status is DiffStatus.UNKNOWN_TO_REGISTRY:
        machine_output(click.style("? ", fg="yellow") + f"{report.name}: not in registry")
        return

    machine_output(
        click.style("~ ", fg="cyan")
        + f"{report.name} (local v{report.local_version}, registry v{report.registry_version})"
    )
    for span in report.changed_spans():
        if span.kind == "removed":
            machine_output(click.style(f"@@ -{span.local_start} @@", fg="cyan"))
            for line in span.lines:
                machine_output(click.style(f"-{line}", fg="red"))
        else:
            machine_output(click.style(f"@@ +{span.registry_start} @@", fg="cyan"))
            for line in span.lines:
                machine_output(click.style(f"+{line}", fg="green"))
