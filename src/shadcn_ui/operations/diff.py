"""Compare installed component files against the registry."""

import difflib
import logging
from collections.abc import Sequence

from shadcn_ui.core.errors import DiffReadError, UnknownComponentError
from shadcn_ui.core.store.abc import ProjectStore
from shadcn_ui.models.component import validate_component_name
from shadcn_ui.models.diff import DiffReport, DiffSpan, DiffStatus
from shadcn_ui.models.manifest import ProjectManifest
from shadcn_ui.operations.installer import component_file_name, component_path
from shadcn_ui.registry.registry import Registry

logger = logging.getLogger(__name__)


def diff_components(
    registry: Registry,
    store: ProjectStore,
    manifest: ProjectManifest,
    names: Sequence[str] | None = None,
) -> list[DiffReport]:
    """Report how each target's on-disk file differs from the registry.

    Targets are `names`, or every installed component when omitted. Never
    writes to disk or to the manifest.

    Raises:
        UnknownComponentError: If a name is not a valid component name
        DiffReadError: If an existing component file cannot be read
    """
    targets = list(dict.fromkeys(names)) if names else manifest.installed_names()
    for name in targets:
        try:
            validate_component_name(name)
        except ValueError as e:
            raise UnknownComponentError(name) from e
    return [_diff_one(registry, store, manifest, name) for name in targets]


def _diff_one(
    registry: Registry,
    store: ProjectStore,
    manifest: ProjectManifest,
    name: str,
) -> DiffReport:
    local_version = manifest.installed.get(name)
    rel_path = component_path(manifest, component_file_name(registry, name))

    if not store.exists(rel_path):
        return DiffReport(name=name, status=DiffStatus.MISSING_LOCALLY, local_version=local_version)

    meta = registry.lookup(name)
    if meta is None:
        return DiffReport(
            name=name,
            status=DiffStatus.UNKNOWN_TO_REGISTRY,
            local_version=local_version,
        )

    try:
        local_content = store.read_text(rel_path)
    except OSError as e:
        raise DiffReadError(name, store.resolve(rel_path), e) from e

    spans = diff_lines(local_content, meta.content)
    changed = any(span.kind != "unchanged" for span in spans)
    logger.debug("Compared %s: %s", name, "modified" if changed else "unchanged")

    return DiffReport(
        name=name,
        status=DiffStatus.MODIFIED if changed else DiffStatus.UNCHANGED,
        spans=spans,
        local_version=local_version,
        registry_version=meta.version,
    )


def diff_lines(local: str, registry_content: str) -> tuple[DiffSpan, ...]:
    """Line-level comparison of on-disk content against registry content.

    A replaced block yields a `removed` span followed by an `added` span.
    """
    local_lines = local.splitlines()
    registry_lines = registry_content.splitlines()
    matcher = difflib.SequenceMatcher(None, local_lines, registry_lines, autojunk=False)

    spans: list[DiffSpan] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            spans.append(DiffSpan("unchanged", tuple(local_lines[i1:i2]), i1 + 1, j1 + 1))
            continue
        if tag in ("replace", "delete"):
            spans.append(DiffSpan("removed", tuple(local_lines[i1:i2]), i1 + 1, j1 + 1))
        if tag in ("replace", "insert"):
            spans.append(DiffSpan("added", tuple(registry_lines[j1:j2]), i2 + 1, j1 + 1))
    return tuple(spans)
