"""Install, remove, update and list components in a project.

Each operation takes the current manifest and returns a result holding the
new one. Writes go through a ProjectStore, one component file at a time; a
component counts as installed only once its file is in place, and the
manifest saved at the end records exactly the components that were written
or deleted, including when a later step fails.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import PurePosixPath

from shadcn_ui.core.errors import (
    ComponentIOError,
    ManifestExistsError,
    NotInstalledError,
    RemovalBlockedError,
    UnknownComponentError,
)
from shadcn_ui.core.store.abc import ProjectStore
from shadcn_ui.io.manifest import CONFIG_FILE_NAME
from shadcn_ui.models.component import ComponentCategory, ComponentMeta
from shadcn_ui.models.manifest import ProjectManifest
from shadcn_ui.operations.module_index import MODULE_INDEX_FILE, update_module_index
from shadcn_ui.operations.resolver import ResolutionPlan, resolve
from shadcn_ui.registry.registry import Registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddOptions:
    force: bool = False


@dataclass(frozen=True)
class ListOptions:
    installed_only: bool = False


@dataclass(frozen=True)
class AddResult:
    manifest: ProjectManifest
    added: tuple[str, ...]
    skipped: tuple[str, ...]


@dataclass(frozen=True)
class RemoveResult:
    manifest: ProjectManifest
    removed: tuple[str, ...]
    already_missing: tuple[str, ...]


@dataclass(frozen=True)
class ComponentUpdate:
    name: str
    old_version: str
    new_version: str

    @property
    def version_changed(self) -> bool:
        return self.old_version != self.new_version


@dataclass(frozen=True)
class UpdateResult:
    """Result of updating installed components.

    `missing_dependencies` are required by an updated component but not
    installed; `update` never installs new components.
    """

    manifest: ProjectManifest
    updated: tuple[ComponentUpdate, ...]
    missing_dependencies: tuple[str, ...]
    unknown: tuple[str, ...]


@dataclass(frozen=True)
class ComponentStatus:
    """One row of `list` output."""

    name: str
    installed_version: str | None
    registry_version: str | None
    category: ComponentCategory | None
    description: str

    @property
    def is_installed(self) -> bool:
        return self.installed_version is not None

    @property
    def is_known(self) -> bool:
        return self.registry_version is not None

    @property
    def is_outdated(self) -> bool:
        if not (self.is_installed and self.is_known):
            return False
        return self.installed_version != self.registry_version


def component_path(manifest: ProjectManifest, file_name: str) -> str:
    """Project-relative path of a component file."""
    return str(PurePosixPath(manifest.components_dir) / file_name)


def component_file_name(registry: Registry, name: str) -> str:
    """File name for `name`, falling back to `<name>.rs` for unknown components."""
    meta = registry.lookup(name)
    return meta.file_name if meta is not None else f"{name}.rs"


def initialize_project(store: ProjectStore, manifest: ProjectManifest, force: bool = False) -> None:
    """Write a fresh manifest and an empty module index.

    Raises:
        ManifestExistsError: If a manifest exists and `force` is not set
        ComponentIOError: If a file cannot be written
    """
    if store.manifest_exists() and not force:
        raise ManifestExistsError(store.resolve(CONFIG_FILE_NAME))

    _save_manifest(store, manifest)
    _sync_module_index(store, manifest, [], [])


def add_components(
    registry: Registry,
    store: ProjectStore,
    manifest: ProjectManifest,
    plan: ResolutionPlan,
    options: AddOptions = AddOptions(),
) -> AddResult:
    """Write every component in `plan` that is not installed yet.

    With `options.force`, installed components are rewritten too.

    Raises:
        UnknownComponentError: If the plan names a component missing from the registry
        ComponentIOError: If a file cannot be written; components written
            before the failure stay installed and recorded
    """
    added: list[str] = []
    skipped: list[str] = []

    with _committing(store, manifest, added, []) as state:
        for name in plan:
            meta = _require(registry, name)
            if state.current.is_installed(name) and not options.force:
                logger.debug("Skipping %s: already installed", name)
                skipped.append(name)
                continue

            _write_component(store, state.current, meta)
            state.current = state.current.with_component(name, meta.version)
            added.append(name)

    return AddResult(manifest=state.current, added=tuple(added), skipped=tuple(skipped))


def remove_components(
    registry: Registry,
    store: ProjectStore,
    manifest: ProjectManifest,
    names: Sequence[str],
) -> RemoveResult:
    """Delete installed components and their manifest entries.

    Nothing is deleted unless every name can go: a component still required
    by another installed component blocks the whole request.

    Raises:
        NotInstalledError: If a name is not in the manifest
        RemovalBlockedError: If another installed component depends on a name
        ComponentIOError: If a file cannot be deleted
    """
    targets = list(dict.fromkeys(names))
    not_installed = [name for name in targets if not manifest.is_installed(name)]
    if not_installed:
        raise NotInstalledError(not_installed)

    required_by = find_blocking_dependents(registry, manifest, targets)
    if required_by:
        raise RemovalBlockedError(required_by)

    removed: list[str] = []
    already_missing: list[str] = []

    with _committing(store, manifest, [], removed) as state:
        for name in targets:
            rel_path = component_path(state.current, component_file_name(registry, name))
            try:
                deleted = store.delete(rel_path)
            except OSError as e:
                raise ComponentIOError(store.resolve(rel_path), "delete", e, name=name) from e
            if not deleted:
                logger.debug("File for %s was already gone: %s", name, rel_path)
                already_missing.append(name)
            state.current = state.current.without_components([name])
            removed.append(name)

    return RemoveResult(
        manifest=state.current,
        removed=tuple(removed),
        already_missing=tuple(already_missing),
    )


def update_components(
    registry: Registry,
    store: ProjectStore,
    manifest: ProjectManifest,
    names: Sequence[str] | None = None,
) -> UpdateResult:
    """Overwrite installed components with the registry's current content.

    Local edits to the files are discarded. The targets and their installed
    dependencies are rewritten; dependencies that are not installed are only
    reported. Without `names`, every installed component the registry still
    knows is updated and the rest are reported as unknown.

    Raises:
        NotInstalledError: If a named component is not installed
        UnknownComponentError: If a named component is missing from the registry
        ComponentIOError: If a file cannot be written
    """
    if names:
        targets = list(dict.fromkeys(names))
        not_installed = [name for name in targets if not manifest.is_installed(name)]
        if not_installed:
            raise NotInstalledError(not_installed)
        unknown: list[str] = []
    else:
        installed = manifest.installed_names()
        targets = [name for name in installed if name in registry]
        unknown = [name for name in installed if name not in registry]

    plan = resolve(registry, targets)
    missing_dependencies = tuple(name for name in plan if not manifest.is_installed(name))
    updated: list[ComponentUpdate] = []
    written: list[str] = []

    with _committing(store, manifest, written, []) as state:
        for name in plan:
            if not manifest.is_installed(name):
                continue
            meta = _require(registry, name)
            _write_component(store, state.current, meta)
            state.current = state.current.with_component(name, meta.version)
            updated.append(ComponentUpdate(name, manifest.installed[name], meta.version))
            written.append(name)

    return UpdateResult(
        manifest=state.current,
        updated=tuple(updated),
        missing_dependencies=missing_dependencies,
        unknown=tuple(unknown),
    )


def list_components(
    registry: Registry,
    manifest: ProjectManifest | None,
    options: ListOptions = ListOptions(),
) -> list[ComponentStatus]:
    """Report install state per component. Never writes.

    Lists every registry component, or with `options.installed_only` every
    installed component, including ones the registry no longer knows.
    """
    installed = manifest.installed if manifest is not None else {}
    names = sorted(installed) if options.installed_only else registry.all_names()

    statuses = []
    for name in names:
        meta = registry.lookup(name)
        statuses.append(
            ComponentStatus(
                name=name,
                installed_version=installed.get(name),
                registry_version=meta.version if meta is not None else None,
                category=meta.category if meta is not None else None,
                description=meta.description if meta is not None else "",
            )
        )
    return statuses


def find_blocking_dependents(
    registry: Registry,
    manifest: ProjectManifest,
    removing: Iterable[str],
) -> dict[str, list[str]]:
    """Map each name in `removing` to installed components that still need it.

    Components being removed together do not block each other. Dependencies
    are read from the current registry; installed components it no longer
    knows cannot block anything.
    """
    removing_set = set(removing)
    required_by: dict[str, list[str]] = {}

    for name in manifest.installed_names():
        if name in removing_set:
            continue
        meta = registry.lookup(name)
        if meta is None:
            logger.debug("Cannot check dependencies of %s: not in registry", name)
            continue
        for dep in meta.dependencies:
            if dep in removing_set:
                required_by.setdefault(dep, []).append(name)

    return required_by


# ============================================================================
# Helpers
# ============================================================================


class _CommitState:
    def __init__(self, manifest: ProjectManifest):
        self.current = manifest


@contextmanager
def _committing(
    store: ProjectStore,
    original: ProjectManifest,
    added: list[str],
    removed: list[str],
) -> Iterator[_CommitState]:
    """Persist whatever progress was made, on success and on failure.

    The caller advances `state.current` after each durable file change and
    appends to `added`/`removed`; on exit the manifest and module index are
    written if anything changed. When the body failed, that error is the one
    re-raised; a failure to record progress is attached to it as a note.
    """
    state = _CommitState(original)
    try:
        yield state
    except BaseException as e:
        try:
            _record_progress(store, original, state.current, added, removed)
        except ComponentIOError as record_error:
            logger.debug("Could not record partial progress", exc_info=True)
            e.add_note(f"Progress was not recorded: {record_error}")
        raise
    else:
        _record_progress(store, original, state.current, added, removed)


def _record_progress(
    store: ProjectStore,
    original: ProjectManifest,
    current: ProjectManifest,
    added: list[str],
    removed: list[str],
) -> None:
    if current != original:
        _save_manifest(store, current)
    if added or removed:
        _sync_module_index(store, current, added, removed)


def _require(registry: Registry, name: str) -> ComponentMeta:
    meta = registry.lookup(name)
    if meta is None:
        raise UnknownComponentError(name)
    return meta


def _write_component(store: ProjectStore, manifest: ProjectManifest, meta: ComponentMeta) -> None:
    rel_path = component_path(manifest, meta.file_name)
    try:
        store.write_text(rel_path, meta.content)
    except OSError as e:
        raise ComponentIOError(store.resolve(rel_path), "write", e, name=meta.name) from e
    logger.debug("Installed %s at %s", meta.qualified_id, rel_path)


def _save_manifest(store: ProjectStore, manifest: ProjectManifest) -> None:
    try:
        store.save_manifest(manifest)
    except OSError as e:
        raise ComponentIOError(store.resolve(CONFIG_FILE_NAME), "write manifest", e) from e


def _sync_module_index(
    store: ProjectStore,
    manifest: ProjectManifest,
    added: list[str],
    removed: list[str],
) -> None:
    rel_path = component_path(manifest, MODULE_INDEX_FILE)
    try:
        existing = store.read_text(rel_path) if store.exists(rel_path) else None
        content = update_module_index(existing, added=added, removed=removed)
        if content != existing:
            store.write_text(rel_path, content)
    except OSError as e:
        raise ComponentIOError(store.resolve(rel_path), "update module index", e) from e
