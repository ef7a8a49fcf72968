"""Tests for add/remove/update/list against a fake project store."""

import pytest

from shadcn_ui.core.errors import (
    ComponentIOError,
    ExitCode,
    ManifestExistsError,
    NotInstalledError,
    RemovalBlockedError,
    UnknownComponentError,
)
from shadcn_ui.io.manifest import create_default_manifest
from shadcn_ui.operations.installer import (
    AddOptions,
    ComponentUpdate,
    ListOptions,
    add_components,
    find_blocking_dependents,
    initialize_project,
    list_components,
    remove_components,
    update_components,
)
from shadcn_ui.operations.resolver import resolve
from tests.fakes.project_store import FakeProjectStore
from tests.test_utils.builders import (
    build_installed_store,
    build_manifest,
    component_rel_path,
    sample_registry,
)

MOD_RS = "src/components/ui/mod.rs"
HEADER = "//! UI components generated by shadcn-ui."


# ============================================================================
# init
# ============================================================================


def test_initialize_project_writes_manifest_and_module_index() -> None:
    store = FakeProjectStore()
    manifest = create_default_manifest()

    initialize_project(store, manifest)

    assert store.manifest == manifest
    assert store.files[MOD_RS] == f"{HEADER}\n\n"


def test_initialize_project_refuses_existing_manifest() -> None:
    existing = build_manifest({"button": "1.0.0"})
    store = FakeProjectStore(manifest=existing)

    with pytest.raises(ManifestExistsError):
        initialize_project(store, create_default_manifest())

    assert store.manifest == existing
    assert store.saved_manifests == []


def test_initialize_project_force_overwrites() -> None:
    store = FakeProjectStore(manifest=build_manifest({"button": "1.0.0"}))
    fresh = create_default_manifest()

    initialize_project(store, fresh, force=True)

    assert store.manifest == fresh


# ============================================================================
# add
# ============================================================================


def test_add_installs_dependencies_first() -> None:
    registry = sample_registry()
    manifest = build_manifest()
    store = FakeProjectStore(manifest=manifest)

    result = add_components(registry, store, manifest, resolve(registry, ["dialog"]))

    assert result.added == ("button", "dialog")
    assert result.skipped == ()
    assert store.written_paths[:2] == [component_rel_path("button"), component_rel_path("dialog")]
    assert store.files[component_rel_path("button")] == "// button v1.0.0\n"
    assert result.manifest.installed == {"button": "1.0.0", "dialog": "1.0.0"}
    assert store.manifest == result.manifest
    assert store.files[MOD_RS] == f"{HEADER}\n\npub mod button;\npub mod dialog;\n"


def test_add_twice_is_idempotent() -> None:
    registry = sample_registry()
    manifest = build_manifest()
    store = FakeProjectStore(manifest=manifest)
    plan = resolve(registry, ["dialog"])
    first = add_components(registry, store, manifest, plan)
    writes_after_first = store.written_paths
    saves_after_first = store.saved_manifests

    second = add_components(registry, store, first.manifest, plan)

    assert second.added == ()
    assert second.skipped == ("button", "dialog")
    assert second.manifest == first.manifest
    assert store.written_paths == writes_after_first
    assert store.saved_manifests == saves_after_first


def test_add_force_rewrites_installed_components() -> None:
    registry = sample_registry()
    store = FakeProjectStore(
        files={component_rel_path("button"): "// my edits\n"},
        manifest=build_manifest({"button": "0.9.0"}),
    )

    result = add_components(
        registry,
        store,
        store.load_manifest(),
        resolve(registry, ["button"]),
        AddOptions(force=True),
    )

    assert result.added == ("button",)
    assert store.files[component_rel_path("button")] == "// button v1.0.0\n"
    assert store.manifest.installed == {"button": "1.0.0"}


def test_add_failure_keeps_components_written_before_it() -> None:
    registry = sample_registry()
    manifest = build_manifest()
    store = FakeProjectStore(manifest=manifest, fail_on_write={component_rel_path("dialog")})

    with pytest.raises(ComponentIOError) as exc_info:
        add_components(registry, store, manifest, resolve(registry, ["alert_dialog"]))

    assert exc_info.value.name == "dialog"
    assert exc_info.value.exit_code == ExitCode.INSTALL
    assert store.manifest.installed == {"button": "1.0.0"}
    assert component_rel_path("alert_dialog") not in store.files
    assert "pub mod button;" in store.files[MOD_RS]
    assert "pub mod dialog;" not in store.files[MOD_RS]


def test_add_reports_manifest_write_failure() -> None:
    registry = sample_registry()
    manifest = build_manifest()
    store = FakeProjectStore(manifest=manifest, fail_on_save_manifest=True)

    with pytest.raises(ComponentIOError) as exc_info:
        add_components(registry, store, manifest, resolve(registry, ["button"]))

    assert exc_info.value.operation == "write manifest"


def test_add_write_failure_is_kept_when_manifest_save_also_fails() -> None:
    registry = sample_registry()
    manifest = build_manifest()
    store = FakeProjectStore(
        manifest=manifest,
        fail_on_write={component_rel_path("dialog")},
        fail_on_save_manifest=True,
    )

    with pytest.raises(ComponentIOError) as exc_info:
        add_components(registry, store, manifest, resolve(registry, ["dialog"]))

    assert exc_info.value.name == "dialog"
    assert exc_info.value.operation == "write"
    notes = exc_info.value.__notes__
    assert len(notes) == 1
    assert "Progress was not recorded" in notes[0]
    assert "write manifest" in notes[0]


def test_add_keeps_hand_written_modules() -> None:
    registry = sample_registry()
    manifest = build_manifest()
    store = FakeProjectStore(
        files={MOD_RS: "//! my components\npub mod my_widget;\n"},
        manifest=manifest,
    )

    add_components(registry, store, manifest, resolve(registry, ["button"]))

    assert store.files[MOD_RS] == f"{HEADER}\n\npub mod button;\npub mod my_widget;\n"


# ============================================================================
# remove
# ============================================================================


def test_remove_blocked_by_installed_dependent() -> None:
    registry = sample_registry()
    store = build_installed_store(registry, ["button", "dialog"])

    with pytest.raises(RemovalBlockedError) as exc_info:
        remove_components(registry, store, store.load_manifest(), ["button"])

    assert exc_info.value.blocked == ["button"]
    assert exc_info.value.required_by == {"button": ["dialog"]}
    assert "'button' is required by dialog" in str(exc_info.value)
    assert store.deleted_paths == []
    assert store.saved_manifests == []


def test_remove_together_with_dependent() -> None:
    registry = sample_registry()
    store = build_installed_store(registry, ["button", "dialog"])

    result = remove_components(registry, store, store.load_manifest(), ["dialog", "button"])

    assert result.removed == ("dialog", "button")
    assert result.already_missing == ()
    assert result.manifest.installed == {}
    assert store.manifest.installed == {}
    assert component_rel_path("button") not in store.files
    assert store.files[MOD_RS] == f"{HEADER}\n\n"


def test_button_dialog_lifecycle() -> None:
    registry = sample_registry()
    store = FakeProjectStore(manifest=build_manifest())

    plan = resolve(registry, ["dialog"])
    assert plan.names == ("button", "dialog")

    added = add_components(registry, store, store.load_manifest(), plan)
    assert added.manifest.installed == {"button": "1.0.0", "dialog": "1.0.0"}

    with pytest.raises(RemovalBlockedError) as exc_info:
        remove_components(registry, store, added.manifest, ["button"])
    assert exc_info.value.required_by == {"button": ["dialog"]}
    assert store.manifest == added.manifest
    assert component_rel_path("button") in store.files

    without_dialog = remove_components(registry, store, store.load_manifest(), ["dialog"])
    assert without_dialog.manifest.installed == {"button": "1.0.0"}
    assert component_rel_path("dialog") not in store.files

    without_button = remove_components(registry, store, store.load_manifest(), ["button"])
    assert without_button.manifest.installed == {}
    assert store.manifest.installed == {}
    assert store.files == {MOD_RS: f"{HEADER}\n\n"}


def test_remove_not_installed() -> None:
    registry = sample_registry()
    store = build_installed_store(registry, ["button"])

    with pytest.raises(NotInstalledError) as exc_info:
        remove_components(registry, store, store.load_manifest(), ["select", "button"])

    assert exc_info.value.names == ["select"]
    assert store.deleted_paths == []


def test_remove_with_file_already_deleted() -> None:
    registry = sample_registry()
    store = FakeProjectStore(manifest=build_manifest({"button": "1.0.0"}))

    result = remove_components(registry, store, store.load_manifest(), ["button"])

    assert result.removed == ("button",)
    assert result.already_missing == ("button",)
    assert store.manifest.installed == {}


def test_remove_failure_keeps_earlier_deletions_recorded() -> None:
    registry = sample_registry()
    store = build_installed_store(
        registry,
        ["button", "dialog"],
        fail_on_delete={component_rel_path("dialog")},
    )

    with pytest.raises(ComponentIOError) as exc_info:
        remove_components(registry, store, store.load_manifest(), ["button", "dialog"])

    assert exc_info.value.operation == "delete"
    assert store.manifest.installed == {"dialog": "1.0.0"}
    assert component_rel_path("dialog") in store.files


def test_find_blocking_dependents() -> None:
    registry = sample_registry()
    manifest = build_manifest({"alert_dialog": "1.0.0", "dialog": "1.0.0", "button": "1.0.0"})

    assert find_blocking_dependents(registry, manifest, ["button"]) == {
        "button": ["alert_dialog", "dialog"],
    }
    assert find_blocking_dependents(registry, manifest, ["button", "dialog"]) == {
        "button": ["alert_dialog"],
        "dialog": ["alert_dialog"],
    }
    assert find_blocking_dependents(registry, manifest, ["alert_dialog"]) == {}


def test_unknown_installed_component_does_not_block() -> None:
    registry = sample_registry()
    manifest = build_manifest({"legacy": "0.1.0", "button": "1.0.0"})

    assert find_blocking_dependents(registry, manifest, ["button"]) == {}


# ============================================================================
# update
# ============================================================================


def test_update_overwrites_local_edits_and_installed_dependencies() -> None:
    registry = sample_registry()
    store = FakeProjectStore(
        files={
            component_rel_path("button"): "// edited button\n",
            component_rel_path("dialog"): "// edited dialog\n",
        },
        manifest=build_manifest({"button": "0.9.0", "dialog": "1.0.0"}),
    )

    result = update_components(registry, store, store.load_manifest(), ["dialog"])

    assert result.updated == (
        ComponentUpdate("button", "0.9.0", "1.0.0"),
        ComponentUpdate("dialog", "1.0.0", "1.0.0"),
    )
    assert result.updated[0].version_changed
    assert not result.updated[1].version_changed
    assert result.missing_dependencies == ()
    assert store.files[component_rel_path("button")] == "// button v1.0.0\n"
    assert store.files[component_rel_path("dialog")] == "// dialog v1.0.0\n"
    assert store.manifest.installed == {"button": "1.0.0", "dialog": "1.0.0"}


def test_update_reports_missing_dependencies_without_installing_them() -> None:
    registry = sample_registry()
    store = build_installed_store(registry, ["dialog"])

    result = update_components(registry, store, store.load_manifest(), ["dialog"])

    assert [u.name for u in result.updated] == ["dialog"]
    assert result.missing_dependencies == ("button",)
    assert component_rel_path("button") not in store.files
    assert "button" not in store.manifest.installed


def test_update_all_skips_components_unknown_to_registry() -> None:
    registry = sample_registry()
    store = FakeProjectStore(
        files={component_rel_path("button"): "// old\n"},
        manifest=build_manifest({"button": "0.9.0", "legacy": "0.1.0"}),
    )

    result = update_components(registry, store, store.load_manifest())

    assert [u.name for u in result.updated] == ["button"]
    assert result.unknown == ("legacy",)
    assert store.manifest.installed == {"button": "1.0.0", "legacy": "0.1.0"}


def test_update_named_component_must_be_installed() -> None:
    registry = sample_registry()
    store = build_installed_store(registry, ["button"])

    with pytest.raises(NotInstalledError):
        update_components(registry, store, store.load_manifest(), ["dialog"])

    assert store.written_paths == []


def test_update_named_component_unknown_to_registry() -> None:
    registry = sample_registry()
    store = FakeProjectStore(manifest=build_manifest({"legacy": "0.1.0"}))

    with pytest.raises(UnknownComponentError):
        update_components(registry, store, store.load_manifest(), ["legacy"])


# ============================================================================
# list
# ============================================================================


def test_list_without_manifest_marks_nothing_installed() -> None:
    statuses = list_components(sample_registry(), None)

    assert [s.name for s in statuses] == sample_registry().all_names()
    assert not any(s.is_installed for s in statuses)


def test_list_marks_installed_and_outdated() -> None:
    manifest = build_manifest({"button": "0.9.0", "dialog": "1.0.0"})

    statuses = {s.name: s for s in list_components(sample_registry(), manifest)}

    assert statuses["button"].is_installed
    assert statuses["button"].is_outdated
    assert statuses["button"].registry_version == "1.0.0"
    assert statuses["dialog"].is_installed
    assert not statuses["dialog"].is_outdated
    assert not statuses["select"].is_installed


def test_list_installed_only_includes_unknown_components() -> None:
    manifest = build_manifest({"legacy": "0.1.0", "button": "1.0.0"})

    statuses = list_components(sample_registry(), manifest, ListOptions(installed_only=True))

    assert [s.name for s in statuses] == ["button", "legacy"]
    legacy = statuses[1]
    assert not legacy.is_known
    assert legacy.category is None
    assert not legacy.is_outdated
