"""Builders for registries, manifests and stores used across tests."""

from collections.abc import Iterable

from shadcn_ui.models.component import ComponentCategory, ComponentMeta
from shadcn_ui.models.manifest import ProjectManifest
from shadcn_ui.registry.registry import Registry
from tests.fakes.project_store import FakeProjectStore

COMPONENTS_DIR = "src/components/ui"


def make_component(
    name: str,
    *,
    dependencies: Iterable[str] = (),
    version: str = "1.0.0",
    category: ComponentCategory = ComponentCategory.INPUT,
    description: str | None = None,
    content: str | None = None,
) -> ComponentMeta:
    return ComponentMeta(
        name=name,
        version=version,
        category=category,
        description=description if description is not None else f"The {name} component",
        dependencies=tuple(dependencies),
        content=content if content is not None else f"// {name} v{version}\n",
        file_name=f"{name}.rs",
    )


def build_registry(*components: ComponentMeta, version: str = "1.0.0") -> Registry:
    """Registry without validation, so broken graphs can be built on purpose."""
    return Registry(version, components)


def sample_registry() -> Registry:
    """Small validated registry.

    button
    dialog -> button
    alert_dialog -> dialog, button
    label, input
    field -> label, input
    popover
    select -> popover
    """
    registry = build_registry(
        make_component("button"),
        make_component("dialog", dependencies=["button"], category=ComponentCategory.FEEDBACK),
        make_component(
            "alert_dialog",
            dependencies=["dialog", "button"],
            category=ComponentCategory.FEEDBACK,
        ),
        make_component("label"),
        make_component("input"),
        make_component("field", dependencies=["label", "input"]),
        make_component("popover", category=ComponentCategory.DISPLAY),
        make_component("select", dependencies=["popover"]),
    )
    registry.validate()
    return registry


def build_manifest(installed: dict[str, str] | None = None) -> ProjectManifest:
    return ProjectManifest(
        components_dir=COMPONENTS_DIR,
        theme_file="src/theme.rs",
        installed=dict(installed or {}),
    )


def component_rel_path(name: str) -> str:
    return f"{COMPONENTS_DIR}/{name}.rs"


def build_installed_store(
    registry: Registry,
    installed: Iterable[str],
    **kwargs,
) -> FakeProjectStore:
    """Fake store where each name is installed with the registry's content."""
    names = list(installed)
    files = {component_rel_path(name): registry.lookup(name).content for name in names}
    manifest = build_manifest({name: registry.lookup(name).version for name in names})
    return FakeProjectStore(files=files, manifest=manifest, **kwargs)
