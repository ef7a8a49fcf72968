"""Build a Registry from a deserialized snapshot.

The snapshot is a mapping with a top-level `version` and a `components` list.
It can come from the registry bundled with the package, from a YAML/JSON file
passed on the command line, or from any caller that already holds the data.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shadcn_ui.core.errors import RegistryFormatError
from shadcn_ui.models.component import ComponentCategory, ComponentMeta, validate_component_name
from shadcn_ui.registry.registry import Registry

logger = logging.getLogger(__name__)

BUNDLED_REGISTRY_PATH = Path(__file__).parent.parent / "data" / "registry.yaml"


class ComponentEntry(BaseModel):
    """A component as it appears in a registry snapshot."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    category: ComponentCategory
    description: str = ""
    dependencies: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    content: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_component_name(v)

    @field_validator("dependencies")
    @classmethod
    def validate_dependencies(cls, v: list[str]) -> list[str]:
        for dep in v:
            validate_component_name(dep)
        if len(set(v)) != len(v):
            raise ValueError("dependencies must not repeat a name")
        return v

    @field_validator("files")
    @classmethod
    def validate_files(cls, v: list[str]) -> list[str]:
        if len(v) > 1:
            raise ValueError("a component ships a single source file")
        for file_name in v:
            if "/" in file_name or "\\" in file_name or file_name.startswith("."):
                raise ValueError(f"file name must be a plain file name: {file_name!r}")
        return v


class RegistryPayload(BaseModel):
    """Top-level registry snapshot structure."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., min_length=1)
    components: list[ComponentEntry]


def load_registry(data: Mapping[str, Any], source: str = "<memory>") -> Registry:
    """Validate a snapshot mapping and build a checked Registry.

    Raises:
        RegistryFormatError: If the snapshot does not match the expected shape
        UnknownComponentError: If a dependency names a missing component
        CyclicDependencyError: If the dependency graph has a cycle
    """
    try:
        payload = RegistryPayload.model_validate(data)
    except ValidationError as e:
        raise RegistryFormatError(source, str(e)) from e

    components = [_to_component_meta(entry) for entry in payload.components]
    try:
        registry = Registry(payload.version, components)
    except ValueError as e:
        raise RegistryFormatError(source, str(e)) from e

    registry.validate()
    logger.debug("Loaded registry from %s", source)
    return registry


def load_registry_file(path: Path) -> Registry:
    """Load a YAML or JSON registry snapshot from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise RegistryFormatError(str(path), f"cannot be read: {e}") from e
    except yaml.YAMLError as e:
        raise RegistryFormatError(str(path), f"cannot be parsed: {e}") from e

    if not isinstance(data, dict):
        raise RegistryFormatError(str(path), "top level must be a mapping")

    return load_registry(data, source=str(path))


def load_bundled_registry() -> Registry:
    """Load the registry shipped in package data."""
    return load_registry_file(BUNDLED_REGISTRY_PATH)


def _to_component_meta(entry: ComponentEntry) -> ComponentMeta:
    dependencies = tuple(entry.dependencies)
    if entry.content is not None:
        content = entry.content
    else:
        content = render_component_stub(entry.name, dependencies)
    file_name = entry.files[0] if entry.files else f"{entry.name}.rs"

    return ComponentMeta(
        name=entry.name,
        version=entry.version,
        category=entry.category,
        description=entry.description,
        dependencies=dependencies,
        content=content,
        file_name=file_name,
    )


def render_component_stub(name: str, dependencies: tuple[str, ...] = ()) -> str:
    """Generate placeholder source for a component without bundled content.

    The stub compiles against GPUI and imports its sibling dependencies, so a
    freshly added component tree builds before it is customized.
    """
    title = " ".join(word.capitalize() for word in name.split("_"))
    pascal = "".join(word.capitalize() for word in name.split("_"))

    lines = [
        f"//! {title} component for shadcn-ui-rs.",
        "//!",
        f"//! Generated by `shadcn-ui add {name}`. Customize freely.",
        "",
        "use gpui::*;",
    ]
    for dep in dependencies:
        lines.append("#[allow(unused_imports)]")
        lines.append(f"use super::{dep};")
    lines.extend(
        [
            "",
            f"/// {title} component.",
            f"pub struct {pascal} {{",
            "    id: ElementId,",
            "}",
            "",
            f"impl {pascal} {{",
            f"    /// Create a new {title}.",
            "    pub fn new(id: impl Into<ElementId>) -> Self {",
            "        Self { id: id.into() }",
            "    }",
            "}",
            "",
        ]
    )
    return "\n".join(lines)
