"""Manifest I/O for shadcn-ui.toml."""

import tomllib
from pathlib import Path
from typing import Any

import tomlkit

from shadcn_ui.core.errors import ManifestCorruptError, ManifestNotFoundError
from shadcn_ui.models.component import validate_component_name
from shadcn_ui.models.manifest import ProjectManifest

CONFIG_FILE_NAME = "shadcn-ui.toml"

DEFAULT_COMPONENTS_DIR = "src/components/ui"
DEFAULT_THEME_FILE = "src/theme.rs"
DEFAULT_REGISTRY_URL = "https://shadcn-ui-rs.dev/registry"


def manifest_path(project_dir: Path) -> Path:
    return project_dir / CONFIG_FILE_NAME


def load_manifest(project_dir: Path) -> ProjectManifest:
    """Load shadcn-ui.toml from the project directory.

    Raises:
        ManifestNotFoundError: If the file does not exist
        ManifestCorruptError: If the file cannot be read, parsed or validated
    """
    path = manifest_path(project_dir)
    if not path.exists():
        raise ManifestNotFoundError(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestCorruptError(path, f"cannot be read: {e}") from e

    return parse_manifest(text, path)


def parse_manifest(text: str, path: Path) -> ProjectManifest:
    """Parse and validate manifest text. `path` is only used in error messages."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestCorruptError(path, f"invalid TOML: {e}") from e

    project = data.get("project")
    if not isinstance(project, dict):
        raise ManifestCorruptError(path, "missing [project] table")

    components_dir = project.get("components_dir")
    if not isinstance(components_dir, str) or not components_dir:
        raise ManifestCorruptError(path, "[project] components_dir must be a non-empty string")

    theme_file = project.get("theme_file", DEFAULT_THEME_FILE)
    if not isinstance(theme_file, str):
        raise ManifestCorruptError(path, "[project] theme_file must be a string")

    components = data.get("components", {})
    if not isinstance(components, dict):
        raise ManifestCorruptError(path, "[components] must be a table of name = version")

    installed: dict[str, str] = {}
    for name, version in components.items():
        try:
            validate_component_name(name)
        except ValueError as e:
            raise ManifestCorruptError(path, str(e)) from e
        if not isinstance(version, str) or not version:
            raise ManifestCorruptError(path, f"version of '{name}' must be a non-empty string")
        installed[name] = version

    config = {k: v for k, v in data.items() if k not in ("project", "components")}

    return ProjectManifest(
        components_dir=components_dir,
        theme_file=theme_file,
        installed=installed,
        config=config,
    )


def render_manifest(manifest: ProjectManifest) -> str:
    """Serialize a manifest to TOML text."""
    doc = tomlkit.document()

    project = tomlkit.table()
    project["components_dir"] = manifest.components_dir
    project["theme_file"] = manifest.theme_file
    doc["project"] = project

    # Opaque config tables in their original order
    for key, value in manifest.config.items():
        doc[key] = value

    components = tomlkit.table()
    for name in manifest.installed_names():
        components[name] = manifest.installed[name]
    doc["components"] = components

    return tomlkit.dumps(doc)


def create_default_manifest(
    components_dir: str = DEFAULT_COMPONENTS_DIR,
    base_color: str = "zinc",
    radius: str = "md",
    dark_mode: bool = True,
) -> ProjectManifest:
    """Create default project manifest."""
    config: dict[str, Any] = {
        "theme": {
            "base_color": base_color,
            "radius": radius,
            "dark_mode": dark_mode,
        },
        "registry": {
            "url": DEFAULT_REGISTRY_URL,
        },
    }
    return ProjectManifest(
        components_dir=components_dir,
        theme_file=DEFAULT_THEME_FILE,
        installed={},
        config=config,
    )
