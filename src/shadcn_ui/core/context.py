"""Application context with dependency injection."""

import logging
from dataclasses import dataclass
from pathlib import Path

from shadcn_ui.core.store.abc import ProjectStore
from shadcn_ui.core.store.real import FilesystemProjectStore
from shadcn_ui.registry.loader import load_bundled_registry, load_registry_file
from shadcn_ui.registry.registry import Registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContext:
    """Immutable context holding all dependencies for one invocation.

    Created at CLI entry point and threaded through the commands. The
    registry is loaded exactly once here; operations borrow it.
    """

    registry: Registry
    store: ProjectStore
    project_dir: Path

    @staticmethod
    def for_test(registry: Registry, store: ProjectStore) -> "AppContext":
        """Create a context from pre-built dependencies (usually a fake store)."""
        return AppContext(registry=registry, store=store, project_dir=store.project_dir)


def create_context(project_dir: Path, registry_path: Path | None = None) -> AppContext:
    """Create production context with the filesystem store.

    Args:
        project_dir: Project root holding shadcn-ui.toml
        registry_path: Optional YAML/JSON registry snapshot; the bundled
            registry is used when omitted
    """
    if registry_path is None:
        registry = load_bundled_registry()
    else:
        registry = load_registry_file(registry_path)
    logger.debug("Using registry v%s for project %s", registry.version, project_dir)

    return AppContext(
        registry=registry,
        store=FilesystemProjectStore(project_dir),
        project_dir=project_dir,
    )
