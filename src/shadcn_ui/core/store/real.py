"""Production ProjectStore backed by the filesystem."""

import logging
from pathlib import Path

from shadcn_ui.core.store.abc import ProjectStore
from shadcn_ui.io.atomic import atomic_write_text
from shadcn_ui.io.manifest import load_manifest, manifest_path, render_manifest
from shadcn_ui.models.manifest import ProjectManifest

logger = logging.getLogger(__name__)


class FilesystemProjectStore(ProjectStore):
    """Reads and writes files under a project directory."""

    def __init__(self, project_dir: Path):
        self._project_dir = project_dir

    @property
    def project_dir(self) -> Path:
        return self._project_dir

    def exists(self, rel_path: str) -> bool:
        return self.resolve(rel_path).is_file()

    def read_text(self, rel_path: str) -> str:
        return self.resolve(rel_path).read_text(encoding="utf-8")

    def write_text(self, rel_path: str, content: str) -> None:
        path = self.resolve(rel_path)
        atomic_write_text(path, content)
        logger.debug("Wrote %s (%d bytes)", path, len(content))

    def delete(self, rel_path: str) -> bool:
        path = self.resolve(rel_path)
        if not path.exists():
            return False
        path.unlink()
        logger.debug("Deleted %s", path)
        return True

    def manifest_exists(self) -> bool:
        return manifest_path(self._project_dir).exists()

    def load_manifest(self) -> ProjectManifest:
        return load_manifest(self._project_dir)

    def save_manifest(self, manifest: ProjectManifest) -> None:
        atomic_write_text(manifest_path(self._project_dir), render_manifest(manifest))
        logger.debug("Saved manifest with %d component(s)", len(manifest.installed))
