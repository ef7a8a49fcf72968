"""Project file access interface.

Architecture:
- ProjectStore: Abstract base class defining the interface
- FilesystemProjectStore: Production implementation over a project directory

All paths passed to a store are POSIX-style and relative to the project
root, e.g. "src/components/ui/button.rs".
"""

from abc import ABC, abstractmethod
from pathlib import Path

from shadcn_ui.models.manifest import ProjectManifest


class ProjectStore(ABC):
    """Abstract interface for reading and writing one project's files.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @property
    @abstractmethod
    def project_dir(self) -> Path:
        """Project root, used for error messages."""
        ...

    @abstractmethod
    def exists(self, rel_path: str) -> bool:
        """Check whether a file exists at the project-relative path."""
        ...

    @abstractmethod
    def read_text(self, rel_path: str) -> str:
        """Read a file.

        Raises:
            OSError: If the file is missing or unreadable
        """
        ...

    @abstractmethod
    def write_text(self, rel_path: str, content: str) -> None:
        """Atomically replace a file's content, creating parent directories.

        Either the complete new content is in place afterwards or the previous
        file is untouched.

        Raises:
            OSError: If staging or renaming fails
        """
        ...

    @abstractmethod
    def delete(self, rel_path: str) -> bool:
        """Delete a file.

        Returns:
            True if a file was deleted, False if it did not exist

        Raises:
            OSError: If deletion fails
        """
        ...

    @abstractmethod
    def manifest_exists(self) -> bool:
        """Check whether the project has a manifest."""
        ...

    @abstractmethod
    def load_manifest(self) -> ProjectManifest:
        """Load the project manifest.

        Raises:
            ManifestNotFoundError: If the project has no manifest
            ManifestCorruptError: If the manifest cannot be parsed or validated
        """
        ...

    @abstractmethod
    def save_manifest(self, manifest: ProjectManifest) -> None:
        """Atomically write the project manifest.

        Raises:
            OSError: If the write fails
        """
        ...

    def resolve(self, rel_path: str) -> Path:
        """Absolute location of a project-relative path, for messages."""
        return self.project_dir / rel_path
