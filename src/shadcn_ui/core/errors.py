"""Error taxonomy for shadcn-ui operations.

Every error names the component(s) or path involved so the CLI can print an
actionable message. Each category carries the exit code the CLI uses for it.
"""

from collections.abc import Iterable, Mapping
from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    RESOLVE = 2
    INSTALL = 3
    DIFF = 4
    MANIFEST = 5
    REGISTRY = 6


class ShadcnError(Exception):
    """Base class for all errors raised by the core."""

    exit_code: ExitCode = ExitCode.FAILURE


# Resolution


class ResolveError(ShadcnError):
    exit_code = ExitCode.RESOLVE


class UnknownComponentError(ResolveError):
    """Raised when a requested or depended-on name is absent from the registry."""

    def __init__(self, name: str, required_by: str | None = None):
        self.name = name
        self.required_by = required_by
        if required_by is None:
            message = f"Unknown component: '{name}'"
        else:
            message = f"Unknown component: '{name}' (required by '{required_by}')"
        super().__init__(message)


class CyclicDependencyError(ResolveError):
    """Raised when the dependency relation contains a cycle.

    `cycle` lists the participating names in traversal order with the first
    name repeated at the end, e.g. ["a", "b", "a"].
    """

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Cyclic dependency: {' -> '.join(cycle)}")


# Installation


class InstallError(ShadcnError):
    exit_code = ExitCode.INSTALL


class RemovalBlockedError(InstallError):
    """Raised when components being removed are still required by others.

    `required_by` maps each blocked name to the sorted installed components
    that depend on it.
    """

    def __init__(self, required_by: Mapping[str, list[str]]):
        self.required_by = dict(required_by)
        self.blocked = sorted(self.required_by)
        details = "; ".join(
            f"'{name}' is required by {', '.join(self.required_by[name])}" for name in self.blocked
        )
        super().__init__(f"Cannot remove {', '.join(self.blocked)}: {details}")


class NotInstalledError(InstallError):
    def __init__(self, names: Iterable[str]):
        self.names = sorted(names)
        super().__init__(f"Component(s) not installed: {', '.join(self.names)}")


class ComponentIOError(InstallError):
    """Raised when staging, renaming or deleting a file fails."""

    def __init__(self, path: Path, operation: str, cause: OSError, name: str | None = None):
        self.path = path
        self.operation = operation
        self.cause = cause
        self.name = name
        subject = f"'{name}' " if name is not None else ""
        super().__init__(f"Failed to {operation} {subject}at {path}: {cause}")


# Diff


class DiffError(ShadcnError):
    exit_code = ExitCode.DIFF


class DiffReadError(DiffError):
    def __init__(self, name: str, path: Path, cause: OSError):
        self.name = name
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read '{name}' at {path}: {cause}")


# Manifest


class ManifestError(ShadcnError):
    exit_code = ExitCode.MANIFEST


class ManifestNotFoundError(ManifestError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No {path.name} found in {path.parent}. Run `shadcn-ui init` first.")


class ManifestExistsError(ManifestError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path.name} already exists in {path.parent}. Use --force to overwrite.")


class ManifestCorruptError(ManifestError):
    """Raised when shadcn-ui.toml cannot be parsed or validated. Fatal."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupt manifest {path}: {reason}")


# Registry


class RegistryError(ShadcnError):
    exit_code = ExitCode.REGISTRY


class RegistryFormatError(RegistryError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid registry {source}: {reason}")
