"""Diff result models."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

SpanKind = Literal["added", "removed", "unchanged"]


class DiffStatus(Enum):
    UNCHANGED = "unchanged"
    MODIFIED = "modified"
    MISSING_LOCALLY = "missing_locally"
    UNKNOWN_TO_REGISTRY = "unknown_to_registry"


@dataclass(frozen=True)
class DiffSpan:
    """A run of consecutive lines sharing one kind.

    `removed` lines exist only on disk, `added` lines exist only in the
    registry. Line numbers are 1-based; `local_start` points into the on-disk
    file and `registry_start` into the registry content.
    """

    kind: SpanKind
    lines: tuple[str, ...]
    local_start: int
    registry_start: int


@dataclass(frozen=True)
class DiffReport:
    """Comparison of one installed component against the registry."""

    name: str
    status: DiffStatus
    spans: tuple[DiffSpan, ...] = ()
    local_version: str | None = None
    registry_version: str | None = None

    @property
    def has_changes(self) -> bool:
        return self.status is not DiffStatus.UNCHANGED

    def changed_spans(self) -> list[DiffSpan]:
        return [span for span in self.spans if span.kind != "unchanged"]
