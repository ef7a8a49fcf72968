"""Immutable in-memory component catalog."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType

from shadcn_ui.core.errors import CyclicDependencyError, UnknownComponentError
from shadcn_ui.models.component import ComponentCategory, ComponentMeta
from shadcn_ui.operations.module_index import MODULE_INDEX_FILE

logger = logging.getLogger(__name__)


class _Mark(Enum):
    IN_PROGRESS = 1
    DONE = 2


class Registry:
    """Catalog mapping component name to ComponentMeta.

    Built once per invocation and never mutated; operations receive it as an
    argument rather than reaching for a global.
    """

    def __init__(self, version: str, components: Iterable[ComponentMeta]):
        entries: dict[str, ComponentMeta] = {}
        owners: dict[str, str] = {}
        for component in components:
            if component.name in entries:
                raise ValueError(f"Duplicate component in registry: '{component.name}'")
            if component.file_name == MODULE_INDEX_FILE:
                raise ValueError(
                    f"Component '{component.name}' cannot use {MODULE_INDEX_FILE}: "
                    "reserved for the module index"
                )
            owner = owners.get(component.file_name)
            if owner is not None:
                raise ValueError(
                    f"Components '{owner}' and '{component.name}' "
                    f"both install {component.file_name}"
                )
            owners[component.file_name] = component.name
            entries[component.name] = component
        self._version = version
        self._components: Mapping[str, ComponentMeta] = MappingProxyType(entries)

    @property
    def version(self) -> str:
        return self._version

    def lookup(self, name: str) -> ComponentMeta | None:
        return self._components.get(name)

    def all_names(self) -> list[str]:
        """All component names in lexicographic order."""
        return sorted(self._components)

    def by_category(self, category: ComponentCategory) -> list[ComponentMeta]:
        return [component for component in self if component.category is category]

    def dependents_of(self, name: str) -> list[str]:
        """Names whose direct dependencies include `name`, sorted."""
        return [n for n in self.all_names() if name in self._components[n].dependencies]

    def validate(self) -> None:
        """Check every dependency exists and the dependency graph is acyclic.

        Raises:
            UnknownComponentError: If a dependency names a missing component
            CyclicDependencyError: For the first cycle found, walking names
                in lexicographic order
        """
        for name in self.all_names():
            for dep in self._components[name].dependencies:
                if dep not in self._components:
                    raise UnknownComponentError(dep, required_by=name)

        marks: dict[str, _Mark] = {}
        for name in self.all_names():
            if name not in marks:
                self._check_acyclic(name, marks, [])

        logger.debug("Registry v%s validated: %d components", self._version, len(self))

    def _check_acyclic(self, name: str, marks: dict[str, _Mark], path: list[str]) -> None:
        marks[name] = _Mark.IN_PROGRESS
        path.append(name)
        for dep in self._components[name].dependencies:
            mark = marks.get(dep)
            if mark is _Mark.IN_PROGRESS:
                cycle_start = path.index(dep)
                raise CyclicDependencyError(path[cycle_start:] + [dep])
            if mark is None:
                self._check_acyclic(dep, marks, path)
        path.pop()
        marks[name] = _Mark.DONE

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __iter__(self) -> Iterator[ComponentMeta]:
        return (self._components[n] for n in self.all_names())

    def __len__(self) -> int:
        return len(self._components)
