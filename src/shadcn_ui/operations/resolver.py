"""Dependency resolution.

Turns a set of requested component names into the ordered list of every
component that must be present, dependencies first.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from shadcn_ui.core.errors import CyclicDependencyError, UnknownComponentError
from shadcn_ui.registry.registry import Registry

logger = logging.getLogger(__name__)


class _Color(Enum):
    IN_PROGRESS = 1
    DONE = 2


@dataclass(frozen=True)
class ResolutionPlan:
    """Dependency-ordered, duplicate-free set of components for a request."""

    names: tuple[str, ...]
    requested: tuple[str, ...]

    def is_dependency(self, name: str) -> bool:
        """True if `name` was pulled in only to satisfy another component."""
        return name not in self.requested

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


def resolve(registry: Registry, requested: Iterable[str]) -> ResolutionPlan:
    """Compute the installation plan for `requested`.

    Walks depth-first from each requested name in request order, visiting
    dependencies in their declaration order and recording each node after
    its dependencies. Identical input always yields the same plan.

    Args:
        registry: Registry to resolve against
        requested: Component names; repeats are ignored

    Returns:
        ResolutionPlan listing each required name exactly once

    Raises:
        UnknownComponentError: If a requested or transitive name is missing
        CyclicDependencyError: If traversal re-enters an in-progress component
    """
    roots = list(dict.fromkeys(requested))
    colors: dict[str, _Color] = {}
    order: list[str] = []

    for name in roots:
        if registry.lookup(name) is None:
            raise UnknownComponentError(name)
        _visit(registry, name, colors, order, path=[])

    logger.debug("Resolved %s -> %s", roots, order)
    return ResolutionPlan(names=tuple(order), requested=tuple(roots))


def resolve_all(registry: Registry) -> ResolutionPlan:
    """Plan that installs every registry component."""
    return resolve(registry, registry.all_names())


def _visit(
    registry: Registry,
    name: str,
    colors: dict[str, _Color],
    order: list[str],
    path: list[str],
) -> None:
    color = colors.get(name)
    if color is _Color.DONE:
        return
    if color is _Color.IN_PROGRESS:
        cycle_start = path.index(name)
        raise CyclicDependencyError(path[cycle_start:] + [name])

    meta = registry.lookup(name)
    if meta is None:
        raise UnknownComponentError(name, required_by=path[-1] if path else None)

    colors[name] = _Color.IN_PROGRESS
    path.append(name)
    for dep in meta.dependencies:
        _visit(registry, dep, colors, order, path)
    path.pop()

    colors[name] = _Color.DONE
    order.append(name)
