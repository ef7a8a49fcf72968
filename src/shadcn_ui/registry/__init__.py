"""Component registry."""

from shadcn_ui.registry.loader import (
    load_bundled_registry,
    load_registry,
    load_registry_file,
    render_component_stub,
)
from shadcn_ui.registry.registry import Registry

__all__ = [
    "Registry",
    "load_bundled_registry",
    "load_registry",
    "load_registry_file",
    "render_component_stub",
]
