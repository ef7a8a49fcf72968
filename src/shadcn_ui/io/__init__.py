"""I/O operations for shadcn-ui."""

from shadcn_ui.io.atomic import atomic_write_text
from shadcn_ui.io.manifest import (
    CONFIG_FILE_NAME,
    create_default_manifest,
    load_manifest,
    manifest_path,
    parse_manifest,
    render_manifest,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "atomic_write_text",
    "create_default_manifest",
    "load_manifest",
    "manifest_path",
    "parse_manifest",
    "render_manifest",
]
