"""shadcn-ui: copy GPUI components into your project.

Import from submodules:
- version: __version__
- operations: resolve, add_components, remove_components, update_components,
  list_components, diff_components
- registry: Registry, load_bundled_registry, load_registry_file
"""

from shadcn_ui.version import __version__ as __version__
