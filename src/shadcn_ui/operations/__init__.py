"""Core operations for shadcn-ui.

Import from submodules:
- resolver: ResolutionPlan, resolve, resolve_all
- installer: AddOptions, ListOptions, add_components, remove_components,
  update_components, list_components
- diff: diff_components, diff_lines
- module_index: update_module_index
"""
