"""Data models for shadcn-ui.

Import from submodules:
- component: ComponentCategory, ComponentMeta, validate_component_name
- manifest: ProjectManifest
- diff: DiffReport, DiffSpan, DiffStatus
"""
