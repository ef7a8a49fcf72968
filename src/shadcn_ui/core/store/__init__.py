from shadcn_ui.core.store.abc import ProjectStore
from shadcn_ui.core.store.real import FilesystemProjectStore

__all__ = ["FilesystemProjectStore", "ProjectStore"]
