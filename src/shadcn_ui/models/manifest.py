"""Project manifest model for shadcn-ui.toml."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ProjectManifest:
    """Project state from shadcn-ui.toml.

    `installed` maps component name to the version that was written to disk.
    `config` holds every table other than [project] and [components]; the core
    never interprets it and writes it back unchanged.
    """

    components_dir: str
    theme_file: str
    installed: dict[str, str] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def is_installed(self, name: str) -> bool:
        return name in self.installed

    def installed_names(self) -> list[str]:
        return sorted(self.installed)

    def with_component(self, name: str, version: str) -> "ProjectManifest":
        """Return new manifest recording `name` at `version` (maintaining immutability)."""
        return replace(self, installed={**self.installed, name: version})

    def without_components(self, names: Iterable[str]) -> "ProjectManifest":
        """Return new manifest with the given names dropped."""
        dropped = set(names)
        return replace(
            self,
            installed={k: v for k, v in self.installed.items() if k not in dropped},
        )

    def with_config_value(self, table: str, key: str, value: Any) -> "ProjectManifest":
        """Return new manifest with `config[table][key]` set to `value`."""
        new_table = {**self.config.get(table, {}), key: value}
        return replace(self, config={**self.config, table: new_table})
