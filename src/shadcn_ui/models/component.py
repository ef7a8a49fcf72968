"""Component metadata models."""

import re
from dataclasses import dataclass
from enum import Enum

_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")

# Lowercase Rust keywords, strict and reserved; they cannot be module names.
_RUST_KEYWORDS = frozenset(
    (
        "abstract as async await become box break const continue crate do dyn else enum extern "
        "false final fn for if impl in let loop macro match mod move mut override priv pub ref "
        "return self static struct super trait true try type typeof unsafe unsized use virtual "
        "where while yield"
    ).split()
)


class ComponentCategory(Enum):
    """Informational grouping used by `list`."""

    INPUT = "input"
    DISPLAY = "display"
    FEEDBACK = "feedback"
    NAVIGATION = "navigation"
    LAYOUT = "layout"
    SPECIAL = "special"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def validate_component_name(value: str) -> str:
    """Validate and return a component name.

    Names become Rust module names in the components directory, so they must
    be lowercase identifiers.

    Args:
        value: String to validate

    Returns:
        The validated name

    Raises:
        ValueError: If value is not a valid component name
    """
    if not _NAME_PATTERN.match(value):
        raise ValueError(
            f"Invalid component name: {value!r} (expected lowercase letters, digits and '_')"
        )
    if value in _RUST_KEYWORDS:
        raise ValueError(f"Invalid component name: {value!r} is a reserved Rust keyword")
    return value


@dataclass(frozen=True)
class ComponentMeta:
    """A single component entry in the registry."""

    name: str
    version: str
    category: ComponentCategory
    description: str
    dependencies: tuple[str, ...]
    content: str
    file_name: str

    @property
    def qualified_id(self) -> str:
        return f"{self.name}@{self.version}"
