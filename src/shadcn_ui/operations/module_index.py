"""Maintenance of the components directory `mod.rs`."""

from collections.abc import Iterable

MODULE_INDEX_FILE = "mod.rs"

_HEADER = "//! UI components generated by shadcn-ui."


def parse_module_index(content: str) -> list[str]:
    """Return the module names declared with `pub mod <name>;`, in file order."""
    modules = []
    for line in content.splitlines():
        trimmed = line.strip()
        if trimmed.startswith("pub mod ") and trimmed.endswith(";"):
            modules.append(trimmed.removeprefix("pub mod ").removesuffix(";").strip())
    return modules


def render_module_index(modules: Iterable[str]) -> str:
    lines = [_HEADER, ""] + [f"pub mod {name};" for name in sorted(set(modules))]
    return "\n".join(lines) + "\n"


def update_module_index(
    existing: str | None,
    added: Iterable[str] = (),
    removed: Iterable[str] = (),
) -> str:
    """Merge declared modules with `added` and drop `removed`.

    Modules declared by hand are kept unless they are being removed.
    """
    modules = set(parse_module_index(existing)) if existing is not None else set()
    modules.update(added)
    modules.difference_update(removed)
    return render_module_index(modules)
