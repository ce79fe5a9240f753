"""Per-language toolchains, looked up through a capability table."""

from __future__ import annotations

import importlib
from pathlib import Path

from ..lesson_types import Language
from ._base import ToolchainSpec

# Lazy imports keep module loading cheap for callers that only need one language
_TOOLCHAIN_CLASSES: dict[Language, str] = {
    Language.CPP: "cpp.CppToolchain",
    Language.JAVASCRIPT: "javascript.JavaScriptToolchain",
    Language.RUST: "rust.RustToolchain",
}


def get_toolchain(
    language: Language | str,
    timeout: float | None = None,
    workspace_root: str | Path | None = None,
) -> ToolchainSpec:
    """Instantiate the toolchain for *language*.

    ``workspace_root`` only matters for project-based toolchains, which build
    in a directory under it instead of next to the solution file.

    Raises ``ValueError`` if *language* has no registered toolchain.
    """
    resolved = language if isinstance(language, Language) else Language.parse(language)
    entry = _TOOLCHAIN_CLASSES.get(resolved)
    if entry is None:
        raise ValueError(f"No toolchain registered for language: {language}")
    module_name, class_name = entry.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    cls = getattr(mod, class_name)
    if resolved is Language.RUST:
        return cls(timeout=timeout, workspace_root=workspace_root)
    return cls(timeout=timeout)


SUPPORTED_LANGUAGES: tuple[Language, ...] = tuple(_TOOLCHAIN_CLASSES.keys())

__all__ = ["ToolchainSpec", "get_toolchain", "SUPPORTED_LANGUAGES"]
