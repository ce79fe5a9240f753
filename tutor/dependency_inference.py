"""Cargo dependency inference from the crates a Rust solution imports."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from . import constants

logger = logging.getLogger(__name__)

# Crates a learner is likely to reach for, in manifest order.
KNOWN_CRATES: tuple[tuple[str, str], ...] = (
    ("rand", 'rand = "0.8"'),
    ("serde", 'serde = { version = "1.0", features = ["derive"] }'),
    ("serde_json", 'serde_json = "1.0"'),
    ("tokio", 'tokio = { version = "1", features = ["full"] }'),
    ("reqwest", 'reqwest = { version = "0.12", features = ["json", "blocking"] }'),
    ("clap", 'clap = { version = "4.5", features = ["derive"] }'),
)

_PATH_SEPARATOR = re.compile(r"::|\s")


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(language)


def _node_text(node) -> str:
    return node.text.decode("utf-8")


def _path_root(path: str) -> str:
    """``rand::Rng`` -> ``rand``; ``::serde::Serialize`` -> ``serde``."""
    return _PATH_SEPARATOR.split(path.lstrip(":").strip(), maxsplit=1)[0]


class CrateScanner:
    """Collects the crate roots named by ``use`` and ``extern crate`` items."""

    def __init__(self, parser_factory: ParserFactory | None = None):
        self._factory = parser_factory or TreeSitterParserFactory()

    def crate_roots(self, source: str) -> list[str]:
        """Crate names in order of first appearance, without duplicates."""
        parser = self._factory.get_parser("rust")
        tree = parser.parse(source.encode("utf-8"))
        roots: list[str] = []
        self._collect(tree.root_node, roots)
        return list(dict.fromkeys(root for root in roots if root))

    def _collect(self, node, roots: list[str]) -> None:
        if node.type == "use_declaration":
            argument = node.child_by_field_name("argument")
            if argument is not None:
                self._collect_use_clause(argument, roots)
            return
        if node.type == "extern_crate_declaration":
            name = node.child_by_field_name("name")
            if name is not None:
                roots.append(_node_text(name))
            return
        for child in node.children:
            self._collect(child, roots)

    def _collect_use_clause(self, clause, roots: list[str]) -> None:
        # use {rand::Rng, serde_json};
        if clause.type == "use_list":
            for item in clause.named_children:
                self._collect_use_clause(item, roots)
            return
        roots.append(_path_root(_node_text(clause)))


def infer_dependencies(source: str, scanner: CrateScanner | None = None) -> list[str]:
    """Cargo dependency lines for the known crates *source* imports.

    A solution whose imports cannot be parsed gets no inferred dependencies;
    cargo then reports any unresolved crate itself.
    """
    try:
        imported = set((scanner or CrateScanner()).crate_roots(source))
    except Exception as exc:
        logger.warning("Could not scan Rust imports, inferring no dependencies: %s", exc)
        return []
    detected = [(crate, line) for crate, line in KNOWN_CRATES if crate in imported]
    if detected:
        logger.info("Detected crate dependencies: %s", ", ".join(crate for crate, _ in detected))
    return [line for _, line in detected]


def generate_cargo_toml(dependencies: list[str]) -> str:
    """Manifest for the ephemeral exercise project."""
    manifest = (
        "[package]\n"
        f'name = "{constants.CARGO_PACKAGE_NAME}"\n'
        'version = "0.1.0"\n'
        'edition = "2021"\n'
    )
    if dependencies:
        manifest += "\n[dependencies]\n" + "\n".join(dependencies) + "\n"
    return manifest
