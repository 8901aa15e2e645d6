"""Tree-sitter syntax layer used for informational syntax checks."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Delegates to tree-sitter-language-pack, keeping one parser per language."""

    def __init__(self):
        self._parsers: dict[str, object] = {}

    def get_parser(self, language: str):
        if language not in self._parsers:
            import tree_sitter_language_pack as tslp

            logger.debug("Loading tree-sitter grammar for %s", language)
            self._parsers[language] = tslp.get_parser(language)
        return self._parsers[language]


class SyntaxParser:
    """Parses source text and locates error / missing nodes in the tree."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse(self, source: str, language: str):
        return self._factory.get_parser(language).parse(source.encode("utf-8"))

    def error_lines(self, source: str, language: str) -> list[int]:
        """Return sorted, 1-based line numbers holding syntax errors."""
        tree = self.parse(source, language)
        if not tree.root_node.has_error:
            return []
        lines: set[int] = set()
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.is_error or node.is_missing:
                lines.add(node.start_point[0] + 1)
            if node.has_error:
                stack.extend(node.children)
        return sorted(lines)
