"""Tree-Sitter Parsing Layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tree_sitter import Tree


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack.

    Raises ``ValueError`` if *language* has no bundled grammar.
    """

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        try:
            return tslp.get_parser(language)
        except LookupError as exc:
            raise ValueError(f"Unsupported language: {language}") from exc


class Parser:
    """Thin wrapper around a parser factory."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse(self, source: bytes, language: str) -> Tree:
        parser = self._factory.get_parser(language)
        return parser.parse(source)
