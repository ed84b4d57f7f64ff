from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from tree_sitter import Node, Tree
from tree_sitter_language_pack import SupportedLanguage, get_parser

from fqn_reconcile.core.languages import normalize_language

NAMESPACE_DEFINITION = "namespace_definition"
OPENING_TAG = "php_tag"
INLINE_TEXT = "text"

_TYPE_DECLARATION_KINDS = {
    "class_declaration": "class",
    "interface_declaration": "interface",
    "trait_declaration": "trait",
    "enum_declaration": "enum",
}


@dataclass(frozen=True)
class NamespaceClause:
    start_byte: int
    end_byte: int
    header_end_byte: int
    name: str | None
    braced: bool


@dataclass(frozen=True)
class TypeDeclaration:
    kind: str
    start_byte: int
    end_byte: int
    name_start_byte: int | None
    name: str | None


class SyntaxTree:
    """A parsed source text with the few structural lookups reconciliation needs."""

    def __init__(self, source: bytes, tree: Tree) -> None:
        self._source = source
        self._tree = tree

    @property
    def root(self) -> Node:
        return self._tree.root_node

    @property
    def source(self) -> bytes:
        return self._source

    def text(self, start_byte: int, end_byte: int) -> str:
        return self._source[start_byte:end_byte].decode("utf-8", errors="replace")

    def node_text(self, node: Node) -> str:
        return self.text(node.start_byte, node.end_byte)

    def first_descendant(self, *kinds: str) -> Node | None:
        """Return the first node in document order whose type is one of ``kinds``."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.type in kinds:
                return node
            stack.extend(reversed(node.children))
        return None

    def namespace_clause(self) -> NamespaceClause | None:
        node = self.first_descendant(NAMESPACE_DEFINITION)
        if node is None:
            return None

        name_node = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        if body is None:
            header_end = node.end_byte
        elif name_node is not None:
            header_end = name_node.end_byte
        else:
            # "namespace { ... }": only the keyword precedes the body
            header_end = node.children[0].end_byte

        return NamespaceClause(
            start_byte=node.start_byte,
            end_byte=node.end_byte,
            header_end_byte=header_end,
            name=self.node_text(name_node) if name_node is not None else None,
            braced=body is not None,
        )

    def type_declaration(self) -> TypeDeclaration | None:
        node = self.first_descendant(*_TYPE_DECLARATION_KINDS)
        if node is None:
            return None

        name_node = node.child_by_field_name("name")
        return TypeDeclaration(
            kind=_TYPE_DECLARATION_KINDS[node.type],
            start_byte=node.start_byte,
            end_byte=node.end_byte,
            name_start_byte=name_node.start_byte if name_node is not None else None,
            name=self.node_text(name_node) if name_node is not None else None,
        )

    def leading_non_code_span(self) -> tuple[int, int] | None:
        """Byte span of the markup before the code, including the opening tag."""
        leading_text: Node | None = None
        for child in self.root.children:
            if child.type == OPENING_TAG:
                return (0, child.end_byte)
            if child.type != INLINE_TEXT:
                break
            leading_text = child
        if leading_text is None:
            return None
        return (0, leading_text.end_byte)


class TreeSitterSyntaxProvider:
    """Parse source text with tree-sitter.

    A parser is obtained per call so that one provider can be shared between
    threads; the language pack caches the grammar itself.
    """

    def __init__(self, language: str = "php") -> None:
        self._language = normalize_language(language)

    @property
    def language(self) -> str:
        return self._language

    def parse(self, text: str) -> SyntaxTree:
        source = text.encode("utf-8")
        parser = get_parser(cast(SupportedLanguage, self._language))
        return SyntaxTree(source, parser.parse(source))
