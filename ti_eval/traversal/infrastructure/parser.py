"""Tree-sitter parsing of source units into ParsedSource trees."""

from collections.abc import Iterator
from dataclasses import dataclass

from tree_sitter import Node, Parser, Tree

from ti_eval.core.position import SourcePosition
from ti_eval.traversal.infrastructure.language_loader import load_javascript

ERROR_KIND = "ERROR"


@dataclass(frozen=True)
class ParsedSource:
    """A syntax tree together with the exact bytes it was parsed from."""

    tree: Tree
    source_bytes: bytes

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        return self.tree.root_node.has_error

    def text(self, node: Node) -> str:
        return self.source_bytes[node.start_byte : node.end_byte].decode(
            "utf-8", errors="replace"
        )

    def position(self, node: Node) -> SourcePosition:
        """Return the 1-based line and 0-based character column of node.

        tree-sitter reports byte columns; the column is converted to a
        character count so multi-byte text earlier on the line does not shift it.
        """
        row, byte_column = node.start_point
        line_start = node.start_byte - byte_column
        prefix = self.source_bytes[line_start : node.start_byte]
        return SourcePosition(
            line=row + 1,
            column=len(prefix.decode("utf-8", errors="replace")),
        )

    def error_count(self) -> int:
        """Count ERROR and zero-width MISSING nodes in the tree."""
        if not self.has_errors:
            return 0
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.type == ERROR_KIND or node.is_missing:
                count += 1
                continue
            if node.has_error:
                stack.extend(node.children)
        return count


def iter_named_nodes(root: Node) -> Iterator[Node]:
    """Yield named nodes in document order, skipping ERROR subtrees."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == ERROR_KIND:
            continue
        if node.is_named:
            yield node
        stack.extend(reversed(node.children))


def same_node(left: Node | None, right: Node | None) -> bool:
    """Compare nodes by kind and byte span; tree-sitter hands out fresh wrappers."""
    if left is None or right is None:
        return False
    return (
        left.type == right.type
        and left.start_byte == right.start_byte
        and left.end_byte == right.end_byte
    )


class TreeSitterSourceParser:
    """Parses JavaScript source text with tree-sitter.

    The tree-sitter Parser is created lazily and reused across calls;
    ``close`` drops it so the next parse builds a fresh one.
    """

    def __init__(self) -> None:
        self._parser: Parser | None = None

    def parse(self, source_code: str) -> ParsedSource:
        source_bytes = source_code.encode("utf-8")
        tree = self._get_parser().parse(source_bytes)
        return ParsedSource(tree=tree, source_bytes=source_bytes)

    def ensure_ready(self) -> None:
        """Load the grammar now so a missing grammar package surfaces before parsing."""
        self._get_parser()

    def close(self) -> None:
        self._parser = None

    def _get_parser(self) -> Parser:
        if self._parser is None:
            parser = Parser()
            parser.language = load_javascript()
            self._parser = parser
        return self._parser
