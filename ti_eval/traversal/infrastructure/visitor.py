"""IdentifierVisitor — single-pass walk producing scoped identifier occurrences."""

from collections.abc import Iterator

from tree_sitter import Node

from ti_eval.traversal.domain.hints import extract_semantic_hints
from ti_eval.traversal.domain.occurrence import IdentifierOccurrence
from ti_eval.traversal.domain.scope import ScopeTracker
from ti_eval.traversal.infrastructure.context import (
    UsageIndex,
    build_usage_index,
    is_class_method,
    operator_of,
    syntactic_context,
)
from ti_eval.traversal.infrastructure.parser import ERROR_KIND, ParsedSource, same_node

_CANDIDATE_KINDS = frozenset(
    {
        "identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
    }
)
# Declarations whose `name` identifier is a label, not a value-bearing reference.
_DECLARATION_KINDS = frozenset(
    {"class_declaration", "function_declaration", "generator_function_declaration"}
)
_FUNCTION_DECLARATION_KINDS = frozenset(
    {"function_declaration", "generator_function_declaration"}
)
# `function` is the pre-0.21 grammar's name for function expressions.
_FUNCTION_EXPRESSION_KINDS = frozenset(
    {"function_expression", "function", "generator_function"}
)
_NAME_KINDS = frozenset(
    {"identifier", "property_identifier", "private_property_identifier"}
)
ANONYMOUS = "anonymous"


class IdentifierVisitor:
    """Walks a parsed source once, tracking scopes and yielding identifier occurrences.

    The walk is iterative: structural nodes push a scope on entry and schedule
    an exit marker behind their children, so the scope stack mirrors nesting
    without relying on Python recursion. Occurrences are yielded lazily; if the
    walk fails part-way, everything yielded before the failure stays valid.
    """

    def __init__(self, parsed: ParsedSource) -> None:
        self._parsed = parsed
        self._scopes = ScopeTracker()
        self._usage: UsageIndex | None = None

    @property
    def scopes(self) -> ScopeTracker:
        return self._scopes

    def visit(self) -> Iterator[IdentifierOccurrence]:
        self._usage = build_usage_index(self._parsed)
        stack: list[tuple[Node, bool]] = [(self._parsed.root, False)]
        while stack:
            node, exiting = stack.pop()
            if exiting:
                self._scopes.exit_scope()
                continue
            if node.type == ERROR_KIND or not node.is_named:
                continue

            if self._enter_structural(node):
                stack.append((node, True))

            occurrence = self._occurrence(node)
            if occurrence is not None:
                yield occurrence

            for child in reversed(node.children):
                stack.append((child, False))

    def _enter_structural(self, node: Node) -> bool:
        kind = node.type
        if kind == "class_declaration":
            self._scopes.enter_scope(f"class:{self._name_of(node)}")
        elif kind in _FUNCTION_DECLARATION_KINDS:
            self._scopes.enter_scope(f"function:{self._name_of(node)}")
        elif is_class_method(node):
            self._scopes.enter_nested_scope(self._name_of(node))
        elif kind == "arrow_function":
            self._scopes.enter_nested_scope("arrow")
        elif kind in _FUNCTION_EXPRESSION_KINDS:
            self._scopes.enter_nested_scope(self._name_of(node))
        else:
            return False
        return True

    def _name_of(self, node: Node) -> str:
        name_node = node.child_by_field_name("name")
        if name_node is None or name_node.type not in _NAME_KINDS:
            return ANONYMOUS
        return self._parsed.text(name_node)

    def _occurrence(self, node: Node) -> IdentifierOccurrence | None:
        if node.type not in _CANDIDATE_KINDS or node.is_missing:
            return None
        parent = node.parent
        if _is_declaration_name(node, parent):
            return None

        name = self._parsed.text(node)
        if not name:
            return None
        usage = self._usage or {}
        return IdentifierOccurrence(
            name=name,
            position=self._parsed.position(node),
            scope=self._scopes.current_scope,
            syntactic_context=syntactic_context(parent),
            semantic_hints=extract_semantic_hints(
                name,
                parent.type if parent is not None else None,
                operator_of(self._parsed, parent),
            ),
            usage_patterns=list(usage.get(name, [])),
        )


def _is_declaration_name(node: Node, parent: Node | None) -> bool:
    return (
        parent is not None
        and parent.type in _DECLARATION_KINDS
        and same_node(parent.child_by_field_name("name"), node)
    )
