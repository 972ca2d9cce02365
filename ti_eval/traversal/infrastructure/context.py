"""Syntactic context and usage patterns for identifiers in a tree-sitter tree."""

from tree_sitter import Node

from ti_eval.traversal.infrastructure.parser import (
    ParsedSource,
    iter_named_nodes,
    same_node,
)

ASSIGNMENT = "assignment"
VARIABLE_DECLARATION = "variable-declaration"
METHOD_PARAMETER = "method-parameter"
MEMBER_ACCESS = "member-access"
FUNCTION_CALL = "function-call"
RETURN_STATEMENT = "return-statement"
UNKNOWN = "unknown"
ASSIGNMENT_TARGET = "assignment-target"

_ASSIGNMENT_KINDS = frozenset(
    {"assignment_expression", "augmented_assignment_expression"}
)
_PROPERTY_KINDS = frozenset({"property_identifier", "private_property_identifier"})

type UsageIndex = dict[str, list[str]]


def is_class_method(node: Node | None) -> bool:
    """True for a method_definition inside a class body, not an object literal."""
    return (
        node is not None
        and node.type == "method_definition"
        and node.parent is not None
        and node.parent.type == "class_body"
    )


def syntactic_context(parent: Node | None) -> str:
    """Label the syntactic role of an identifier from its parent node.

    Rules are checked in priority order; when none applies the parent's own
    node kind is returned.
    """
    if parent is None:
        return UNKNOWN

    kind = parent.type
    grandparent = parent.parent
    if kind in _ASSIGNMENT_KINDS:
        return ASSIGNMENT
    if kind == "variable_declarator":
        return VARIABLE_DECLARATION
    if kind == "formal_parameters" and is_class_method(grandparent):
        return METHOD_PARAMETER
    if kind == "member_expression":
        return MEMBER_ACCESS
    if kind == "call_expression" or (
        kind == "arguments"
        and grandparent is not None
        and grandparent.type == "call_expression"
    ):
        return FUNCTION_CALL
    if kind == "return_statement":
        return RETURN_STATEMENT
    return kind


def operator_of(parsed: ParsedSource, parent: Node | None) -> str | None:
    """Return the operator token text of a binary/unary/assignment parent."""
    if parent is None:
        return None
    operator = parent.child_by_field_name("operator")
    if operator is None:
        return None
    return parsed.text(operator)


def usage_label(parsed: ParsedSource, node: Node) -> str | None:
    """Describe how one reference uses its identifier, if in a recognised way."""
    parent = node.parent
    if parent is None:
        return None

    if parent.type == "member_expression" and same_node(
        parent.child_by_field_name("object"), node
    ):
        prop = parent.child_by_field_name("property")
        if prop is not None and prop.type in _PROPERTY_KINDS:
            return f"property-access:{parsed.text(prop)}"
        return None

    if parent.type == "call_expression" and same_node(
        parent.child_by_field_name("function"), node
    ):
        arguments = parent.child_by_field_name("arguments")
        if arguments is None or arguments.type != "arguments":
            return None
        count = sum(1 for child in arguments.named_children if child.type != "comment")
        return f"function-call:{count}-args"

    if parent.type in _ASSIGNMENT_KINDS and same_node(
        parent.child_by_field_name("left"), node
    ):
        return ASSIGNMENT_TARGET

    return None


def build_usage_index(parsed: ParsedSource) -> UsageIndex:
    """Collect usage labels of every identifier, grouped by name in source order.

    References are grouped by name across the whole source unit rather than
    by resolved binding, so shadowed names share their usage patterns.
    """
    index: UsageIndex = {}
    for node in iter_named_nodes(parsed.root):
        if node.type != "identifier":
            continue
        label = usage_label(parsed, node)
        if label is not None:
            index.setdefault(parsed.text(node), []).append(label)
    return index
