"""Semantic hint extraction: pure, name- and parent-shape-based heuristics."""

LIKELY_NUMBER = "likely-number"
LIKELY_STRING = "likely-string"
LIKELY_BOOLEAN = "likely-boolean"
LIKELY_ARRAY = "likely-array"
NUMERIC_CONTEXT = "numeric-context"
STRING_CONTEXT = "string-context"
BOOLEAN_CONTEXT = "boolean-context"

# (hint, substrings) in the order the hints are reported.
_NAME_CUES: list[tuple[str, tuple[str, ...]]] = [
    (LIKELY_NUMBER, ("count", "length", "size", "index")),
    (LIKELY_STRING, ("name", "title", "text", "message")),
    (LIKELY_BOOLEAN, ("is", "has", "can", "should")),
    (LIKELY_ARRAY, ("list", "array", "items")),
]

_ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/", "%", "**"})
_COMPARISON_OPERATORS = frozenset({"==", "===", "!=", "!==", "<", ">", "<=", ">="})


def extract_name_hints(name: str) -> list[str]:
    """Return type-category hints suggested by substrings of an identifier name.

    Substring tests are case-sensitive, so ``userName`` does not trigger
    ``likely-string`` while ``username`` does. A trailing ``s`` also counts as
    an array cue.
    """
    hints: list[str] = []
    for hint, cues in _NAME_CUES:
        if any(cue in name for cue in cues):
            hints.append(hint)
    if LIKELY_ARRAY not in hints and name.endswith("s"):
        hints.append(LIKELY_ARRAY)
    return hints


def extract_context_hints(
    parent_kind: str | None, operator: str | None = None
) -> list[str]:
    """Return hints implied by the operator of the identifier's parent expression."""
    if parent_kind is None or operator is None:
        return []

    hints: list[str] = []
    if parent_kind == "binary_expression":
        if operator in _ARITHMETIC_OPERATORS:
            hints.append(NUMERIC_CONTEXT)
        if operator == "+":
            hints.append(STRING_CONTEXT)
        if operator in _COMPARISON_OPERATORS:
            hints.append(BOOLEAN_CONTEXT)
    elif parent_kind == "unary_expression" and operator == "!":
        hints.append(BOOLEAN_CONTEXT)
    return hints


def extract_semantic_hints(
    name: str, parent_kind: str | None = None, operator: str | None = None
) -> list[str]:
    """Combine name hints and context hints into one ordered, duplicate-free list."""
    combined = extract_name_hints(name) + extract_context_hints(parent_kind, operator)
    return list(dict.fromkeys(combined))
