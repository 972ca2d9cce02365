"""Loads the tree-sitter JavaScript grammar once per process."""

import tree_sitter_javascript
from tree_sitter import Language

_LANGUAGE_CACHE: dict[str, Language] = {}


def load_javascript() -> Language:
    """Return the JavaScript Language, building it on first use.

    Raises:
        ImportError: if tree-sitter-javascript is not installed.
    """
    if "javascript" not in _LANGUAGE_CACHE:
        _LANGUAGE_CACHE["javascript"] = Language(tree_sitter_javascript.language())
    return _LANGUAGE_CACHE["javascript"]
