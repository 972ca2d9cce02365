"""Environment variable references in raw config data.

Two forms are understood inside string values: ``${NAME}``, which requires
NAME to be set, and ``${NAME:-fallback}``, which uses fallback when NAME is
unset. Non-string values pass through untouched.
"""

import os
import re
from collections.abc import Callable, Iterator

_REFERENCE = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _strings(data: RawValue) -> Iterator[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _strings(item)
    elif isinstance(data, dict):
        for value in data.values():
            yield from _strings(value)


def _map_strings(data: RawValue, rewrite: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return rewrite(data)
    if isinstance(data, list):
        return [_map_strings(item, rewrite) for item in data]
    if isinstance(data, dict):
        return {key: _map_strings(value, rewrite) for key, value in data.items()}
    return data


def collect_missing_vars(data: RawValue) -> list[str]:
    """Names of referenced variables that are unset and have no fallback.

    Each name appears once, in the order it is first referenced.
    """
    required = (
        reference.group("name")
        for text in _strings(data)
        for reference in _REFERENCE.finditer(text)
        if reference.group("default") is None
    )
    return list(dict.fromkeys(name for name in required if name not in os.environ))


def _resolve(reference: re.Match[str]) -> str:
    name, default = reference.group("name", "default")
    if default is None:
        return os.environ[name]
    return os.environ.get(name, default)


def interpolate(data: RawValue) -> RawValue:
    """Replace every reference with its runtime value.

    Substituted values stay strings. Callers check `collect_missing_vars`
    first; an unset variable without a fallback raises KeyError here.
    """
    return _map_strings(data, lambda text: _REFERENCE.sub(_resolve, text))
