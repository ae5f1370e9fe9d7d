"""Key path access over nested mappings.

A key path addresses a value inside nested dictionaries using dots or brackets:
``user.name``, ``user[name]`` and ``user[address][city]`` are all valid.
"""

import re
from typing import Any, List, Mapping, MutableMapping, Tuple

_TOKEN_PATTERN = re.compile(r"\[([^\]]+)\]|([^.\[\]]+)")

_MISSING = object()


def split_path(path: str) -> List[str]:
    """Splits a key path into its keys.

    >>> split_path("user[address].city")
    ['user', 'address', 'city']
    """
    keys = []
    for match in _TOKEN_PATTERN.finditer(path):
        bracketed, plain = match.groups()
        keys.append(bracketed if bracketed is not None else plain)
    return keys or [path]


def _child(container: Any, key: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(key, _MISSING)
    if isinstance(container, (list, tuple)) and key.isdigit():
        index = int(key)
        return container[index] if index < len(container) else _MISSING
    return _MISSING


def _walk(data: Mapping[str, Any], keys: List[str]) -> Any:
    current: Any = data
    for key in keys:
        current = _child(current, key)
        if current is _MISSING:
            break
    return current


def get_path(data: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Returns the value at ``path`` or ``default`` when any key is missing."""
    value = _walk(data, split_path(path))
    return default if value is _MISSING else value


def has_path(data: Mapping[str, Any], path: str) -> bool:
    return _walk(data, split_path(path)) is not _MISSING


def set_path(data: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Sets the value at ``path``, creating intermediate dictionaries.

    Intermediate values that are not mappings are replaced.
    """
    keys = split_path(path)
    current = data
    for key in keys[:-1]:
        child = current.get(key)
        if not isinstance(child, MutableMapping):
            child = {}
            current[key] = child
        current = child
    current[keys[-1]] = value


def delete_path(data: MutableMapping[str, Any], path: str) -> None:
    """Removes the value at ``path``. Missing keys are ignored."""
    keys = split_path(path)
    parent = _walk(data, keys[:-1])
    if isinstance(parent, MutableMapping):
        parent.pop(keys[-1], None)


def flatten(data: Mapping[str, Any], prefix: str = "") -> List[Tuple[str, Any]]:
    """Flattens nested mappings and lists into ``(name, value)`` pairs.

    Nested keys and list indexes are rendered with brackets, the way HTML forms
    name nested fields.

    >>> flatten({"user": {"name": "ann"}, "tags": ["a", "b"]})
    [('user[name]', 'ann'), ('tags[0]', 'a'), ('tags[1]', 'b')]
    """
    pairs: List[Tuple[str, Any]] = []
    for key, value in data.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            pairs.extend(flatten(value, name))
        elif isinstance(value, (list, tuple)):
            pairs.extend(flatten({str(i): item for i, item in enumerate(value)}, name))
        else:
            pairs.append((name, value))
    return pairs
