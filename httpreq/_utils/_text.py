from typing import Any, AnyStr, Optional


def is_empty(value: Any) -> bool:
    """Tells whether a value is missing or has zero length."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) == 0
    return False


def concat(separator: AnyStr, *segments: Optional[AnyStr]) -> AnyStr:
    """Joins the non-empty segments with a separator.

    Empty segments are treated as absent, so no doubled separators are produced.

    >>> concat(", ", "a", "", "b")
    'a, b'
    >>> concat("\\r\\n", "", "Name: value")
    'Name: value'
    """
    return separator.join(
        segment for segment in segments if not is_empty(segment)  # type: ignore[misc]
    )
