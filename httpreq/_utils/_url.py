from typing import Any, List, Mapping, Tuple

from httpx import URL

from ._keypath import flatten


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def build_query_pairs(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """Renders a parameter mapping as ordered query-string pairs.

    Nested mappings and lists become bracketed names (``tags[0]``,
    ``user[name]``); ``None`` values are skipped.

    >>> build_query_pairs({"q": "x", "tags": ["a", "b"], "skip": None})
    [('q', 'x'), ('tags[0]', 'a'), ('tags[1]', 'b')]
    """
    return [
        (name, _query_value(value))
        for name, value in flatten(params)
        if value is not None
    ]


def add_params(url: str, params: Mapping[str, Any]) -> str:
    """Appends parameters to the query string of a URL.

    Parameters already present in the URL are kept unless ``params`` redefines
    them, in which case the new value wins.

    Raises:
        httpx.InvalidURL: If the URL cannot be parsed.

    >>> add_params("https://example.com/search?lang=en", {"q": "cats"})
    'https://example.com/search?lang=en&q=cats'
    """
    pairs = build_query_pairs(params)
    if not pairs:
        return url

    return str(URL(url).copy_merge_params(pairs))
