from typing import Any, Dict, Mapping, Optional
from urllib.parse import unquote_plus

from ._utils._keypath import delete_path, get_path, has_path, set_path


def _decode(value: Any) -> Any:
    if isinstance(value, str):
        return unquote_plus(value)
    if isinstance(value, Mapping):
        return {key: _decode(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_decode(item) for item in value]
    return value


class RequestContext:
    """Holds the parameters of an incoming request.

    Handlers receive the context explicitly instead of reading global request
    state. Parameter names accept key paths (``user[name]``, ``user.name``).

    >>> context = RequestContext.from_query_string("q=hello+world&user[id]=7")
    >>> context.get("q")
    'hello world'
    >>> context.get("user")
    {'id': '7'}
    """

    def __init__(
        self, params: Optional[Mapping[str, Any]] = None, method: str = "GET"
    ) -> None:
        self._params: Dict[str, Any] = dict(params or {})
        self._method = method.upper()

    @classmethod
    def from_query_string(cls, query: str, method: str = "GET") -> "RequestContext":
        """Builds a context from a raw query string.

        Names are decoded right away. Values of GET contexts are kept encoded and
        decoded on read; values of other methods are decoded here.
        """
        context = cls(method=method)
        for pair in query.lstrip("?").split("&"):
            if not pair:
                continue
            name, _, value = pair.partition("=")
            if context.method != "GET":
                value = unquote_plus(value)
            context.set(unquote_plus(name), value)
        return context

    @property
    def method(self) -> str:
        return self._method

    @property
    def params(self) -> Dict[str, Any]:
        return self._params

    def get(self, name: str, default: Any = None) -> Any:
        """Gets a parameter, or ``default`` if it does not exist.

        Values of GET requests are URL-decoded, including the strings nested in
        mappings and lists.
        """
        param = get_path(self._params, name, default)
        if self._method == "GET":
            param = _decode(param)
        return param

    def set(self, name: str, value: Any) -> None:
        set_path(self._params, name, value)

    def has(self, name: str) -> bool:
        return has_path(self._params, name)

    def delete(self, name: str) -> None:
        delete_path(self._params, name)
