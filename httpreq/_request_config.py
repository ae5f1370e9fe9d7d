import copy
import re
from typing import Any, Dict, Optional

from ._utils._text import concat
from ._utils.constants import (
    CRLF,
    DEFAULT_CONTENT_TYPE,
    HEADER_CONTENT_TYPE,
    OPTION_HEADER,
)


class HttpRequestConfig:
    """Transport options of a request.

    Options are handed verbatim to the transport (``method``, ``header``,
    ``content``, ``timeout``, ``proxy``...). The ``header`` option is a block of
    ``Name: value`` lines separated by CRLF, which this class edits in place:
    lines are matched by name case-insensitively, reads return the first
    matching line, and writes replace every matching line or append a new one.

    The header block always contains a ``Content-Type`` line, which defaults to
    ``application/x-www-form-urlencoded; charset=utf-8``.

    >>> config = HttpRequestConfig()
    >>> config.set_content_type_option("charset", "iso-8859-1")
    >>> config.get_header_key("content-type")
    'application/x-www-form-urlencoded; charset=iso-8859-1'
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None) -> None:
        self._options: Dict[str, Any] = {
            OPTION_HEADER: f"{HEADER_CONTENT_TYPE}: {DEFAULT_CONTENT_TYPE}"
        }
        for name, value in (options or {}).items():
            self.set_option(name, value)

        if not self.get_header_key(HEADER_CONTENT_TYPE):
            self.set_header_key(HEADER_CONTENT_TYPE, DEFAULT_CONTENT_TYPE)

    def __repr__(self) -> str:
        return f"HttpRequestConfig({self._options!r})"

    def get_option(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)

    def set_option(self, name: str, value: Any) -> None:
        self._options[name] = value

    def get_options(self) -> Dict[str, Any]:
        return self._options

    def clone(self) -> "HttpRequestConfig":
        """Returns a deep copy, so that changes to it never reach this instance."""
        return copy.deepcopy(self)

    def get_header_key(self, name: str) -> str:
        """Gets the value of a header line, or an empty string."""
        pattern = re.compile(
            rf"^[ \t]*{re.escape(name)}[ \t]*:(.*)", re.MULTILINE | re.IGNORECASE
        )
        match = pattern.search(self.get_option(OPTION_HEADER) or "")
        return match.group(1).strip() if match else ""

    def set_header_key(self, name: str, value: str) -> None:
        """Replaces the header lines named ``name`` or appends a new one.

        Line endings are normalized to CRLF first.
        """
        header = self.get_option(OPTION_HEADER) or ""
        header = header.replace("\r", "").replace("\n", CRLF)

        pattern = re.compile(
            rf"^([ \t]*{re.escape(name)}[ \t]*):([^\r\n]*)",
            re.MULTILINE | re.IGNORECASE,
        )
        header, count = pattern.subn(lambda m: f"{m.group(1)}: {value}", header)

        if count == 0:
            header = concat(CRLF, header, f"{name}: {value}")

        self.set_option(OPTION_HEADER, header)

    def get_content_type(self) -> str:
        """Gets the type of the Content-Type header, without its parameters."""
        return self.get_header_key(HEADER_CONTENT_TYPE).split(";")[0].strip()

    def set_content_type(self, value: str) -> None:
        """Sets the type of the Content-Type header, keeping its parameters."""
        options = self.get_header_key(HEADER_CONTENT_TYPE).split(";")
        options[0] = value.strip()
        self.set_header_key(HEADER_CONTENT_TYPE, ";".join(options))

    def get_content_type_option(self, name: str) -> str:
        """Gets a parameter of the Content-Type header (``charset``, ``boundary``...)."""
        pattern = re.compile(rf";\s*{re.escape(name)}\s*=([^;]*)", re.IGNORECASE)
        match = pattern.search(self.get_header_key(HEADER_CONTENT_TYPE))
        return match.group(1).strip() if match else ""

    def set_content_type_option(self, name: str, value: str) -> None:
        """Replaces a parameter of the Content-Type header or appends it."""
        pattern = re.compile(rf";\s*({re.escape(name)})\s*=\s*([^;]*)", re.IGNORECASE)
        content_type, count = pattern.subn(
            lambda m: f"; {m.group(1)}={value}",
            self.get_header_key(HEADER_CONTENT_TYPE),
        )

        if count == 0:
            content_type += f"; {name}={value}"

        self.set_header_key(HEADER_CONTENT_TYPE, content_type)
