from logging import getLogger
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from httpx import BaseTransport, Client, HTTPError, InvalidURL, Response

from .._config import Config
from .._utils._logs import setup_logging
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils._user_agent import user_agent_value
from .._utils.constants import (
    HEADER_USER_AGENT,
    OPTION_CONTENT,
    OPTION_FOLLOW_LOCATION,
    OPTION_HEADER,
    OPTION_IGNORE_ERRORS,
    OPTION_MAX_REDIRECTS,
    OPTION_METHOD,
    OPTION_PROXY,
    OPTION_TIMEOUT,
    OPTION_USER_AGENT,
)
from ..models.exceptions import TransportError


def parse_header_lines(header: str) -> List[Tuple[str, str]]:
    """Parses a block of ``Name: value`` lines into ordered pairs.

    Lines without a colon are ignored; repeated names are kept.
    """
    headers = []
    for line in header.splitlines():
        name, sep, value = line.partition(":")
        if sep and name.strip():
            headers.append((name.strip(), value.strip()))
    return headers


def format_response_headers(response: Response) -> str:
    """Renders the status lines and headers of a response and its redirects.

    >>> format_response_headers(Response(404, headers={"Server": "x"}))
    'HTTP/1.1 404 Not Found\\nServer: x'
    """
    lines = []
    for hop in [*response.history, response]:
        lines.append(f"{hop.http_version} {hop.status_code} {hop.reason_phrase}")
        encoding = hop.headers.encoding
        lines.extend(
            f"{name.decode(encoding)}: {value.decode(encoding)}"
            for name, value in hop.headers.raw
        )
    return "\n".join(lines)


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no", "off")
    return bool(value)


def _proxy_url(proxy: str) -> str:
    if proxy.startswith("tcp://"):
        return "http://" + proxy[len("tcp://") :]
    return proxy


class HttpTransport:
    """Performs a single blocking HTTP request described by transport options.

    A new ``httpx.Client`` is opened for every call and closed before returning.
    The options understood are ``method``, ``header``, ``content``, ``timeout``,
    ``proxy``, ``user_agent``, ``follow_location``, ``max_redirects`` and
    ``ignore_errors``; any other option is ignored.

    Args:
        config (Optional[Config]): Client settings. Read from the environment when
            not given.
        transport (Optional[BaseTransport]): The httpx transport to send requests
            through, for instance an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[BaseTransport] = None,
    ) -> None:
        self._logger = getLogger("httpreq")
        self._config = config if config is not None else Config.from_env()
        self._transport = transport

        if self._config.debug:
            setup_logging(self._config.debug)

    def perform(self, url: str, options: Mapping[str, Any]) -> bytes:
        """Sends the request and returns the response body.

        Raises:
            TransportError: If the server cannot be reached or answers with an
                error status (unless ``ignore_errors`` is set). The error carries
                the raw response headers, if any response was received.
        """
        method = str(options.get(OPTION_METHOD) or "GET").upper()

        headers = parse_header_lines(options.get(OPTION_HEADER) or "")
        if not any(name.lower() == HEADER_USER_AGENT.lower() for name, _ in headers):
            headers.append(
                (HEADER_USER_AGENT, options.get(OPTION_USER_AGENT) or user_agent_value())
            )

        content: Union[str, bytes, None] = options.get(OPTION_CONTENT)
        if isinstance(content, str):
            content = content.encode("utf-8")

        self._logger.debug(f"Request: {method} {url}")
        self._logger.debug(f"HEADERS: {headers}")

        try:
            with Client(**self._client_kwargs(options)) as client:
                response = client.request(
                    method, url, headers=headers, content=content or None
                )
        except (HTTPError, InvalidURL) as e:
            raise TransportError(f"Failed to open {url}: {e}") from e

        self._logger.debug(f"Response: {response.status_code} {response.reason_phrase}")

        if response.is_error and not _flag(options.get(OPTION_IGNORE_ERRORS)):
            raise TransportError(
                f"{response.status_code} {response.reason_phrase} for url: {url}",
                format_response_headers(response),
            )

        return response.content

    def _client_kwargs(self, options: Mapping[str, Any]) -> Dict[str, Any]:
        client_kwargs = get_httpx_client_kwargs(self._config)

        if options.get(OPTION_TIMEOUT) is not None:
            client_kwargs["timeout"] = float(options[OPTION_TIMEOUT])
        if options.get(OPTION_FOLLOW_LOCATION) is not None:
            client_kwargs["follow_redirects"] = _flag(options[OPTION_FOLLOW_LOCATION])
        if options.get(OPTION_MAX_REDIRECTS) is not None:
            client_kwargs["max_redirects"] = int(options[OPTION_MAX_REDIRECTS])
        if options.get(OPTION_PROXY):
            client_kwargs["proxy"] = _proxy_url(str(options[OPTION_PROXY]))
        if self._transport is not None:
            client_kwargs["transport"] = self._transport

        return client_kwargs
