import re
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from httpx import InvalidURL

from .._request_config import HttpRequestConfig
from .._utils._keypath import get_path, set_path
from .._utils._multipart import encode_form_data
from .._utils._text import is_empty
from .._utils._url import add_params
from .._utils.constants import OPTION_CONTENT
from ..models.exceptions import HttpRequestError, TransportError
from ..models.form import FormData
from ..tracing import traced
from ._transport import HttpTransport

_STATUS_LINE_PATTERN = re.compile(
    r"^\s*HTTP(/[\d.]+)?\s+([45]\d{2})\s+(.*)", re.MULTILINE | re.IGNORECASE
)


def request_error(url: str, response_headers: str) -> HttpRequestError:
    """Builds the error for a failed request from the raw response headers.

    The first 4xx or 5xx status line found in the headers names the failure.

    >>> str(request_error("http://x/y", "HTTP/1.1 404 Not Found"))
    'Url not found: http://x/y'
    """
    match = _STATUS_LINE_PATTERN.search(response_headers or "")
    if match is None:
        return HttpRequestError(f"Failed to open {url}", url=url)

    status_line = match.group(0).strip()
    status_code = int(match.group(2))
    if status_code == 404:
        message = f"Url not found: {url}"
    else:
        message = f"Failed to open {url}:\n{status_line}"

    return HttpRequestError(message, url=url, status_code=status_code)


class BaseRequest(ABC):
    """Base class of the requests.

    A request holds query parameters, form parameters and a configuration. Every
    call to ``send`` works on a copy of the configuration, which subclasses
    prepare in ``prepare`` (typically by setting the method and content type).

    The form boundary is generated once per instance and written to the
    ``boundary`` parameter of the Content-Type header right away.

    Args:
        config (Optional[HttpRequestConfig]): The configuration. A default one is
            created if not provided.
        transport (Optional[HttpTransport]): The transport used to send the
            request. A default one, configured from the environment, is created
            on first send if not provided.
    """

    def __init__(
        self,
        config: Optional[HttpRequestConfig] = None,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        self._form_boundary = f"------FormBoundary{uuid.uuid4().hex}"
        self._transport = transport

        self.config = config if config is not None else HttpRequestConfig()
        self.config.set_content_type_option("boundary", self._form_boundary)

        self.params: Dict[str, Any] = {}
        self.form_params: Dict[str, Any] = {}

    @property
    def form_boundary(self) -> str:
        return self._form_boundary

    @property
    def transport(self) -> HttpTransport:
        if self._transport is None:
            self._transport = HttpTransport()
        return self._transport

    def get_param(self, name: str, default: Any = None) -> Any:
        """Gets a query parameter, or ``default`` if it does not exist."""
        return get_path(self.params, name, default)

    def set_param(self, name: str, value: Any) -> None:
        """Sets a query parameter.

        Args:
            name (str): The parameter name. Key paths (``user[name]``,
                ``user.name``) set nested values.
            value (Any): A scalar or a list of scalars.
        """
        set_path(self.params, name, value)

    def get_form_param(self, name: str, default: Any = None) -> Optional[FormData]:
        """Gets a form parameter, or ``default`` if it does not exist."""
        return get_path(self.form_params, name, default)

    def set_form_param(self, name: str, value: Any) -> None:
        """Sets a form parameter.

        Values that are not ``FormData`` instances are wrapped in one.
        """
        if not isinstance(value, FormData):
            value = FormData(value)

        set_path(self.form_params, name, value)

    def get_form_data(self) -> Union[str, bytes]:
        """Renders the form parameters as a multipart body.

        This is what ``send`` uses as the ``content`` option when none is set.
        It is an empty string when there are no form parameters.
        """
        return encode_form_data(self._form_boundary, self.form_params)

    @abstractmethod
    def prepare(self, config: HttpRequestConfig) -> None:
        """Prepares the configuration of a request about to be sent.

        Args:
            config (HttpRequestConfig): A copy of the request configuration.
        """

    @traced(name="http_request_send", run_type="httpreq")
    def send(self, url: str) -> bytes:
        """Sends the request and returns the response body.

        Args:
            url (str): The URL. Query parameters are appended to it.

        Returns:
            bytes: The response body.

        Raises:
            HttpRequestError: If the request fails.
        """
        config = self.config.clone()
        self.prepare(config)
        if is_empty(config.get_option(OPTION_CONTENT)):
            config.set_option(OPTION_CONTENT, self.get_form_data())

        try:
            target = add_params(url, self.params)
        except InvalidURL as e:
            raise request_error(url, "") from e

        try:
            return self.transport.perform(target, config.get_options())
        except TransportError as e:
            raise request_error(url, e.response_headers) from e
