from typing import Optional


class HttpException(Exception):
    """Base class for the errors raised by httpreq."""


class HttpRequestError(HttpException):
    """An exception that is triggered when sending a request fails.

    The message is derived from the status line of the response, when the server
    sent one; otherwise it only names the URL that could not be opened.
    """

    def __init__(
        self, message: str, url: str = "", status_code: Optional[int] = None
    ) -> None:
        self.message = message
        self.url = url
        self.status_code = status_code
        super().__init__(self.message)


class MimeDetectionError(HttpException):
    """An exception that is triggered when the MIME type of a content cannot be detected."""

    def __init__(self, message: str = "Error detecting MIME type") -> None:
        self.message = message
        super().__init__(self.message)


class TransportError(HttpException):
    """Raised by the transport when a request does not produce a usable response.

    ``response_headers`` holds the raw header text of every response received
    while handling the request (redirects included), or an empty string when the
    server could not be reached.
    """

    def __init__(self, message: str, response_headers: str = "") -> None:
        self.message = message
        self.response_headers = response_headers
        super().__init__(self.message)


class InvalidConfigError(HttpException):
    def __init__(self, message: str = "Invalid httpreq configuration") -> None:
        self.message = message
        super().__init__(self.message)
