"""httpreq: an outbound HTTP request builder.

Requests accumulate query and form parameters, render a multipart/form-data
body when needed and send a single blocking request. Failures are raised as
``HttpRequestError``.

Example:
```python
    from httpreq import FormFile, PostRequest

    request = PostRequest()
    request.set_param("lang", "en")
    request.set_form_param("title", "Holidays")
    request.set_form_param("photo", FormFile("/path/to/photo.jpg"))
    contents = request.send("https://example.com/upload")
```
"""

from .models import (
    FormData,
    FormFile,
    HttpException,
    HttpRequestError,
    InvalidConfigError,
    MimeDetectionError,
)
from ._config import Config
from ._request_config import HttpRequestConfig
from ._request_context import RequestContext
from ._services import BaseRequest, GetRequest, HttpTransport, PostRequest
from ._utils import setup_logging

__all__ = [
    "BaseRequest",
    "Config",
    "FormData",
    "FormFile",
    "GetRequest",
    "HttpException",
    "HttpRequestConfig",
    "HttpRequestError",
    "HttpTransport",
    "InvalidConfigError",
    "MimeDetectionError",
    "PostRequest",
    "RequestContext",
    "setup_logging",
]
