from .exceptions import (
    HttpException,
    HttpRequestError,
    InvalidConfigError,
    MimeDetectionError,
    TransportError,
)
from .form import FormData, FormFile

__all__ = [
    "FormData",
    "FormFile",
    "HttpException",
    "HttpRequestError",
    "InvalidConfigError",
    "MimeDetectionError",
    "TransportError",
]
