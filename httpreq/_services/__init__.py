from ._base_request import BaseRequest
from ._transport import HttpTransport
from .get_request import GetRequest
from .post_request import PostRequest

__all__ = [
    "BaseRequest",
    "GetRequest",
    "PostRequest",
    "HttpTransport",
]
