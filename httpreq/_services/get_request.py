from .._request_config import HttpRequestConfig
from .._utils.constants import CONTENT_TYPE_URLENCODED, OPTION_METHOD
from ._base_request import BaseRequest


class GetRequest(BaseRequest):
    """Sends GET requests.

    Example:
    ```python
        request = GetRequest()
        request.set_param("q", "kittens")
        contents = request.send("https://example.com/search")
    ```
    """

    def prepare(self, config: HttpRequestConfig) -> None:
        config.set_option(OPTION_METHOD, "GET")
        config.set_content_type(CONTENT_TYPE_URLENCODED)
