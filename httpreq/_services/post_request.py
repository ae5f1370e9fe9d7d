from .._request_config import HttpRequestConfig
from .._utils.constants import CONTENT_TYPE_MULTIPART, OPTION_METHOD
from ._base_request import BaseRequest


class PostRequest(BaseRequest):
    """Sends POST requests with a multipart/form-data body.

    Example:
    ```python
        request = PostRequest()
        request.set_form_param("title", "Holidays")
        request.set_form_param("photo", FormFile("/path/to/photo.jpg"))
        contents = request.send("https://example.com/upload")
    ```
    """

    def prepare(self, config: HttpRequestConfig) -> None:
        config.set_option(OPTION_METHOD, "POST")
        config.set_content_type(CONTENT_TYPE_MULTIPART)
