import os
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .._utils._mime import detect_mime_type

Scalar = Union[str, bytes]


def _to_scalar(value: Any) -> Scalar:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, bool):
        return "1" if value else ""
    if value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"form values must be scalars, got {type(value).__name__}")


class FormData(BaseModel):
    """A single value of a multipart form.

    The value is either a scalar or a list of scalars. A list is rendered as one
    part per item, named ``name[0]``, ``name[1]``... even when it holds a single
    item.

    Example:
    ```python
        contents = Path("/path/to/image.jpg").read_bytes()
        data = FormData(contents, "image/jpeg", "image.jpg")
    ```
    """

    model_config = ConfigDict(validate_assignment=True)

    data: Union[List[Scalar], Scalar] = Field(default="", frozen=True)
    mime_type: str = ""
    filename: str = ""

    def __init__(
        self, data: Any = "", mime_type: str = "", filename: str = "", **kwargs: Any
    ) -> None:
        super().__init__(data=data, mime_type=mime_type, filename=filename, **kwargs)

    @field_validator("data", mode="before")
    @classmethod
    def _normalize_data(cls, value: Any) -> Union[List[Scalar], Scalar]:
        if isinstance(value, (list, tuple)):
            return [_to_scalar(item) for item in value]
        return _to_scalar(value)

    @property
    def is_array(self) -> bool:
        return isinstance(self.data, list)

    @property
    def items(self) -> List[Scalar]:
        """The data as a list of items; a scalar becomes a one-item list."""
        return list(self.data) if isinstance(self.data, list) else [self.data]


class FormFile(FormData):
    """A form value read from a file.

    The file is read when the instance is created. When no MIME type is given it
    is detected from the file content, and the filename defaults to the base name
    of the path.

    Raises:
        MimeDetectionError: If no MIME type is given and it cannot be detected.
    """

    path: Optional[str] = Field(default=None, frozen=True)

    def __init__(
        self, path: Union[str, os.PathLike], mime_type: str = "", filename: str = ""
    ) -> None:
        contents = Path(path).read_bytes()
        basename = os.path.basename(os.fspath(path))
        super().__init__(
            contents,
            mime_type or detect_mime_type(contents, basename),
            filename or basename,
            path=os.fspath(path),
        )
