from typing import Any, Iterator, List, Mapping, Tuple, Union
from urllib.parse import quote_plus

from ..models.form import FormData, Scalar
from ._text import concat, is_empty


def _iter_fields(
    fields: Mapping[str, Any], prefix: str = ""
) -> Iterator[Tuple[str, FormData]]:
    for name, value in fields.items():
        full_name = f"{prefix}[{name}]" if prefix else str(name)
        if isinstance(value, Mapping):
            yield from _iter_fields(value, full_name)
        elif isinstance(value, FormData):
            yield full_name, value
        else:
            yield full_name, FormData(value)


def _escape_name(name: str) -> str:
    return name.replace('"', '\\"')


def encode_form_data(
    boundary: str, fields: Mapping[str, Any]
) -> Union[str, bytes]:
    """Renders form fields as a multipart/form-data body.

    Each item of each field becomes one part. Lines are separated by ``\\n`` and
    the body ends with the closing delimiter followed by CRLF. Fields whose value
    is a mapping (as created by key paths like ``user[name]``) are flattened into
    bracketed field names.

    Args:
        boundary (str): The multipart boundary.
        fields (Mapping[str, Any]): Field name to ``FormData`` (other values are
            wrapped in ``FormData``), in rendering order.

    Returns:
        Union[str, bytes]: An empty string when there are no fields. The body is
            ``bytes`` if any item is binary, ``str`` otherwise.

    >>> encode_form_data("B", {"name": FormData("Alice")})
    '--B\\nContent-Disposition: form-data; name="name"\\n\\nAlice\\n--B--\\r\\n'
    """
    if not fields:
        return ""

    segments: List[Scalar] = []
    for name, part in _iter_fields(fields):
        for index, item in enumerate(part.items):
            suffix = f"[{index}]" if part.is_array else ""

            disposition = (
                f'Content-Disposition: form-data; name="{_escape_name(name)}{suffix}"'
            )
            if not is_empty(part.filename):
                disposition += f"; filename={quote_plus(part.filename)}"

            content_type = ""
            if not is_empty(part.mime_type):
                content_type = f"Content-Type: {part.mime_type}"

            content = b"\n" + item if isinstance(item, bytes) else f"\n{item}"

            segments.extend([f"--{boundary}", disposition, content_type, content])

    segments.append(f"--{boundary}--\r\n")

    if any(isinstance(segment, bytes) for segment in segments):
        return concat(
            b"\n",
            *(
                segment.encode("utf-8") if isinstance(segment, str) else segment
                for segment in segments
            ),
        )
    return concat("\n", *segments)  # type: ignore[arg-type]
