import mimetypes

import filetype

from ..models.exceptions import MimeDetectionError


def detect_mime_type(content: bytes, filename: str = "") -> str:
    """Detects the MIME type of a file content.

    The content is sniffed from its magic numbers first. Formats without a
    signature (plain text, CSV, JSON...) fall back to the filename extension and
    finally to ``text/plain`` when the content is valid UTF-8.

    Args:
        content (bytes): The file content.
        filename (str): The name of the file, if known.

    Returns:
        str: The detected MIME type.

    Raises:
        MimeDetectionError: If the MIME type cannot be determined.
    """
    mime_type = filetype.guess_mime(content) if content else None
    if mime_type:
        return mime_type

    if filename:
        mime_type, _ = mimetypes.guess_type(filename)
        if mime_type:
            return mime_type

    try:
        content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MimeDetectionError(
            f"Error detecting MIME type{f' of {filename}' if filename else ''}"
        ) from e

    return "text/plain"
