import pytest
from pydantic import ValidationError

from httpreq import FormData, FormFile, MimeDetectionError
from httpreq._utils._mime import detect_mime_type

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


class TestFormData:
    def test_scalar(self):
        part = FormData("value")

        assert part.data == "value"
        assert part.is_array is False
        assert part.items == ["value"]
        assert part.mime_type == ""
        assert part.filename == ""

    def test_array(self):
        part = FormData(["a", "b"])

        assert part.is_array is True
        assert part.items == ["a", "b"]

    def test_scalars_are_converted_to_strings(self):
        assert FormData(5).data == "5"
        assert FormData(1.5).data == "1.5"
        assert FormData(True).data == "1"
        assert FormData([1, 2]).data == ["1", "2"]

    def test_bytes_are_kept(self):
        assert FormData(b"\x00\x01").data == b"\x00\x01"

    def test_nested_values_are_rejected(self):
        with pytest.raises(ValidationError):
            FormData([["a"]])

    def test_mime_type_and_filename_can_be_changed(self):
        part = FormData("x")

        part.mime_type = "text/csv"
        part.filename = "data.csv"

        assert part.mime_type == "text/csv"
        assert part.filename == "data.csv"

    def test_data_is_read_only(self):
        part = FormData("x")

        with pytest.raises(ValidationError):
            part.data = "y"


class TestFormFile:
    def test_detects_mime_type_from_content(self, tmp_path):
        path = tmp_path / "picture"
        path.write_bytes(PNG)

        part = FormFile(path)

        assert part.data == PNG
        assert part.mime_type == "image/png"
        assert part.filename == "picture"
        assert part.path == str(path)

    def test_falls_back_to_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        part = FormFile(str(path))

        assert part.mime_type == "text/plain"
        assert part.filename == "notes.txt"

    def test_explicit_mime_type_and_filename(self, tmp_path):
        path = tmp_path / "upload.bin"
        path.write_bytes(PNG)

        part = FormFile(path, "application/octet-stream", "renamed.png")

        assert part.mime_type == "application/octet-stream"
        assert part.filename == "renamed.png"

    def test_undetectable_content(self, tmp_path):
        path = tmp_path / "blob"
        path.write_bytes(b"\x01\x81\x82\x83\xfe\xff\x80")

        with pytest.raises(MimeDetectionError):
            FormFile(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FormFile(tmp_path / "nope.txt")


def test_detect_mime_type_of_text_without_name():
    assert detect_mime_type(b"plain words") == "text/plain"
