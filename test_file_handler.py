"""
Tests for image upload validation and storage
Run: pytest test_file_handler.py
"""

import pytest

from app.core.exceptions import ResourceLimitError, UnsupportedMediaError, ValidationError
from app.utils.file_handler import (
    delete_file,
    get_file_url,
    is_safe_filename,
    save_image,
    validate_image_file,
    validate_magic_bytes,
)
from app.utils.validators import clean_text, parse_year, require_text
from conftest import GIF_BYTES, JPEG_BYTES, PNG_BYTES, WEBP_BYTES, make_upload


@pytest.mark.parametrize(
    "filename,content,content_type",
    [
        ("a.png", PNG_BYTES, "image/png"),
        ("a.jpg", JPEG_BYTES, "image/jpeg"),
        ("a.JPEG", JPEG_BYTES, "image/jpg"),
        ("a.gif", GIF_BYTES, "image/gif"),
        ("a.webp", WEBP_BYTES, "image/webp"),
    ],
)
def test_allowed_images_pass(filename, content, content_type):
    data, ext = validate_image_file(make_upload(filename, content, content_type))

    assert data == content
    assert ext == filename[filename.rindex("."):].lower()


def test_extension_must_be_an_image():
    with pytest.raises(UnsupportedMediaError):
        validate_image_file(make_upload("notes.txt", PNG_BYTES, "image/png"))


def test_mime_type_must_be_an_image():
    with pytest.raises(UnsupportedMediaError):
        validate_image_file(make_upload("photo.png", PNG_BYTES, "text/plain"))


def test_content_must_match_extension():
    with pytest.raises(UnsupportedMediaError):
        validate_image_file(make_upload("photo.png", JPEG_BYTES, "image/png"))


def test_unsupported_media_is_a_validation_error():
    assert issubclass(UnsupportedMediaError, ValidationError)
    assert UnsupportedMediaError().status_code == 400


def test_too_large_image_rejected():
    upload = make_upload("photo.png", PNG_BYTES + b"\x00" * 100, "image/png")

    with pytest.raises(ResourceLimitError) as exc_info:
        validate_image_file(upload, max_size_bytes=64)

    assert exc_info.value.status_code == 400


def test_empty_image_rejected():
    with pytest.raises(ValidationError):
        validate_image_file(make_upload("photo.png", b"", "image/png"))


def test_webp_needs_webp_marker():
    assert validate_magic_bytes(WEBP_BYTES, "webp")
    assert not validate_magic_bytes(b"RIFF\x24\x00\x00\x00WAVEfmt " + b"\x00" * 8, "webp")


def test_save_image_generates_unique_names(upload_dir):
    first = save_image(make_upload())
    second = save_image(make_upload())

    assert first != second
    assert first.startswith("timeline_") and first.endswith(".png")
    assert (upload_dir / first).read_bytes() == PNG_BYTES


def test_delete_file_is_idempotent(upload_dir):
    filename = save_image(make_upload())

    assert delete_file(filename) is True
    assert not (upload_dir / filename).exists()
    assert delete_file(filename) is False
    assert delete_file(None) is False


def test_delete_file_refuses_paths(upload_dir, tmp_path):
    outside = tmp_path / "keep.png"
    outside.write_bytes(PNG_BYTES)

    assert not is_safe_filename("../keep.png")
    assert delete_file(f"../{outside.name}") is False
    assert delete_file(str(outside)) is False
    assert outside.exists()


def test_file_url():
    assert get_file_url("timeline_x.png") == "/uploads/timeline/timeline_x.png"
    assert get_file_url(None) is None
    assert get_file_url("") is None


def test_text_helpers():
    assert clean_text("  Dhaka ") == "Dhaka"
    assert clean_text("   ", "Unknown") == "Unknown"
    assert clean_text(None, "Admin") == "Admin"
    assert require_text(" Title ", "Title is required") == "Title"
    with pytest.raises(ValidationError) as exc_info:
        require_text("  ", "Title is required")
    assert exc_info.value.detail == "Title is required"


@pytest.mark.parametrize(
    "value,expected",
    [("2020", 2020), (" 1971 ", 1971), ("1952 AD", 1952), (1999, 1999), ("abc", None), ("", None), (None, None)],
)
def test_parse_year(value, expected):
    assert parse_year(value) == expected
