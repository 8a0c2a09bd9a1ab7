import pytest

from livehouse.uploads import (
    MAX_UPLOAD_BYTES,
    MSG_BAD_TYPE,
    MSG_NO_FILE,
    MSG_TOO_LARGE,
    UploadError,
    generate_name,
    store_image,
    validate_image,
)
from tests.conftest import GIF_BYTES, JPEG_BYTES, PNG_BYTES


@pytest.mark.parametrize("filename, mime, data, ext", [
    ("flyer.png", "image/png", PNG_BYTES, ".png"),
    ("flyer.JPG", "image/jpeg", JPEG_BYTES, ".jpg"),
    ("flyer.jpeg", "image/jpeg", JPEG_BYTES, ".jpeg"),
    ("flyer.gif", "image/gif", GIF_BYTES, ".gif"),
])
def test_accepts_images(filename, mime, data, ext):
    assert validate_image(filename, mime, data) == ext


def _rejected(filename, mime, data):
    with pytest.raises(UploadError) as info:
        validate_image(filename, mime, data)
    return info.value.message


def test_rejects_missing_file():
    assert _rejected(None, None, b"") == MSG_NO_FILE


def test_rejects_oversized_png():
    data = PNG_BYTES + b"\x00" * (6 * 1024 * 1024)
    assert _rejected("big.png", "image/png", data) == MSG_TOO_LARGE


def test_accepts_exactly_five_megabytes():
    data = PNG_BYTES + b"\x00" * (MAX_UPLOAD_BYTES - len(PNG_BYTES))
    assert validate_image("edge.png", "image/png", data) == ".png"


def test_rejects_exe_renamed_to_png():
    exe = b"MZ\x90\x00" + b"\x00" * 1020
    assert _rejected("setup.png", "image/png", exe) == MSG_BAD_TYPE


def test_rejects_real_png_with_wrong_declared_mime():
    assert _rejected("flyer.png", "application/octet-stream", PNG_BYTES) == MSG_BAD_TYPE


def test_rejects_disallowed_extension():
    assert _rejected("flyer.webp", "image/png", PNG_BYTES) == MSG_BAD_TYPE


def test_generated_names_keep_extension():
    name = generate_name(".png")
    stamp, _, rest = name.partition("-")
    assert stamp.isdigit()
    assert rest.endswith(".png")


def test_store_image_writes_file(tmp_path):
    url = store_image(tmp_path / "uploads", "flyer.png", "image/png", PNG_BYTES)
    assert url.startswith("/uploads/")
    stored = tmp_path / "uploads" / url.rsplit("/", 1)[1]
    assert stored.read_bytes() == PNG_BYTES
