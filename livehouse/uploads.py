"""
Flyer image uploads.

A file is accepted only when the declared MIME type, the file extension and
the leading bytes all say JPEG, PNG or GIF, and it is at most 5 MB. Stored
files get a generated name and are served back under /uploads/.
"""

import logging
import random
import re
import time
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
URL_PREFIX = "/uploads"

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif"}
_ALLOWED_MIME = re.compile(r"jpeg|jpg|png|gif")

_SIGNATURES = [
    b"\xff\xd8\xff",           # JPEG
    b"\x89PNG\r\n\x1a\n",      # PNG
    b"GIF87a",
    b"GIF89a",
]

MSG_NO_FILE = "No file uploaded"
MSG_BAD_TYPE = "Only .png, .jpg and .gif format allowed!"
MSG_TOO_LARGE = "Upload error: File too large"


class UploadError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def _looks_like_image(data: bytes) -> bool:
    return any(data.startswith(sig) for sig in _SIGNATURES)


def validate_image(filename: Optional[str], content_type: Optional[str], data: bytes) -> str:
    """Check an upload and return its lower-cased extension; raise UploadError otherwise."""
    if not filename:
        raise UploadError(MSG_NO_FILE)
    if len(data) > MAX_UPLOAD_BYTES:
        raise UploadError(MSG_TOO_LARGE)

    ext = Path(filename).suffix.lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise UploadError(MSG_BAD_TYPE)
    if not content_type or not _ALLOWED_MIME.search(content_type.lower()):
        raise UploadError(MSG_BAD_TYPE)
    if not _looks_like_image(data):
        raise UploadError(MSG_BAD_TYPE)
    return ext


def generate_name(ext: str) -> str:
    """<epoch millis>-<random>.<ext>, e.g. '1760668800000-482913455.png'."""
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


def store_image(
    upload_dir: Path,
    filename: Optional[str],
    content_type: Optional[str],
    data: bytes,
) -> str:
    """Validate and write an uploaded image. Returns the URL path it is served from."""
    ext = validate_image(filename, content_type, data)
    upload_dir.mkdir(parents=True, exist_ok=True)

    name = generate_name(ext)
    while (upload_dir / name).exists():
        name = generate_name(ext)
    (upload_dir / name).write_bytes(data)

    logger.info("Stored upload %s (%d bytes)", name, len(data))
    return f"{URL_PREFIX}/{name}"
