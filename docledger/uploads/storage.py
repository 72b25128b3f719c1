"""Image storage through Django's default storage backend.

Files land under ``DOCLEDGER['UPLOAD_DIR']`` with a unique name built from
the original stem, a millisecond timestamp and a random number.
"""

import logging
import os
import secrets
import time
from dataclasses import dataclass

from django.core.files.storage import default_storage
from django.utils.text import get_valid_filename

from docledger.core.conf import ledger_setting
from docledger.core.exceptions import ValidationError

from .exceptions import ImageNotFoundError, ImageTooLargeError, UnsupportedImageTypeError

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
MAX_FILES_PER_REQUEST = 10


@dataclass(frozen=True)
class StoredImage:
    filename: str
    original_name: str
    url: str
    size: int
    content_type: str


def unique_name(original_name: str) -> str:
    """Return e.g. 'logo-1760860800000-482913775.png' for 'logo.png'."""
    stem, ext = os.path.splitext(os.path.basename(original_name or "image"))
    stem = get_valid_filename(stem) if stem.strip() else "image"
    stamp = int(time.time() * 1000)
    return f"{stem}-{stamp}-{secrets.randbelow(10**9)}{ext.lower()}"


def _storage_path(filename: str) -> str:
    return f"{ledger_setting('UPLOAD_DIR').strip('/')}/{filename}"


def validate_image(upload) -> None:
    """
    Check type and size of an uploaded file.

    Raises:
        UnsupportedImageTypeError: If it is not JPEG, PNG, GIF or WebP
        ImageTooLargeError: If it exceeds DOCLEDGER['UPLOAD_MAX_BYTES']
    """
    if (upload.content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
        raise UnsupportedImageTypeError()
    max_bytes = ledger_setting("UPLOAD_MAX_BYTES")
    if upload.size > max_bytes:
        raise ImageTooLargeError(f"Image is larger than {max_bytes // (1024 * 1024)} MB")


def save_image(upload) -> StoredImage:
    validate_image(upload)
    stored_path = default_storage.save(_storage_path(unique_name(upload.name)), upload)
    filename = os.path.basename(stored_path)
    logger.info("Stored image %s (%d bytes)", stored_path, upload.size)
    return StoredImage(
        filename=filename,
        original_name=upload.name,
        url=default_storage.url(stored_path),
        size=upload.size,
        content_type=upload.content_type,
    )


def save_images(uploads) -> list:
    """Validate every file first so a bad one stores nothing."""
    if len(uploads) > MAX_FILES_PER_REQUEST:
        raise ValidationError(f"At most {MAX_FILES_PER_REQUEST} images per upload")
    for upload in uploads:
        validate_image(upload)
    return [save_image(upload) for upload in uploads]


def delete_image(filename: str) -> None:
    """
    Delete a stored image by its bare filename.

    Raises:
        ImageNotFoundError: If the name is not a plain filename or does not exist
    """
    if not filename or os.path.basename(filename) != filename or filename.startswith("."):
        raise ImageNotFoundError()
    path = _storage_path(filename)
    if not default_storage.exists(path):
        raise ImageNotFoundError()
    default_storage.delete(path)
    logger.info("Deleted image %s", path)
