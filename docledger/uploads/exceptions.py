"""Exceptions for image uploads."""

from docledger.core.exceptions import NotFoundError, ValidationError


class UnsupportedImageTypeError(ValidationError):
    default_message = "Invalid file type. Only JPEG, PNG, GIF and WebP are allowed."


class ImageTooLargeError(ValidationError):
    default_message = "Image is larger than the upload limit"


class ImageNotFoundError(NotFoundError):
    default_message = "Image not found"
