"""
File validators - check uploaded file handles.

Every validator here fails with "invalid file format" when given a value
that is not an UploadedFile.
"""

from collections.abc import Collection
from typing import Any

from fieldrules.core.models import UploadedFile, is_absent
from fieldrules.utils.validation import validate_bound, validate_content_types

from .base_validator import BaseValidator

IMAGE_MIME_TYPES = frozenset({"image/png", "image/jpg", "image/jpeg", "image/svg+xml"})

INVALID_FILE_MESSAGE = "invalid file format"


class FileValidator(BaseValidator):
    """Validates that a field holds an uploaded file of any type."""

    def validate(self, value: Any) -> None:
        self.require_file(value)

    def require_file(self, value: Any) -> UploadedFile:
        """Return the value as an UploadedFile or fail."""
        if not isinstance(value, UploadedFile):
            raise self.fail(INVALID_FILE_MESSAGE)
        return value

    @property
    def rule_type(self) -> str:
        return "file"


class ImageValidator(FileValidator):
    """Validates that an uploaded file declares an image/* content type."""

    def validate(self, value: Any) -> None:
        upload = self.require_file(value)

        if not upload.content_type.startswith("image/"):
            raise self.fail("must be an image")

    @property
    def rule_type(self) -> str:
        return "image"


class ImageMimeValidator(FileValidator):
    """Validates that an uploaded file is a PNG, JPG, JPEG or SVG image."""

    def validate(self, value: Any) -> None:
        upload = self.require_file(value)

        if upload.content_type not in IMAGE_MIME_TYPES:
            raise self.fail("must be PNG, JPG, JPEG or SVG")

    @property
    def rule_type(self) -> str:
        return "image_mime"


class FileSizeValidator(FileValidator):
    """
    Validates that an uploaded file does not exceed a size limit.

    Parameters:
    - max_bytes: Largest accepted size in bytes (inclusive)
    """

    def __init__(self, max_bytes: int):
        self.max_bytes = validate_bound(max_bytes, "max_bytes")

    def validate(self, value: Any) -> None:
        upload = self.require_file(value)

        if upload.size > self.max_bytes:
            raise self.fail(f"file size must be less than {self.max_bytes} bytes")

    @property
    def rule_type(self) -> str:
        return "file_size"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(max_bytes={self.max_bytes})"


def normalize_file_type(content_type: str) -> str:
    """Strip a leading "application/" and lower-case the content type."""
    return content_type.removeprefix("application/").lower()


def check_file_type(value: Any, valid_types: Collection[str]) -> str | None:
    """
    Check an uploaded file's content type against an allow-list.

    The content type has any leading "application/" removed and is
    lower-cased before the lookup, so "application/PDF" matches "pdf".

    Args:
        value: The field value to check
        valid_types: Allowed (normalized) content types

    Returns:
        None if the file type is allowed or the value is absent,
        otherwise the failure message
    """
    if is_absent(value):
        return None

    if not isinstance(value, UploadedFile):
        return INVALID_FILE_MESSAGE

    if normalize_file_type(value.content_type) not in valid_types:
        return "file type is not allowed"

    return None


class FileTypeValidator(FileValidator):
    """
    Validates an uploaded file's content type against an allow-list.

    Parameters:
    - valid_types: Allowed content types, compared after normalize_file_type()
    """

    def __init__(self, valid_types: Collection[str]):
        self.valid_types = validate_content_types(valid_types)

    def validate(self, value: Any) -> None:
        message = check_file_type(value, self.valid_types)
        if message:
            raise self.fail(message)

    @property
    def rule_type(self) -> str:
        return "file_type"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(valid_types={sorted(self.valid_types)})"
