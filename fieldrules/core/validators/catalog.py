"""
Ready-to-use validator instances and factories for building field rules.

Example:
    FieldRule(field="first_name", validators=[required, min_length(3), max_length(50)])
"""

from collections.abc import Collection

from .date_validator import DateValidator
from .file_validator import (
    FileSizeValidator,
    FileTypeValidator,
    FileValidator,
    ImageMimeValidator,
    ImageValidator,
)
from .length_validator import MaxLengthValidator, MinLengthValidator
from .regex_validator import EmailValidator, PhoneValidator, URLValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import NumericValidator, StringTypeValidator

required = RequiredFieldValidator()
email = EmailValidator()
phone = PhoneValidator()
url = URLValidator()
string_type = StringTypeValidator()
numeric = NumericValidator()
date = DateValidator()
file = FileValidator()
image = ImageValidator()
image_mime = ImageMimeValidator()


def min_length(minimum: int) -> MinLengthValidator:
    """Validator requiring at least `minimum` characters or items."""
    return MinLengthValidator(minimum)


def max_length(maximum: int) -> MaxLengthValidator:
    """Validator allowing at most `maximum` characters or items."""
    return MaxLengthValidator(maximum)


def file_size(max_bytes: int) -> FileSizeValidator:
    """Validator allowing uploaded files of at most `max_bytes` bytes."""
    return FileSizeValidator(max_bytes)


def file_type(valid_types: Collection[str]) -> FileTypeValidator:
    """Validator allowing uploaded files whose content type is in `valid_types`."""
    return FileTypeValidator(valid_types)
