"""
Validation rule implementations.

Provides validators for required fields, lengths, string formats (email,
phone, URL), types, dates and uploaded files, plus ready-made instances
and factories in catalog.
"""

from .base_validator import BaseValidator, ValidationError
from .catalog import (
    date,
    email,
    file,
    file_size,
    file_type,
    image,
    image_mime,
    max_length,
    min_length,
    numeric,
    phone,
    required,
    string_type,
    url,
)
from .date_validator import DateValidator
from .file_validator import (
    IMAGE_MIME_TYPES,
    FileSizeValidator,
    FileTypeValidator,
    FileValidator,
    ImageMimeValidator,
    ImageValidator,
    check_file_type,
)
from .length_validator import MaxLengthValidator, MinLengthValidator
from .regex_validator import EmailValidator, PhoneValidator, RegexValidator, URLValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import NumericValidator, StringTypeValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "RegexValidator",
    "EmailValidator",
    "PhoneValidator",
    "URLValidator",
    "StringTypeValidator",
    "NumericValidator",
    "DateValidator",
    "FileValidator",
    "ImageValidator",
    "ImageMimeValidator",
    "FileSizeValidator",
    "FileTypeValidator",
    "IMAGE_MIME_TYPES",
    "check_file_type",
    "required",
    "min_length",
    "max_length",
    "email",
    "phone",
    "url",
    "string_type",
    "numeric",
    "date",
    "file",
    "image",
    "image_mime",
    "file_size",
    "file_type",
]
