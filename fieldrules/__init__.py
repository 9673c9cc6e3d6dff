"""
fieldrules - declarative field validation for records.

Rules address a record's fields by external (wire) name, run ordered
validators against each value and collect every failure as a
{field, message} item.
"""

import logging

from fieldrules.core.models import FieldRule, UploadedFile, ValidationErrorItem
from fieldrules.core.rules import RuleEngine, RuleSetBuilder, validate
from fieldrules.core.schema import FieldNotFoundError, resolve
from fieldrules.core.validators import (
    BaseValidator,
    check_file_type,
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

__version__ = "0.1.0"

# Library logging stays silent until the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "validate",
    "RuleEngine",
    "RuleSetBuilder",
    "FieldRule",
    "ValidationErrorItem",
    "UploadedFile",
    "resolve",
    "FieldNotFoundError",
    "BaseValidator",
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
