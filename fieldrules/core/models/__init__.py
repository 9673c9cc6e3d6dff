"""
Core data models for field validation.

All models use Pydantic for runtime validation and type safety.
"""

from .error_item import ValidationErrorItem
from .field_rule import FieldRule, Validator
from .field_value import ValueKind, classify, is_absent
from .uploaded_file import UploadedFile

__all__ = [
    "FieldRule",
    "Validator",
    "ValidationErrorItem",
    "UploadedFile",
    "ValueKind",
    "classify",
    "is_absent",
]
