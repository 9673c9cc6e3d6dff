"""
Length validators - bound the length of strings and the size of collections.
"""

from typing import Any

from fieldrules.core.models import ValueKind, classify
from fieldrules.utils.validation import validate_bound

from .base_validator import BaseValidator


class MinLengthValidator(BaseValidator):
    """
    Validates that a string or collection is at least a given length.

    Strings are measured in characters (len(str)), collections in items.
    This differs from a UTF-8 byte count: "café" is 4 characters but 5
    bytes on the wire. Values of any other kind pass.

    Parameters:
    - min_length: Minimum length (inclusive)
    """

    def __init__(self, min_length: int):
        self.min_length = validate_bound(min_length, "min_length")

    def validate(self, value: Any) -> None:
        kind = classify(value)

        if kind is ValueKind.TEXT and len(value) < self.min_length:
            raise self.fail(f"must be at least {self.min_length} characters long")

        if kind is ValueKind.COLLECTION and len(value) < self.min_length:
            raise self.fail(f"must have at least {self.min_length} items")

    @property
    def rule_type(self) -> str:
        return "min_length"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(min_length={self.min_length})"


class MaxLengthValidator(BaseValidator):
    """
    Validates that a string or collection does not exceed a given length.

    Strings are measured in characters, not UTF-8 bytes, as in
    MinLengthValidator.

    Parameters:
    - max_length: Maximum length (inclusive)
    """

    def __init__(self, max_length: int):
        self.max_length = validate_bound(max_length, "max_length")

    def validate(self, value: Any) -> None:
        kind = classify(value)

        if kind is ValueKind.TEXT and len(value) > self.max_length:
            raise self.fail(f"must not exceed {self.max_length} characters")

        if kind is ValueKind.COLLECTION and len(value) > self.max_length:
            raise self.fail(f"must not have more than {self.max_length} items")

    @property
    def rule_type(self) -> str:
        return "max_length"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(max_length={self.max_length})"
