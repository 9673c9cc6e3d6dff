"""
Type validators - check the kind of a field value.
"""

import re
from typing import Any

from fieldrules.core.models import ValueKind, classify

from .base_validator import BaseValidator

DIGITS_PATTERN = re.compile(r"[0-9]+")


class StringTypeValidator(BaseValidator):
    """Validates that a field holds a string."""

    def validate(self, value: Any) -> None:
        if classify(value) is not ValueKind.TEXT:
            raise self.fail("must be a string")

    @property
    def rule_type(self) -> str:
        return "string"


class NumericValidator(BaseValidator):
    """
    Validates that a field is numeric.

    Passes for integers (bool excluded) and for strings made only of the
    ASCII digits 0-9. Floats, signs, decimal points and thousands
    separators fail.
    """

    def validate(self, value: Any) -> None:
        kind = classify(value)

        if kind is ValueKind.INTEGER:
            return

        if kind is ValueKind.TEXT and DIGITS_PATTERN.fullmatch(value):
            return

        raise self.fail("must be numeric")

    @property
    def rule_type(self) -> str:
        return "numeric"
