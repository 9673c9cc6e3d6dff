"""
RequiredFieldValidator - ensures a field holds a value.
"""

from typing import Any

from fieldrules.core.models import ValueKind, classify

from .base_validator import BaseValidator


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a field is present.

    Fails if:
    - Field value is None
    - Field value is an empty string
    - Field value is an empty collection (list, dict, set, ...)

    Any other value passes, including 0 and False.
    """

    skip_absent = False

    def validate(self, value: Any) -> None:
        """
        Validate that the field holds a value.

        Args:
            value: The field value to validate

        Raises:
            ValidationError: If the value is None, empty string or empty collection
        """
        kind = classify(value)

        if kind is ValueKind.ABSENT:
            raise self.fail("field is required")

        if kind is ValueKind.COLLECTION and len(value) == 0:
            raise self.fail("field is required")

    @property
    def rule_type(self) -> str:
        return "required"
