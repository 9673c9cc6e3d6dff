"""
Base validator interface for all validation rules.

All validators must inherit from BaseValidator and implement the validate() method.
Calling a validator runs validate() and turns a failure into its message, so
instances can sit in a FieldRule's validator list next to plain functions.
"""

from abc import ABC, abstractmethod
from typing import Any

from fieldrules.core.models import is_absent


class ValidationError(Exception):
    """Raised by validate() when a value fails a rule."""

    def __init__(self, rule_name: str, message: str):
        self.rule_name = rule_name
        self.message = message
        super().__init__(f"[{rule_name}] {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one check against a single resolved value.
    Validators know nothing about the field they are applied to; the rule
    engine attaches the field name to any failure.

    Absent values (None or "") pass every validator unless skip_absent is
    set to False, which only the required check does.
    """

    skip_absent = True

    @abstractmethod
    def validate(self, value: Any) -> None:
        """
        Validate a value against this rule.

        Args:
            value: The resolved field value (never absent unless skip_absent is False)

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def fail(self, message: str) -> ValidationError:
        """Build the ValidationError for this rule."""
        return ValidationError(rule_name=self.rule_type, message=message)

    def __call__(self, value: Any) -> str | None:
        """
        Evaluate a value.

        Returns:
            None if the value passes, otherwise the failure message
        """
        if self.skip_absent and is_absent(value):
            return None

        try:
            self.validate(value)
        except ValidationError as e:
            return e.message

        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
