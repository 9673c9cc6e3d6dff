"""
RegexValidator - validates string values against a regular expression pattern.

Email, phone and URL checks are fixed-pattern specializations.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseValidator


class RegexValidator(BaseValidator):
    """
    Validates that a string value fully matches a regular expression pattern.

    Parameters:
    - pattern: Regular expression pattern (string or compiled Pattern)
    - message: Failure message when the value does not match
    - type_message: Failure message when the value is not a string
                    (defaults to message)
    - flags: Optional regex flags (e.g., re.IGNORECASE)
    """

    def __init__(
        self,
        pattern: str | Pattern,
        message: str = "does not match the required format",
        type_message: str | None = None,
        flags: int = 0,
    ):
        try:
            if isinstance(pattern, str):
                self.pattern: Pattern = re.compile(pattern, flags)
            elif isinstance(pattern, Pattern):
                self.pattern = pattern
            else:
                raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")

        self.message = message
        self.type_message = type_message or message

    def validate(self, value: Any) -> None:
        """
        Validate that the value matches the regex pattern.

        Args:
            value: The field value to validate

        Raises:
            ValidationError: If value is not a string or doesn't match the pattern
        """
        if not isinstance(value, str):
            raise self.fail(self.type_message)

        if not self.pattern.fullmatch(value):
            raise self.fail(self.message)

    @property
    def rule_type(self) -> str:
        return "regex"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pattern={self.pattern.pattern!r})"


EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")

# E.164: "+", a non-zero digit, then 1 to 14 more digits
PHONE_PATTERN = re.compile(r"\+[1-9][0-9]{1,14}")

URL_PATTERN = re.compile(
    r"(?:http|https)://[\w\-]+(?:\.[\w\-]+)+(?:[\w\-.,@?^=%&:/~+#]*[\w\-@?^=%&/~+#])?",
    re.ASCII,
)


class EmailValidator(RegexValidator):
    """Validates a local@domain.tld email address."""

    def __init__(self):
        super().__init__(EMAIL_PATTERN, message="must be a valid email address")

    @property
    def rule_type(self) -> str:
        return "email"


class PhoneValidator(RegexValidator):
    """Validates an international phone number in E.164 form."""

    def __init__(self):
        super().__init__(PHONE_PATTERN, message="invalid phone number format")

    @property
    def rule_type(self) -> str:
        return "phone"


class URLValidator(RegexValidator):
    """Validates an http(s) URL with a dotted host."""

    def __init__(self):
        super().__init__(URL_PATTERN, message="not a valid URL", type_message="value is not a string")

    @property
    def rule_type(self) -> str:
        return "url"
