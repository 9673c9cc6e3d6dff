"""
DateValidator - validates ISO calendar dates (YYYY-MM-DD).
"""

import re
from datetime import datetime
from typing import Any

from .base_validator import BaseValidator

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DATE_FORMAT = "%Y-%m-%d"
ZERO_YEAR = "0000"
LEAP_YEAR = "2000"


class DateValidator(BaseValidator):
    """
    Validates that a string is a real calendar date in YYYY-MM-DD form.

    Checks run in order and the first failure wins:
    1. shape YYYY-MM-DD           -> "invalid date format"
    2. calendar parse             -> "invalid date"
    3. year in [1, 9999]          -> "invalid year"
    4. month in [1, 12]           -> "invalid month"
    5. day in [1, 31]             -> "invalid day"

    The calendar parse rejects dates such as 2023-02-30 or 2023-04-31.
    Year 0000 is outside the parser's range, so its month and day are
    checked against a leap year and a real month/day reports "invalid year".
    The month and day range checks only guard against values the parser
    would accept.
    """

    def validate(self, value: Any) -> None:
        if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
            raise self.fail("invalid date format")

        if value.startswith(ZERO_YEAR):
            # Year 0 is outside datetime's range; check month and day against
            # a leap year, as the proleptic calendar treats year 0 as leap
            try:
                datetime.strptime(LEAP_YEAR + value[4:], DATE_FORMAT)
            except ValueError:
                raise self.fail("invalid date")
            raise self.fail("invalid year")

        try:
            parsed = datetime.strptime(value, DATE_FORMAT)
        except ValueError:
            raise self.fail("invalid date")

        if not 1 <= parsed.year <= 9999:
            raise self.fail("invalid year")
        if not 1 <= parsed.month <= 12:
            raise self.fail("invalid month")
        if not 1 <= parsed.day <= 31:
            raise self.fail("invalid day")

    @property
    def rule_type(self) -> str:
        return "date"
