"""
Classification of resolved field values into the kinds validators understand.
"""

from collections.abc import Mapping, Sized
from enum import Enum
from typing import Any

from .uploaded_file import UploadedFile


class ValueKind(str, Enum):
    """Closed set of value kinds a validator can receive."""

    ABSENT = "absent"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    COLLECTION = "collection"
    FILE = "file"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    """
    Classify a resolved field value.

    None and the empty string are both ABSENT. bool is checked before int
    because bool is an int subclass but is not numeric here.

    Args:
        value: The resolved field value

    Returns:
        The ValueKind of the value
    """
    if value is None or (isinstance(value, str) and value == ""):
        return ValueKind.ABSENT
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, UploadedFile):
        return ValueKind.FILE
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.OTHER
    if isinstance(value, Mapping) or (isinstance(value, Sized) and hasattr(value, "__iter__")):
        return ValueKind.COLLECTION
    return ValueKind.OTHER


def is_absent(value: Any) -> bool:
    """Return True for None and the empty string."""
    return classify(value) is ValueKind.ABSENT
