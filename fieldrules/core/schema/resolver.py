"""
Field resolver: locate a field's value in a record by its external name.
"""

from collections.abc import Mapping
from typing import Any

from .field_map import FieldMap


class FieldNotFoundError(LookupError):
    """Raised when a record does not declare the requested external name."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        self.message = f"field not found: {field_name}"
        super().__init__(self.message)


def resolve(record: Any, field_name: str) -> Any:
    """
    Return the current value of the field declared under an external name.

    Records may be pydantic models, dataclasses or mappings keyed by
    external name. A None record or any other kind of value declares no
    fields.

    Args:
        record: The record to look into
        field_name: External (wire) name of the field

    Returns:
        The field value (which may itself be None)

    Raises:
        FieldNotFoundError: If the record does not declare the field
    """
    if record is None:
        raise FieldNotFoundError(field_name)

    if isinstance(record, Mapping):
        if field_name in record:
            return record[field_name]
        raise FieldNotFoundError(field_name)

    getter = FieldMap.for_type(type(record)).getter(field_name)
    if getter is None:
        raise FieldNotFoundError(field_name)

    return getter(record)


def missing_fields(record_type: type, field_names: list[str]) -> list[str]:
    """
    List the external names a record type does not declare.

    Args:
        record_type: A pydantic model or dataclass type
        field_names: External names to check

    Returns:
        Names absent from the type, in the given order
    """
    field_map = FieldMap.for_type(record_type)
    return [name for name in field_names if name not in field_map]
