"""
Per-type tables mapping external field names to attribute accessors.

A table is built once per record type from its declared fields and cached,
so resolving a field never walks the class metadata twice.
"""

import dataclasses
from functools import lru_cache
from operator import attrgetter
from typing import Any, Callable, Dict, List

from pydantic import BaseModel

# Metadata key holding a dataclass field's external name
JSON_METADATA_KEY = "json"


class FieldMap:
    """
    Ordered mapping of external name -> accessor for one record type.

    Supported record types:
    - pydantic models: serialization_alias, then alias, then attribute name
    - dataclasses: field(metadata={"json": "wire_name"}), then attribute name

    Any other type yields an empty map.
    """

    def __init__(self, record_type: type, entries: Dict[str, str]):
        """
        Initialize field map.

        Args:
            record_type: The record type the map describes
            entries: External name -> attribute name, in declaration order
        """
        self.record_type = record_type
        self._attributes = entries
        self._getters: Dict[str, Callable[[Any], Any]] = {
            external: attrgetter(attribute) for external, attribute in entries.items()
        }

    @classmethod
    def for_type(cls, record_type: type) -> "FieldMap":
        """Return the cached field map for a record type."""
        return _build_field_map(record_type)

    def __contains__(self, external_name: str) -> bool:
        return external_name in self._getters

    def __len__(self) -> int:
        return len(self._getters)

    def external_names(self) -> List[str]:
        """List the external names the type declares, in declaration order."""
        return list(self._attributes)

    def attribute_for(self, external_name: str) -> str | None:
        """Return the attribute name behind an external name, if any."""
        return self._attributes.get(external_name)

    def getter(self, external_name: str) -> Callable[[Any], Any] | None:
        """Return the accessor for an external name, if any."""
        return self._getters.get(external_name)

    def __repr__(self) -> str:
        return f"FieldMap(type={self.record_type.__name__}, fields={self.external_names()})"


def _external_name_from_tag(tag: str, default: str) -> str:
    # "name,omitempty" -> "name"; "" or "-" options fall back to the attribute
    name = tag.split(",", 1)[0].strip()
    return name or default


def _pydantic_entries(record_type: type) -> Dict[str, str]:
    entries: Dict[str, str] = {}
    for attribute, info in record_type.model_fields.items():
        external = info.serialization_alias or info.alias or attribute
        # First declared field wins on duplicate external names
        entries.setdefault(external, attribute)
    return entries


def _dataclass_entries(record_type: type) -> Dict[str, str]:
    entries: Dict[str, str] = {}
    for field in dataclasses.fields(record_type):
        tag = field.metadata.get(JSON_METADATA_KEY)
        external = _external_name_from_tag(tag, field.name) if isinstance(tag, str) else field.name
        entries.setdefault(external, field.name)
    return entries


@lru_cache(maxsize=None)
def _build_field_map(record_type: type) -> FieldMap:
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return FieldMap(record_type, _pydantic_entries(record_type))

    if dataclasses.is_dataclass(record_type):
        return FieldMap(record_type, _dataclass_entries(record_type))

    return FieldMap(record_type, {})
