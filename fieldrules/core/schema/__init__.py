"""
Field name resolution for records addressed by external (wire) names.
"""

from .field_map import JSON_METADATA_KEY, FieldMap
from .resolver import FieldNotFoundError, missing_fields, resolve

__all__ = [
    "FieldMap",
    "FieldNotFoundError",
    "JSON_METADATA_KEY",
    "missing_fields",
    "resolve",
]
