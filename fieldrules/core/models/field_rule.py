"""
FieldRule model binding an external field name to an ordered list of validators.
"""

from typing import Any, Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

Validator = Callable[[Any], Optional[str]]


class FieldRule(BaseModel):
    """
    Declaration of the checks applied to one field of a record.

    Attributes:
        field: External (wire) name of the field, e.g. the serialization alias
        description: Human label for the field (informational only)
        validators: Validators run in order; each returns None on success
                    or a failure message
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., min_length=1)
    description: str = ""
    validators: List[Validator] = Field(default_factory=list)
