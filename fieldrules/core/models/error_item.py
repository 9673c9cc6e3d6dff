"""
ValidationErrorItem model representing one field-scoped validation failure.
"""

from pydantic import BaseModel, ConfigDict


class ValidationErrorItem(BaseModel):
    """
    One failed check for one field.

    The shape is the wire-facing contract of the library: a list of these
    serializes directly into a JSON array for an API response.

    Attributes:
        field: External (wire) name of the field that failed
        message: Human-readable failure message
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "field": "first_name",
                "message": "must be at least 3 characters long",
            }
        },
    )

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field} : {self.message}"
