"""
UploadedFile model representing a submitted file (name, content type, size).
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class UploadedFile(BaseModel):
    """
    Opaque handle for a file submitted with a form or multipart request.

    Only metadata is carried; validators never read the file content.

    Attributes:
        filename: Client-supplied file name
        content_type: Declared content type ("image/png", "application/pdf")
        size: Size in bytes
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "filename": "avatar.png",
                "content_type": "image/png",
                "size": 48213,
            }
        },
    )

    filename: str
    content_type: str = ""
    size: int = Field(0, ge=0)

    @classmethod
    def from_headers(cls, filename: str, headers: Mapping[str, str], size: int) -> "UploadedFile":
        """
        Build a handle from the MIME headers of a multipart part.

        Header names are matched case-insensitively; a missing Content-Type
        yields an empty content type.

        Args:
            filename: Client-supplied file name
            headers: Header mapping of the part
            size: Size in bytes

        Returns:
            UploadedFile handle
        """
        content_type = ""
        for name, value in headers.items():
            if name.lower() == "content-type":
                content_type = value
                break

        return cls(filename=filename, content_type=content_type, size=size)
