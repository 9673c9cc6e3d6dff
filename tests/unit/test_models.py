"""
Unit tests for Pydantic data models.

Tests all core models for validation, serialization and constraint enforcement.
"""

import json

import pytest
from pydantic import ValidationError

from fieldrules.core.models import (
    FieldRule,
    UploadedFile,
    ValidationErrorItem,
    ValueKind,
    classify,
    is_absent,
)
from fieldrules.core.validators import min_length, required


class TestValidationErrorItem:
    """Tests for ValidationErrorItem model"""

    def test_json_shape(self):
        """Test an item serializes to {field, message}"""
        item = ValidationErrorItem(field="name", message="field is required")
        assert item.model_dump() == {"field": "name", "message": "field is required"}
        assert json.loads(item.model_dump_json()) == {"field": "name", "message": "field is required"}

    def test_items_are_comparable(self):
        assert ValidationErrorItem(field="a", message="m") == ValidationErrorItem(field="a", message="m")

    def test_str(self):
        assert str(ValidationErrorItem(field="name", message="field is required")) == "name : field is required"

    def test_frozen(self):
        item = ValidationErrorItem(field="a", message="m")
        with pytest.raises(ValidationError):
            item.field = "b"


class TestFieldRule:
    """Tests for FieldRule model"""

    def test_valid_rule(self):
        rule = FieldRule(field="name", description="Name", validators=[required, min_length(3)])
        assert rule.field == "name"
        assert len(rule.validators) == 2

    def test_defaults(self):
        """Test description and validators default to empty"""
        rule = FieldRule(field="name")
        assert rule.description == ""
        assert rule.validators == []

    def test_plain_function_validator(self):
        def starts_with_capital(value):
            return None if value[:1].isupper() else "must start with a capital letter"

        rule = FieldRule(field="name", validators=[starts_with_capital])
        assert rule.validators[0]("ann") == "must start with a capital letter"

    def test_empty_field_name(self):
        with pytest.raises(ValidationError) as exc_info:
            FieldRule(field="")
        assert "field" in str(exc_info.value)

    def test_non_callable_validator(self):
        with pytest.raises(ValidationError):
            FieldRule(field="name", validators=["required"])


class TestUploadedFile:
    """Tests for UploadedFile model"""

    def test_valid_upload(self):
        upload = UploadedFile(filename="a.png", content_type="image/png", size=10)
        assert upload.size == 10

    def test_negative_size(self):
        with pytest.raises(ValidationError) as exc_info:
            UploadedFile(filename="a.png", content_type="image/png", size=-1)
        assert "size" in str(exc_info.value)

    def test_from_headers_case_insensitive(self):
        """Test Content-Type is read regardless of header case"""
        upload = UploadedFile.from_headers("a.pdf", {"content-type": "application/pdf"}, 99)
        assert upload.content_type == "application/pdf"
        assert upload.size == 99

    def test_from_headers_missing_content_type(self):
        upload = UploadedFile.from_headers("a.bin", {"Content-Disposition": "form-data"}, 1)
        assert upload.content_type == ""


class TestClassify:
    """Tests for value classification"""

    @pytest.mark.parametrize("value,kind", [
        (None, ValueKind.ABSENT),
        ("", ValueKind.ABSENT),
        ("x", ValueKind.TEXT),
        (1, ValueKind.INTEGER),
        (True, ValueKind.BOOLEAN),
        (1.5, ValueKind.FLOAT),
        ([], ValueKind.COLLECTION),
        ({"a": 1}, ValueKind.COLLECTION),
        ((1, 2), ValueKind.COLLECTION),
        (frozenset(), ValueKind.COLLECTION),
        (b"bytes", ValueKind.OTHER),
        (object(), ValueKind.OTHER),
    ])
    def test_kinds(self, value, kind):
        assert classify(value) is kind

    def test_upload_is_file(self, png_upload):
        assert classify(png_upload) is ValueKind.FILE

    def test_is_absent(self):
        assert is_absent(None)
        assert is_absent("")
        assert not is_absent(" ")
        assert not is_absent(0)
        assert not is_absent([])
