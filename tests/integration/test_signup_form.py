"""
Integration tests running complete rule sets against typed records.
"""

import json

import pytest

from fieldrules import (
    FieldRule,
    RuleEngine,
    RuleSetBuilder,
    UploadedFile,
    date,
    email,
    file_size,
    file_type,
    image,
    image_mime,
    max_length,
    min_length,
    numeric,
    phone,
    required,
    url,
    validate,
)


@pytest.fixture
def user_rules():
    return RuleSetBuilder() \
        .add_rule("name", required, min_length(3), max_length(50), description="Name") \
        .add_rule("password", required, min_length(6), max_length(50), description="Password") \
        .build()


@pytest.fixture
def signup_rules():
    return [
        FieldRule(field="first_name", description="First name", validators=[required, min_length(2)]),
        FieldRule(field="email", description="Email", validators=[required, email]),
        FieldRule(field="phone", description="Phone", validators=[phone]),
        FieldRule(field="website", description="Website", validators=[url]),
        FieldRule(field="birth_date", description="Birth date", validators=[date]),
        FieldRule(field="age", description="Age", validators=[numeric]),
        FieldRule(field="tags", description="Tags", validators=[max_length(3)]),
        FieldRule(field="avatar", description="Avatar", validators=[image, image_mime, file_size(1000)]),
        FieldRule(field="resume", description="Resume", validators=[file_type({"pdf", "msword"})]),
    ]


@pytest.mark.integration
class TestUserScenarios:
    """Name and password rules against a pydantic record"""

    def test_short_name(self, user_type, user_rules):
        """Test a short name reports only the minimum length"""
        user = user_type(full_name="Jo", password="123456")

        errors = validate(user, user_rules)

        assert [e.model_dump() for e in errors] == [
            {"field": "name", "message": "must be at least 3 characters long"},
        ]

    def test_empty_fields(self, user_type, user_rules):
        """Test empty fields report required once each; length checks skip absent values"""
        user = user_type(full_name="", password="")

        errors = validate(user, user_rules)

        assert [e.model_dump() for e in errors] == [
            {"field": "name", "message": "field is required"},
            {"field": "password", "message": "field is required"},
        ]

    def test_valid_user_is_idempotent(self, user_type, user_rules):
        """Test a valid record yields an empty list on every call"""
        user = user_type(full_name="John", password="123456")
        engine = RuleEngine(user_rules)

        assert engine.validate(user) == []
        assert engine.validate(user) == []

    def test_rules_addressing_internal_name(self, user_type):
        """Test rules must use the external name, not the attribute name"""
        user = user_type(full_name="John", password="123456")

        errors = validate(user, RuleSetBuilder().add_rule("full_name", required).build())

        assert [e.message for e in errors] == ["field not found: full_name"]

    def test_errors_serialize_to_json_array(self, user_type, user_rules):
        errors = validate(user_type(full_name="", password="12"), user_rules)

        payload = json.loads(json.dumps([e.model_dump() for e in errors]))

        assert payload == [
            {"field": "name", "message": "field is required"},
            {"field": "password", "message": "must be at least 6 characters long"},
        ]


@pytest.mark.integration
class TestSignupForm:
    """Full signup form rules against a dataclass record"""

    def test_valid_form(self, signup_form_type, signup_rules):
        form = signup_form_type(
            first_name="Ann",
            email_address="ann@example.com",
            phone_number="+353861234567",
            website="https://ann.example.com/about",
            birth_date="1990-05-17",
            age=33,
            tags=["a", "b"],
            avatar=UploadedFile(filename="me.png", content_type="image/png", size=500),
            resume=UploadedFile(filename="cv.pdf", content_type="application/pdf", size=20000),
        )

        assert validate(form, signup_rules) == []

    def test_optional_fields_may_be_empty(self, signup_form_type, signup_rules):
        """Test only required fields are enforced on an otherwise empty form"""
        form = signup_form_type(first_name="Ann", email_address="ann@example.com")

        assert validate(form, signup_rules) == []

    def test_every_problem_is_reported(self, signup_form_type, signup_rules):
        form = signup_form_type(
            first_name="A",
            email_address="not-an-email",
            phone_number="0861234567",
            website="ann.example.com",
            birth_date="2023-02-30",
            age="33.5",
            tags=["a", "b", "c", "d"],
            avatar=UploadedFile(filename="me.gif", content_type="image/gif", size=1500),
            resume="cv.pdf",
        )

        errors = validate(form, signup_rules)

        assert [(e.field, e.message) for e in errors] == [
            ("first_name", "must be at least 2 characters long"),
            ("email", "must be a valid email address"),
            ("phone", "invalid phone number format"),
            ("website", "not a valid URL"),
            ("birth_date", "invalid date"),
            ("age", "must be numeric"),
            ("tags", "must not have more than 3 items"),
            ("avatar", "must be PNG, JPG, JPEG or SVG"),
            ("avatar", "file size must be less than 1000 bytes"),
            ("resume", "invalid file format"),
        ]

    def test_upload_from_multipart_headers(self, signup_form_type, signup_rules):
        resume = UploadedFile.from_headers("cv.doc", {"CONTENT-TYPE": "application/MSWord"}, 1024)
        form = signup_form_type(first_name="Ann", email_address="ann@example.com", resume=resume)

        assert validate(form, signup_rules) == []
