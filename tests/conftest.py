"""
Pytest configuration and fixtures for fieldrules tests

This module provides shared record types and uploaded-file fixtures.
"""
from dataclasses import dataclass, field

import pytest
from hypothesis import HealthCheck, settings
from pydantic import BaseModel, Field

from fieldrules import UploadedFile

# Hypothesis's first text() draw builds its unicode tables, which can trip
# the too_slow health check on a cold run.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run full rule sets against records"
    )


# =======================
# RECORD TYPES
# =======================

class User(BaseModel):
    """Pydantic record whose internal names differ from its wire names"""

    full_name: str = Field("", serialization_alias="name")
    password: str = ""


@dataclass
class SignupForm:
    """Dataclass record declaring wire names through field metadata"""

    first_name: str = field(default="", metadata={"json": "first_name"})
    email_address: str = field(default="", metadata={"json": "email,omitempty"})
    phone_number: str = field(default="", metadata={"json": "phone"})
    website: str = field(default="", metadata={"json": "website"})
    birth_date: str = field(default="", metadata={"json": "birth_date"})
    age: object = field(default=None, metadata={"json": "age"})
    tags: list = field(default_factory=list, metadata={"json": "tags"})
    avatar: object = field(default=None, metadata={"json": "avatar"})
    resume: object = field(default=None, metadata={"json": "resume"})


@pytest.fixture
def user_type():
    return User


@pytest.fixture
def signup_form_type():
    return SignupForm


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def png_upload() -> UploadedFile:
    return UploadedFile(filename="avatar.png", content_type="image/png", size=500)


@pytest.fixture
def gif_upload() -> UploadedFile:
    return UploadedFile(filename="avatar.gif", content_type="image/gif", size=1500)


@pytest.fixture
def pdf_upload() -> UploadedFile:
    return UploadedFile(filename="resume.pdf", content_type="application/PDF", size=2048)
