"""
Contact form schema.
Request bodies for POST /api/contact are validated against this model
before anything reaches the store.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import re

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_PATTERN = re.compile(r"^\+?\d{10,15}$")


class ContactForm(BaseModel):
    """An enquiry submitted through the site's contact form."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ..., min_length=2, max_length=100,
        description="Full name of the person enquiring"
    )
    email: str = Field(
        ..., max_length=254,
        description="Reply-to e-mail address"
    )
    phone: str = Field(
        ...,
        description="Contact number, 10 to 15 digits with optional leading +"
    )
    message: str = Field(
        ..., min_length=10, max_length=2000,
        description="Enquiry text"
    )
    package_interest: Optional[str] = Field(
        None,
        description="Title of the package the enquiry is about"
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v.lower()

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        # Spaces and dashes are formatting only
        digits = re.sub(r"[\s\-]", "", v)
        if not PHONE_PATTERN.match(digits):
            raise ValueError("Phone number must contain 10 to 15 digits")
        return digits
