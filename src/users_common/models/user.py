"""User model for User API."""

from email_validator import validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """User entity model.

    JSON payloads use camelCase names (``firstName``, ``lastName``); the
    model also accepts the Python attribute names.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 99,
                "email": "david.parker@gmail.com",
                "firstName": "David",
                "lastName": "Parker",
                "password": "avid808",
            }
        },
    )

    id: int | None = Field(None, description="Identifier assigned by the service on creation")
    email: str = Field(..., description="Email address of the user")
    first_name: str | None = Field(None, alias="firstName", description="First name of the user")
    last_name: str | None = Field(None, alias="lastName", description="Last name of the user")
    password: str | None = Field(None, description="Password of the user")

    @field_validator("email")
    @classmethod
    def check_email_format(cls, value: str) -> str:
        """Reject malformed addresses; the address is stored as given, not normalised."""
        validate_email(value, check_deliverability=False, globally_deliverable=False, test_environment=True)
        return value
