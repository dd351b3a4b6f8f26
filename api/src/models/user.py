"""
User models.

Provides Pydantic schemas for:
- Stored user records
- User creation requests
"""

import re

from pydantic import BaseModel, Field, field_validator


ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")


def validate_alphanumeric(value: str, field_name: str) -> str:
    """Reject values containing anything other than ASCII letters and digits."""
    if not ALPHANUMERIC.fullmatch(value):
        raise ValueError(f"{field_name} must contain only letters and numbers")
    return value


class User(BaseModel):
    """Stored user record."""
    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    full_name: str = Field(..., description="Full name")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "username": "some_guy",
                "full_name": "Guy Bernfeld"
            }
        }
    }


class UserCreate(BaseModel):
    """Create user request schema. The ID is assigned by the server."""
    username: str = Field(
        ...,
        min_length=3,
        max_length=15,
        description="Username (3-15 letters or digits)"
    )
    full_name: str = Field(
        ...,
        min_length=3,
        max_length=30,
        description="Full name (3-30 letters or digits)"
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        return validate_alphanumeric(v, "username")

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        """Validate full name format."""
        return validate_alphanumeric(v, "full_name")

    def to_user(self, user_id: int) -> User:
        """Build the stored record for this request under the given ID."""
        return User(id=user_id, username=self.username, full_name=self.full_name)

    model_config = {
        "json_schema_extra": {
            "example": {
                "username": "bob42",
                "full_name": "BobBuilder"
            }
        }
    }
