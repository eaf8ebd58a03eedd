from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator, model_validator
from pydantic.alias_generators import to_camel

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72  # bcrypt ignores or rejects anything past this

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=50)]


def strip_email(value):
    return value.strip() if isinstance(value, str) else value


def check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class RegisterRequest(BaseModel):
    username: Username
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)

    @field_validator("email", mode="before")
    @classmethod
    def trim_email(cls, value):
        return strip_email(value)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value):
        return value.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, value):
        return check_password_bytes(value)


class LoginRequest(BaseModel):
    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    password: str = Field(min_length=1)


class ProfileUpdate(BaseModel):
    """Profile edit; a password change needs the current password and a matching confirmation."""

    username: Optional[Username] = None
    email: Optional[EmailStr] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = Field(default=None, min_length=MIN_PASSWORD_LENGTH)
    confirm_password: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("email", mode="before")
    @classmethod
    def trim_email(cls, value):
        return strip_email(value)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value):
        return None if value is None else value.lower()

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value):
        return None if value is None else check_password_bytes(value)

    @model_validator(mode="after")
    def check_password_change(self):
        if self.new_password is not None:
            if not self.current_password:
                raise ValueError("Current password is required to set a new password")
            if self.new_password != self.confirm_password:
                raise ValueError("New password and confirmation do not match")
        elif self.username is None and self.email is None:
            raise ValueError("Nothing to update")
        return self


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class AuthResponse(BaseModel):
    token: str
    user: UserOut


class ProfileResponse(BaseModel):
    message: str
    user: UserOut
