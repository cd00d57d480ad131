# pawfam/schemas/auth.py
import uuid
from typing import Literal

from pydantic import ConfigDict, EmailStr, field_validator
from sqlmodel import SQLModel, Field

Role = Literal["customer", "vendor"]


def _lower_email(v: str) -> str:
    return v.strip().lower()


class RegisterRequest(SQLModel):
    """
    Payload for customer and vendor registration.

    Validation rules:
      - username, email, password are required and cannot be blank
      - email is lower-cased (uniqueness is case-insensitive)
    """

    model_config = ConfigDict(extra="forbid")

    username: str = Field(max_length=50)
    email: EmailStr
    password: str = Field(max_length=128)

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("field cannot be empty")
        return v

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _lower_email(v)


class LoginRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = _lower_email(v)
        if not v:
            raise ValueError("email cannot be empty")
        return v


class ResetOtpRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    email: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = _lower_email(v)
        if not v:
            raise ValueError("email cannot be empty")
        return v


class VerifyOtpRequest(ResetOtpRequest):
    otp: str = Field(min_length=1, max_length=16)

    @field_validator("otp")
    @classmethod
    def strip_otp(cls, v: str) -> str:
        return v.strip()


class UserPublic(SQLModel):
    """Identity echoed to clients. Never carries the password hash."""

    id: uuid.UUID
    username: str
    email: str
    role: Role


class AuthResponse(SQLModel):
    token: str
    user: UserPublic
    message: str


class MeResponse(SQLModel):
    user: UserPublic


class OtpSentResponse(SQLModel):
    message: str
    email: str


class OtpVerifiedResponse(SQLModel):
    message: str
    verified: bool = True
