"""Pydantic models for API request/response."""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72
MIN_PASSWORD_LENGTH = 6


def _phone_to_str(v):
    # Clients send phone numbers both as strings and as JSON numbers
    if isinstance(v, bool):
        raise ValueError("phone must be a string or number")
    if isinstance(v, (int, float)):
        return str(int(v)) if float(v).is_integer() else str(v)
    return v


def _not_null(v, field: str):
    if v is None:
        raise ValueError(f"{field} cannot be null")
    return v


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── users ────────────────────────────────────────────────────

class RegisterRequest(BaseModel):
    """Request model for user registration."""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def _coerce_phone(cls, v):
        return _phone_to_str(v)


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class UpdateProfileRequest(BaseModel):
    """Partial profile update. Email and password are not accepted here."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v):
        _not_null(v, "name")
        return v.strip() if isinstance(v, str) else v

    @field_validator("phone", mode="before")
    @classmethod
    def _coerce_phone(cls, v):
        return _phone_to_str(v)


class UserProfile(CamelModel):
    """Public profile of a user (never includes the password hash)."""
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    """Response model for registration and login."""
    token: str
    user: UserProfile


# ── children ─────────────────────────────────────────────────

class ChildCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    birth_date: Optional[date] = Field(None, alias="birthDate")
    notes: Optional[str] = Field(None, max_length=2000)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class ChildUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    birth_date: Optional[date] = Field(None, alias="birthDate")
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v):
        _not_null(v, "name")
        return v.strip() if isinstance(v, str) else v


class ChildResponse(CamelModel):
    id: str
    parent_id: str
    name: str
    birth_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# ── errors ───────────────────────────────────────────────────

class ErrorResponse(BaseModel):
    """Body of every error response."""
    success: bool = False
    code: str
    message: str
