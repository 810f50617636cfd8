"""Request models for the HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from talent_manager.domain.users import Role


class ArtistIntakeForm(BaseModel):
    """Fields submitted when a manager adds an artist."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone_number: str | None = None
    social: str | None = None
    manager_id: UUID | None = None

    @field_validator("phone_number", "social", "manager_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ArtistUpdate(BaseModel):
    """Partial artist update; only fields present in the body are written."""

    model_config = ConfigDict(extra="ignore")

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    social: str | None = None
    website: str | None = None
    bio: str | None = None
    address: str | None = None
    profile_picture: str | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def _require_name(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            raise ValueError("must not be empty")
        return value


class BookingCreate(BaseModel):
    """Booking creation payload."""

    model_config = ConfigDict(extra="ignore")

    title: str
    start: datetime
    end: datetime
    status: str | None = None


class BookingUpdate(BaseModel):
    """Booking update payload identifying the booking by id."""

    model_config = ConfigDict(extra="ignore")

    id: UUID | None = None
    title: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    status: str | None = None


class SignUpRequest(BaseModel):
    """Self sign-up payload."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    first_name: str
    last_name: str
    phone_number: str | None = None
    role: Role = Role.ARTIST


class SignInRequest(BaseModel):
    """Credentials for sign-in."""

    email: str
    password: str
