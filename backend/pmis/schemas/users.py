"""User Schemas — accounts referenced by created-by / assigned-to fields."""

from pydantic import Field

from pmis.schemas.base import ApiModel, PartialModel, RecordMixin


class UserCreate(ApiModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    full_name: str = Field(min_length=1)
    role: str = "user"
    avatar: str | None = None


class UserUpdate(PartialModel):
    non_nullable = frozenset({"username", "password", "email", "full_name", "role"})

    username: str | None = Field(None, min_length=1, max_length=100)
    password: str | None = Field(None, min_length=1)
    email: str | None = Field(None, min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    full_name: str | None = Field(None, min_length=1)
    role: str | None = None
    avatar: str | None = None


class User(RecordMixin, UserCreate):
    """Stored user — includes the password; never returned by the API."""


class UserPublic(RecordMixin):
    """User as returned by the API."""
    username: str
    email: str
    full_name: str
    role: str
    avatar: str | None = None
