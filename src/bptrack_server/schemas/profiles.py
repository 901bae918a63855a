"""Pydantic schemas for profiles."""

from typing import Literal

from pydantic import Field

from bptrack_server.schemas.base import CamelModel, UTCDateTime

Gender = Literal["male", "female"]


class ProfileCreate(CamelModel):
    """Body for creating a profile."""

    name: str = Field(min_length=1, max_length=100)
    gender: Gender
    age: int = Field(ge=0, le=130)
    medical_conditions: list[str] = Field(default_factory=list)


class ProfileUpdate(CamelModel):
    """Partial profile update."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    gender: Gender | None = None
    age: int | None = Field(default=None, ge=0, le=130)
    medical_conditions: list[str] | None = None


class ProfileRead(CamelModel):
    """Profile as returned by the API."""

    id: str
    name: str
    gender: str
    age: int
    medical_conditions: list[str]
    created_at: UTCDateTime
