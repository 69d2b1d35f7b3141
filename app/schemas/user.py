"""Schemas for job seeker profiles."""

from pydantic import BaseModel, Field


class UserUpdateRequest(BaseModel):
    name: str | None = Field(None, description="New display name")


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    image: str = ""
    resume: str = ""
