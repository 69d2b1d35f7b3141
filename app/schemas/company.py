"""Schemas for company accounts."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.company import Company


class CompanyLoginRequest(BaseModel):
    """Login payload; fields are checked by the service."""

    email: str | None = Field(None, description="Registered company email")
    password: str | None = Field(None, description="Account password")


class CompanyOut(BaseModel):
    """Public company projection, never carries the password hash."""

    id: str
    name: str
    email: str
    image: str = ""

    @classmethod
    def from_model(cls, company: Company) -> "CompanyOut":
        return cls(**company.to_public())


class CompanyProfileOut(CompanyOut):
    created_at: datetime | None = None


class CompanySummary(BaseModel):
    """Company fields embedded in job listings."""

    id: str
    name: str
    image: str = ""
    email: str | None = None

    @classmethod
    def from_model(cls, company: Company, include_email: bool = False) -> "CompanySummary":
        return cls(
            id=company.id,
            name=company.name,
            image=company.image,
            email=company.email if include_email else None,
        )
