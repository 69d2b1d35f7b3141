"""Job posting model."""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.storage import Base
from app.models._time import utc_now
from app.models.company import Company, new_id


class JobCategory(str, enum.Enum):
    PROGRAMMING = "Programming"
    DESIGN = "Design"
    MARKETING = "Marketing"
    FINANCE = "Finance"
    MANAGEMENT = "Management"
    DATA_SCIENCE = "Data Science"
    SALES = "Sales"
    HUMAN_RESOURCES = "Human Resources"
    ENGINEERING = "Engineering"
    OTHER = "Other"


class JobLevel(str, enum.Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    SENIOR = "Senior"
    LEAD = "Lead"
    DIRECTOR = "Director"


class Job(Base):
    """Job listing owned by exactly one company."""

    __tablename__ = "jobs"
    __table_args__ = (
        Index("ix_jobs_filters", "category", "level", "location", "visible"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    level: Mapped[str] = mapped_column(String(50), nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)
    company_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("companies.id"), nullable=False, index=True
    )
    visible: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, default=utc_now, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, onupdate=utc_now, nullable=False
    )

    company: Mapped[Company] = relationship(lazy="raise")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "location": self.location,
            "category": self.category,
            "level": self.level,
            "salary": self.salary,
            "company_id": self.company_id,
            "visible": self.visible,
            "date": self.date,
        }
