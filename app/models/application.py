"""Job application model."""

import enum
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.storage import Base
from app.models._time import utc_now
from app.models.company import new_id
from app.models.job import Job
from app.models.user import User


class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class JobApplication(Base):
    """Links one applicant to one job.

    ``company_id`` is copied from the job when the row is inserted and is
    never recomputed afterwards.
    """

    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_job_applications_user_job"),
        Index("ix_job_applications_company_status", "company_id", "status"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    job_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("jobs.id"), nullable=False, index=True
    )
    company_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("companies.id"), nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(20), default=ApplicationStatus.PENDING.value, nullable=False
    )
    date: Mapped[datetime] = mapped_column(DateTime, default=utc_now, nullable=False)

    job: Mapped[Job] = relationship(lazy="raise")
    # Applicant rows are removed by identity sync without touching applications.
    user: Mapped[User | None] = relationship(
        primaryjoin="foreign(JobApplication.user_id) == User.id",
        lazy="raise",
        viewonly=True,
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "job_id": self.job_id,
            "company_id": self.company_id,
            "status": self.status,
            "date": self.date,
        }
