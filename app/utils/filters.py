"""Public job listing filters."""

from dataclasses import dataclass

from sqlalchemy import ColumnElement, or_

from app.models.job import Job


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _contains(column, term: str) -> ColumnElement[bool]:
    return column.ilike(f"%{_escape_like(term)}%", escape="\\")


@dataclass
class JobFilter:
    """Optional filters for the public job listing.

    Hidden jobs are always excluded.
    """

    category: str | None = None
    level: str | None = None
    location: str | None = None
    search: str | None = None

    def clauses(self) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = [Job.visible.is_(True)]
        if self.category:
            conditions.append(Job.category == self.category)
        if self.level:
            conditions.append(Job.level == self.level)
        if self.location:
            conditions.append(_contains(Job.location, self.location))
        if self.search:
            conditions.append(
                or_(_contains(Job.title, self.search), _contains(Job.description, self.search))
            )
        return conditions
