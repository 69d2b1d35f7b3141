"""Validation logic for job fields."""

import math
from dataclasses import dataclass, field
from typing import Any

from app.models.job import JobCategory, JobLevel

REQUIRED_JOB_FIELDS = ("title", "description", "location", "category", "level", "salary")
MUTABLE_JOB_FIELDS = (
    "title",
    "description",
    "location",
    "category",
    "level",
    "salary",
    "visible",
)

CATEGORIES = {c.value for c in JobCategory}
LEVELS = {lv.value for lv in JobLevel}


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None
    values: dict[str, Any] = field(default_factory=dict)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def coerce_salary(value: Any) -> float | None:
    """Convert a salary to a non-negative number, or None if impossible."""
    if isinstance(value, bool):
        return None
    try:
        salary = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(salary) or math.isinf(salary) or salary < 0:
        return None
    return salary


def _check_field(name: str, value: Any) -> tuple[Any, str | None]:
    if name in ("title", "description", "location"):
        if _is_blank(value) or not isinstance(value, str):
            return None, f"Field '{name}' must be a non-empty string."
        return value.strip() if name != "description" else value, None
    if name == "category":
        if value not in CATEGORIES:
            return None, f"Invalid category. Must be one of: {', '.join(sorted(CATEGORIES))}."
        return value, None
    if name == "level":
        if value not in LEVELS:
            return None, f"Invalid level. Must be one of: {', '.join(sorted(LEVELS))}."
        return value, None
    if name == "salary":
        salary = coerce_salary(value)
        if salary is None:
            return None, "Salary must be a non-negative number."
        return salary, None
    if name == "visible":
        if not isinstance(value, bool):
            return None, "Field 'visible' must be a boolean."
        return value, None
    return value, None


def validate_job_create(payload: dict[str, Any]) -> ValidationResult:
    """Validate a full job definition."""
    missing = [name for name in REQUIRED_JOB_FIELDS if _is_blank(payload.get(name))]
    if missing:
        return ValidationResult(
            is_valid=False,
            error=(
                "Please provide all required fields: "
                "title, description, location, category, level, salary."
            ),
        )

    values = {}
    for name in REQUIRED_JOB_FIELDS:
        value, error = _check_field(name, payload[name])
        if error:
            return ValidationResult(is_valid=False, error=error)
        values[name] = value
    return ValidationResult(is_valid=True, values=values)


def validate_job_update(payload: dict[str, Any]) -> ValidationResult:
    """Validate the allow-listed fields present in a partial update.

    Fields outside the allow-list are ignored.
    """
    values = {}
    for name in MUTABLE_JOB_FIELDS:
        if name not in payload or payload[name] is None:
            continue
        value, error = _check_field(name, payload[name])
        if error:
            return ValidationResult(is_valid=False, error=error)
        values[name] = value
    return ValidationResult(is_valid=True, values=values)
