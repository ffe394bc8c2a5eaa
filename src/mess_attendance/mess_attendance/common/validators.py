from __future__ import annotations

from typing import Optional

from ..core.exceptions import InputMissingError, ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise InputMissingError(f"{field_name} is required")
    return str(value).strip()


def optional_year(value) -> Optional[int]:
    """Parse an optional year filter coming from a query string or JSON body."""
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid year: {value!r}")


def require_year(value) -> int:
    year = optional_year(value)
    if year is None:
        raise InputMissingError("Year is required")
    return year
