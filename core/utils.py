from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional, Union

from core.exceptions import ValidationError


def date_to_storage(value: Union[date, datetime, str, None]) -> Optional[str]:
    """
    Convert a calendar date to its stored form (ISO-8601 "YYYY-MM-DD").
    Datetimes are truncated to their date part.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10]).isoformat()
        except ValueError:
            raise ValidationError(f"Invalid date: {value!r}", field="tanggal")
    raise ValidationError(f"Unsupported date value: {value!r}", field="tanggal")


def date_from_storage(value: Optional[str]) -> Optional[date]:
    """Convert a stored "YYYY-MM-DD" string back to a date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def escape_like(term: str, escape_char: str = "\\") -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(escape_char, escape_char * 2)
        .replace("%", escape_char + "%")
        .replace("_", escape_char + "_")
    )


def apply_updates(instance: Any, changes: Dict[str, Any], nullable: Iterable[str] = ()) -> Any:
    """
    Apply only the supplied fields of a partial update and refresh updated_at.

    Args:
        instance: ORM object to modify
        changes: Field values that were present in the request
        nullable: Fields that may be explicitly set to None

    Returns:
        The modified instance
    """
    nullable = set(nullable)
    for field, value in changes.items():
        if value is None and field not in nullable:
            raise ValidationError(f"{field} cannot be null", field=field)
        setattr(instance, field, value)
    instance.updated_at = datetime.utcnow()
    return instance
