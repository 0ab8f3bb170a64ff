from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

from core.exceptions import ValidationError

_TRUTHY = {"1", "true", "yes", "on"}


def parse_report_date(value: Any, *, field_name: str, default: date | None = None) -> date:
    if value in (None, ""):
        return default or date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise ValidationError(
            f"Invalid date for {field_name}: {value!r}.",
            code="ERRORS.BAD_REQUEST",
        ) from exc


def is_truthy_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    try:
        return int(text, 10) != 0
    except ValueError:
        return text in _TRUTHY


def week_start(anchor: date) -> date:
    return anchor - timedelta(days=anchor.weekday())


def period_label(start: date, end: date) -> str:
    return f"{start.isoformat()} / {end.isoformat()}"


__all__ = [
    "parse_report_date",
    "is_truthy_flag",
    "week_start",
    "period_label",
]
