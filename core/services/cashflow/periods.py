from __future__ import annotations

from datetime import date, timedelta

from core.exceptions import InvalidRangeError
from core.interfaces import PeriodRepository
from core.models import Period
from core.services.cashflow.helpers import week_start


def build_weekly_periods(date_from: date, date_to: date) -> list[Period]:
    """
    Monday-aligned weeks from the week containing ``date_from`` while the
    week start is not after ``date_to``. The first week always exists and its
    start is pinned to ``date_from`` so that no flow before the requested
    range is credited.
    """
    if date_from > date_to:
        return []

    weeks: list[Period] = []
    start = week_start(date_from)
    sequence = 1
    while True:
        weeks.append(Period(id=sequence, number=sequence, start_date=start, end_date=start + timedelta(days=6)))
        start = start + timedelta(days=7)
        sequence += 1
        if start > date_to:
            break

    weeks[0] = weeks[0].with_start(date_from)
    return weeks


def resolve_calendar_periods(period_repo: PeriodRepository, date_from: date, date_to: date) -> list[Period]:
    if date_from > date_to:
        return []
    periods = period_repo.list_overlapping(date_from, date_to)
    return sorted(periods, key=lambda p: (p.start_date, p.id))


def resolve_periods(
    *,
    period_repo: PeriodRepository,
    date_from: date,
    date_to: date,
    weekly: bool = False,
) -> list[Period]:
    if weekly:
        periods = build_weekly_periods(date_from, date_to)
    else:
        periods = resolve_calendar_periods(period_repo, date_from, date_to)
    if not periods:
        raise InvalidRangeError("Periods not found due to a bad date interval.")
    return periods


__all__ = ["build_weekly_periods", "resolve_calendar_periods", "resolve_periods"]
