from __future__ import annotations

from core.models import Period, Posting
from core.services.cashflow.models import PeriodGrouping, PeriodPostings


def posting_in_period(posting: Posting, period: Period, *, weekly: bool) -> bool:
    if weekly:
        return period.contains(posting.date)
    return posting.period_id is not None and posting.period_id == period.id


def group_by_period(periods: list[Period], postings: list[Posting], *, weekly: bool = False) -> PeriodGrouping:
    buckets: list[PeriodPostings] = []
    assigned: set[int] = set()
    for period in periods:
        matched: list[Posting] = []
        for index, posting in enumerate(postings):
            if posting_in_period(posting, period, weekly=weekly):
                matched.append(posting)
                assigned.add(index)
        buckets.append(PeriodPostings(period=period, postings=matched))

    unassigned = [posting for index, posting in enumerate(postings) if index not in assigned]
    return PeriodGrouping(buckets=buckets, unassigned=unassigned)


__all__ = ["posting_in_period", "group_by_period"]
