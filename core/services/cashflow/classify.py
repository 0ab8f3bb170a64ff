from __future__ import annotations

from core.models import FlowSide, Posting
from core.services.cashflow.models import FlowEntry, PeriodFlows, PeriodPostings


def side_amount(posting: Posting, side: FlowSide) -> float:
    if side == FlowSide.INCOME:
        return float(posting.debit_amount or 0.0)
    return float(posting.credit_amount or 0.0)


def split_flows(bucket: PeriodPostings) -> PeriodFlows:
    # A posting with both sides positive lands in both lists.
    incomes = [p for p in bucket.postings if float(p.debit_amount or 0.0) > 0.0]
    expenses = [p for p in bucket.postings if float(p.credit_amount or 0.0) > 0.0]
    return PeriodFlows(period=bucket.period, incomes=incomes, expenses=expenses)


def summarize_by_origin(postings: list[Posting], side: FlowSide) -> list[FlowEntry]:
    """
    One entry per transfer type, valued at the total of every posting that
    shares the origin of the first posting carrying that transfer type.
    """
    totals: dict[int, float] = {}
    for posting in postings:
        if not posting.origin_id:
            continue
        totals[posting.origin_id] = totals.get(posting.origin_id, 0.0) + side_amount(posting, side)

    entries: list[FlowEntry] = []
    seen: set[str | None] = set()
    for posting in postings:
        if not posting.origin_id:
            continue
        label = posting.transaction_type_label
        if label in seen:
            continue
        seen.add(label)
        entries.append(
            FlowEntry(
                transfer_type=label,
                currency_id=posting.currency_id,
                value=float(totals[posting.origin_id]),
            )
        )
    return entries


__all__ = ["side_amount", "split_flows", "summarize_by_origin"]
