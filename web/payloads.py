"""JSON shapes returned by the cashflow endpoints."""

from __future__ import annotations

from typing import Any

from core.models import Period, Posting
from core.services.cashflow.models import CashflowResult, PeriodFlows


def period_payload(period: Period) -> dict[str, Any]:
    return {
        "id": period.id,
        "number": period.number,
        "start_date": period.start_date.isoformat(),
        "end_date": period.end_date.isoformat(),
    }


def posting_payload(posting: Posting) -> dict[str, Any]:
    return {
        "trans_id": posting.transaction_id,
        "trans_date": posting.date.isoformat(),
        "period_id": posting.period_id,
        "number": posting.account_number,
        "label": posting.account_label,
        "debit_equiv": posting.debit_amount,
        "credit_equiv": posting.credit_amount,
        "currency_id": posting.currency_id,
        "description": posting.description,
        "origin_id": posting.origin_id,
        "transactionType": posting.transaction_type_label,
        "record_uuid": posting.record_uuid,
    }


def flows_payload(flow: PeriodFlows) -> dict[str, Any]:
    return {
        "period": period_payload(flow.period),
        "incomes": [posting_payload(p) for p in flow.incomes],
        "expenses": [posting_payload(p) for p in flow.expenses],
    }


def cashflow_payload(result: CashflowResult) -> dict[str, Any]:
    return {
        "openingBalance": {"balance": result.opening_balance, "account_id": result.account_id},
        "flows": [flows_payload(flow) for flow in result.flows],
        "unassigned": len(result.unassigned),
    }
