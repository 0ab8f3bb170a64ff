from __future__ import annotations

from typing import Any

from core.models import CashPaymentRow, ServiceAggregate


def cash_reference(key: str, project_abbr: str | None, reference: Any) -> str:
    parts = [str(part) for part in (key, project_abbr, reference) if part not in (None, "")]
    return ".".join(parts)


def cash_payment_from_row(row: Any, *, key: str, service_names: dict[int, str]) -> CashPaymentRow:
    return CashPaymentRow(
        uuid=str(row.uuid),
        reference=cash_reference(key, row.abbr, row.reference),
        date=row.date,
        cash_amount=float(row.cash_amount or 0.0),
        invoice_amount=float(row.invoice_amount or 0.0),
        currency_id=row.currency_id,
        service_id=row.service_id,
        service_name=service_names.get(row.service_id),
        patient_name=str(row.display_name or ""),
        cumsum=float(row.cumsum or 0.0),
    )


def service_aggregate_from_row(row: Any) -> ServiceAggregate:
    return ServiceAggregate(
        service_name=row.name,
        total_cash_income=float(row.total_cash_income or 0.0),
        total_accrual_income=(None if row.total_accrual_income is None else float(row.total_accrual_income)),
    )
