from __future__ import annotations

from datetime import date

from core.models import CashPaymentRow, FlowSide, ServiceAggregate
from core.services.cashflow.balances import BalanceAccumulator
from core.services.cashflow.classify import summarize_by_origin
from core.services.cashflow.models import (
    CashflowReport,
    CashflowResult,
    FlowEntry,
    PeriodSummary,
    ServiceCashflowReport,
)


UNKNOWN_TRANSFER_TYPE = "Unknown"


def row_label(transfer_type: str | None) -> str:
    return transfer_type or UNKNOWN_TRANSFER_TYPE


def _ordered_labels(per_period: list[list[FlowEntry]]) -> list[str]:
    labels: list[str] = []
    for entries in per_period:
        for entry in entries:
            label = row_label(entry.transfer_type)
            if label not in labels:
                labels.append(label)
    return labels


def _label_values(entries: list[FlowEntry]) -> dict[str, float]:
    values: dict[str, float] = {}
    for entry in entries:
        label = row_label(entry.transfer_type)
        values[label] = values.get(label, 0.0) + float(entry.value)
    return values


def resolve_account_label(result: CashflowResult) -> str | None:
    for flow in result.flows:
        if flow.incomes:
            return flow.incomes[0].account_label
    for flow in result.flows:
        if flow.expenses:
            return flow.expenses[0].account_label
    return None


def assemble_report(
    result: CashflowResult,
    *,
    date_from: date,
    date_to: date,
    account_label: str | None = None,
) -> CashflowReport:
    incomes_by_period = [summarize_by_origin(flow.incomes, FlowSide.INCOME) for flow in result.flows]
    expenses_by_period = [summarize_by_origin(flow.expenses, FlowSide.EXPENSE) for flow in result.flows]

    accumulator = BalanceAccumulator(result.opening_balance, [flow.period.start_date for flow in result.flows])
    summaries: list[PeriodSummary] = []
    for flow, incomes, expenses in zip(result.flows, incomes_by_period, expenses_by_period):
        total_income = float(sum(entry.value for entry in incomes))
        total_expense = float(sum(entry.value for entry in expenses))
        step = accumulator.advance(total_income, total_expense)
        summaries.append(
            PeriodSummary(
                period=flow.period,
                incomes=_label_values(incomes),
                expenses=_label_values(expenses),
                total_income=total_income,
                total_expense=total_expense,
                opening_balance=step.opening_balance,
                closing_balance=step.closing_balance,
            )
        )

    return CashflowReport(
        account_id=result.account_id,
        account_label=resolve_account_label(result) or account_label,
        opening_balance=float(result.opening_balance),
        date_from=date_from,
        date_to=date_to,
        weekly=result.weekly,
        income_labels=_ordered_labels(incomes_by_period),
        expense_labels=_ordered_labels(expenses_by_period),
        summaries=summaries,
        unassigned_count=len(result.unassigned),
    )


def build_service_matrix(rows: list[CashPaymentRow], services: list[str]) -> list[list[object]]:
    """
    One line per cash payment: reference, patient, one cell per service
    (only the payment's service is filled) and the running total.
    """
    width = len(services)
    matrix: list[list[object]] = []
    for row in rows:
        line: list[object] = [None] * (width + 3)
        line[0] = row.reference
        line[1] = row.patient_name
        if row.service_name in services:
            line[services.index(row.service_name) + 2] = float(row.cash_amount)
        line[width + 2] = float(row.cumsum)
        matrix.append(line)
    return matrix


def assemble_service_report(
    *,
    rows: list[CashPaymentRow],
    services: list[str],
    aggregates: list[ServiceAggregate],
    date_from: date,
    date_to: date,
) -> ServiceCashflowReport:
    matrix = build_service_matrix(rows, services) if rows else []
    total = None
    if matrix:
        last = matrix[-1]
        total = float(last[len(last) - 1])  # type: ignore[arg-type]
    return ServiceCashflowReport(
        date_from=date_from,
        date_to=date_to,
        services=list(services) if rows else [],
        matrix=matrix,
        aggregates=list(aggregates),
        total_cash_income=total,
        rows=list(rows),
    )


__all__ = [
    "UNKNOWN_TRANSFER_TYPE",
    "row_label",
    "resolve_account_label",
    "assemble_report",
    "build_service_matrix",
    "assemble_service_report",
]
