"""Row layouts shared by the PDF and Excel renderers."""

from __future__ import annotations

from core.services.cashflow.helpers import period_label
from core.services.cashflow.models import CashflowReport, ServiceCashflowReport

SECTION_INCOMES = "Incomes"
SECTION_EXPENSES = "Expenses"


def cashflow_header(report: CashflowReport) -> list[str]:
    return ["Label"] + [period_label(s.period.start_date, s.period.end_date) for s in report.summaries]


def cashflow_rows(report: CashflowReport) -> list[list[object]]:
    """
    Label-by-period matrix: opening balances, income lines, expense lines,
    totals and closing balances. Section headers carry empty period cells.
    """
    width = len(report.summaries)
    rows: list[list[object]] = []
    rows.append(["Opening balance"] + [s.opening_balance for s in report.summaries])

    rows.append([SECTION_INCOMES] + [None] * width)
    for label in report.income_labels:
        rows.append([label] + [s.incomes.get(label, 0.0) for s in report.summaries])
    rows.append(["Total incomes"] + [s.total_income for s in report.summaries])

    rows.append([SECTION_EXPENSES] + [None] * width)
    for label in report.expense_labels:
        rows.append([label] + [s.expenses.get(label, 0.0) for s in report.summaries])
    rows.append(["Total expenses"] + [s.total_expense for s in report.summaries])

    rows.append(["Closing balance"] + [s.closing_balance for s in report.summaries])
    return rows


def service_header(report: ServiceCashflowReport) -> list[str]:
    return ["Reference", "Patient"] + list(report.services) + ["Cumulative"]


def service_aggregate_rows(report: ServiceCashflowReport) -> list[list[object]]:
    rows: list[list[object]] = [
        [agg.service_name, agg.total_cash_income, agg.total_accrual_income]
        for agg in report.aggregates
    ]
    if report.total_cash_income is not None:
        rows.append(["Total", report.total_cash_income, None])
    return rows


def format_amount(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (int, float)):
        return f"{float(value):,.2f}"
    return str(value)


__all__ = [
    "cashflow_header",
    "cashflow_rows",
    "service_header",
    "service_aggregate_rows",
    "format_amount",
    "SECTION_INCOMES",
    "SECTION_EXPENSES",
]
