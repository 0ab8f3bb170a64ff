from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from core.models import CashPaymentRow, Period, Posting, ServiceAggregate


@dataclass(frozen=True)
class FlowEntry:
    transfer_type: str | None
    currency_id: int | None
    value: float


@dataclass(frozen=True)
class PeriodPostings:
    period: Period
    postings: list[Posting]


@dataclass(frozen=True)
class PeriodGrouping:
    buckets: list[PeriodPostings]
    unassigned: list[Posting]


@dataclass(frozen=True)
class PeriodFlows:
    period: Period
    incomes: list[Posting]
    expenses: list[Posting]


@dataclass(frozen=True)
class CashflowResult:
    account_id: int
    opening_balance: float
    weekly: bool
    periods: list[Period]
    flows: list[PeriodFlows]
    unassigned: list[Posting] = field(default_factory=list)
    date_from: date | None = None
    date_to: date | None = None


@dataclass(frozen=True)
class PeriodSummary:
    period: Period
    incomes: dict[str, float]
    expenses: dict[str, float]
    total_income: float
    total_expense: float
    opening_balance: float
    closing_balance: float


@dataclass(frozen=True)
class CashflowReport:
    account_id: int
    account_label: str | None
    opening_balance: float
    date_from: date
    date_to: date
    weekly: bool
    income_labels: list[str]
    expense_labels: list[str]
    summaries: list[PeriodSummary]
    unassigned_count: int = 0

    @property
    def total_income(self) -> float:
        return float(sum(s.total_income for s in self.summaries))

    @property
    def total_expense(self) -> float:
        return float(sum(s.total_expense for s in self.summaries))

    @property
    def closing_balance(self) -> float:
        if not self.summaries:
            return self.opening_balance
        return self.summaries[-1].closing_balance


@dataclass(frozen=True)
class ServiceCashflowReport:
    date_from: date
    date_to: date
    services: list[str]
    matrix: list[list[object]]
    aggregates: list[ServiceAggregate]
    total_cash_income: float | None
    rows: list[CashPaymentRow] = field(default_factory=list)


__all__ = [
    "FlowEntry",
    "PeriodPostings",
    "PeriodGrouping",
    "PeriodFlows",
    "CashflowResult",
    "PeriodSummary",
    "CashflowReport",
    "ServiceCashflowReport",
]
