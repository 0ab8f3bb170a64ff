from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

# ---------- Enums ----------

class FlowSide(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

# ---------- Core models ----------

@dataclass(frozen=True)
class Period:
    id: int
    start_date: date
    end_date: date
    number: Optional[int] = None
    fiscal_year_id: Optional[int] = None

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def with_start(self, start_date: date) -> "Period":
        return Period(
            id=self.id,
            start_date=start_date,
            end_date=self.end_date,
            number=self.number,
            fiscal_year_id=self.fiscal_year_id,
        )


@dataclass(frozen=True)
class Posting:
    """One general-ledger transaction against an account, debit/credit summed per transaction."""
    transaction_id: str
    date: date
    period_id: Optional[int]
    account_number: str
    account_label: str
    debit_amount: float
    credit_amount: float
    currency_id: Optional[int]
    description: str = ""
    origin_id: Optional[int] = None
    transaction_type_label: Optional[str] = None
    record_uuid: Optional[str] = None


@dataclass(frozen=True)
class Account:
    id: int
    number: str
    label: str


@dataclass(frozen=True)
class CashPaymentRow:
    uuid: str
    reference: str
    date: date
    cash_amount: float
    invoice_amount: float
    currency_id: Optional[int]
    service_id: Optional[int]
    service_name: Optional[str]
    patient_name: str
    cumsum: float


@dataclass(frozen=True)
class ServiceAggregate:
    service_name: Optional[str]
    total_cash_income: float
    total_accrual_income: Optional[float]
