from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from core.models import Account, CashPaymentRow, Period, Posting, ServiceAggregate


class PeriodRepository(ABC):
    @abstractmethod
    def list_overlapping(self, date_from: date, date_to: date) -> List[Period]: ...


class AccountRepository(ABC):
    @abstractmethod
    def get(self, account_id: int) -> Optional[Account]: ...


class LedgerRepository(ABC):
    @abstractmethod
    def list_postings(self, account_id: int, date_from: date, date_to: date) -> List[Posting]: ...

    @abstractmethod
    def opening_balance(self, account_id: int, before: date) -> float: ...


class CashRepository(ABC):
    @abstractmethod
    def list_service_payments(self, date_from: date, date_to: date) -> List[CashPaymentRow]: ...

    @abstractmethod
    def list_service_names(self, service_ids: List[int]) -> List[str]: ...

    @abstractmethod
    def aggregate_by_service(self, date_from: date, date_to: date) -> List[ServiceAggregate]: ...
