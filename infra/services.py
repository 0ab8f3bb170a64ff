from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.cashflow import CashflowService
from infra.db.repositories import (
    SqlAlchemyAccountRepository,
    SqlAlchemyCashRepository,
    SqlAlchemyLedgerRepository,
    SqlAlchemyPeriodRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    cashflow_service: CashflowService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "cashflow_service": self.cashflow_service,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    period_repo = SqlAlchemyPeriodRepository(session)
    account_repo = SqlAlchemyAccountRepository(session)
    ledger_repo = SqlAlchemyLedgerRepository(session)
    cash_repo = SqlAlchemyCashRepository(session)

    cashflow_service = CashflowService(
        period_repo=period_repo,
        ledger_repo=ledger_repo,
        cash_repo=cash_repo,
        account_repo=account_repo,
    )
    return ServiceGraph(session=session, cashflow_service=cashflow_service)


def build_services(session: Session) -> dict[str, Any]:
    return build_service_graph(session).as_dict()


__all__ = ["ServiceGraph", "build_service_graph", "build_services"]
