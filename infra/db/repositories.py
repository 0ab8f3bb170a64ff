"""Repository exports for the cashflow read models."""

from infra.db.cash import SqlAlchemyCashRepository
from infra.db.ledger import (
    SqlAlchemyAccountRepository,
    SqlAlchemyLedgerRepository,
    SqlAlchemyPeriodRepository,
)

__all__ = [
    "SqlAlchemyAccountRepository",
    "SqlAlchemyCashRepository",
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyPeriodRepository",
]
