from infra.db.ledger.mapper import account_from_orm, period_from_orm, posting_from_row
from infra.db.ledger.repository import (
    SqlAlchemyAccountRepository,
    SqlAlchemyLedgerRepository,
    SqlAlchemyPeriodRepository,
)

__all__ = [
    "account_from_orm",
    "period_from_orm",
    "posting_from_row",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyPeriodRepository",
]
