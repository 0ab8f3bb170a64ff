from infra.db.cash.mapper import cash_payment_from_row, cash_reference, service_aggregate_from_row
from infra.db.cash.repository import SqlAlchemyCashRepository

__all__ = [
    "cash_payment_from_row",
    "cash_reference",
    "service_aggregate_from_row",
    "SqlAlchemyCashRepository",
]
