from __future__ import annotations

from typing import Any

from core.models import Account, Period, Posting
from infra.db.models import AccountORM, PeriodORM


def period_from_orm(obj: PeriodORM) -> Period:
    return Period(
        id=obj.id,
        number=obj.number,
        start_date=obj.start_date,
        end_date=obj.end_date,
        fiscal_year_id=obj.fiscal_year_id,
    )


def account_from_orm(obj: AccountORM) -> Account:
    return Account(id=obj.id, number=str(obj.number), label=obj.label)


def posting_from_row(row: Any) -> Posting:
    return Posting(
        transaction_id=str(row.trans_id),
        date=row.trans_date,
        period_id=row.period_id,
        account_number=str(row.number),
        account_label=str(row.label or ""),
        debit_amount=float(row.debit_equiv or 0.0),
        credit_amount=float(row.credit_equiv or 0.0),
        currency_id=row.currency_id,
        description=str(row.description or ""),
        origin_id=row.origin_id,
        transaction_type_label=row.transaction_type,
        record_uuid=row.record_uuid,
    )
