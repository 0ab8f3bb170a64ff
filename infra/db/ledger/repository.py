from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session

from core.interfaces import AccountRepository, LedgerRepository, PeriodRepository
from core.models import Account, Period, Posting
from core.services.cashflow.policy import transfer_origin_id, transfer_voucher_type_id
from infra.db.ledger.mapper import account_from_orm, period_from_orm, posting_from_row
from infra.db.models import AccountORM, GeneralLedgerORM, PeriodORM, TransactionTypeORM, VoucherORM


class SqlAlchemyPeriodRepository(PeriodRepository):
    def __init__(self, session: Session):
        self.session = session

    def list_overlapping(self, date_from: date, date_to: date) -> List[Period]:
        stmt = (
            select(PeriodORM)
            .where(
                or_(
                    and_(PeriodORM.start_date >= date_from, PeriodORM.end_date <= date_to),
                    and_(PeriodORM.start_date <= date_from, PeriodORM.end_date >= date_from),
                    and_(PeriodORM.start_date <= date_to, PeriodORM.end_date >= date_to),
                )
            )
            .order_by(PeriodORM.start_date, PeriodORM.id)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [period_from_orm(row) for row in rows]


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session: Session):
        self.session = session

    def get(self, account_id: int) -> Optional[Account]:
        obj = self.session.get(AccountORM, account_id)
        return account_from_orm(obj) if obj else None


class SqlAlchemyLedgerRepository(LedgerRepository):
    def __init__(
        self,
        session: Session,
        *,
        transfer_origin: int | None = None,
        transfer_voucher_type: int | None = None,
    ):
        self.session = session
        self.transfer_origin = transfer_origin if transfer_origin is not None else transfer_origin_id()
        self.transfer_voucher_type = (
            transfer_voucher_type if transfer_voucher_type is not None else transfer_voucher_type_id()
        )

    def list_postings(self, account_id: int, date_from: date, date_to: date) -> List[Posting]:
        gl = GeneralLedgerORM
        transfer_references = select(VoucherORM.reference_uuid).where(
            VoucherORM.type_id == self.transfer_voucher_type,
            VoucherORM.reference_uuid.is_not(None),
        )
        stmt = (
            select(
                gl.trans_id,
                func.min(gl.trans_date).label("trans_date"),
                func.min(gl.period_id).label("period_id"),
                func.min(gl.record_uuid).label("record_uuid"),
                func.sum(gl.debit_equiv).label("debit_equiv"),
                func.sum(gl.credit_equiv).label("credit_equiv"),
                func.min(gl.currency_id).label("currency_id"),
                func.min(gl.description).label("description"),
                func.min(gl.origin_id).label("origin_id"),
                func.min(TransactionTypeORM.text).label("transaction_type"),
                AccountORM.number,
                AccountORM.label,
            )
            .join(AccountORM, AccountORM.id == gl.account_id)
            .join(TransactionTypeORM, TransactionTypeORM.id == gl.origin_id)
            .where(
                gl.account_id == account_id,
                gl.trans_date >= date_from,
                gl.trans_date <= date_to,
                gl.origin_id != self.transfer_origin,
                gl.record_uuid.not_in(transfer_references),
            )
            .group_by(gl.trans_id, AccountORM.number, AccountORM.label)
            .order_by(func.min(gl.trans_date), gl.trans_id)
        )
        rows = self.session.execute(stmt).all()
        return [posting_from_row(row) for row in rows]

    def opening_balance(self, account_id: int, before: date) -> float:
        gl = GeneralLedgerORM
        stmt = select(func.sum(gl.debit_equiv - gl.credit_equiv)).where(
            gl.account_id == account_id,
            gl.trans_date < before,
        )
        value = self.session.execute(stmt).scalar()
        return float(value or 0.0)
