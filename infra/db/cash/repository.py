from __future__ import annotations

from datetime import date
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.interfaces import CashRepository
from core.models import CashPaymentRow, ServiceAggregate
from core.services.cashflow.policy import cash_payment_key
from infra.db.cash.mapper import cash_payment_from_row, service_aggregate_from_row
from infra.db.models import CashItemORM, CashORM, InvoiceORM, PatientORM, ProjectORM, ServiceORM


class SqlAlchemyCashRepository(CashRepository):
    def __init__(self, session: Session, *, reference_key: str | None = None):
        self.session = session
        self.reference_key = reference_key or cash_payment_key()

    def _realized_cash_filters(self, date_from: date, date_to: date):
        return (
            CashORM.is_caution.is_(False),
            CashORM.reversed.is_(False),
            CashORM.date >= date_from,
            CashORM.date <= date_to,
        )

    def list_service_payments(self, date_from: date, date_to: date) -> List[CashPaymentRow]:
        payments = (
            select(
                CashORM.uuid,
                CashORM.reference,
                ProjectORM.abbr,
                CashORM.date,
                CashORM.amount.label("cash_amount"),
                func.sum(InvoiceORM.cost).label("invoice_amount"),
                CashORM.currency_id,
                func.min(ServiceORM.id).label("service_id"),
                PatientORM.display_name,
            )
            .select_from(CashORM)
            .join(CashItemORM, CashItemORM.cash_uuid == CashORM.uuid)
            .join(InvoiceORM, InvoiceORM.uuid == CashItemORM.invoice_uuid)
            .join(ProjectORM, ProjectORM.id == CashORM.project_id)
            .join(PatientORM, PatientORM.debtor_uuid == CashORM.debtor_uuid)
            .join(ServiceORM, ServiceORM.id == InvoiceORM.service_id)
            .where(*self._realized_cash_filters(date_from, date_to))
            .group_by(
                CashORM.uuid,
                CashORM.reference,
                ProjectORM.abbr,
                CashORM.date,
                CashORM.amount,
                CashORM.currency_id,
                PatientORM.display_name,
            )
            .subquery()
        )
        ordering = (payments.c.date, payments.c.abbr, payments.c.reference)
        stmt = select(
            *payments.c,
            func.sum(payments.c.cash_amount).over(order_by=ordering, rows=(None, 0)).label("cumsum"),
        ).order_by(*ordering)
        rows = self.session.execute(stmt).all()
        if not rows:
            return []

        service_ids = sorted({row.service_id for row in rows if row.service_id is not None})
        names_stmt = select(ServiceORM.id, ServiceORM.name).where(ServiceORM.id.in_(service_ids))
        service_names = {sid: name for sid, name in self.session.execute(names_stmt).all()}
        return [
            cash_payment_from_row(row, key=self.reference_key, service_names=service_names)
            for row in rows
        ]

    def list_service_names(self, service_ids: List[int]) -> List[str]:
        if not service_ids:
            return []
        stmt = (
            select(ServiceORM.name)
            .where(ServiceORM.id.in_(service_ids))
            .distinct()
            .order_by(ServiceORM.name)
        )
        return [str(name) for name in self.session.execute(stmt).scalars().all()]

    def aggregate_by_service(self, date_from: date, date_to: date) -> List[ServiceAggregate]:
        stmt = (
            select(
                ServiceORM.name,
                func.sum(CashORM.amount).label("total_cash_income"),
                func.sum(InvoiceORM.cost).label("total_accrual_income"),
            )
            .select_from(CashORM)
            .join(CashItemORM, CashItemORM.cash_uuid == CashORM.uuid)
            .join(InvoiceORM, InvoiceORM.uuid == CashItemORM.invoice_uuid)
            .join(ServiceORM, ServiceORM.id == InvoiceORM.service_id)
            .where(*self._realized_cash_filters(date_from, date_to))
            .group_by(ServiceORM.name)
            .order_by(ServiceORM.name)
        )
        return [service_aggregate_from_row(row) for row in self.session.execute(stmt).all()]
