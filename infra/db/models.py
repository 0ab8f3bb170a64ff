# infra/db/models.py
from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base


class AccountORM(Base):
    __tablename__ = "account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    number: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    label: Mapped[str] = mapped_column(String, nullable=False)


class FiscalYearORM(Base):
    __tablename__ = "fiscal_year"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    previous_fiscal_year_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("fiscal_year.id"), nullable=True
    )


class PeriodORM(Base):
    __tablename__ = "period"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    fiscal_year_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("fiscal_year.id", ondelete="CASCADE"), nullable=True
    )
    number: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
Index("idx_period_dates", PeriodORM.start_date, PeriodORM.end_date)


class TransactionTypeORM(Base):
    __tablename__ = "transaction_type"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    text: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str] = mapped_column(String, default="")


class GeneralLedgerORM(Base):
    __tablename__ = "general_ledger"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    record_uuid: Mapped[str] = mapped_column(String(36), nullable=False)
    trans_id: Mapped[str] = mapped_column(String(100), nullable=False)
    trans_date: Mapped[date] = mapped_column(Date, nullable=False)
    period_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("period.id"), nullable=True)
    account_id: Mapped[int] = mapped_column(Integer, ForeignKey("account.id"), nullable=False)
    debit: Mapped[float] = mapped_column(Float, default=0.0)
    credit: Mapped[float] = mapped_column(Float, default=0.0)
    debit_equiv: Mapped[float] = mapped_column(Float, default=0.0)
    credit_equiv: Mapped[float] = mapped_column(Float, default=0.0)
    currency_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    description: Mapped[str] = mapped_column(String, default="")
    comment: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    origin_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("transaction_type.id"), nullable=True
    )
Index("idx_general_ledger_account_date", GeneralLedgerORM.account_id, GeneralLedgerORM.trans_date)
Index("idx_general_ledger_trans_id", GeneralLedgerORM.trans_id)


class VoucherORM(Base):
    __tablename__ = "voucher"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    type_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    reference_uuid: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    amount: Mapped[float] = mapped_column(Float, default=0.0)
    description: Mapped[str] = mapped_column(String, default="")


class ProjectORM(Base):
    __tablename__ = "project"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    abbr: Mapped[str] = mapped_column(String(12), nullable=False)


class PatientORM(Base):
    __tablename__ = "patient"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    debtor_uuid: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    display_name: Mapped[str] = mapped_column(String, nullable=False)


class ServiceORM(Base):
    __tablename__ = "service"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)


class InvoiceORM(Base):
    __tablename__ = "invoice"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    service_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("service.id"), nullable=True)
    cost: Mapped[float] = mapped_column(Float, default=0.0)
    date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)


class CashORM(Base):
    __tablename__ = "cash"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    project_id: Mapped[int] = mapped_column(Integer, ForeignKey("project.id"), nullable=False)
    reference: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    debtor_uuid: Mapped[str] = mapped_column(String(36), nullable=False)
    amount: Mapped[float] = mapped_column(Float, default=0.0)
    currency_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    is_caution: Mapped[bool] = mapped_column(Boolean, default=False)
    reversed: Mapped[bool] = mapped_column(Boolean, default=False)
Index("idx_cash_date", CashORM.date)


class CashItemORM(Base):
    __tablename__ = "cash_item"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    cash_uuid: Mapped[str] = mapped_column(
        String(36), ForeignKey("cash.uuid", ondelete="CASCADE"), nullable=False
    )
    invoice_uuid: Mapped[str] = mapped_column(String(36), ForeignKey("invoice.uuid"), nullable=False)
    amount: Mapped[float] = mapped_column(Float, default=0.0)
