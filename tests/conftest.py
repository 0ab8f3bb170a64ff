# tests/conftest.py
import os
from calendar import monthrange
from datetime import date
from uuid import uuid4

os.environ.setdefault("BHIMA_DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from infra.db.base import Base
from infra.db.models import (
    AccountORM,
    CashItemORM,
    CashORM,
    FiscalYearORM,
    GeneralLedgerORM,
    InvoiceORM,
    PatientORM,
    PeriodORM,
    ProjectORM,
    ServiceORM,
    TransactionTypeORM,
    VoucherORM,
)
from infra.services import build_service_graph

CASH_PAYMENT = 1
TRANSFER = 10
CASH_ACCOUNT_ID = 1


class LedgerSeeder:
    """Small builder for the rows the cashflow queries read."""

    def __init__(self, session):
        self.session = session
        self._trans_seq = 0

    def account(self, account_id=CASH_ACCOUNT_ID, number="57110010", label="Caisse Principale"):
        self.session.add(AccountORM(id=account_id, number=number, label=label))
        self.session.flush()
        return account_id

    def transaction_types(self):
        for type_id, text in (
            (CASH_PAYMENT, "Cash payment"),
            (2, "Convention payment"),
            (3, "Support income"),
            (4, "Generic income"),
            (5, "Generic expense"),
            (TRANSFER, "Transfer"),
        ):
            self.session.add(TransactionTypeORM(id=type_id, text=text, type="income"))
        self.session.flush()

    def fiscal_year(self, year: int):
        fy = FiscalYearORM(id=year, label=f"Fiscal Year {year}", start_date=date(year, 1, 1), end_date=date(year, 12, 31))
        self.session.add(fy)
        for month in range(1, 13):
            self.session.add(
                PeriodORM(
                    id=self.period_id(year, month),
                    fiscal_year_id=year,
                    number=month,
                    start_date=date(year, month, 1),
                    end_date=date(year, month, monthrange(year, month)[1]),
                )
            )
        self.session.flush()

    @staticmethod
    def period_id(year: int, month: int) -> int:
        return year * 100 + month

    def posting(
        self,
        trans_date: date,
        *,
        debit: float = 0.0,
        credit: float = 0.0,
        origin_id: int | None = CASH_PAYMENT,
        account_id: int = CASH_ACCOUNT_ID,
        trans_id: str | None = None,
        record_uuid: str | None = None,
        period_id: int | None = -1,
        currency_id: int = 2,
    ) -> str:
        if trans_id is None:
            self._trans_seq += 1
            trans_id = f"TRX{self._trans_seq}"
        if period_id == -1:
            period_id = self.period_id(trans_date.year, trans_date.month)
        record_uuid = record_uuid or str(uuid4())
        self.session.add(
            GeneralLedgerORM(
                uuid=str(uuid4()),
                record_uuid=record_uuid,
                trans_id=trans_id,
                trans_date=trans_date,
                period_id=period_id,
                account_id=account_id,
                debit=debit,
                credit=credit,
                debit_equiv=debit,
                credit_equiv=credit,
                currency_id=currency_id,
                description=f"Transaction {trans_id}",
                origin_id=origin_id,
            )
        )
        self.session.flush()
        return record_uuid

    def voucher(self, *, type_id: int, reference_uuid: str, on: date):
        self.session.add(VoucherORM(uuid=str(uuid4()), type_id=type_id, reference_uuid=reference_uuid, date=on))
        self.session.flush()

    def hospital(self):
        self.session.add(ProjectORM(id=1, name="Test Project A", abbr="TPA"))
        self.session.add(ServiceORM(id=1, name="Medecine Interne"))
        self.session.add(ServiceORM(id=2, name="Administration"))
        self.session.add(ServiceORM(id=3, name="Pediatrie"))
        self.session.flush()

    def patient(self, name: str) -> str:
        debtor = str(uuid4())
        self.session.add(PatientORM(uuid=str(uuid4()), debtor_uuid=debtor, display_name=name))
        self.session.flush()
        return debtor

    def cash_payment(
        self,
        *,
        reference: int,
        on: date,
        amount: float,
        debtor_uuid: str,
        service_id: int,
        invoice_cost: float | None = None,
        is_caution: bool = False,
        reversed: bool = False,
    ) -> str:
        invoice_uuid = str(uuid4())
        cash_uuid = str(uuid4())
        self.session.add(InvoiceORM(uuid=invoice_uuid, service_id=service_id, cost=invoice_cost or amount, date=on))
        self.session.add(
            CashORM(
                uuid=cash_uuid,
                project_id=1,
                reference=reference,
                date=on,
                debtor_uuid=debtor_uuid,
                amount=amount,
                currency_id=2,
                is_caution=is_caution,
                reversed=reversed,
            )
        )
        self.session.add(CashItemORM(uuid=str(uuid4()), cash_uuid=cash_uuid, invoice_uuid=invoice_uuid, amount=amount))
        self.session.flush()
        return cash_uuid


@pytest.fixture
def engine():
    # separate in-memory DB per test, shared across threads for the HTTP client
    engine = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine):
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def seeder(session):
    seeder = LedgerSeeder(session)
    seeder.account()
    seeder.transaction_types()
    return seeder


@pytest.fixture
def services(session):
    return build_service_graph(session).as_dict()
