from __future__ import annotations

import logging
from datetime import date

import pytest

from core.exceptions import InvalidRangeError, MissingParameterError, ValidationError
from core.interfaces import CashRepository, LedgerRepository, PeriodRepository
from core.services.cashflow import service as service_module
from core.services.cashflow.helpers import parse_report_date
from core.services.cashflow.service import CashflowService

TRANSFER = 10


@pytest.fixture
def ledger(seeder):
    seeder.fiscal_year(2023)
    seeder.fiscal_year(2024)
    seeder.account(account_id=2, number="57110020", label="Caisse Auxiliaire")
    seeder.posting(date(2023, 12, 15), debit=100)
    record = seeder.posting(date(2024, 1, 10), debit=300, trans_id="HBB10")
    seeder.posting(date(2024, 1, 10), debit=200, trans_id="HBB10", record_uuid=record)
    seeder.posting(date(2024, 1, 20), credit=200, origin_id=5)
    seeder.posting(date(2024, 2, 5), credit=100, origin_id=5)
    seeder.posting(date(2024, 2, 6), debit=1000, origin_id=TRANSFER)
    transferred = seeder.posting(date(2024, 2, 7), debit=70, origin_id=4)
    seeder.voucher(type_id=TRANSFER, reference_uuid=transferred, on=date(2024, 2, 7))
    seeder.posting(date(2024, 1, 15), debit=999, account_id=2)
    return seeder


def test_calendar_cashflow_splits_flows_per_period(services, ledger):
    svc = services["cashflow_service"]

    result = svc.get_cashflow(1, date_from="2024-01-01", date_to="2024-02-29")

    assert result.account_id == 1
    assert result.opening_balance == 100.0
    assert [p.id for p in result.periods] == [202401, 202402]
    jan, feb = result.flows
    assert [p.debit_amount for p in jan.incomes] == [500.0]
    assert [p.credit_amount for p in jan.expenses] == [200.0]
    assert feb.incomes == []
    assert [p.credit_amount for p in feb.expenses] == [100.0]
    assert result.unassigned == []


def test_report_balances_chain_across_periods(services, ledger):
    svc = services["cashflow_service"]

    report = svc.get_report("1", date_from="2024-01-01", date_to="2024-02-29")

    assert report.opening_balance == 100.0
    assert [(s.opening_balance, s.closing_balance) for s in report.summaries] == [(100.0, 400.0), (400.0, 300.0)]
    assert report.income_labels == ["Cash payment"]
    assert report.expense_labels == ["Generic expense"]
    assert report.account_label == "Caisse Principale"


def test_weekly_cashflow_uses_date_ranges(services, ledger):
    svc = services["cashflow_service"]

    result = svc.get_cashflow(1, date_from="2024-01-08", date_to="2024-01-21", weekly=True)

    assert result.weekly is True
    assert [(p.start_date, p.end_date) for p in result.periods] == [
        (date(2024, 1, 8), date(2024, 1, 14)),
        (date(2024, 1, 15), date(2024, 1, 21)),
    ]
    assert result.opening_balance == 100.0
    first, second = result.flows
    assert [p.debit_amount for p in first.incomes] == [500.0]
    assert [p.credit_amount for p in second.expenses] == [200.0]


def test_weekly_opening_balance_starts_at_requested_day(services, ledger):
    svc = services["cashflow_service"]

    result = svc.get_cashflow(1, date_from="2024-01-11", date_to="2024-01-21", weekly=True)

    assert result.periods[0].start_date == date(2024, 1, 11)
    assert result.opening_balance == 600.0
    assert result.flows[0].incomes == []


def test_account_label_falls_back_to_account_record(services, seeder):
    seeder.fiscal_year(2024)
    report = services["cashflow_service"].get_report(1, date_from="2024-03-01", date_to="2024-03-31")

    assert report.account_label == "Caisse Principale"
    assert report.summaries[0].closing_balance == 0.0


def test_postings_without_period_are_counted_and_logged(services, seeder, caplog):
    seeder.fiscal_year(2024)
    seeder.posting(date(2024, 1, 10), debit=50)
    seeder.posting(date(2024, 1, 11), debit=75, period_id=None, trans_id="ORPHAN")

    with caplog.at_level(logging.WARNING):
        result = services["cashflow_service"].get_cashflow(1, date_from="2024-01-01", date_to="2024-01-31")

    assert [p.transaction_id for p in result.unassigned] == ["ORPHAN"]
    assert [p.debit_amount for p in result.flows[0].incomes] == [50.0]
    assert "outside every resolved period" in caplog.text


def test_non_numeric_account_is_rejected(services):
    with pytest.raises(ValidationError):
        services["cashflow_service"].get_cashflow("cash", date_from="2024-01-01", date_to="2024-01-31")


def test_range_without_periods_is_a_bad_interval(services, seeder):
    with pytest.raises(InvalidRangeError) as exc:
        services["cashflow_service"].get_cashflow(1, date_from="2024-01-01", date_to="2024-01-31")
    assert exc.value.code == "ERRORS.BAD_DATE_INTERVAL"


def test_service_report_lists_payments_per_service(services, seeder):
    seeder.hospital()
    john = seeder.patient("John Doe")
    jane = seeder.patient("Jane Doe")
    seeder.cash_payment(reference=1, on=date(2024, 3, 2), amount=10.0, debtor_uuid=john, service_id=1)
    seeder.cash_payment(reference=2, on=date(2024, 3, 1), amount=5.0, debtor_uuid=jane, service_id=2)

    report = services["cashflow_service"].get_service_report(date_from="2024-03-01", date_to="2024-03-31")

    assert report.services == ["Administration", "Medecine Interne"]
    assert report.matrix == [
        ["CP.TPA.2", "Jane Doe", 5.0, None, 5.0],
        ["CP.TPA.1", "John Doe", None, 10.0, 15.0],
    ]
    assert report.total_cash_income == 15.0
    assert [a.service_name for a in report.aggregates] == ["Administration", "Medecine Interne"]


def test_service_report_without_payments(services, seeder):
    report = services["cashflow_service"].get_service_report(date_from="2024-03-01", date_to="2024-03-31")

    assert report.matrix == []
    assert report.services == []
    assert report.aggregates == []
    assert report.total_cash_income is None


class _RecordingPeriods(PeriodRepository):
    def __init__(self, calls):
        self.calls = calls

    def list_overlapping(self, date_from, date_to):
        self.calls.append("list_overlapping")
        return []


class _RecordingLedger(LedgerRepository):
    def __init__(self, calls):
        self.calls = calls

    def list_postings(self, account_id, date_from, date_to):
        self.calls.append("list_postings")
        return []

    def opening_balance(self, account_id, before):
        self.calls.append("opening_balance")
        return 0.0


class _RecordingCash(CashRepository):
    def __init__(self, calls):
        self.calls = calls

    def list_service_payments(self, date_from, date_to):
        self.calls.append("list_service_payments")
        return []

    def list_service_names(self, service_ids):
        self.calls.append("list_service_names")
        return []

    def aggregate_by_service(self, date_from, date_to):
        self.calls.append("aggregate_by_service")
        return []


@pytest.mark.parametrize("account_id", [None, ""])
@pytest.mark.parametrize("method", ["get_cashflow", "get_report"])
def test_missing_account_is_rejected_before_querying(account_id, method):
    calls = []
    svc = CashflowService(
        period_repo=_RecordingPeriods(calls),
        ledger_repo=_RecordingLedger(calls),
        cash_repo=_RecordingCash(calls),
    )

    with pytest.raises(MissingParameterError) as exc:
        getattr(svc, method)(account_id, date_from="2024-01-01", date_to="2024-01-31")

    assert exc.value.code == "ERRORS.BAD_REQUEST"
    assert str(exc.value) == "Cashbox is missing."
    assert calls == []


def test_report_parses_each_date_once(services, ledger, monkeypatch):
    parsed = []

    def counting_parse(value, *, field_name, default=None):
        parsed.append(field_name)
        return parse_report_date(value, field_name=field_name, default=default)

    monkeypatch.setattr(service_module, "parse_report_date", counting_parse)

    report = services["cashflow_service"].get_report(1, date_from="2024-01-01", date_to="2024-02-29")

    assert parsed == ["dateFrom", "dateTo"]
    assert (report.date_from, report.date_to) == (date(2024, 1, 1), date(2024, 2, 29))


def test_cashflow_result_carries_parsed_range(services, ledger):
    result = services["cashflow_service"].get_cashflow(1, date_from="2024-01-01", date_to="2024-02-29")

    assert (result.date_from, result.date_to) == (date(2024, 1, 1), date(2024, 2, 29))
