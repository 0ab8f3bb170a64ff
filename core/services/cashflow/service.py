from __future__ import annotations

import logging
from datetime import date
from typing import Any

from core.exceptions import MissingParameterError, ValidationError
from core.interfaces import AccountRepository, CashRepository, LedgerRepository, PeriodRepository
from core.services.cashflow.assembler import assemble_report, assemble_service_report
from core.services.cashflow.classify import split_flows
from core.services.cashflow.grouping import group_by_period
from core.services.cashflow.helpers import parse_report_date
from core.services.cashflow.models import CashflowReport, CashflowResult, ServiceCashflowReport
from core.services.cashflow.periods import resolve_periods

logger = logging.getLogger(__name__)


def _require_account_id(account_id: Any) -> int:
    if account_id in (None, ""):
        raise MissingParameterError("Cashbox is missing.")
    try:
        return int(account_id)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid account id: {account_id!r}.", code="ERRORS.BAD_REQUEST") from exc


class CashflowService:
    """Cashflow read models for a cashbox account, by accounting period or by week."""

    def __init__(
        self,
        *,
        period_repo: PeriodRepository,
        ledger_repo: LedgerRepository,
        cash_repo: CashRepository,
        account_repo: AccountRepository | None = None,
    ) -> None:
        self._period_repo: PeriodRepository = period_repo
        self._ledger_repo: LedgerRepository = ledger_repo
        self._cash_repo: CashRepository = cash_repo
        self._account_repo: AccountRepository | None = account_repo

    def get_cashflow(
        self,
        account_id: Any,
        *,
        date_from: date | str | None = None,
        date_to: date | str | None = None,
        weekly: bool = False,
    ) -> CashflowResult:
        account = _require_account_id(account_id)
        start = parse_report_date(date_from, field_name="dateFrom")
        end = parse_report_date(date_to, field_name="dateTo")

        periods = resolve_periods(
            period_repo=self._period_repo,
            date_from=start,
            date_to=end,
            weekly=weekly,
        )
        opening_balance = self._ledger_repo.opening_balance(account, periods[0].start_date)
        postings = self._ledger_repo.list_postings(account, start, end)
        grouping = group_by_period(periods, postings, weekly=weekly)
        if grouping.unassigned:
            logger.warning(
                "Cashflow for account %s: %d posting(s) outside every resolved period were left out.",
                account,
                len(grouping.unassigned),
            )

        logger.info(
            "Cashflow for account %s from %s to %s (%s): %d period(s), %d posting(s).",
            account,
            start,
            end,
            "weekly" if weekly else "calendar",
            len(periods),
            len(postings),
        )
        return CashflowResult(
            account_id=account,
            opening_balance=float(opening_balance or 0.0),
            weekly=weekly,
            periods=periods,
            flows=[split_flows(bucket) for bucket in grouping.buckets],
            unassigned=grouping.unassigned,
            date_from=start,
            date_to=end,
        )

    def get_report(
        self,
        account_id: Any,
        *,
        date_from: date | str | None = None,
        date_to: date | str | None = None,
        weekly: bool = False,
    ) -> CashflowReport:
        result = self.get_cashflow(account_id, date_from=date_from, date_to=date_to, weekly=weekly)
        account = None if self._account_repo is None else self._account_repo.get(result.account_id)
        return assemble_report(
            result,
            account_label=(None if account is None else account.label),
            date_from=result.date_from,
            date_to=result.date_to,
        )

    def get_service_report(
        self,
        *,
        date_from: date | str | None = None,
        date_to: date | str | None = None,
    ) -> ServiceCashflowReport:
        start = parse_report_date(date_from, field_name="dateFrom")
        end = parse_report_date(date_to, field_name="dateTo")

        rows = self._cash_repo.list_service_payments(start, end)
        services: list[str] = []
        if rows:
            service_ids: list[int] = []
            for row in rows:
                if row.service_id is not None and row.service_id not in service_ids:
                    service_ids.append(row.service_id)
            services = self._cash_repo.list_service_names(service_ids)
        aggregates = self._cash_repo.aggregate_by_service(start, end)

        logger.info(
            "Cashflow by service from %s to %s: %d payment(s), %d service(s).",
            start,
            end,
            len(rows),
            len(services),
        )
        return assemble_service_report(
            rows=rows,
            services=services,
            aggregates=aggregates,
            date_from=start,
            date_to=end,
        )


__all__ = ["CashflowService"]
