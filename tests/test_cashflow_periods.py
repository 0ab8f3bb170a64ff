from __future__ import annotations

from datetime import date

import pytest

from core.exceptions import InvalidRangeError, ValidationError
from core.services.cashflow.helpers import is_truthy_flag, parse_report_date, period_label, week_start
from core.services.cashflow.periods import build_weekly_periods, resolve_periods
from infra.db.repositories import SqlAlchemyPeriodRepository


def test_weekly_periods_pin_first_week_to_requested_start():
    weeks = build_weekly_periods(date(2024, 3, 5), date(2024, 3, 20))

    assert [(w.start_date, w.end_date) for w in weeks] == [
        (date(2024, 3, 5), date(2024, 3, 10)),
        (date(2024, 3, 11), date(2024, 3, 17)),
        (date(2024, 3, 18), date(2024, 3, 24)),
    ]
    assert [w.id for w in weeks] == [1, 2, 3]
    assert [w.number for w in weeks] == [1, 2, 3]


def test_weekly_periods_single_day_still_yields_one_week():
    weeks = build_weekly_periods(date(2024, 3, 10), date(2024, 3, 10))

    assert len(weeks) == 1
    assert weeks[0].start_date == date(2024, 3, 10)
    assert weeks[0].end_date == date(2024, 3, 10)


def test_weekly_periods_starting_on_monday_keep_full_first_week():
    weeks = build_weekly_periods(date(2024, 3, 4), date(2024, 3, 11))

    assert weeks[0].start_date == date(2024, 3, 4)
    assert weeks[-1].start_date == date(2024, 3, 11)
    assert len(weeks) == 2


def test_weekly_periods_reversed_range_is_empty():
    assert build_weekly_periods(date(2024, 3, 20), date(2024, 3, 5)) == []


def test_calendar_periods_include_partially_overlapping_months(session, seeder):
    seeder.fiscal_year(2024)
    periods = resolve_periods(
        period_repo=SqlAlchemyPeriodRepository(session),
        date_from=date(2024, 1, 15),
        date_to=date(2024, 3, 10),
    )

    assert [p.id for p in periods] == [202401, 202402, 202403]
    assert periods[0].start_date == date(2024, 1, 1)
    assert periods[-1].end_date == date(2024, 3, 31)


def test_calendar_periods_range_inside_single_month(session, seeder):
    seeder.fiscal_year(2024)
    periods = resolve_periods(
        period_repo=SqlAlchemyPeriodRepository(session),
        date_from=date(2024, 2, 5),
        date_to=date(2024, 2, 20),
    )

    assert [p.id for p in periods] == [202402]


def test_calendar_periods_without_match_raise_bad_interval(session, seeder):
    seeder.fiscal_year(2024)
    with pytest.raises(InvalidRangeError) as exc:
        resolve_periods(
            period_repo=SqlAlchemyPeriodRepository(session),
            date_from=date(2030, 1, 1),
            date_to=date(2030, 2, 1),
        )
    assert exc.value.code == "ERRORS.BAD_DATE_INTERVAL"


@pytest.mark.parametrize("weekly", [False, True])
def test_reversed_range_raises_bad_interval(session, seeder, weekly):
    seeder.fiscal_year(2024)
    with pytest.raises(InvalidRangeError):
        resolve_periods(
            period_repo=SqlAlchemyPeriodRepository(session),
            date_from=date(2024, 3, 20),
            date_to=date(2024, 3, 5),
            weekly=weekly,
        )


def test_parse_report_date_accepts_dates_and_iso_strings():
    assert parse_report_date("2024-03-05", field_name="dateFrom") == date(2024, 3, 5)
    assert parse_report_date("2024-03-05T10:30:00Z", field_name="dateFrom") == date(2024, 3, 5)
    assert parse_report_date(date(2024, 3, 5), field_name="dateFrom") == date(2024, 3, 5)
    assert parse_report_date(None, field_name="dateFrom", default=date(2020, 1, 1)) == date(2020, 1, 1)


def test_parse_report_date_rejects_garbage():
    with pytest.raises(ValidationError) as exc:
        parse_report_date("not-a-date", field_name="dateTo")
    assert exc.value.code == "ERRORS.BAD_REQUEST"
    assert "dateTo" in str(exc.value)


def test_small_helpers():
    assert week_start(date(2024, 3, 10)) == date(2024, 3, 4)
    assert period_label(date(2024, 3, 4), date(2024, 3, 10)) == "2024-03-04 / 2024-03-10"
    assert is_truthy_flag("1") and is_truthy_flag("true") and is_truthy_flag(True)
    assert not is_truthy_flag("0") and not is_truthy_flag(None) and not is_truthy_flag("no")


@pytest.mark.parametrize("raw", ["2", "-1", " 7 ", "01", 3])
def test_weekly_flag_accepts_any_non_zero_integer(raw):
    assert is_truthy_flag(raw) is True


@pytest.mark.parametrize("raw", ["0", "00", "", "off", "weekly"])
def test_weekly_flag_false_values(raw):
    assert is_truthy_flag(raw) is False
