"""Reporting API wrappers around renderer classes."""

from contextlib import suppress
from datetime import date
from pathlib import Path
from typing import Any, Optional

from core.exceptions import ValidationError
from core.reporting.contexts import (
    CashflowDocumentContext,
    ServiceDocumentContext,
    normalize_orientation,
)
from core.reporting.renderers.balance import BalanceChartRenderer
from core.reporting.renderers.excel import ExcelCashflowRenderer, ExcelServiceRenderer
from core.reporting.renderers.pdf import PdfCashflowRenderer, PdfServiceRenderer
from core.services.cashflow import CashflowService

RENDERERS = {
    "pdf": ("application/pdf", ".pdf"),
    "xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", ".xlsx"),
}


def normalize_renderer(value: Optional[str]) -> str:
    token = (value or "pdf").strip().lower()
    if token not in RENDERERS:
        raise ValidationError(f"Unsupported renderer: {value!r}.", code="ERRORS.BAD_REQUEST")
    return token


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _cleanup_temp_artifact(path: Path | None, temp_dir: Path | None = None) -> None:
    if path:
        with suppress(FileNotFoundError, PermissionError, OSError):
            path.unlink()

    parent = temp_dir if temp_dir is not None else (path.parent if path else None)
    if parent is None:
        return
    if parent.exists():
        with suppress(FileNotFoundError, PermissionError, OSError):
            if not any(parent.iterdir()):
                parent.rmdir()


def generate_cashflow_excel(
    cashflow_service: CashflowService,
    account_id: Any,
    output_path: str | Path,
    *,
    date_from: date | str | None = None,
    date_to: date | str | None = None,
    weekly: bool = False,
    orientation: str | None = None,
    user: str | None = None,
) -> Path:
    orientation = normalize_orientation(orientation)
    report = cashflow_service.get_report(account_id, date_from=date_from, date_to=date_to, weekly=weekly)
    ctx = CashflowDocumentContext(
        orientation=orientation,
        user=user,
        printed_on=date.today(),
        report=report,
    )
    return ExcelCashflowRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_cashflow_pdf(
    cashflow_service: CashflowService,
    account_id: Any,
    output_path: str | Path,
    *,
    date_from: date | str | None = None,
    date_to: date | str | None = None,
    weekly: bool = False,
    orientation: str | None = None,
    user: str | None = None,
    temp_dir: str | Path = "tmp_reports",
) -> Path:
    orientation = normalize_orientation(orientation)
    report = cashflow_service.get_report(account_id, date_from=date_from, date_to=date_to, weekly=weekly)

    temp_dir = Path(temp_dir)
    temp_dir.mkdir(parents=True, exist_ok=True)
    chart_path: Path | None = temp_dir / f"balance_{report.account_id}.png"
    try:
        BalanceChartRenderer().render(report.summaries, chart_path)
    except ValueError:
        chart_path = None

    ctx = CashflowDocumentContext(
        orientation=orientation,
        user=user,
        printed_on=date.today(),
        report=report,
        chart_png_path=str(chart_path) if chart_path else "",
    )
    try:
        return PdfCashflowRenderer().render(ctx, _ensure_parent(Path(output_path)))
    finally:
        _cleanup_temp_artifact(chart_path, temp_dir=temp_dir)


def generate_service_excel(
    cashflow_service: CashflowService,
    output_path: str | Path,
    *,
    date_from: date | str | None = None,
    date_to: date | str | None = None,
    orientation: str | None = None,
    user: str | None = None,
) -> Path:
    orientation = normalize_orientation(orientation)
    report = cashflow_service.get_service_report(date_from=date_from, date_to=date_to)
    ctx = ServiceDocumentContext(orientation=orientation, user=user, printed_on=date.today(), report=report)
    return ExcelServiceRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_service_pdf(
    cashflow_service: CashflowService,
    output_path: str | Path,
    *,
    date_from: date | str | None = None,
    date_to: date | str | None = None,
    orientation: str | None = None,
    user: str | None = None,
) -> Path:
    orientation = normalize_orientation(orientation)
    report = cashflow_service.get_service_report(date_from=date_from, date_to=date_to)
    ctx = ServiceDocumentContext(orientation=orientation, user=user, printed_on=date.today(), report=report)
    return PdfServiceRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_cashflow_document(
    cashflow_service: CashflowService,
    account_id: Any,
    output_dir: str | Path,
    *,
    renderer: str | None = None,
    **options: Any,
) -> Path:
    renderer = normalize_renderer(renderer)
    output_dir = Path(output_dir)
    if renderer == "xlsx":
        return generate_cashflow_excel(cashflow_service, account_id, output_dir / "cashflow.xlsx", **options)
    return generate_cashflow_pdf(
        cashflow_service,
        account_id,
        output_dir / "cashflow.pdf",
        temp_dir=output_dir / "tmp",
        **options,
    )


def generate_service_document(
    cashflow_service: CashflowService,
    output_dir: str | Path,
    *,
    renderer: str | None = None,
    **options: Any,
) -> Path:
    renderer = normalize_renderer(renderer)
    output_dir = Path(output_dir)
    if renderer == "xlsx":
        return generate_service_excel(cashflow_service, output_dir / "cashflow_by_service.xlsx", **options)
    return generate_service_pdf(cashflow_service, output_dir / "cashflow_by_service.pdf", **options)
