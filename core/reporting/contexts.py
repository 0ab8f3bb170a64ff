from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.exceptions import ValidationError
from core.services.cashflow.models import CashflowReport, ServiceCashflowReport

ORIENTATIONS = ("landscape", "portrait")


def normalize_orientation(value: Optional[str]) -> str:
    token = (value or "landscape").strip().lower()
    if token not in ORIENTATIONS:
        raise ValidationError(f"Unsupported orientation: {value!r}.", code="ERRORS.BAD_REQUEST")
    return token


@dataclass
class DocumentContext:
    orientation: str
    user: Optional[str]
    printed_on: date


@dataclass
class CashflowDocumentContext(DocumentContext):
    report: CashflowReport
    chart_png_path: str = ""


@dataclass
class ServiceDocumentContext(DocumentContext):
    report: ServiceCashflowReport
