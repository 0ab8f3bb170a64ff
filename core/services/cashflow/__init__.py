from .models import (
    CashflowReport,
    CashflowResult,
    FlowEntry,
    PeriodFlows,
    PeriodGrouping,
    PeriodPostings,
    PeriodSummary,
    ServiceCashflowReport,
)
from .service import CashflowService

__all__ = [
    "CashflowService",
    "CashflowReport",
    "CashflowResult",
    "FlowEntry",
    "PeriodFlows",
    "PeriodGrouping",
    "PeriodPostings",
    "PeriodSummary",
    "ServiceCashflowReport",
]
