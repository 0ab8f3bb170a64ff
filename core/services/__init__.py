from .cashflow import CashflowService, CashflowReport, CashflowResult, ServiceCashflowReport

__all__ = [
    "CashflowService",
    "CashflowReport",
    "CashflowResult",
    "ServiceCashflowReport",
]
