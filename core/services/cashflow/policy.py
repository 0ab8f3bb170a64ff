from __future__ import annotations

import os


DEFAULT_TRANSFER_ORIGIN_ID = 10
DEFAULT_TRANSFER_VOUCHER_TYPE_ID = 10
DEFAULT_CASH_PAYMENT_KEY = "CP"


def _int_setting(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def transfer_origin_id() -> int:
    return _int_setting("BHIMA_TRANSFER_ORIGIN_ID", DEFAULT_TRANSFER_ORIGIN_ID)


def transfer_voucher_type_id() -> int:
    return _int_setting("BHIMA_TRANSFER_VOUCHER_TYPE_ID", DEFAULT_TRANSFER_VOUCHER_TYPE_ID)


def cash_payment_key() -> str:
    return (os.getenv("BHIMA_CASH_PAYMENT_KEY", DEFAULT_CASH_PAYMENT_KEY) or "").strip() or DEFAULT_CASH_PAYMENT_KEY


__all__ = [
    "transfer_origin_id",
    "transfer_voucher_type_id",
    "cash_payment_key",
    "DEFAULT_TRANSFER_ORIGIN_ID",
    "DEFAULT_TRANSFER_VOUCHER_TYPE_ID",
    "DEFAULT_CASH_PAYMENT_KEY",
]
