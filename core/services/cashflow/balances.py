from __future__ import annotations

from dataclasses import dataclass
from datetime import date


def is_first_period(start: date, reference: date) -> bool:
    """
    Fiscal-year start test used to reseed the running balance.

    When the first period opens on January 1st, every period opening on a
    January 1st counts as first, whatever its year. Otherwise only a period
    starting on the exact reference day does.
    """
    if reference.day == 1 and reference.month == 1:
        return start.day == 1 and start.month == 1
    return start.day == reference.day and start.month == reference.month and start.year == reference.year


@dataclass(frozen=True)
class BalanceStep:
    index: int
    opening_balance: float
    closing_balance: float


class BalanceAccumulator:
    """Running opening/closing balance across an ordered list of period starts."""

    def __init__(self, opening_balance: float, period_starts: list[date]):
        self._opening = float(opening_balance or 0.0)
        self._starts = list(period_starts)
        self._closings: list[float] = []

    @property
    def opening_balance(self) -> float:
        return self._opening

    @property
    def closings(self) -> list[float]:
        return list(self._closings)

    def advance(self, total_income: float, total_expense: float) -> BalanceStep:
        index = len(self._closings)
        if index >= len(self._starts):
            raise IndexError("No period left to accumulate.")

        start = self._starts[index]
        if index == 0 or is_first_period(start, self._starts[0]):
            opening = self._opening
        else:
            opening = self._closings[index - 1]

        closing = opening + float(total_income or 0.0) - float(total_expense or 0.0)
        self._closings.append(closing)
        return BalanceStep(index=index, opening_balance=opening, closing_balance=closing)


__all__ = ["is_first_period", "BalanceStep", "BalanceAccumulator"]
