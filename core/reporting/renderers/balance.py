from pathlib import Path
from typing import List

from matplotlib.figure import Figure

from core.services.cashflow.models import PeriodSummary


class BalanceChartRenderer:
    """Incomes/expenses bars with the closing balance line, one tick per period."""

    def render(self, summaries: List[PeriodSummary], output_path: Path) -> Path:
        if not summaries:
            raise ValueError("No periods available for the balance chart")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        xs = list(range(len(summaries)))
        labels = [s.period.start_date.isoformat() for s in summaries]
        incomes = [float(s.total_income) for s in summaries]
        expenses = [-float(s.total_expense) for s in summaries]
        closings = [float(s.closing_balance) for s in summaries]

        # no pyplot: its figure manager is global state shared by worker threads
        fig = Figure(figsize=(10, 3))
        ax = fig.add_subplot()
        ax.bar(xs, incomes, width=0.6, color="#9fd39f", label="Incomes")
        ax.bar(xs, expenses, width=0.6, color="#f3a7a7", label="Expenses")
        ax.plot(xs, closings, color="#1f4e79", marker="o", linewidth=1.5, label="Closing balance")
        ax.axhline(0, color="black", linewidth=0.6)

        ax.set_xticks(xs)
        ax.set_xticklabels(labels, fontsize=7, rotation=30)
        ax.legend(fontsize=8)
        ax.grid(True, axis="y", linestyle=":", linewidth=0.6)

        fig.tight_layout()
        fig.savefig(output_path, dpi=150)

        return output_path
