from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from core.reporting.contexts import CashflowDocumentContext, DocumentContext, ServiceDocumentContext
from core.reporting.tables import (
    SECTION_EXPENSES,
    SECTION_INCOMES,
    cashflow_header,
    cashflow_rows,
    service_aggregate_rows,
    service_header,
)

header_font = Font(bold=True)
title_font = Font(bold=True, size=14)
center = Alignment(horizontal="center")
thin_border = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)
header_fill = PatternFill("solid", fgColor="DDDDDD")
section_fill = PatternFill("solid", fgColor="F2F2F2")


def _write_header(ws, row: int, headers: list[str]) -> None:
    for col_index, h in enumerate(headers, start=1):
        cell = ws.cell(row=row, column=col_index, value=h)
        cell.font = header_font
        cell.alignment = center
        cell.fill = header_fill
        cell.border = thin_border


def _write_footer(ws, row: int, ctx: DocumentContext) -> int:
    ws[f"A{row}"] = "Printed on"
    ws[f"B{row}"] = ctx.printed_on.isoformat()
    row += 1
    if ctx.user:
        ws[f"A{row}"] = "Printed by"
        ws[f"B{row}"] = ctx.user
        row += 1
    return row


def _set_page(ws, ctx: DocumentContext) -> None:
    ws.page_setup.orientation = ctx.orientation


class ExcelCashflowRenderer:
    def render(self, ctx: CashflowDocumentContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        report = ctx.report
        wb = Workbook()

        # ---------------- Overview ----------------
        ws = wb.active
        ws.title = "Overview"
        _set_page(ws, ctx)
        ws["A1"] = f"Cashflow - {report.account_label or report.account_id}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        kv("Account ID", report.account_id)
        kv("Date from", report.date_from.isoformat())
        kv("Date to", report.date_to.isoformat())
        kv("Grouping", "weekly" if report.weekly else "accounting periods")
        kv("Opening balance", report.opening_balance)
        kv("Total incomes", report.total_income)
        kv("Total expenses", report.total_expense)
        kv("Closing balance", report.closing_balance)
        kv("Unassigned postings", report.unassigned_count)
        row += 1
        _write_footer(ws, row, ctx)

        ws.column_dimensions["A"].width = 28
        ws.column_dimensions["B"].width = 22

        # ---------------- Periods ----------------
        ws_flows = wb.create_sheet("Cashflow")
        _set_page(ws_flows, ctx)
        headers = cashflow_header(report)
        _write_header(ws_flows, 1, headers)
        for row_index, values in enumerate(cashflow_rows(report), start=2):
            is_section = values[0] in (SECTION_INCOMES, SECTION_EXPENSES)
            for col_index, value in enumerate(values, start=1):
                cell = ws_flows.cell(row=row_index, column=col_index, value=value)
                cell.border = thin_border
                if is_section:
                    cell.font = header_font
                    cell.fill = section_fill

        ws_flows.column_dimensions["A"].width = 30
        for col_index in range(2, len(headers) + 1):
            ws_flows.column_dimensions[get_column_letter(col_index)].width = 24

        wb.save(output_path)
        return output_path


class ExcelServiceRenderer:
    def render(self, ctx: ServiceDocumentContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        report = ctx.report
        wb = Workbook()

        # ---------------- Payments ----------------
        ws = wb.active
        ws.title = "Payments"
        _set_page(ws, ctx)
        headers = service_header(report)
        _write_header(ws, 1, headers)
        for row_index, line in enumerate(report.matrix, start=2):
            for col_index, value in enumerate(line, start=1):
                ws.cell(row=row_index, column=col_index, value=value).border = thin_border

        ws.column_dimensions["A"].width = 20
        ws.column_dimensions["B"].width = 30
        for col_index in range(3, len(headers) + 1):
            ws.column_dimensions[get_column_letter(col_index)].width = 16

        # ---------------- Totals ----------------
        ws_totals = wb.create_sheet("Totals")
        _set_page(ws_totals, ctx)
        _write_header(ws_totals, 1, ["Service", "Cash income", "Accrual income"])
        last_row = 1
        for row_index, values in enumerate(service_aggregate_rows(report), start=2):
            for col_index, value in enumerate(values, start=1):
                ws_totals.cell(row=row_index, column=col_index, value=value).border = thin_border
            last_row = row_index
        _write_footer(ws_totals, last_row + 2, ctx)

        ws_totals.column_dimensions["A"].width = 30
        ws_totals.column_dimensions["B"].width = 18
        ws_totals.column_dimensions["C"].width = 18

        wb.save(output_path)
        return output_path
