from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape, portrait
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import (
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from core.reporting.contexts import CashflowDocumentContext, DocumentContext, ServiceDocumentContext
from core.reporting.tables import (
    SECTION_EXPENSES,
    SECTION_INCOMES,
    cashflow_header,
    cashflow_rows,
    format_amount,
    service_aggregate_rows,
    service_header,
)

_MARGIN = 40


def _document(ctx: DocumentContext, output_path: Path) -> SimpleDocTemplate:
    size = landscape(A4) if ctx.orientation == "landscape" else portrait(A4)
    return SimpleDocTemplate(
        str(output_path),
        pagesize=size,
        leftMargin=_MARGIN,
        rightMargin=_MARGIN,
        topMargin=_MARGIN,
        bottomMargin=_MARGIN,
    )


def _grid_style(font_size: float) -> list:
    return [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
    ]


def _footer_lines(ctx: DocumentContext) -> list[str]:
    lines = [f"Printed on: {ctx.printed_on.isoformat()}"]
    if ctx.user:
        lines.append(f"Printed by: {ctx.user}")
    return lines


class PdfCashflowRenderer:
    def render(self, ctx: CashflowDocumentContext, output_path: Path) -> Path:
        report = ctx.report
        doc = _document(ctx, output_path)
        styles = getSampleStyleSheet()
        story = []

        # ---------------- Title ----------------
        title = report.account_label or f"Account {report.account_id}"
        story.append(Paragraph(f"Cashflow - {title}", styles["Title"]))
        story.append(Spacer(1, 12))

        # ---------------- Summary ----------------
        info = [
            f"From {report.date_from.isoformat()} to {report.date_to.isoformat()}",
            f"Grouping: {'weekly' if report.weekly else 'accounting periods'}",
            f"Opening balance: {format_amount(report.opening_balance)}",
            f"Total incomes: {format_amount(report.total_income)}",
            f"Total expenses: {format_amount(report.total_expense)}",
            f"Closing balance: {format_amount(report.closing_balance)}",
        ]
        if report.unassigned_count:
            info.append(f"Postings outside the resolved periods: {report.unassigned_count}")
        for line in info + _footer_lines(ctx):
            story.append(Paragraph(line, styles["Normal"]))
        story.append(Spacer(1, 16))

        # ---------------- Balance chart ----------------
        if ctx.chart_png_path:
            story.append(Paragraph("Balance by period", styles["Heading2"]))
            story.append(Spacer(1, 8))
            img = Image(ctx.chart_png_path)
            img._restrictSize(doc.width, 220)
            story.append(img)
            story.append(Spacer(1, 16))

        # ---------------- Matrix ----------------
        story.append(Paragraph("Incomes and expenses", styles["Heading2"]))
        story.append(Spacer(1, 8))

        data = [cashflow_header(report)]
        section_rows = []
        for index, row in enumerate(cashflow_rows(report), start=1):
            if row[0] in (SECTION_INCOMES, SECTION_EXPENSES):
                section_rows.append(index)
            data.append([row[0]] + [format_amount(value) for value in row[1:]])

        columns = len(data[0])
        label_width = min(160, doc.width * 0.3)
        value_width = (doc.width - label_width) / max(1, columns - 1)
        font_size = 8 if columns <= 8 else 6
        table = Table(data, colWidths=[label_width] + [value_width] * (columns - 1), repeatRows=1)
        style = _grid_style(font_size)
        for index in section_rows:
            style.append(("FONTNAME", (0, index), (-1, index), "Helvetica-Bold"))
            style.append(("BACKGROUND", (0, index), (-1, index), colors.whitesmoke))
        table.setStyle(TableStyle(style))
        story.append(table)

        doc.build(story)
        return output_path


class PdfServiceRenderer:
    def render(self, ctx: ServiceDocumentContext, output_path: Path) -> Path:
        report = ctx.report
        doc = _document(ctx, output_path)
        styles = getSampleStyleSheet()
        story = []

        story.append(Paragraph("Cashflow by service", styles["Title"]))
        story.append(Spacer(1, 12))
        for line in [f"From {report.date_from.isoformat()} to {report.date_to.isoformat()}"] + _footer_lines(ctx):
            story.append(Paragraph(line, styles["Normal"]))
        story.append(Spacer(1, 16))

        if not report.matrix:
            story.append(Paragraph("No cash payment found for the selected dates.", styles["Normal"]))
            doc.build(story)
            return output_path

        # ---------------- Payments ----------------
        story.append(Paragraph("Cash payments", styles["Heading2"]))
        story.append(Spacer(1, 8))
        data = [service_header(report)]
        for line in report.matrix:
            data.append([str(line[0]), str(line[1])] + [format_amount(value) for value in line[2:]])
        columns = len(data[0])
        font_size = 8 if columns <= 8 else 6
        table = Table(data, colWidths=[doc.width / columns] * columns, repeatRows=1)
        table.setStyle(TableStyle(_grid_style(font_size)))
        story.append(table)
        story.append(Spacer(1, 16))

        # ---------------- Totals ----------------
        story.append(Paragraph("Totals by service", styles["Heading2"]))
        story.append(Spacer(1, 8))
        totals = [["Service", "Cash income", "Accrual income"]]
        for row in service_aggregate_rows(report):
            totals.append([str(row[0] or "")] + [format_amount(value) for value in row[1:]])
        totals_table = Table(totals, colWidths=[200, 120, 120])
        totals_table.setStyle(TableStyle(_grid_style(8)))
        story.append(totals_table)

        doc.build(story)
        return output_path
