from __future__ import annotations

import io
from collections.abc import Sequence

from openpyxl import Workbook
from openpyxl.styles import Font

from expense_dashboard.schemas.expense import ExpenseRecord
from expense_dashboard.services.aggregation import AggregateSummary
from expense_dashboard.services.periods import month_label

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

EXPENSE_HEADERS = ("Date", "Description", "Category", "Amount", "Notes")


def _bold_row(ws, values: Sequence[object]) -> None:
    ws.append(list(values))
    for cell in ws[ws.max_row]:
        cell.font = Font(bold=True)


def build_report_workbook(
    records: Sequence[ExpenseRecord],
    summary: AggregateSummary,
    *,
    period_label: str,
) -> bytes:
    """Two-sheet workbook: report summary and the filtered expense rows."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Summary"

    _bold_row(ws, ["Expense report", period_label])
    ws.append(["Total expenses", round(summary.total_amount, 2)])
    ws.append(["Transactions", summary.total_count])
    ws.append(["Average daily spend", round(summary.avg_daily_spend, 2)])
    if summary.top_category is not None:
        top = summary.top_category
        ws.append(["Top category", top.category, round(top.amount, 2), f"{top.percentage}%"])
    else:
        ws.append(["Top category", "-"])

    ws.append([])
    _bold_row(ws, ["Category", "Amount"])
    for category, amount in summary.category_totals.items():
        ws.append([category, round(amount, 2)])

    ws.append([])
    _bold_row(ws, ["Month", "Amount"])
    for key, amount in summary.monthly_trend.items():
        ws.append([month_label(key), round(amount, 2)])

    rows = wb.create_sheet("Expenses")
    _bold_row(rows, EXPENSE_HEADERS)
    for record in records:
        rows.append(
            [record.date, record.title, record.category, round(record.amount, 2), record.notes or ""]
        )
    for cell in rows["A"][1:]:
        cell.number_format = "yyyy-mm-dd"

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
