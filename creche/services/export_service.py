# ================================
# creche/services/export_service.py
# ================================
from __future__ import annotations

from datetime import date, datetime
from io import BytesIO
from typing import Iterable, List

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font

from creche.models import Fee

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _autosize(ws):
    ws.freeze_panes = "A2"
    for col in ws.columns:
        w = max(10, *(len(str(c.value)) if c.value else 0 for c in col)) + 2
        ws.column_dimensions[col[0].column_letter].width = min(w, 40)


def _header(ws, headers: List[str]):
    ws.append(headers)
    for cell in ws[1]:
        cell.font = Font(bold=True)


def _date_cols(ws, cols: Iterable[int]):
    for col in cols:
        for cells in ws.iter_cols(min_col=col, max_col=col, min_row=2):
            for c in cells:
                if isinstance(c.value, (date, datetime)):
                    c.number_format = "dd/mm/yyyy"
                    c.alignment = Alignment(horizontal="center")


def _save(wb) -> bytes:
    out = BytesIO()
    wb.save(out)
    out.seek(0)
    return out.getvalue()


# ---------- fees ----------
def build_fees_xlsx(fees: List[Fee]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Fees"
    _header(ws, ["ID", "Child", "Parent", "Description", "Amount", "Due date", "Status", "Paid date"])

    for f in fees:
        parent = f.student.parent if f.student else None
        ws.append([
            f.id,
            f.student_name or "",
            parent.name if parent else "",
            f.description,
            float(f.amount),
            f.due_date,
            f.status,
            f.paid_date.date() if f.paid_date else None,
        ])

    for cells in ws.iter_cols(min_col=5, max_col=5, min_row=2):
        for c in cells:
            c.number_format = "#,##0.00"
    _date_cols(ws, (6, 8))
    _autosize(ws)
    return _save(wb)


# ---------- attendance sheet ----------
def build_attendance_xlsx(day: date, rows: List[dict]) -> bytes:
    """``rows`` is the attendance sheet for one day (see services.attendance)."""
    wb = Workbook()
    ws = wb.active
    ws.title = f"Attendance {day.isoformat()}"
    _header(ws, ["Date", "Child", "Class", "Present", "Notes"])

    for r in rows:
        ws.append([
            r["date"],
            r["student_name"],
            r["class_name"] or "",
            "Yes" if r["present"] else "No",
            r["notes"],
        ])

    _date_cols(ws, (1,))
    _autosize(ws)
    return _save(wb)
