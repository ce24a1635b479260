# creche/services/receipt_pdf.py
import io
import logging
import os

from reportlab.lib import colors
from reportlab.lib.pagesizes import A5
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas as rl_canvas
from reportlab.platypus import Table, TableStyle

from creche.core.config import settings
from creche.models import Fee
from creche.services.activity import money
from creche.utils.datetime import fmt_dmy, utcnow

log = logging.getLogger("creche.pdf")

TITLE_SIZE = 14
TEXT_SIZE = 10

LM, RM, TM, BM = 12*mm, 12*mm, 14*mm, 14*mm
KV_STEP = 6*mm

# built-in fallbacks, replaced once a TTF is registered
FONT_REG = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
_fonts_ready = False


def _first_existing(paths):
    for p in paths:
        if not p:
            continue
        p = os.path.abspath(str(p).strip().strip('"').strip("'"))
        if os.path.exists(p):
            return p
    return None


def _register_fonts():
    """
    Use DejaVu (or whatever FONT_PATH points at) when present so names with
    accents render; otherwise stay on Helvetica.
    """
    global FONT_REG, FONT_BOLD, _fonts_ready
    if _fonts_ready:
        return
    _fonts_ready = True

    reg = _first_existing([settings.FONT_PATH, os.path.join(os.getcwd(), "assets", "DejaVuSans.ttf")])
    bold = _first_existing([
        settings.FONT_PATH_BOLD,
        os.path.join(os.getcwd(), "assets", "DejaVuSans-Bold.ttf"),
        reg,
    ])
    try:
        if reg:
            pdfmetrics.registerFont(TTFont("CrecheSans", reg))
            FONT_REG = "CrecheSans"
        if bold:
            pdfmetrics.registerFont(TTFont("CrecheSans-Bold", bold))
            FONT_BOLD = "CrecheSans-Bold"
    except Exception as e:
        log.warning("could not register TrueType fonts: %s", e)


def _draw_kv(c, x, y, label, value, step=KV_STEP, gap=1.4*mm):
    """'Label:' in regular, value in bold right after the colon."""
    lbl = f"{label.rstrip(':')}:"
    c.setFont(FONT_REG, TEXT_SIZE)
    c.drawString(x, y, lbl)
    c.setFont(FONT_BOLD, TEXT_SIZE)
    c.drawString(x + stringWidth(lbl, FONT_REG, TEXT_SIZE) + gap, y, value or "")
    return y - step


def _receipt_no(fee: Fee) -> str:
    return f"RCP-{fee.id:06d}"


def render_fee_receipt(fee: Fee) -> bytes:
    """One A5 receipt for a paid fee."""
    _register_fonts()
    buf = io.BytesIO()
    c = rl_canvas.Canvas(buf, pagesize=A5)
    c.setTitle(f"Receipt {_receipt_no(fee)}")
    W, H = A5

    # header
    y = H - TM
    c.setFont(FONT_BOLD, TITLE_SIZE)
    c.drawCentredString(W/2, y, settings.CRECHE_NAME)
    y -= 8*mm
    c.setFont(FONT_BOLD, 12)
    c.drawCentredString(W/2, y, "PAYMENT RECEIPT")
    y -= 12*mm

    y = _draw_kv(c, LM, y, "Receipt no", _receipt_no(fee))
    y = _draw_kv(c, LM, y, "Paid on", fmt_dmy(fee.paid_date))
    y = _draw_kv(c, LM, y, "Child", fee.student_name or "")
    parent = fee.student.parent if fee.student else None
    y = _draw_kv(c, LM, y, "Parent", parent.name if parent else "")
    y -= 4*mm

    w = W - LM - RM
    rows = [
        ["Description", "Due date", "Amount"],
        [fee.description, fmt_dmy(fee.due_date), money(fee.amount)],
        ["", "Total paid", money(fee.amount)],
    ]
    t = Table(rows, colWidths=[w*0.55, w*0.22, w*0.23])
    t.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (-1, -1), FONT_REG),
        ("FONTNAME", (0, 0), (-1, 0), FONT_BOLD),
        ("FONTNAME", (1, -1), (-1, -1), FONT_BOLD),
        ("FONTSIZE", (0, 0), (-1, -1), TEXT_SIZE),
        ("ALIGN", (-1, 0), (-1, -1), "RIGHT"),
        ("GRID", (0, 0), (-1, -2), 0.5, colors.black),
        ("LINEBELOW", (1, -1), (-1, -1), 0.8, colors.black),
        ("TOPPADDING", (0, 0), (-1, -1), 5),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]))
    t.wrapOn(c, 0, 0)
    t.drawOn(c, LM, y - t._height)

    c.setFont(FONT_REG, 8)
    c.drawCentredString(W/2, BM, f"Generated {fmt_dmy(utcnow())} - thank you for your payment.")

    c.showPage(); c.save()
    return buf.getvalue()
