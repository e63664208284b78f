# backend/utils/pdf.py

import io
import logging
from datetime import datetime
from pathlib import Path

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from config import settings
from models.sale import Sale

logger = logging.getLogger(__name__)

# Font configuration
FONT_DIR = Path(settings.FONT_DIR)
FONT_REGULAR_PATH = FONT_DIR / "DejaVuSans.ttf"
FONT_BOLD_PATH = FONT_DIR / "DejaVuSans-Bold.ttf"

FONT_REGULAR_NAME = "Helvetica"
FONT_BOLD_NAME = "Helvetica-Bold"

_fonts_inited = False
def _init_fonts():
    """Registers DejaVu fonts when available, otherwise keeps the built-in Helvetica."""
    global _fonts_inited, FONT_REGULAR_NAME, FONT_BOLD_NAME
    if _fonts_inited:
        return

    if not FONT_REGULAR_PATH.exists():
        logger.debug("Font file not found at %s, using Helvetica", FONT_REGULAR_PATH)
        _fonts_inited = True
        return

    try:
        pdfmetrics.registerFont(TTFont("DejaVuSans", str(FONT_REGULAR_PATH)))
        bold_name = "DejaVuSans"
        if FONT_BOLD_PATH.exists():
            pdfmetrics.registerFont(TTFont("DejaVuSans-Bold", str(FONT_BOLD_PATH)))
            bold_name = "DejaVuSans-Bold"
    except Exception as e:
        # Receipt still renders with Helvetica, registration is retried next time
        logger.warning("Font init failed, using Helvetica: %s", e)
        return

    FONT_REGULAR_NAME = "DejaVuSans"
    FONT_BOLD_NAME = bold_name
    _fonts_inited = True


def format_sale_date(value: str) -> str:
    """Turns a stored ISO timestamp into e.g. '19 Oct 2026, 12:00'."""
    try:
        # fromisoformat only accepts a trailing 'Z' from Python 3.11
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return str(value or "")
    return parsed.strftime("%d %b %Y, %H:%M")


def format_amount(amount: int) -> str:
    return f"{settings.CURRENCY_LABEL} {amount}"


def receipt_filename(sale_id: int) -> str:
    return f"receipt_{sale_id}.pdf"


def generate_receipt_pdf(sale: Sale) -> bytes:
    """
    Renders a single-page receipt for one sale and returns the PDF bytes:
    - title
    - sale / product identifiers, quantity
    - total with currency label
    - date and payment mode
    """
    _init_fonts()

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    width, height = A4

    c.setTitle(f"Receipt #{sale.id}")

    def draw_text(x, y, text, font=None, size=11, align="left"):
        c.setFont(font or FONT_REGULAR_NAME, size)
        text_str = str(text) if text is not None else ""
        if align == "right":
            c.drawRightString(x, y, text_str)
        elif align == "center":
            c.drawCentredString(x, y, text_str)
        else:
            c.drawString(x, y, text_str)

    # Header
    y = height - 25 * mm
    draw_text(width / 2, y, "Sales Receipt", font=FONT_BOLD_NAME, size=18, align="center")
    y -= 8 * mm
    c.setLineWidth(0.5)
    c.line(20 * mm, y, 190 * mm, y)
    y -= 12 * mm

    rows = [
        ("Sale ID:", sale.id),
        ("Product ID:", sale.product_id),
        ("Quantity:", sale.quantity_sold),
        ("Total:", format_amount(sale.total_price)),
        ("Date:", format_sale_date(sale.date_time)),
        ("Payment Mode:", sale.payment_mode),
    ]
    for label, value in rows:
        draw_text(25 * mm, y, label, font=FONT_BOLD_NAME)
        draw_text(70 * mm, y, value)
        y -= 8 * mm

    # Footer
    y -= 4 * mm
    c.line(20 * mm, y, 190 * mm, y)
    y -= 10 * mm
    draw_text(width / 2, y, "Thank you for your purchase!", size=10, align="center")

    c.showPage()
    c.save()
    return buf.getvalue()
