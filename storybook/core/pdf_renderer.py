"""
Draw a DocumentLayout to PDF bytes with reportlab.

The layout already holds absolute coordinates in points (origin bottom-left,
the same convention reportlab uses), so rendering is a straight walk over the
elements of each page.
"""

import io
import logging

from reportlab.pdfgen import canvas as rl_canvas

from ..config import LAYOUT_CONSTANTS
from .types import DocumentLayout, PageLayout

logger = logging.getLogger(__name__)


def _draw_page(c: rl_canvas.Canvas, page: PageLayout) -> None:
    c.setPageSize((page.width, page.height))

    for rect in page.rects:
        c.setStrokeColorRGB(*rect.border_color)
        c.setLineWidth(rect.border_width)
        c.rect(rect.x, rect.y, rect.width, rect.height, stroke=1, fill=0)

    for text in page.texts:
        c.setFont(LAYOUT_CONSTANTS["font_name"], text.font_size)
        c.setFillColorRGB(*text.color)
        c.drawString(text.x, text.y, text.text)

    c.showPage()


def render_pdf(layout: DocumentLayout, title: str = "") -> bytes:
    """
    Render every page of the layout into a single PDF.

    Invariant mode is on, so rendering the same layout twice gives the same
    bytes.

    Args:
        layout: Output of build_document
        title: Optional PDF metadata title

    Returns:
        PDF data as bytes
    """
    buf = io.BytesIO()
    cover = layout.cover
    c = rl_canvas.Canvas(buf, pagesize=(cover.width, cover.height), invariant=1)
    if title:
        c.setTitle(title)

    for page in layout.pages:
        _draw_page(c, page)

    c.save()
    pdf_data = buf.getvalue()

    logger.debug(
        f"Rendered {layout.variant} PDF: {layout.page_count} pages, {len(pdf_data)} bytes"
    )
    return pdf_data
