# pdf_export.py
from __future__ import annotations
from io import BytesIO
from typing import Any, List
from xml.sax.saxutils import escape

import logging

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from b_types.party_types import Guest, Party
from utils.helpers import calendar_date, text_or_blank

logger = logging.getLogger(__name__)

EMPTY_PDF = b"%PDF-1.4\n1 0 obj <<>> endobj\ntrailer <<>>\n%%EOF\n"


def _p(s: Any) -> str:
    # Paragraph takes mini-markup, so user text is escaped
    return escape(text_or_blank(s)).replace("\n", "<br/>")


def build_party_pdf(party: Party, guests: List[Guest]) -> bytes:
    """One-page A4 sheet: party details and its guest list."""
    buf = BytesIO()
    title = f"{text_or_blank(party.get('name'))} #{party.get('id')}"
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36,
        title=title,
    )
    styles = getSampleStyleSheet()

    story: List[Any] = []
    story.append(Paragraph(_p(title), styles["Heading1"]))
    story.append(Spacer(1, 8))
    meta = [
        f"<b>Date:</b> {_p(calendar_date(party.get('date')))}",
        f"<b>Location:</b> {_p(party.get('location'))}",
    ]
    story.append(Paragraph("<br/>".join(meta), styles["Normal"]))
    story.append(Spacer(1, 12))

    description = text_or_blank(party.get("description")).strip()
    if description:
        story.append(Paragraph("Description", styles["Heading2"]))
        story.append(Paragraph(_p(description), styles["Normal"]))
        story.append(Spacer(1, 12))

    story.append(Paragraph(f"Guests ({len(guests)})", styles["Heading2"]))
    if guests:
        names = "<br/>".join(f"• {_p(g.get('name'))}" for g in guests)
        story.append(Paragraph(names, styles["Normal"]))
    else:
        story.append(Paragraph("No RSVPs yet.", styles["Normal"]))

    try:
        doc.build(story)
        return buf.getvalue()
    except Exception as e:
        logger.error("PDF build failed for party %s: %s", party.get("id"), e)
        return EMPTY_PDF
