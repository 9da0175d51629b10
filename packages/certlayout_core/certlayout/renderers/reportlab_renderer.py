"""
ReportLab renderer - serializes a DocumentDescription to PDF bytes.

Descriptions use a top-left origin; reportlab draws from the bottom-left, so
every y is flipped against the page height here and nowhere else.
"""

from __future__ import annotations

import io
import logging
from typing import List, Optional

from reportlab.lib.colors import HexColor, black
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..engine.height_estimator import chars_per_line, estimate_line_count, wrap_text
from ..engine.instructions import (
    DocumentDescription,
    ImageInstruction,
    ListInstruction,
    PageInstructions,
    PlaceholderInstruction,
    TextInstruction,
)
from ..exceptions import RenderingError
from ..styles.style_catalog import StyleDefinition

logger = logging.getLogger(__name__)

REGULAR_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"
# Baseline offset from the top of a line box, as a fraction of the font size.
ASCENT_RATIO = 0.8
BULLET = "•"


def fit_lines(text: str, width: float, font_size: float, line_height: float, max_height: float) -> List[str]:
    """
    Lines to draw for ``text`` inside a box of ``max_height``.

    Word wrapping is used when it fits the estimated box; otherwise lines
    are cut at the estimated characters per line.
    """
    lines = wrap_text(text, width, font_size)
    advance = font_size * line_height
    if advance <= 0 or len(lines) * advance <= max_height + 1e-6:
        return lines
    per_line = chars_per_line(width, font_size)
    chunked: List[str] = []
    for segment in (text or "").split("\n"):
        chunked.extend(segment[i:i + per_line] for i in range(0, max(len(segment), 1), per_line))
    return chunked


class ReportLabRenderer:
    """Draw positioned instructions with a reportlab ``Canvas``."""

    def __init__(self, compress: bool = True):
        self.compress = compress

    def render(self, description: DocumentDescription) -> bytes:
        """
        Render every page and return the PDF bytes.

        Raises:
            RenderingError: The description has no pages or reportlab fails to save
        """
        if not description.pages:
            raise RenderingError("Nothing to render: document has no pages")

        buffer = io.BytesIO()
        first = description.pages[0]
        c = canvas.Canvas(buffer, pagesize=(first.width, first.height), pageCompression=int(self.compress))
        info = description.info
        c.setTitle(info.title)
        c.setAuthor(info.author)
        c.setSubject(info.subject)
        c.setCreator(info.creator)

        for page in description.pages:
            c.setPageSize((page.width, page.height))
            self._render_page(c, page)
            c.showPage()

        try:
            c.save()
        except Exception as exc:
            raise RenderingError("Failed to serialize PDF", details=str(exc)) from exc
        logger.debug(f"Rendered {len(description.pages)} page(s), {buffer.tell()} bytes")
        return buffer.getvalue()

    def _render_page(self, c: canvas.Canvas, page: PageInstructions) -> None:
        for item in page.instructions:
            if isinstance(item, ImageInstruction):
                self._draw_image(c, page, item)
            elif isinstance(item, TextInstruction):
                self._draw_text(c, page, item)
            elif isinstance(item, ListInstruction):
                self._draw_list(c, page, item)
            elif isinstance(item, PlaceholderInstruction):
                continue
            else:
                raise RenderingError(f"Unsupported instruction {type(item).__name__}")

    @staticmethod
    def _draw_image(c: canvas.Canvas, page: PageInstructions, item: ImageInstruction) -> None:
        rect = item.rect
        data = item.asset.data
        try:
            source = ImageReader(io.BytesIO(data)) if isinstance(data, (bytes, bytearray)) else data
            c.drawImage(
                source,
                rect.x,
                page.height - rect.bottom,
                width=rect.width,
                height=rect.height,
                mask="auto",
            )
        except Exception as exc:
            logger.warning(f"Could not draw image '{item.asset.name}' in slot '{item.slot}': {exc}")

    @staticmethod
    def _set_style(c: canvas.Canvas, style: StyleDefinition) -> None:
        try:
            c.setFillColor(HexColor(style.color))
        except ValueError:
            logger.warning(f"Invalid color {style.color!r}, using black")
            c.setFillColor(black)
        c.setFont(BOLD_FONT if style.bold else REGULAR_FONT, style.font_size)

    def _draw_lines(
        self,
        c: canvas.Canvas,
        page: PageInstructions,
        lines: List[str],
        x: float,
        top: float,
        style: StyleDefinition,
    ) -> float:
        advance = style.line_advance
        for index, line in enumerate(lines):
            baseline = top + index * advance + style.font_size * ASCENT_RATIO
            c.drawString(x, page.height - baseline, line)
        return top + len(lines) * advance

    def _draw_text(self, c: canvas.Canvas, page: PageInstructions, item: TextInstruction) -> None:
        style = item.style
        self._set_style(c, style)
        lines = fit_lines(item.text, item.rect.width, style.font_size, style.line_height, item.rect.height)
        self._draw_lines(c, page, lines, item.rect.x, item.rect.y, style)

    def _draw_list(self, c: canvas.Canvas, page: PageInstructions, item: ListInstruction) -> None:
        style = item.style
        self._set_style(c, style)
        width = item.rect.width - item.bullet_indent
        top = item.rect.y
        for text in item.items:
            height = estimate_line_count(text, width, style.font_size) * style.line_advance
            c.drawString(item.rect.x, page.height - (top + style.font_size * ASCENT_RATIO), BULLET)
            lines = fit_lines(text, width, style.font_size, style.line_height, height)
            self._draw_lines(c, page, lines, item.rect.x + item.bullet_indent, top, style)
            top += height + item.item_spacing


def render_pdf(description: DocumentDescription, compress: Optional[bool] = None) -> bytes:
    """Convenience wrapper around ``ReportLabRenderer().render``."""
    return ReportLabRenderer(compress=True if compress is None else compress).render(description)
