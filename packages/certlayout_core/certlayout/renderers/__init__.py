"""Renderers consuming a DocumentDescription."""

from .reportlab_renderer import ReportLabRenderer, render_pdf

__all__ = ["ReportLabRenderer", "render_pdf"]
