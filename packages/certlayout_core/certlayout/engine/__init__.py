"""Layout engine: estimation, planning, overflow resolution and positioning."""

from .geometry import Margins, Rect, Size
from .height_estimator import estimate_list_height, estimate_paragraph_height
from .layout_frame import DecorationSlot, LayoutFrame
from .layout_planner import LayoutResult, PlacedBlock, plan_layout
from .overflow_resolver import OverflowResolver, Outcome, Resolution
from .instructions import (
    DocumentDescription,
    DocumentInfo,
    ImageInstruction,
    Layer,
    ListInstruction,
    PageInstructions,
    PlaceholderInstruction,
    TextInstruction,
)
from .page_positioner import OverlayText, PagePositioner, fit_image, footer_height
from .layout_validator import LayoutValidator

__all__ = [
    "DecorationSlot",
    "DocumentDescription",
    "DocumentInfo",
    "ImageInstruction",
    "Layer",
    "LayoutFrame",
    "LayoutResult",
    "LayoutValidator",
    "ListInstruction",
    "Margins",
    "Outcome",
    "OverflowResolver",
    "OverlayText",
    "PageInstructions",
    "PagePositioner",
    "PlaceholderInstruction",
    "PlacedBlock",
    "Rect",
    "Resolution",
    "Size",
    "TextInstruction",
    "estimate_list_height",
    "estimate_paragraph_height",
    "fit_image",
    "footer_height",
    "plan_layout",
]
