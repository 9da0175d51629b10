"""
Layout frame - fixed page geometry for the certificate.

The frame is configuration: it is built once (``LayoutFrame.landscape_a4()``)
and shared. Per-generation adjustments such as the footer reservation return
a new frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Literal, Optional, Tuple

from ..exceptions import GeometryError
from .geometry import Margins, Rect

logger = logging.getLogger(__name__)

A4_LANDSCAPE = (841.89, 595.28)

VerticalAlign = Literal["top", "center", "bottom"]
Layer = Literal["background", "overlay"]


@dataclass(frozen=True, slots=True)
class DecorationSlot:
    """
    Target box for a decoration image.

    The scaled image is left-aligned in the box and aligned vertically
    according to ``align``. Slots with ``preserve_aspect=False`` always
    stretch to the whole box.
    """

    name: str
    box: Rect
    layer: Layer = "background"
    align: VerticalAlign = "top"
    preserve_aspect: bool = True

    def place(self, width: float, height: float) -> Rect:
        if self.align == "center":
            y = self.box.y + (self.box.height - height) / 2
        elif self.align == "bottom":
            y = self.box.bottom - height
        else:
            y = self.box.y
        return Rect(self.box.x, y, width, height)


@dataclass(frozen=True, slots=True)
class LayoutFrame:
    """Page geometry constants in points, top-left origin."""

    page_width: float
    page_height: float
    margins: Margins
    text_x: float
    text_width: float
    training_width: float
    manual_width: float
    start_anchor_y: float
    content_bottom_limit: float
    manual_floor_y: Optional[float] = None
    inter_section_gap: float = 8.0
    bullet_indent: float = 12.0
    list_item_spacing: float = 3.0
    safe_bottom_offset: float = 10.0
    footer_gap: float = 24.0
    trainer_label_offset: float = 18.0
    footer_reserved: Optional[float] = None
    decorations: Tuple[DecorationSlot, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.page_width <= 0 or self.page_height <= 0:
            raise GeometryError("Page size must be positive", details=f"{self.page_width}x{self.page_height}")
        if self.text_width <= 0 or self.training_width <= 0 or self.manual_width <= 0:
            raise GeometryError("Content widths must be positive")
        if not 0 <= self.start_anchor_y < self.content_bottom_limit <= self.page_height:
            raise GeometryError(
                "Content area is empty",
                details=f"start={self.start_anchor_y}, bottom limit={self.content_bottom_limit}",
            )

    @property
    def footer_top(self) -> float:
        """Y where a reserved footer image starts."""
        return self.page_height - self.safe_bottom_offset - (self.footer_reserved or 0.0)

    def decoration(self, name: str) -> Optional[DecorationSlot]:
        for slot in self.decorations:
            if slot.name == name:
                return slot
        return None

    def reserve_footer(self, footer_height: float, label_band: bool = False) -> "LayoutFrame":
        """
        Return a frame whose content-bottom limit leaves room for the footer.

        The footer height has to be known before planning; it only depends
        on the static page width, so callers size the footer first.

        Args:
            footer_height: Scaled height of the footer image, 0 without one
            label_band: Keep ``footer_gap`` free above the footer top even
                when ``footer_height`` is 0, so a trainer label placed
                ``trainer_label_offset`` above it never meets content
        """
        if footer_height < 0:
            raise GeometryError("Footer height must be non-negative", details=str(footer_height))
        if self.footer_reserved is not None:
            raise GeometryError("Footer space has already been reserved on this frame")
        if footer_height == 0 and not label_band:
            return self
        limit = self.content_bottom_limit - footer_height - self.footer_gap
        if limit <= self.start_anchor_y:
            raise GeometryError(
                "Footer leaves no room for content",
                details=f"footer height {footer_height:.2f}, limit would be {limit:.2f}",
            )
        logger.debug(f"Reserved {footer_height:.2f}pt footer; content bottom limit {self.content_bottom_limit:.2f} -> {limit:.2f}")
        return replace(self, content_bottom_limit=limit, footer_reserved=footer_height)

    @classmethod
    def landscape_a4(cls) -> "LayoutFrame":
        """Geometry of the landscape A4 training certificate."""
        page_width, page_height = A4_LANDSCAPE

        sidebar_width = min(70.0, page_width * 0.08) * 0.85 * 0.55
        footer_min_left = sidebar_width + 18.0 + 20.0

        # Reference margins the text column was designed against (l, t, r, b).
        ref_left, ref_top, ref_right, ref_bottom = 105.0, 40.0, 160.0, 100.0
        adjusted_content_width = max(0.0, page_width - ref_left - ref_right - 15.0)
        left_margin = footer_min_left
        right_margin = max(ref_right + 40.0, page_width - left_margin - adjusted_content_width)
        margins = Margins(top=ref_top, right=right_margin, bottom=ref_bottom, left=left_margin)

        text_width = page_width - left_margin - right_margin
        training_width = min(
            max(min(320.0, text_width), min(text_width * 0.78, text_width - 80.0)),
            text_width,
        )

        safe_bottom_offset = ref_bottom * 0.1

        background_width = min(320.0, page_width * 0.35)
        background_x = page_width - background_width + background_width * 0.12 + background_width * 0.15
        background_base_height = background_width * 1328.0 / 839.0
        top_bleed = ref_top + 20.0
        bottom_bleed = ref_bottom + 20.0
        background_height = background_base_height + top_bleed + bottom_bleed
        background_y = (page_height - background_base_height) / 2 - top_bleed - background_height * 0.05

        logo_width = min(background_width * 0.6, 200.0)
        logo_box_height = 120.0
        logo_x = background_x + (background_width - logo_width) / 2 - logo_width * 0.2
        logo_y = (page_height - logo_box_height) / 2 + page_height * 0.02

        footer_width = min(min(page_width - 40.0, 780.0) * 0.8, page_width - footer_min_left - 30.0) * 0.816
        footer_box_height = 140.0
        footer_y = page_height - safe_bottom_offset - footer_box_height

        decorations = (
            DecorationSlot("sidebar", Rect(0.0, 0.0, sidebar_width, page_height), "background", "top", False),
            DecorationSlot(
                "background",
                Rect(background_x, background_y, background_width, background_height),
                "background",
                "top",
                False,
            ),
            DecorationSlot("logo", Rect(logo_x, logo_y, logo_width, logo_box_height), "overlay", "center", True),
            DecorationSlot(
                "footer",
                Rect(footer_min_left, footer_y, footer_width, footer_box_height),
                "overlay",
                "bottom",
                True,
            ),
        )

        start_y = ref_top + 8.0
        return cls(
            page_width=page_width,
            page_height=page_height,
            margins=margins,
            text_x=left_margin,
            text_width=text_width,
            training_width=training_width,
            manual_width=435.0,
            start_anchor_y=start_y,
            content_bottom_limit=page_height - safe_bottom_offset,
            manual_floor_y=start_y,
            safe_bottom_offset=safe_bottom_offset,
            decorations=decorations,
        )
