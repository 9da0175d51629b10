"""
Page positioner - turns a resolution and image assets into drawable pages.

Draw order on every page: background decorations, content top to bottom,
then overlay decorations and overlay text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..models.assets import CertificateImages, ImageAsset
from ..models.content import ListBlock
from .geometry import Rect, Size
from .height_estimator import estimate_paragraph_height
from .instructions import (
    DocumentDescription,
    DocumentInfo,
    ImageInstruction,
    Instruction,
    Layer,
    ListInstruction,
    PageInstructions,
    PlaceholderInstruction,
    TextInstruction,
)
from .layout_frame import DecorationSlot, LayoutFrame
from .layout_planner import LayoutResult
from .overflow_resolver import Resolution

logger = logging.getLogger(__name__)


def fit_image(max_width: float, max_height: float, intrinsic: Optional[Size]) -> Size:
    """
    Scale ``intrinsic`` into a ``max_width`` x ``max_height`` box.

    Width is fitted first; when that makes the image too tall the height
    constrains instead. The aspect ratio is preserved. Without a usable
    intrinsic size the whole box is returned.

    Examples:
        >>> fit_image(100, 100, Size(200, 100))
        Size(width=100.0, height=50.0)
        >>> fit_image(100, 100, Size(100, 200))
        Size(width=50.0, height=100.0)
    """
    if intrinsic is None or intrinsic.width <= 0 or intrinsic.height <= 0:
        return Size(float(max_width), float(max_height))
    scale = max_width / intrinsic.width
    if intrinsic.height * scale > max_height:
        scale = max_height / intrinsic.height
    return Size(intrinsic.width * scale, intrinsic.height * scale)


def fit_to_slot(slot: DecorationSlot, asset: Optional[ImageAsset]) -> Tuple[Size, bool]:
    """Size of ``asset`` in ``slot`` and whether the box was filled in degraded mode."""
    box = slot.box
    if not slot.preserve_aspect:
        return Size(box.width, box.height), False
    if asset is None or not asset.has_intrinsic_size:
        return Size(box.width, box.height), True
    return fit_image(box.width, box.height, asset.intrinsic_size), False


def footer_height(frame: LayoutFrame, asset: Optional[ImageAsset]) -> float:
    """
    Height the footer image will occupy, known before any content is planned.

    Returns 0 when the frame has no footer slot or no footer asset.
    """
    slot = frame.decoration("footer")
    if slot is None or asset is None:
        return 0.0
    size, _ = fit_to_slot(slot, asset)
    return size.height


@dataclass(frozen=True, slots=True)
class OverlayText:
    """Text drawn above the decorations, e.g. the trainer line."""

    text: str
    style_id: str
    x: float
    y: float
    width: float
    page: int = 1


class PagePositioner:
    """Build a ``DocumentDescription`` from a resolved layout."""

    def __init__(self, secondary_frame: Optional[LayoutFrame] = None):
        self.secondary_frame = secondary_frame

    def position(
        self,
        resolution: Resolution,
        images: CertificateImages,
        frame: LayoutFrame,
        decorations: Sequence[OverlayText] = (),
        info: Optional[DocumentInfo] = None,
    ) -> DocumentDescription:
        """
        Position every section, decoration and overlay text.

        Args:
            resolution: Output of ``OverflowResolver.resolve``
            images: Decoration assets; missing ones become placeholders
            frame: Primary page frame
            decorations: Overlay texts, resolved with the resolution's catalog
            info: Document metadata

        Returns:
            One page, or two when a section was deferred.
        """
        pages = [self._page(1, resolution.primary, resolution, images, frame, decorations)]
        if resolution.deferred:
            secondary = self.secondary_frame or frame
            pages.append(self._page(2, resolution.deferred, resolution, images, secondary, decorations))
        logger.debug(f"Positioned {len(pages)} page(s)")
        return DocumentDescription(pages=tuple(pages), info=info or DocumentInfo())

    def _page(
        self,
        number: int,
        results: Sequence[LayoutResult],
        resolution: Resolution,
        images: CertificateImages,
        frame: LayoutFrame,
        decorations: Sequence[OverlayText],
    ) -> PageInstructions:
        instructions: List[Instruction] = []
        instructions.extend(self._decorations(frame, images, Layer.BACKGROUND))
        instructions.extend(self._content(results, frame))
        if number == 1:
            # Logo and footer belong to the certificate page only.
            instructions.extend(self._decorations(frame, images, Layer.OVERLAY))
        for overlay in decorations:
            if overlay.page == number and overlay.text:
                instructions.append(self._overlay_text(overlay, resolution))
        return PageInstructions(number, frame.page_width, frame.page_height, tuple(instructions))

    def _decorations(self, frame: LayoutFrame, images: CertificateImages, layer: Layer) -> List[Instruction]:
        placed: List[Instruction] = []
        for slot in frame.decorations:
            if Layer[slot.layer.upper()] != layer:
                continue
            asset = images.get(slot.name) if slot.name in images.SLOTS else None
            if asset is None:
                logger.warning(f"No image for decoration '{slot.name}'; leaving a placeholder")
                placed.append(PlaceholderInstruction(slot.name, slot.box, layer))
                continue
            size, degraded = fit_to_slot(slot, asset)
            if degraded:
                logger.warning(
                    f"Image '{asset.name}' has no intrinsic size; stretching it to "
                    f"{size.width:.1f}x{size.height:.1f} for '{slot.name}'"
                )
            placed.append(ImageInstruction(slot.name, asset, slot.place(size.width, size.height), layer, degraded))
        return placed

    @staticmethod
    def _content(results: Sequence[LayoutResult], frame: LayoutFrame) -> List[Instruction]:
        placed: List[Instruction] = []
        for result in results:
            for placement in result.placements:
                rect = Rect(frame.text_x + placement.margin.left, placement.y, placement.width, placement.height)
                block = placement.block
                if isinstance(block, ListBlock):
                    if not block.items:
                        continue
                    placed.append(
                        ListInstruction(
                            block.items,
                            rect,
                            placement.style,
                            frame.bullet_indent,
                            frame.list_item_spacing,
                            section_id=result.section_id,
                        )
                    )
                else:
                    placed.append(TextInstruction(block.text, rect, placement.style, section_id=result.section_id))
        placed.sort(key=lambda item: item.rect.y)
        return placed

    @staticmethod
    def _overlay_text(overlay: OverlayText, resolution: Resolution) -> TextInstruction:
        style = resolution.catalog.get(overlay.style_id)
        height = estimate_paragraph_height(overlay.text, overlay.width, style.font_size, style.line_height)
        return TextInstruction(overlay.text, Rect(overlay.x, overlay.y, overlay.width, height), style, Layer.OVERLAY)
