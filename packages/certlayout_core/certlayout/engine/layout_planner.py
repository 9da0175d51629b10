"""
Layout planner - stacks sections top to bottom inside the layout frame.

Planning is pure: the same sections, catalog and frame always produce the
same results. Nothing is drawn here; the positioner turns results into
instructions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..models.content import LeafBlock, ListBlock, Section, iter_leaf_blocks
from ..styles.style_catalog import StyleCatalog, StyleDefinition
from .geometry import Margins
from .height_estimator import estimate_list_height, estimate_paragraph_height
from .layout_frame import LayoutFrame

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlacedBlock:
    """
    Leaf block with its resolved style and vertical slot.

    ``y`` is the top of the block's content box (after its top margin);
    ``width`` is the wrapping width and ``height`` excludes margins.
    """

    block: LeafBlock
    style: StyleDefinition
    margin: Margins
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Planned position of one section."""

    section_id: str
    start_y: float
    height: float
    overflowed: bool
    mandatory: bool = True
    page: int = 1
    placements: Tuple[PlacedBlock, ...] = ()

    @property
    def end_y(self) -> float:
        return self.start_y + self.height


def block_height(block: LeafBlock, style: StyleDefinition, width: float, frame: LayoutFrame) -> float:
    """Intrinsic height of a leaf block, margins excluded."""
    if isinstance(block, ListBlock):
        return estimate_list_height(
            block.items,
            width,
            style.font_size,
            style.line_height,
            frame.list_item_spacing,
            frame.bullet_indent,
        )
    return estimate_paragraph_height(block.text, width, style.font_size, style.line_height)


def _plan_section(
    section: Section, catalog: StyleCatalog, start_y: float, frame: LayoutFrame
) -> Tuple[Tuple[PlacedBlock, ...], float]:
    """Place the leaf blocks of one section; returns the placements and the end y."""
    placements = []
    y = start_y
    for block in iter_leaf_blocks(section.blocks):
        style = catalog.get(block.style_id)
        margin = block.margin_override if block.margin_override is not None else style.margin
        height = block_height(block, style, section.width, frame)
        top = y + margin.top
        placements.append(PlacedBlock(block, style, margin, top, section.width, height))
        # Advance from the bottom edge, not by summed heights.
        y = top + height + margin.bottom
    return tuple(placements), y


def plan_layout(
    sections: Sequence[Section],
    catalog: StyleCatalog,
    start_anchor_y: float,
    frame: LayoutFrame,
    page: int = 1,
) -> Tuple[LayoutResult, ...]:
    """
    Stack ``sections`` in order starting at ``start_anchor_y``.

    Args:
        sections: Sections in layout order
        catalog: Catalog resolving block style ids (normal or compacted)
        start_anchor_y: Cursor position before the first section
        frame: Page geometry; supplies the gaps and the content-bottom limit
        page: Page number recorded on every result

    Returns:
        One ``LayoutResult`` per section, in input order. A section starts at
        ``max(cursor, floor_y)``; an empty section has zero height and is
        never flagged as overflowed.
    """
    results = []
    cursor = start_anchor_y
    for section in sections:
        start_y = max(cursor, section.floor_y or 0.0)
        placements, end_y = _plan_section(section, catalog, start_y, frame)
        height = end_y - start_y
        # A section with nothing to draw never overflows, wherever it starts.
        overflowed = not section.is_empty and end_y > frame.content_bottom_limit
        results.append(
            LayoutResult(
                section_id=section.section_id,
                start_y=start_y,
                height=height,
                overflowed=overflowed,
                mandatory=section.mandatory,
                page=page,
                placements=placements,
            )
        )
        logger.debug(
            f"Planned section '{section.section_id}' on page {page}: "
            f"y={start_y:.2f} h={height:.2f} overflowed={overflowed}"
        )
        cursor = end_y + frame.inter_section_gap
    return tuple(results)
