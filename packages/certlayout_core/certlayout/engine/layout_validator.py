"""
Layout validator - integrity checks on a positioned document.

Checks:
- content instructions on the same page do not overlap
- overlay text (the trainer label) does not cover content
- primary page content stays above the content-bottom limit
- nothing extends past the page edges (warning only)
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .instructions import DocumentDescription, Layer, PageInstructions
from .layout_frame import LayoutFrame

logger = logging.getLogger(__name__)

# Tolerance for floating point accumulation in planned coordinates.
EPSILON = 1e-6


class LayoutValidator:
    """Validate a ``DocumentDescription`` against its primary frame."""

    def __init__(self, description: DocumentDescription, frame: LayoutFrame):
        """
        Args:
            description: Positioned document
            frame: Primary page frame (with the footer reserved)
        """
        self.description = description
        self.frame = frame
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate(self) -> Tuple[bool, List[str], List[str]]:
        """
        Run every check.

        Returns:
            Tuple (is_valid, errors, warnings)
        """
        self.errors.clear()
        self.warnings.clear()

        if not self.description.pages:
            self.errors.append("Document has no pages")
        for page in self.description.pages:
            self._validate_no_overlap(page)
            self._validate_overlay_text(page)
            self._validate_bottom_limit(page)
            self._validate_page_bounds(page)

        is_valid = not self.errors
        if not is_valid:
            logger.debug(f"Layout validation failed with {len(self.errors)} error(s)")
        return is_valid, self.errors.copy(), self.warnings.copy()

    def _validate_no_overlap(self, page: PageInstructions) -> None:
        content = page.content()
        for index, first in enumerate(content):
            for second in content[index + 1:]:
                if first.rect.intersects(second.rect):
                    self.errors.append(
                        f"Page {page.number}: {first.kind} at y={first.rect.y:.2f} overlaps "
                        f"{second.kind} at y={second.rect.y:.2f}"
                    )

    def _validate_overlay_text(self, page: PageInstructions) -> None:
        content = page.content()
        for overlay in page.by_layer(Layer.OVERLAY):
            if overlay.kind != "text":
                continue
            for item in content:
                if overlay.rect.intersects(item.rect):
                    self.errors.append(
                        f"Page {page.number}: overlay text '{overlay.text}' at y={overlay.rect.y:.2f} "
                        f"covers {item.kind} at y={item.rect.y:.2f}"
                    )

    def _validate_bottom_limit(self, page: PageInstructions) -> None:
        if page.number != 1:
            return
        limit = self.frame.content_bottom_limit
        for item in page.content():
            if item.rect.bottom > limit + EPSILON:
                self.errors.append(
                    f"Page {page.number}: {item.kind} ends at {item.rect.bottom:.2f}, "
                    f"below the content limit {limit:.2f}"
                )

    def _validate_page_bounds(self, page: PageInstructions) -> None:
        for item in page.instructions:
            if item.layer == Layer.BACKGROUND:
                # Background art bleeds off the page edge.
                continue
            rect = item.rect
            if rect.x < -EPSILON or rect.right > page.width + EPSILON:
                self.warnings.append(
                    f"Page {page.number}: {item.kind} spans x={rect.x:.2f}..{rect.right:.2f}, "
                    f"outside the page width {page.width:.2f}"
                )
            if (rect.y < -EPSILON or rect.bottom > page.height + EPSILON):
                self.warnings.append(
                    f"Page {page.number}: {item.kind} spans y={rect.y:.2f}..{rect.bottom:.2f}, "
                    f"outside the page height {page.height:.2f}"
                )
