"""
Overflow resolver - bounded compaction and deferral around the planner.

Resolution runs at most two planning passes over the page: one with the
normal catalog and, when a mandatory section overflows, one with the
compacted catalog. Only optional sections may then be moved to a secondary
page; a mandatory section that still overflows is fatal.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..exceptions import ContentOverflowFatal
from ..models.content import Section
from ..styles.style_catalog import StyleCatalog
from .layout_frame import LayoutFrame
from .layout_planner import LayoutResult, plan_layout

logger = logging.getLogger(__name__)

SECONDARY_PAGE = 2


class Outcome(enum.Enum):
    """Terminal states of a resolution."""

    NORMAL = "normal"
    COMPACTED = "compacted"
    # Never carried by a Resolution; reported by raising ContentOverflowFatal.
    FATAL = "fatal"


@dataclass(frozen=True, slots=True)
class Resolution:
    """
    Result of resolving a certificate's sections.

    Attributes:
        outcome: ``Outcome.NORMAL`` or ``Outcome.COMPACTED``
        catalog: Catalog every section was planned with
        primary: Results drawn on page 1, in section order
        deferred: Results relocated to the secondary page
    """

    outcome: Outcome
    catalog: StyleCatalog
    primary: Tuple[LayoutResult, ...]
    deferred: Tuple[LayoutResult, ...] = ()

    @property
    def deferred_ids(self) -> Tuple[str, ...]:
        return tuple(result.section_id for result in self.deferred)

    @property
    def page_count(self) -> int:
        return SECONDARY_PAGE if self.deferred else 1

    def results(self) -> Tuple[LayoutResult, ...]:
        return self.primary + self.deferred

    def section(self, section_id: str) -> Optional[LayoutResult]:
        for result in self.results():
            if result.section_id == section_id:
                return result
        return None


class OverflowResolver:
    """
    Plan sections and fall back to compaction, then deferral.

    Args:
        frame: Primary page frame (footer already reserved)
        catalog: Normal style catalog; never modified
        secondary_frame: Frame for deferred sections; defaults to ``frame``
    """

    def __init__(self, frame: LayoutFrame, catalog: StyleCatalog, secondary_frame: Optional[LayoutFrame] = None):
        self.frame = frame
        self.catalog = catalog
        self.secondary_frame = secondary_frame or frame

    def resolve(self, sections: Sequence[Section]) -> Resolution:
        """
        Resolve ``sections`` into a primary page and an optional deferral.

        Raises:
            ContentOverflowFatal: A mandatory section overflows after compaction
        """
        sections = tuple(sections)
        catalog = self.catalog
        outcome = Outcome.NORMAL
        results = plan_layout(sections, catalog, self.frame.start_anchor_y, self.frame)

        if self._first_mandatory_overflow(results) is not None:
            logger.info("Mandatory content overflows with normal styles; compacting")
            catalog = self.catalog.compacted()
            outcome = Outcome.COMPACTED
            results = plan_layout(sections, catalog, self.frame.start_anchor_y, self.frame)
            failed = self._first_mandatory_overflow(results)
            if failed is not None:
                logger.error(
                    f"Section '{failed.section_id}' ends at {failed.end_y:.2f}, "
                    f"past the limit {self.frame.content_bottom_limit:.2f}, after compaction"
                )
                raise ContentOverflowFatal(
                    failed.section_id,
                    height=failed.height,
                    limit=self.frame.content_bottom_limit,
                    bottom=failed.end_y,
                )

        primary = []
        to_defer = []
        for section, result in zip(sections, results):
            if not result.mandatory and result.overflowed:
                to_defer.append(section)
            else:
                primary.append(result)

        deferred = self._defer(to_defer, catalog)
        logger.info(
            f"Resolved {len(sections)} sections: outcome={outcome.value}, "
            f"deferred={[result.section_id for result in deferred]}"
        )
        return Resolution(outcome, catalog, tuple(primary), deferred)

    @staticmethod
    def _first_mandatory_overflow(results: Sequence[LayoutResult]) -> Optional[LayoutResult]:
        for result in results:
            if result.mandatory and result.overflowed:
                return result
        return None

    def _defer(self, sections: Sequence[Section], catalog: StyleCatalog) -> Tuple[LayoutResult, ...]:
        if not sections:
            return ()
        for section in sections:
            logger.info(f"Deferring optional section '{section.section_id}' to page {SECONDARY_PAGE}")
        # A deferred section starts a fresh page at its own floor, never above the anchor.
        deferred = plan_layout(
            sections, catalog, self.secondary_frame.start_anchor_y, self.secondary_frame, page=SECONDARY_PAGE
        )
        for result in deferred:
            if result.overflowed:
                logger.warning(
                    f"Deferred section '{result.section_id}' still exceeds the secondary page "
                    f"({result.end_y:.2f} > {self.secondary_frame.content_bottom_limit:.2f}); drawing it anyway"
                )
        return deferred
