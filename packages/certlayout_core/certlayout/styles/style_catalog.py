"""
Style catalog - named style definitions with pre-registered compact variants.

A catalog is an immutable value. Compaction never touches the catalog it is
called on: ``compacted()`` hands back a second catalog that resolves every
style id to its compact variant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from ..engine.geometry import Margins
from ..exceptions import StyleError

logger = logging.getLogger(__name__)

# Legibility floors for compact variants.
MIN_FONT_SIZE = 7.0
MIN_LINE_HEIGHT = 0.7

DEFAULT_TEXT_COLOR = "#1f274d"
TITLE_COLOR = "#c4143c"


class StyleId:
    """Semantic roles used by the certificate sections."""

    INTRO = "intro"
    TITLE = "certificate_title"
    BODY = "body"
    TRAINING_NAME = "training_name"
    CONTENT_TITLE = "content_title"
    SECTION_HEADING = "section_heading"
    LIST_ITEM = "list_item"
    THEORY_LIST_ITEM = "theory_list_item"
    MANUAL = "manual"
    TRAINER = "trainer"


@dataclass(frozen=True, slots=True)
class StyleDefinition:
    """Resolved typography for one block."""

    font_size: float
    line_height: float
    margin: Margins = field(default_factory=Margins)
    bold: bool = False
    color: str = DEFAULT_TEXT_COLOR

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise StyleError("font_size must be positive", details=str(self.font_size))
        if self.line_height <= 0:
            raise StyleError("line_height must be positive", details=str(self.line_height))
        if not self.margin.is_non_negative():
            raise StyleError("margins must be non-negative", details=str(self.margin.as_tuple()))

    @property
    def line_advance(self) -> float:
        """Height of one rendered line in points."""
        return self.font_size * self.line_height


@dataclass(frozen=True, slots=True)
class StyleDelta:
    """How a style shrinks when the page is compacted."""

    font_size: float = -1.5
    line_height: float = -0.1
    margin_scale: float = 0.5

    def apply(self, style: StyleDefinition) -> StyleDefinition:
        """
        Build the compact variant of ``style``.

        Compact values never exceed the normal ones and never go below the
        legibility floors (unless the normal value already sits below them).
        """
        font_size = min(style.font_size, max(MIN_FONT_SIZE, style.font_size + self.font_size))
        line_height = min(style.line_height, max(MIN_LINE_HEIGHT, style.line_height + self.line_height))
        scale = min(1.0, max(0.0, self.margin_scale))
        return StyleDefinition(
            font_size=font_size,
            line_height=line_height,
            margin=style.margin.scaled(scale),
            bold=style.bold,
            color=style.color,
        )


class StyleCatalog:
    """
    Immutable mapping of style ids to definitions.

    Args:
        styles: Normal style definitions keyed by style id
        deltas: Compaction deltas keyed by style id; missing ids use ``StyleDelta()``
    """

    __slots__ = ("_normal", "_compact", "_is_compact")

    def __init__(
        self,
        styles: Mapping[str, StyleDefinition],
        deltas: Optional[Mapping[str, StyleDelta]] = None,
        *,
        _compact: Optional[Mapping[str, StyleDefinition]] = None,
        _is_compact: bool = False,
    ):
        if not styles:
            raise StyleError("A style catalog needs at least one style")
        self._normal: Mapping[str, StyleDefinition] = MappingProxyType(dict(styles))
        if _compact is None:
            deltas = deltas or {}
            _compact = {
                style_id: deltas.get(style_id, StyleDelta()).apply(style)
                for style_id, style in styles.items()
            }
        self._compact: Mapping[str, StyleDefinition] = MappingProxyType(dict(_compact))
        self._is_compact = _is_compact

    @property
    def is_compact(self) -> bool:
        return self._is_compact

    def get(self, style_id: str) -> StyleDefinition:
        """Resolve ``style_id`` in this catalog's variant."""
        table = self._compact if self._is_compact else self._normal
        try:
            return table[style_id]
        except KeyError:
            raise StyleError(f"Unknown style id '{style_id}'") from None

    def normal_variant(self, style_id: str) -> StyleDefinition:
        return self._normal[style_id]

    def compact_variant(self, style_id: str) -> StyleDefinition:
        return self._compact[style_id]

    def compacted(self) -> "StyleCatalog":
        """Return a catalog resolving every style to its compact variant."""
        if self._is_compact:
            return self
        logger.debug(f"Deriving compact style catalog ({len(self._normal)} styles)")
        return StyleCatalog(self._normal, _compact=self._compact, _is_compact=True)

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._normal

    def __iter__(self) -> Iterator[str]:
        return iter(self._normal)

    def __len__(self) -> int:
        return len(self._normal)

    def __repr__(self) -> str:
        variant = "compact" if self._is_compact else "normal"
        return f"StyleCatalog({variant}, styles={sorted(self._normal)})"


def _margin(top: float = 0.0, bottom: float = 0.0) -> Margins:
    return Margins(top=top, right=0.0, bottom=bottom, left=0.0)


def default_catalog() -> StyleCatalog:
    """Certificate typography tuned around the chars-per-line height heuristic."""
    styles: Dict[str, StyleDefinition] = {
        StyleId.INTRO: StyleDefinition(12.0, 1.0, _margin(bottom=8.0)),
        StyleId.TITLE: StyleDefinition(28.0, 1.0, _margin(top=8.0, bottom=8.0), bold=True, color=TITLE_COLOR),
        StyleId.BODY: StyleDefinition(12.0, 1.0, _margin(bottom=2.0)),
        StyleId.TRAINING_NAME: StyleDefinition(18.0, 1.0, _margin(top=12.0), bold=True),
        StyleId.CONTENT_TITLE: StyleDefinition(12.0, 1.0, _margin(top=12.0, bottom=6.0), bold=True),
        StyleId.SECTION_HEADING: StyleDefinition(13.0, 1.0, _margin(bottom=4.0), bold=True),
        StyleId.LIST_ITEM: StyleDefinition(10.0, 1.0, _margin(top=2.0)),
        StyleId.THEORY_LIST_ITEM: StyleDefinition(9.5, 1.0, _margin(top=2.0)),
        StyleId.MANUAL: StyleDefinition(12.5, 1.18, _margin()),
        StyleId.TRAINER: StyleDefinition(11.0, 1.0, _margin()),
    }
    deltas = {
        StyleId.TITLE: StyleDelta(font_size=-4.0, line_height=0.0, margin_scale=0.5),
        StyleId.TRAINING_NAME: StyleDelta(font_size=-3.0, line_height=0.0, margin_scale=0.5),
        StyleId.MANUAL: StyleDelta(font_size=-2.0, line_height=-0.1, margin_scale=0.5),
        StyleId.TRAINER: StyleDelta(font_size=0.0, line_height=0.0, margin_scale=1.0),
    }
    return StyleCatalog(styles, deltas)
