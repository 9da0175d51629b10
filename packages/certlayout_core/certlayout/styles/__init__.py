"""Typography for certificate layout."""

from .style_catalog import (
    MIN_FONT_SIZE,
    MIN_LINE_HEIGHT,
    StyleCatalog,
    StyleDefinition,
    StyleDelta,
    StyleId,
    default_catalog,
)

__all__ = [
    "MIN_FONT_SIZE",
    "MIN_LINE_HEIGHT",
    "StyleCatalog",
    "StyleDefinition",
    "StyleDelta",
    "StyleId",
    "default_catalog",
]
