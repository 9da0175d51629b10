"""Tests for StyleCatalog and compact variants."""

import pytest

from certlayout.engine.geometry import Margins
from certlayout.exceptions import StyleError
from certlayout.styles.style_catalog import (
    MIN_FONT_SIZE,
    MIN_LINE_HEIGHT,
    StyleCatalog,
    StyleDefinition,
    StyleDelta,
    StyleId,
    default_catalog,
)


class TestStyleDefinition:
    """Test suite for StyleDefinition validation."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"font_size": 0.0, "line_height": 1.0},
            {"font_size": 10.0, "line_height": -1.0},
            {"font_size": 10.0, "line_height": 1.0, "margin": Margins(top=-1.0)},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(StyleError):
            StyleDefinition(**kwargs)

    def test_line_advance(self):
        assert StyleDefinition(12.5, 1.18).line_advance == pytest.approx(14.75)


class TestStyleDelta:
    """Test suite for compact variant derivation."""

    def test_compact_never_exceeds_normal(self):
        style = StyleDefinition(12.0, 1.0, Margins(top=4.0, bottom=8.0))
        compact = StyleDelta(font_size=2.0, line_height=0.5, margin_scale=3.0).apply(style)
        assert compact.font_size == 12.0
        assert compact.line_height == 1.0
        assert compact.margin == style.margin

    def test_floors_are_applied(self):
        compact = StyleDelta(font_size=-10.0, line_height=-1.0).apply(StyleDefinition(9.0, 1.0))
        assert compact.font_size == MIN_FONT_SIZE
        assert compact.line_height == MIN_LINE_HEIGHT

    def test_margins_are_scaled(self):
        compact = StyleDelta(margin_scale=0.5).apply(StyleDefinition(12.0, 1.0, Margins(top=8.0, bottom=4.0)))
        assert compact.margin.top == 4.0
        assert compact.margin.bottom == 2.0

    def test_bold_and_color_survive(self):
        compact = StyleDelta().apply(StyleDefinition(20.0, 1.0, bold=True, color="#c4143c"))
        assert compact.bold
        assert compact.color == "#c4143c"


class TestStyleCatalog:
    """Test suite for StyleCatalog."""

    def test_empty_catalog_rejected(self):
        with pytest.raises(StyleError):
            StyleCatalog({})

    def test_unknown_style_raises(self):
        with pytest.raises(StyleError, match="missing"):
            default_catalog().get("missing")

    def test_compacted_is_a_new_catalog(self):
        catalog = default_catalog()
        compact = catalog.compacted()

        assert compact is not catalog
        assert compact.is_compact
        assert not catalog.is_compact
        assert catalog.get(StyleId.MANUAL).font_size == 12.5
        assert compact.get(StyleId.MANUAL).font_size == 10.5

    def test_compacted_is_idempotent(self):
        compact = default_catalog().compacted()
        assert compact.compacted() is compact

    def test_every_compact_style_is_tighter(self):
        catalog = default_catalog()
        for style_id in catalog:
            normal = catalog.normal_variant(style_id)
            compact = catalog.compact_variant(style_id)
            assert compact.font_size <= normal.font_size
            assert compact.line_height <= normal.line_height
            assert compact.margin.vertical <= normal.margin.vertical

    def test_catalog_cannot_be_mutated(self):
        catalog = default_catalog()
        with pytest.raises(AttributeError):
            catalog.extra = 1

    def test_mapping_protocol(self):
        catalog = default_catalog()
        assert StyleId.TITLE in catalog
        assert "nope" not in catalog
        assert len(catalog) == len(list(catalog)) == 10
