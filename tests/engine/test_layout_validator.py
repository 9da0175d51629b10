"""Tests for LayoutValidator."""

from certlayout.engine.geometry import Rect
from certlayout.engine.instructions import (
    DocumentDescription,
    ImageInstruction,
    Layer,
    PageInstructions,
    TextInstruction,
)
from certlayout.engine.layout_validator import LayoutValidator
from certlayout.models.assets import ImageAsset
from certlayout.styles.style_catalog import StyleDefinition

STYLE = StyleDefinition(10.0, 1.0)


def page(*rects, number=1, layer=Layer.CONTENT):
    instructions = tuple(TextInstruction("t", rect, STYLE, layer) for rect in rects)
    return PageInstructions(number, 300.0, 200.0, instructions)


class TestLayoutValidator:
    """Test suite for LayoutValidator."""

    def test_valid_layout(self, small_frame):
        description = DocumentDescription((page(Rect(0, 0, 100, 20), Rect(0, 20, 100, 20)),))

        is_valid, errors, warnings = LayoutValidator(description, small_frame).validate()

        assert is_valid
        assert errors == []
        assert warnings == []

    def test_no_pages_is_an_error(self, small_frame):
        is_valid, errors, _ = LayoutValidator(DocumentDescription(()), small_frame).validate()

        assert not is_valid
        assert "no pages" in errors[0]

    def test_overlap_is_an_error(self, small_frame):
        description = DocumentDescription((page(Rect(0, 0, 100, 30), Rect(0, 20, 100, 20)),))

        is_valid, errors, _ = LayoutValidator(description, small_frame).validate()

        assert not is_valid
        assert "overlaps" in errors[0]

    def test_content_below_limit_is_an_error(self, small_frame):
        description = DocumentDescription((page(Rect(0, 90, 100, 20)),))

        is_valid, errors, _ = LayoutValidator(description, small_frame).validate()

        assert not is_valid
        assert "below the content limit" in errors[0]

    def test_secondary_page_is_not_held_to_primary_limit(self, small_frame):
        description = DocumentDescription((page(Rect(0, 0, 10, 10)), page(Rect(0, 90, 100, 20), number=2)))

        is_valid, _, _ = LayoutValidator(description, small_frame).validate()

        assert is_valid

    def test_outside_page_width_is_a_warning(self, small_frame):
        description = DocumentDescription((page(Rect(250, 0, 100, 20)),))

        is_valid, errors, warnings = LayoutValidator(description, small_frame).validate()

        assert is_valid
        assert "outside the page width" in warnings[0]

    def test_background_bleed_is_allowed(self, small_frame):
        description = DocumentDescription((page(Rect(250, -10, 100, 300), layer=Layer.BACKGROUND),))

        _, _, warnings = LayoutValidator(description, small_frame).validate()

        assert warnings == []

    def test_overlay_images_may_overlap_content(self, small_frame):
        content = TextInstruction("c", Rect(0, 0, 100, 20), STYLE)
        logo = ImageInstruction("logo", ImageAsset("logo.png", b"png"), Rect(0, 10, 100, 20), Layer.OVERLAY)
        description = DocumentDescription((PageInstructions(1, 300.0, 200.0, (content, logo)),))

        is_valid, _, _ = LayoutValidator(description, small_frame).validate()

        assert is_valid

    def test_overlay_text_covering_content_is_an_error(self, small_frame):
        """A trainer label printed over a list line is rejected."""
        content = TextInstruction("c", Rect(0, 60, 100, 30), STYLE)
        label = TextInstruction("Formador: Pep", Rect(0, 80, 100, 11), STYLE, Layer.OVERLAY)
        description = DocumentDescription((PageInstructions(1, 300.0, 200.0, (content, label)),))

        is_valid, errors, _ = LayoutValidator(description, small_frame).validate()

        assert not is_valid
        assert "Formador: Pep" in errors[0]
        assert "covers text" in errors[0]

    def test_overlay_text_clear_of_content_is_valid(self, small_frame):
        content = TextInstruction("c", Rect(0, 60, 100, 20), STYLE)
        label = TextInstruction("Formador: Pep", Rect(0, 80, 100, 11), STYLE, Layer.OVERLAY)
        description = DocumentDescription((PageInstructions(1, 300.0, 200.0, (content, label)),))

        is_valid, errors, _ = LayoutValidator(description, small_frame).validate()

        assert is_valid, errors
