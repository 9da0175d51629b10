"""Tests for records, assets and content blocks."""

import logging

import pytest

from certlayout.engine.geometry import Size
from certlayout.exceptions import MediaError
from certlayout.models.assets import CertificateImages, ImageAsset
from certlayout.models.content import GroupBlock, ListBlock, ParagraphBlock, Section, iter_leaf_blocks
from certlayout.models.record import CertificateRecord


class TestCertificateRecord:
    """Test suite for CertificateRecord."""

    def test_from_camel_case(self):
        record = CertificateRecord.from_dict(
            {
                "studentFullName": "Ana",
                "theoryItems": ["a", None, "b"],
                "durationLabel": 8,
                "unknownKey": "ignored",
            }
        )
        assert record.student_full_name == "Ana"
        assert record.theory_items == ("a", "b")
        assert record.duration_label == "8"

    def test_from_snake_case_and_none(self):
        record = CertificateRecord.from_dict({"training_title": "PRL", "manual_text": None})
        assert record.training_title == "PRL"
        assert record.manual_text == ""

    def test_lists_become_tuples(self):
        record = CertificateRecord(practice_items=["x"])
        assert record.practice_items == ("x",)

    def test_to_dict_round_trip(self):
        record = CertificateRecord(student_full_name="Ana", theory_items=("a",))
        assert CertificateRecord.from_dict(record.to_dict()) == record


class TestImageAsset:
    """Test suite for ImageAsset."""

    def test_probes_intrinsic_size(self, make_png):
        asset = ImageAsset.from_bytes("logo.png", make_png(320, 120))
        assert asset.intrinsic_size == Size(320.0, 120.0)
        assert asset.has_intrinsic_size

    def test_unreadable_image_keeps_data(self, caplog):
        with caplog.at_level(logging.WARNING, logger="certlayout"):
            asset = ImageAsset.from_bytes("logo.svg", b"<svg></svg>")

        assert asset.intrinsic_size is None
        assert not asset.has_intrinsic_size
        assert asset.data == b"<svg></svg>"
        assert "Could not read intrinsic size" in caplog.text

    def test_empty_data_rejected(self):
        with pytest.raises(MediaError):
            ImageAsset.from_bytes("empty.png", b"")


class TestCertificateImages:
    """Test suite for CertificateImages."""

    def test_from_mapping(self):
        logo = ImageAsset("logo", b"x")
        images = CertificateImages.from_mapping({"logo": logo})
        assert images.get("logo") is logo
        assert images.get("footer") is None
        assert [slot for slot, _ in images.items()] == list(CertificateImages.SLOTS)

    def test_unknown_slot_rejected(self):
        with pytest.raises(MediaError):
            CertificateImages.from_mapping({"watermark": ImageAsset("w", b"x")})

    def test_get_unknown_slot(self):
        with pytest.raises(KeyError):
            CertificateImages().get("watermark")


class TestContentBlocks:
    """Test suite for content blocks and sections."""

    def test_iter_leaf_blocks_preserves_order(self):
        first = ParagraphBlock("1", "body")
        second = ListBlock(["2"], "list_item")
        third = ParagraphBlock("3", "body")
        blocks = (first, GroupBlock((second, GroupBlock((third,)))))

        assert list(iter_leaf_blocks(blocks)) == [first, second, third]

    def test_list_items_are_tuples(self):
        assert ListBlock(["a", "b"], "list_item").items == ("a", "b")

    def test_section_defaults(self):
        section = Section("theory", [], 100.0)
        assert section.mandatory
        assert section.floor_y is None
        assert section.is_empty
        assert section.blocks == ()
