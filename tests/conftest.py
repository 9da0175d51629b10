"""
Pytest configuration for CertLayout
"""

import io
import logging
import sys
from pathlib import Path

import pytest
from PIL import Image

from certlayout.engine.geometry import Margins
from certlayout.engine.layout_frame import LayoutFrame
from certlayout.models.assets import CertificateImages, ImageAsset
from certlayout.models.record import CertificateRecord
from certlayout.styles.style_catalog import StyleCatalog, StyleDefinition, StyleDelta, default_catalog


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid stray handlers."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()
    logging.getLogger("certlayout").handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def png_bytes(width: int, height: int) -> bytes:
    """Encode a blank PNG of the given pixel size."""
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), (255, 255, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def certificate_images():
    """Decoration images with the proportions of the production artwork."""
    return CertificateImages(
        background=ImageAsset.from_bytes("background.png", png_bytes(839, 1328)),
        sidebar=ImageAsset.from_bytes("sidebar.png", png_bytes(40, 600)),
        footer=ImageAsset.from_bytes("footer.png", png_bytes(853, 153)),
        logo=ImageAsset.from_bytes("logo.png", png_bytes(400, 200)),
    )


@pytest.fixture
def sample_record():
    """Typical certificate: four theory items, three practice items, no manual text."""
    return CertificateRecord(
        student_full_name="Ana Ruiz Gómez",
        document_type_label="dni",
        document_number="12345678Z",
        primary_date="2025-03-12",
        secondary_date="2025-03-13",
        location_label="Valencia",
        duration_label="8",
        training_title="Trabajos en altura",
        theory_items=("Normativa", "Equipos de protección", "Anclajes", "Rescate"),
        practice_items=("Ascenso", "Descenso", "Evacuación"),
        manual_text="",
        organization_name="GEPCO Formación",
        trainer_name="Marta Soler",
    )


@pytest.fixture
def landscape_frame():
    return LayoutFrame.landscape_a4()


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def small_frame():
    """
    100pt tall content area, no gaps: easy arithmetic for resolver tests.
    """
    return LayoutFrame(
        page_width=300.0,
        page_height=200.0,
        margins=Margins(),
        text_x=0.0,
        text_width=200.0,
        training_width=200.0,
        manual_width=200.0,
        start_anchor_y=0.0,
        content_bottom_limit=100.0,
        inter_section_gap=0.0,
    )


@pytest.fixture
def small_catalog():
    """
    One style: 20pt lines normally, 15pt when compacted.

    With a 200pt width a 20 character paragraph is exactly one line in both
    variants.
    """
    return StyleCatalog(
        {"p": StyleDefinition(20.0, 1.0)},
        {"p": StyleDelta(font_size=-5.0, line_height=0.0, margin_scale=1.0)},
    )


@pytest.fixture
def make_png():
    """Factory returning PNG bytes for a (width, height) pixel size."""
    return png_bytes
