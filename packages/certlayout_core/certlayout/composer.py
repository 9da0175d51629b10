"""
Certificate composition pipeline.

    record + images
      -> footer sizing and frame reservation
      -> section building
      -> overflow resolution (compaction, deferral)
      -> positioning and validation
      -> DocumentDescription (optionally rendered to PDF)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .content.sections_builder import IssuerConfig, build_sections, build_trainer_label
from .content.text_format import (
    build_file_name,
    format_full_name,
    format_training_name,
    normalise_text,
    resolve_training_title,
)
from .engine.instructions import DocumentDescription, DocumentInfo
from .exceptions import LayoutError
from .engine.layout_frame import LayoutFrame
from .engine.layout_validator import LayoutValidator
from .engine.overflow_resolver import OverflowResolver, Resolution
from .engine.page_positioner import PagePositioner, footer_height
from .models.assets import CertificateImages
from .models.record import CertificateRecord
from .styles.style_catalog import StyleCatalog, default_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ComposedCertificate:
    """Everything a caller needs to render or inspect one certificate."""

    description: DocumentDescription
    resolution: Resolution
    frame: LayoutFrame
    file_name: str
    warnings: Tuple[str, ...] = ()


def build_document_info(record: CertificateRecord, issuer: IssuerConfig) -> DocumentInfo:
    return DocumentInfo(
        title=f"Certificado - {format_full_name(record.student_full_name)}",
        author=record.organization_name or issuer.organization_name,
        subject=format_training_name(resolve_training_title(record.training_title)),
    )


def compose_certificate(
    record: CertificateRecord,
    images: Optional[CertificateImages] = None,
    frame: Optional[LayoutFrame] = None,
    catalog: Optional[StyleCatalog] = None,
    issuer: Optional[IssuerConfig] = None,
) -> ComposedCertificate:
    """
    Compose one certificate.

    Args:
        record: Resolved certificate fields
        images: Decoded decoration images (missing ones become placeholders)
        frame: Page geometry; ``LayoutFrame.landscape_a4()`` by default
        catalog: Normal style catalog; ``default_catalog()`` by default
        issuer: Signatory configuration

    Returns:
        ComposedCertificate

    Raises:
        ContentOverflowFatal: A mandatory section does not fit after compaction
        LayoutError: The positioned page has overlapping or overflowing content
    """
    images = images or CertificateImages()
    base_frame = frame or LayoutFrame.landscape_a4()
    catalog = catalog or default_catalog()
    issuer = issuer or IssuerConfig()

    # The footer is sized before planning so content can stop above it.
    # The trainer label band stays reserved even without a footer image.
    primary_frame = base_frame.reserve_footer(
        footer_height(base_frame, images.footer),
        label_band=bool(normalise_text(record.trainer_name)),
    )

    sections = build_sections(record, primary_frame, issuer)
    resolution = OverflowResolver(primary_frame, catalog, secondary_frame=base_frame).resolve(sections)

    trainer = build_trainer_label(record, primary_frame)
    description = PagePositioner(secondary_frame=base_frame).position(
        resolution,
        images,
        primary_frame,
        decorations=(trainer,) if trainer else (),
        info=build_document_info(record, issuer),
    )

    is_valid, errors, warnings = LayoutValidator(description, primary_frame).validate()
    if not is_valid:
        raise LayoutError("Composed layout failed validation", details="; ".join(errors))
    for message in warnings:
        logger.warning(f"Layout check: {message}")

    file_name = build_file_name(record)
    logger.info(
        f"Composed '{file_name}': {len(description)} page(s), outcome={resolution.outcome.value}, "
        f"deferred={list(resolution.deferred_ids)}"
    )
    return ComposedCertificate(description, resolution, primary_frame, file_name, tuple(warnings))


def render_certificate_pdf(
    record: CertificateRecord,
    images: Optional[CertificateImages] = None,
    frame: Optional[LayoutFrame] = None,
    catalog: Optional[StyleCatalog] = None,
    issuer: Optional[IssuerConfig] = None,
) -> Tuple[bytes, ComposedCertificate]:
    """Compose and serialize to PDF bytes with reportlab."""
    from .renderers.reportlab_renderer import ReportLabRenderer

    composed = compose_certificate(record, images, frame, catalog, issuer)
    return ReportLabRenderer().render(composed.description), composed
