"""
Section builder - turns a certificate record into ordered layout sections.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..engine.layout_frame import LayoutFrame
from ..engine.page_positioner import OverlayText
from ..models.content import GroupBlock, ListBlock, ParagraphBlock, Section
from ..models.record import CertificateRecord
from ..styles.style_catalog import StyleId
from .text_format import (
    build_document_sentence,
    ensure_list,
    format_duration,
    format_full_name,
    format_location,
    format_training_date_range,
    format_training_name,
    normalise_text,
    resolve_training_title,
)

logger = logging.getLogger(__name__)

HEADER = "header"
THEORY = "theory"
PRACTICE = "practice"
MANUAL = "manual"

EMPTY_LIST_PLACEHOLDER = "—"
CONTENT_TITLE = "Contenidos de la formación"


@dataclass(frozen=True, slots=True)
class IssuerConfig:
    """Who signs the certificate."""

    signatory_name: str = "Lluís Vicent Pérez"
    organization_name: str = "GEPCO Formación"

    def intro(self, organization_override: str = "") -> str:
        organization = normalise_text(organization_override) or self.organization_name
        return f"Sr. {self.signatory_name},\nDirector de la escuela {organization}\nexpide el presente:"


def _header(record: CertificateRecord, frame: LayoutFrame, issuer: IssuerConfig) -> Section:
    date_label = format_training_date_range(record.primary_date, record.secondary_date)
    identity = build_document_sentence(record.document_type_label, record.document_number)
    statement = GroupBlock(
        (
            ParagraphBlock(f"A nombre del alumno/a {format_full_name(record.student_full_name)}", StyleId.BODY),
            ParagraphBlock(
                f"{identity}, quien en fecha {date_label} y en {format_location(record.location_label)}",
                StyleId.BODY,
            ),
            ParagraphBlock(
                f"ha superado, con una duración total de {format_duration(record.duration_label)} horas, "
                "la formación de:",
                StyleId.BODY,
            ),
        )
    )
    blocks = (
        ParagraphBlock(issuer.intro(record.organization_name), StyleId.INTRO),
        ParagraphBlock("CERTIFICADO", StyleId.TITLE),
        statement,
        ParagraphBlock(format_training_name(resolve_training_title(record.training_title)), StyleId.TRAINING_NAME),
    )
    return Section(HEADER, blocks, frame.text_width)


def _module_list(
    section_id: str,
    heading: str,
    items: Tuple[str, ...],
    style_id: str,
    width: float,
    title: Optional[str] = None,
) -> Section:
    if items:
        body = ListBlock(items, style_id)
    else:
        body = ParagraphBlock(EMPTY_LIST_PLACEHOLDER, style_id)
    blocks = (ParagraphBlock(heading, StyleId.SECTION_HEADING), body)
    if title:
        blocks = (ParagraphBlock(title, StyleId.CONTENT_TITLE),) + blocks
    return Section(section_id, blocks, width)


def _manual(record: CertificateRecord, frame: LayoutFrame) -> Section:
    text = normalise_text(record.manual_text)
    blocks = (ParagraphBlock(text, StyleId.MANUAL),) if text else ()
    return Section(MANUAL, blocks, frame.manual_width, floor_y=frame.manual_floor_y, mandatory=False)


def build_sections(
    record: CertificateRecord,
    frame: LayoutFrame,
    issuer: Optional[IssuerConfig] = None,
) -> Tuple[Section, ...]:
    """
    Build the certificate sections in layout order.

    Args:
        record: Resolved certificate fields
        frame: Page geometry supplying the section widths
        issuer: Signatory configuration; defaults to ``IssuerConfig()``

    Returns:
        ``header``, ``theory``, ``practice`` (mandatory) and ``manual``
        (optional, empty when there is no manual text).
    """
    issuer = issuer or IssuerConfig()
    sections = (
        _header(record, frame, issuer),
        _module_list(
            THEORY,
            "Parte teórica",
            ensure_list(record.theory_items),
            StyleId.THEORY_LIST_ITEM,
            frame.training_width,
            title=CONTENT_TITLE,
        ),
        _module_list(
            PRACTICE, "Parte práctica", ensure_list(record.practice_items), StyleId.LIST_ITEM, frame.training_width
        ),
        _manual(record, frame),
    )
    logger.debug(f"Built sections {[section.section_id for section in sections]}")
    return sections


def build_trainer_label(record: CertificateRecord, frame: LayoutFrame) -> Optional[OverlayText]:
    """``"Formador: <name>"`` just above the footer; ``None`` without a trainer."""
    trainer = normalise_text(record.trainer_name)
    if not trainer:
        return None
    x = max(frame.text_x + 10.0, frame.margins.left)
    y = max(0.0, frame.footer_top - frame.trainer_label_offset)
    return OverlayText(f"Formador: {trainer}", StyleId.TRAINER, x, y, frame.text_width)
