"""
CertLayout - training certificate layout engine.

Turns a resolved certificate record and its decoration images into a
positioned page description, compacting typography once and moving the free
text block to a second page when the content does not fit.

Features:
- Height estimation without text shaping
- Ordered section planning inside a fixed landscape A4 frame
- Bounded overflow resolution (compaction, then deferral)
- Image fitting with aspect ratio preservation and degraded fallbacks
- PDF rendering with ReportLab

Quick Start:
    from certlayout import CertificateRecord, compose_certificate

    record = CertificateRecord.from_dict({"studentFullName": "Ana Ruiz", "theoryItems": ["Riesgos"]})
    composed = compose_certificate(record)
    print(composed.resolution.outcome, composed.file_name)
"""

from .version import __version__, __version_info__

# Exceptions - always available
from .exceptions import (
    CertLayoutError,
    ContentOverflowFatal,
    GeometryError,
    LayoutError,
    MediaError,
    RenderingError,
    StyleError,
)

# Engine before models and styles: both import engine.geometry.
from .engine import (
    DocumentDescription,
    LayoutFrame,
    LayoutResult,
    Outcome,
    OverflowResolver,
    PagePositioner,
    Resolution,
    estimate_list_height,
    estimate_paragraph_height,
    fit_image,
    plan_layout,
)
from .models import CertificateImages, CertificateRecord, ImageAsset, ListBlock, ParagraphBlock, Section
from .styles import StyleCatalog, StyleDefinition, default_catalog
from .content import IssuerConfig, build_sections
from .composer import ComposedCertificate, compose_certificate, render_certificate_pdf

__all__ = [
    "__version__",
    "__version_info__",
    "CertLayoutError",
    "CertificateImages",
    "CertificateRecord",
    "ComposedCertificate",
    "ContentOverflowFatal",
    "DocumentDescription",
    "GeometryError",
    "ImageAsset",
    "IssuerConfig",
    "LayoutError",
    "LayoutFrame",
    "LayoutResult",
    "ListBlock",
    "MediaError",
    "Outcome",
    "OverflowResolver",
    "PagePositioner",
    "ParagraphBlock",
    "RenderingError",
    "Resolution",
    "Section",
    "StyleCatalog",
    "StyleDefinition",
    "StyleError",
    "build_sections",
    "compose_certificate",
    "default_catalog",
    "estimate_list_height",
    "estimate_paragraph_height",
    "fit_image",
    "plan_layout",
    "render_certificate_pdf",
]
