"""Data model for certificate composition."""

from .assets import CertificateImages, ImageAsset
from .content import ContentBlock, GroupBlock, ListBlock, ParagraphBlock, Section, iter_leaf_blocks
from .record import CertificateRecord

__all__ = [
    "CertificateImages",
    "CertificateRecord",
    "ContentBlock",
    "GroupBlock",
    "ImageAsset",
    "ListBlock",
    "ParagraphBlock",
    "Section",
    "iter_leaf_blocks",
]
