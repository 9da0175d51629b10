"""Certificate wording and section construction."""

from .sections_builder import IssuerConfig, build_sections, build_trainer_label
from .text_format import build_file_name

__all__ = ["IssuerConfig", "build_file_name", "build_sections", "build_trainer_label"]
