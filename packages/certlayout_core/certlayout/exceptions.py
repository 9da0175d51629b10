"""Custom exceptions for CertLayout."""

from typing import Optional


class CertLayoutError(Exception):
    """Base exception for CertLayout errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class LayoutError(CertLayoutError):
    """Exception raised during layout calculation."""

    pass


class ContentOverflowFatal(LayoutError):
    """
    A mandatory section does not fit on the page even with compact styles.

    Generation for the record is aborted; the content has to be edited
    (e.g. trimming the module lists) before it can be issued.
    """

    def __init__(self, section_id: str, height: float = 0.0, limit: float = 0.0, bottom: float = 0.0):
        super().__init__(
            f"Section '{section_id}' does not fit on the page after compaction",
            details=f"ends at y={bottom:.2f}, content bottom limit is {limit:.2f} (height {height:.2f})",
        )
        self.section_id = section_id
        self.height = height
        self.limit = limit
        self.bottom = bottom


class StyleError(CertLayoutError):
    """Exception raised during style resolution."""

    pass


class GeometryError(CertLayoutError):
    """Exception raised during geometry calculations."""

    pass


class MediaError(CertLayoutError):
    """Exception raised during media processing."""

    pass


class RenderingError(CertLayoutError):
    """Exception raised during document rendering."""

    pass
