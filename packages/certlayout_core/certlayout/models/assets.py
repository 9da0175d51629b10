"""
Image assets handed to the page positioner.

Loading and caching the images is done by the caller; the core only needs
the bytes (or a reference the renderer understands) and, when known, the
intrinsic pixel size used to keep the aspect ratio.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, Iterator, Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from ..engine.geometry import Size
from ..exceptions import MediaError

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, str]


@dataclass(frozen=True, slots=True)
class ImageAsset:
    """Raw image data plus optional intrinsic (width, height)."""

    name: str
    data: ImageSource
    intrinsic_size: Optional[Size] = None

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "ImageAsset":
        """
        Build an asset, probing the intrinsic size from the image header.

        Pillow only parses the header here, the pixels are not decoded.
        When the format is not recognised the asset is kept without a size
        and the positioner will stretch it into its box.
        """
        if not data:
            raise MediaError(f"Image '{name}' has no data")
        try:
            with Image.open(io.BytesIO(data)) as image:
                width, height = image.size
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning(f"Could not read intrinsic size of image '{name}': {exc}")
            return cls(name=name, data=data)
        return cls(name=name, data=data, intrinsic_size=Size(float(width), float(height)))

    @property
    def has_intrinsic_size(self) -> bool:
        size = self.intrinsic_size
        return size is not None and size.width > 0 and size.height > 0


@dataclass(frozen=True, slots=True)
class CertificateImages:
    """Decoded decoration images; any of them may be missing."""

    background: Optional[ImageAsset] = None
    sidebar: Optional[ImageAsset] = None
    footer: Optional[ImageAsset] = None
    logo: Optional[ImageAsset] = None

    SLOTS: ClassVar[Tuple[str, ...]] = ("background", "sidebar", "footer", "logo")

    def get(self, slot: str) -> Optional[ImageAsset]:
        if slot not in self.SLOTS:
            raise KeyError(slot)
        return getattr(self, slot)

    def items(self) -> Iterator[Tuple[str, Optional[ImageAsset]]]:
        for slot in self.SLOTS:
            yield slot, getattr(self, slot)

    @classmethod
    def from_mapping(cls, assets: Dict[str, ImageAsset]) -> "CertificateImages":
        unknown = set(assets) - set(cls.SLOTS)
        if unknown:
            raise MediaError("Unknown image slots", details=", ".join(sorted(unknown)))
        return cls(**assets)
