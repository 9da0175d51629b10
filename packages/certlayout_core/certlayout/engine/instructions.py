"""
Drawable instructions - the platform-agnostic document description.

Coordinates are absolute points with a top-left origin. Instructions on a
page are stored in draw order: later instructions paint over earlier ones.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union

from ..models.assets import ImageAsset
from ..styles.style_catalog import StyleDefinition
from .geometry import Rect


class Layer(enum.IntEnum):
    BACKGROUND = 0
    CONTENT = 1
    OVERLAY = 2


@dataclass(frozen=True, slots=True)
class ImageInstruction:
    """Draw ``asset`` scaled into ``rect``."""

    slot: str
    asset: ImageAsset
    rect: Rect
    layer: Layer = Layer.BACKGROUND
    # True when the intrinsic size was unknown and the box was filled.
    degraded: bool = False
    kind: str = field(default="image", init=False)


@dataclass(frozen=True, slots=True)
class TextInstruction:
    """Paragraph wrapped to ``rect.width``."""

    text: str
    rect: Rect
    style: StyleDefinition
    layer: Layer = Layer.CONTENT
    section_id: Optional[str] = None
    kind: str = field(default="text", init=False)


@dataclass(frozen=True, slots=True)
class ListInstruction:
    """Bulleted list; item text is indented by ``bullet_indent``."""

    items: Tuple[str, ...]
    rect: Rect
    style: StyleDefinition
    bullet_indent: float
    item_spacing: float
    layer: Layer = Layer.CONTENT
    section_id: Optional[str] = None
    kind: str = field(default="list", init=False)


@dataclass(frozen=True, slots=True)
class PlaceholderInstruction:
    """Reserved box for an asset that was not supplied; renderers may skip it."""

    slot: str
    rect: Rect
    layer: Layer = Layer.BACKGROUND
    reason: str = "missing asset"
    kind: str = field(default="placeholder", init=False)


Instruction = Union[ImageInstruction, TextInstruction, ListInstruction, PlaceholderInstruction]


@dataclass(frozen=True, slots=True)
class PageInstructions:
    number: int
    width: float
    height: float
    instructions: Tuple[Instruction, ...] = ()

    def by_layer(self, layer: Layer) -> Tuple[Instruction, ...]:
        return tuple(item for item in self.instructions if item.layer == layer)

    def content(self) -> Tuple[Instruction, ...]:
        return self.by_layer(Layer.CONTENT)


@dataclass(frozen=True, slots=True)
class DocumentInfo:
    title: str = ""
    author: str = ""
    subject: str = ""
    creator: str = "certlayout"


@dataclass(frozen=True, slots=True)
class DocumentDescription:
    """Ordered pages ready for a renderer."""

    pages: Tuple[PageInstructions, ...]
    info: DocumentInfo = field(default_factory=DocumentInfo)

    def __iter__(self) -> Iterator[PageInstructions]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def page(self, number: int) -> PageInstructions:
        for page in self.pages:
            if page.number == number:
                return page
        raise KeyError(number)
