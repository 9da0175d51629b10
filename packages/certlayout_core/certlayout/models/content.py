"""Content blocks and sections fed to the layout planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional, Tuple, Union

from ..engine.geometry import Margins


@dataclass(frozen=True, slots=True)
class ParagraphBlock:
    """Paragraph of text; ``\\n`` forces a line break."""

    text: str
    style_id: str
    margin_override: Optional[Margins] = None
    kind: Literal["paragraph"] = field(default="paragraph", init=False)


@dataclass(frozen=True, slots=True)
class ListBlock:
    """Bulleted list; each item wraps independently."""

    items: Tuple[str, ...]
    style_id: str
    margin_override: Optional[Margins] = None
    kind: Literal["list"] = field(default="list", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class GroupBlock:
    """Blocks stacked one after another; the group adds no margin of its own."""

    children: Tuple["ContentBlock", ...]
    kind: Literal["group"] = field(default="group", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


ContentBlock = Union[ParagraphBlock, ListBlock, GroupBlock]
LeafBlock = Union[ParagraphBlock, ListBlock]


def iter_leaf_blocks(blocks: Tuple[ContentBlock, ...]) -> Iterator[LeafBlock]:
    """Flatten groups depth-first, preserving document order."""
    for block in blocks:
        if isinstance(block, GroupBlock):
            yield from iter_leaf_blocks(block.children)
        else:
            yield block


@dataclass(frozen=True, slots=True)
class Section:
    """
    Named run of content laid out as a unit.

    Attributes:
        section_id: Stable identifier reported in layout results and errors
        blocks: Content in document order
        width: Wrapping width in points
        floor_y: Minimum start position; the section never starts above it
        mandatory: Optional sections may be deferred to a secondary page
    """

    section_id: str
    blocks: Tuple[ContentBlock, ...]
    width: float
    floor_y: Optional[float] = None
    mandatory: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocks", tuple(self.blocks))

    @property
    def is_empty(self) -> bool:
        return not self.blocks
