"""
Height estimator - rendered height of paragraphs and lists without text shaping.

The chars-per-line heuristic assumes every glyph is ``CHAR_WIDTH_FACTOR`` em
wide and errs on the high side. The compaction deltas and the inter-section
gap are tuned around this bias; exact font metrics would need them retuned.
"""

from __future__ import annotations

import math
from typing import List, Sequence

# Average glyph advance as a fraction of the font size.
CHAR_WIDTH_FACTOR = 0.5
MIN_CHARS_PER_LINE = 10


def chars_per_line(width: float, font_size: float) -> int:
    """Number of characters assumed to fit on one line of ``width`` points."""
    width = max(1.0, float(width))
    return max(MIN_CHARS_PER_LINE, int(math.floor(width / (font_size * CHAR_WIDTH_FACTOR))))


def estimate_line_count(text: str, width: float, font_size: float) -> int:
    """Estimated number of rendered lines; explicit newlines always break."""
    per_line = chars_per_line(width, font_size)
    return sum(
        max(1, math.ceil(len(segment) / per_line))
        for segment in (text or "").split("\n")
    )


def estimate_paragraph_height(text: str, width: float, font_size: float, line_height: float) -> float:
    """
    Estimate the rendered height of a paragraph.

    Args:
        text: Paragraph text; ``\\n`` starts a new line
        width: Available width in points (values <= 0 are clamped to 1)
        font_size: Font size in points
        line_height: Line height multiplier

    Returns:
        Height in points. An empty string still reserves one line.
    """
    return estimate_line_count(text, width, font_size) * font_size * line_height


def estimate_list_height(
    items: Sequence[str],
    width: float,
    font_size: float,
    line_height: float,
    item_bottom_spacing: float,
    bullet_indent: float,
) -> float:
    """
    Estimate the rendered height of a bulleted list.

    Every item wraps in ``width - bullet_indent`` and is followed by
    ``item_bottom_spacing``. An empty list takes no space.
    """
    item_width = width - bullet_indent
    return sum(
        estimate_paragraph_height(item, item_width, font_size, line_height) + item_bottom_spacing
        for item in items
    )


def wrap_text(text: str, width: float, font_size: float) -> List[str]:
    """
    Break ``text`` into the lines the estimator assumes.

    Words are kept whole where possible; a word longer than a line is split.
    Greedy word wrapping can need one line more than the character count
    suggests, so this is a drawing aid, not a second estimator.
    """
    per_line = chars_per_line(width, font_size)
    lines: List[str] = []
    for segment in (text or "").split("\n"):
        current = ""
        for word in segment.split(" "):
            while len(word) > per_line:
                if current:
                    lines.append(current)
                    current = ""
                lines.append(word[:per_line])
                word = word[per_line:]
            candidate = f"{current} {word}" if current else word
            if len(candidate) <= per_line:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
    return lines
