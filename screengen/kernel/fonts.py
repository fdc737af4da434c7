"""
Screengen Kernel — Font Fit & Text Centering

Device fonts are fixed-width bitmaps in a handful of discrete sizes, so
fitting text is a lookup: walk the table from the largest size down and
take the first one whose string fits inside the tile.

Multi-line content is not measured line by line; the line-break marker
counts as a character and the text is centered as a single line.
"""

from __future__ import annotations

from screengen.kernel.profiles import FontTable
from screengen.kernel.types import LayoutError, Offset, Tile


def fit_font_size(content: str, width: int, height: int, table: FontTable) -> int:
    """
    Largest font size whose string is narrower than `width` and whose
    size is below `height`. Falls back to the smallest size in the table,
    letting the text overflow rather than failing.
    """
    char_len = len(content)
    for size, glyph_width in table.entries:
        if glyph_width * char_len < width and size < height:
            return size
    return table.smallest


def text_offset(content: str, font_size: int, width: int, height: int, table: FontTable) -> Offset:
    """Offset that centers `content` inside a `width` x `height` tile."""
    char_width = table.glyph_width(font_size)

    # If the string goes beyond the tile, clamp its width
    str_width = min(char_width * len(content), width)

    # Font size is the glyph height in pixels. An explicit size taller
    # than the tile pins the text to the top edge.
    return Offset(
        x=(width - str_width) // 2,
        y=max(height - font_size, 0) // 2,
    )


def apply_font(tile: Tile, table: FontTable) -> None:
    """Pick the tile's font size (explicit size wins) and center its text."""
    rect = tile.rect
    if rect is None:
        raise LayoutError(f"Cannot fit text of an unplaced tile {tile.text.content!r}")

    text = tile.text
    size = text.font_size
    if size is None:
        size = fit_font_size(text.content, rect.width, rect.height, table)

    text.offset = text_offset(text.content, size, rect.width, rect.height, table)
    text.resolved_font_size = size
