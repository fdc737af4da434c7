"""
Screengen Kernel — Dimension Resolver

Pure function: (tree, bounds, profile) → resolved tree
No IO. Deterministic: same input → same geometry, always.

Walks the tree once and assigns an absolute rectangle to every leaf:

- Vertical / Horizontal split their axis evenly among the children that
  are not separators. Separators do not take a slot of their own; they
  sit at the top (left) edge of the slot of the child that follows them.
- Split divides the height by its share.
- Tiles get their font fitted and their text centered.
- Separators are 1px rules inset by the profile margins.
- List items get `visible_count`-sized slots and may overflow.
"""

from __future__ import annotations

import copy
import logging
from typing import TypeVar

from screengen.kernel.fonts import apply_font
from screengen.kernel.profiles import DeviceProfile
from screengen.kernel.types import (
    Horizontal,
    HorizontalSeparator,
    LayoutError,
    ListWidget,
    Node,
    Rect,
    Split,
    Tile,
    Vertical,
    VerticalSeparator,
    describe,
    is_separator,
)

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Node)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve(root: N, bounds: Rect, profile: DeviceProfile) -> N:
    """
    Lay out `root` inside `bounds`.
    Returns a new, fully resolved tree. The input tree is never modified.
    """
    resolved = copy.deepcopy(root)
    resolve_in_place(resolved, bounds, profile)
    return resolved


def resolve_in_place(root: Node, bounds: Rect, profile: DeviceProfile) -> None:
    """
    Lay out `root` inside `bounds`, overwriting any previous geometry.
    The caller must own the tree exclusively for the duration of the call.

    Earlier geometry is cleared first, so a pass that raises leaves the
    unvisited nodes unresolved instead of holding stale rectangles.
    """
    logger.debug("Resolving %s in %s for %s", describe(root), bounds, profile.name)
    _clear_geometry(root)
    _resolve(root, bounds, profile)


# ---------------------------------------------------------------------------
# Per-node layout
# ---------------------------------------------------------------------------


def _resolve(node: Node, d: Rect, profile: DeviceProfile) -> None:
    if isinstance(node, Vertical):
        _resolve_vertical(node, d, profile)
    elif isinstance(node, Horizontal):
        _resolve_horizontal(node, d, profile)
    elif isinstance(node, Split):
        _resolve_split(node, d, profile)
    elif isinstance(node, Tile):
        node.rect = d
        _check_explicit_font(node, profile)
        apply_font(node, profile.font_table)
    elif isinstance(node, HorizontalSeparator):
        node.rect = _horizontal_rule(d, profile.horizontal_separator_margin)
    elif isinstance(node, VerticalSeparator):
        node.rect = _vertical_rule(d, profile.vertical_separator_margin)
    elif isinstance(node, ListWidget):
        _resolve_list(node, d, profile)
    else:
        raise LayoutError(f"Unknown node type {type(node).__name__}")


def _resolve_vertical(node: Vertical, d: Rect, profile: DeviceProfile) -> None:
    height = d.height // _slot_count(node.nodes, "Vertical")

    # Separators overlap the widget that follows them, so each one seen
    # pulls the slot index back by one.
    # Without correction:      With correction:
    #   [widget1]                [widget1]
    #   [separator]              [separator]
    #   [empty space]            [widget2]
    #   [widget2]                [widget3] - bottom of the screen
    #   [widget3] - off screen
    seen = 0
    for idx, child in enumerate(node.nodes):
        slot = idx - seen
        x = d.x
        if isinstance(child, HorizontalSeparator):
            seen += 1
        elif isinstance(child, VerticalSeparator):
            seen += 1
            # A vertical rule in a vertical stack bisects the width
            x = d.x + d.width // 2

        _resolve(child, Rect(x=x, y=d.y + slot * height, width=d.width, height=height), profile)


def _resolve_horizontal(node: Horizontal, d: Rect, profile: DeviceProfile) -> None:
    width = d.width // _slot_count(node.nodes, "Horizontal")

    seen = 0
    for idx, child in enumerate(node.nodes):
        slot = idx - seen
        y = d.y
        if isinstance(child, HorizontalSeparator):
            seen += 1
            y = d.y + d.height // 2
        elif isinstance(child, VerticalSeparator):
            seen += 1

        _resolve(child, Rect(x=d.x + slot * width, y=y, width=width, height=d.height), profile)


def _resolve_split(node: Split, d: Rect, profile: DeviceProfile) -> None:
    up_height = int(d.height * node.first_share)
    down_height = d.height - up_height
    _resolve(node.first, Rect(x=d.x, y=d.y, width=d.width, height=up_height), profile)
    _resolve(node.second, Rect(x=d.x, y=d.y + up_height, width=d.width, height=down_height), profile)


def _resolve_list(node: ListWidget, d: Rect, profile: DeviceProfile) -> None:
    if node.visible_count <= 0:
        raise LayoutError(f"ListWidget needs a positive visible_count, got {node.visible_count}")

    margin = profile.list_item_margin
    item_width = d.width - 2 * margin
    if item_width < 0:
        raise LayoutError(f"ListWidget item margin {margin} does not fit in width {d.width}")

    node.rect = d
    tile_height = d.height // node.visible_count

    # Items past visible_count keep going below the list; no clamping
    for idx, item in enumerate(node.items):
        item.rect = Rect(
            x=d.x + margin,
            y=d.y + idx * tile_height,
            width=item_width,
            height=tile_height,
        )
        _check_explicit_font(item, profile)
        apply_font(item, profile.font_table)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _clear_geometry(root: Node) -> None:
    for node in root.walk():
        # Stacks have no geometry of their own
        if node.rect is not None:
            node.rect = None
        if isinstance(node, Tile):
            node.text.offset = None
            node.text.resolved_font_size = None


def _slot_count(children: list[Node], kind: str) -> int:
    """Number of children that take a slot (everything except separators)."""
    count = sum(1 for child in children if not is_separator(child))
    if count == 0:
        raise LayoutError(f"{kind} stack has no children besides separators; cannot divide its area")
    return count


def _horizontal_rule(d: Rect, margin: int) -> Rect:
    width = d.width - 2 * margin
    if width < 0:
        raise LayoutError(f"HorizontalSeparator margin {margin} does not fit in width {d.width}")
    return Rect(x=d.x + margin, y=d.y, width=width, height=1)


def _vertical_rule(d: Rect, margin: int) -> Rect:
    height = d.height - 2 * margin
    if height < 0:
        raise LayoutError(f"VerticalSeparator margin {margin} does not fit in height {d.height}")
    return Rect(x=d.x, y=d.y + margin, width=1, height=height)


def _check_explicit_font(tile: Tile, profile: DeviceProfile) -> None:
    size = tile.text.font_size
    if size is not None and not profile.font_table.has_size(size):
        raise LayoutError(
            f"{describe(tile)} asks for font size {size}, "
            f"which {profile.name} does not have (sizes: {profile.font_table.sizes})"
        )
