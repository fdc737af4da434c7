"""
Screengen Kernel — Shared Types

Data classes used across builders, resolver, renderers and assembly.
These are the contracts that bind the kernel together.

Tree model:
- A screen is a tree of nodes: stacks (Vertical, Horizontal), uneven
  Split, text-bearing leaves (Tile, ListWidget) and separators.
- Builders create nodes with no geometry (`rect is None`).
- The resolver fills in every `rect`, text `offset` and `resolved_font_size`.
- Renderers read the resolved tree and never modify it.

`rect is None` is the "unresolved" marker. Renderers refuse such nodes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScreengenError(Exception):
    """Base class for every error raised by the kernel."""
    pass


class ConfigurationError(ScreengenError):
    """A node was configured with an attribute it cannot carry, or a name is unknown."""
    pass


class LayoutError(ScreengenError):
    """The tree cannot be laid out (degenerate counts, unknown font sizes)."""
    pass


class RenderError(ScreengenError):
    """A renderer was handed a tree that was never resolved."""
    pass


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rect:
    """Absolute pixel rectangle on the device."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inset(self, amount: int) -> Rect:
        """Shrink by `amount` pixels on every side."""
        return Rect(
            x=self.x + amount,
            y=self.y + amount,
            width=self.width - 2 * amount,
            height=self.height - 2 * amount,
        )

    def contains(self, other: Rect) -> bool:
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def overlaps(self, other: Rect) -> bool:
        """True if the two rectangles share at least one pixel."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class Offset:
    """Position of a text relative to its owning tile."""

    x: int
    y: int


# ---------------------------------------------------------------------------
# Tree nodes
# ---------------------------------------------------------------------------


@dataclass
class Text:
    """
    Text carried by a tile.

    `content` is the literal display text. With `format` set, the content is
    sample text for sizing and the format is handed to the device, which
    supplies the arguments at runtime.

    `font_size` is the author's explicit override. The resolver never writes
    it; the size actually used goes to `resolved_font_size`.
    """

    content: str
    format: str | None = None
    font_size: int | None = None
    offset: Offset | None = None
    resolved_font_size: int | None = None


class Node:
    """Base of every layout node."""

    rect: Rect | None = None

    def with_format(self, fmt: str) -> Node:
        raise ConfigurationError(f"Cannot set format on {type(self).__name__}")

    def with_font_size(self, size: int) -> Node:
        raise ConfigurationError(f"Cannot set font_size on {type(self).__name__}")

    def children(self) -> list[Node]:
        return []

    def walk(self) -> Iterator[Node]:
        """Yield this node and every descendant, depth-first in document order."""
        yield self
        for child in self.children():
            yield from child.walk()

    @property
    def is_resolved(self) -> bool:
        return self.rect is not None


@dataclass
class Vertical(Node):
    """Stacks children top to bottom, splitting height evenly."""

    nodes: list[Node] = field(default_factory=list)

    def children(self) -> list[Node]:
        return self.nodes

    @property
    def is_resolved(self) -> bool:
        # Stacks carry no geometry of their own
        return True


@dataclass
class Horizontal(Node):
    """Stacks children left to right, splitting width evenly."""

    nodes: list[Node] = field(default_factory=list)

    def children(self) -> list[Node]:
        return self.nodes

    @property
    def is_resolved(self) -> bool:
        return True


@dataclass
class Split(Node):
    """Uneven two-way division of the vertical axis."""

    first: Node
    first_share: float
    second: Node
    second_share: float

    def children(self) -> list[Node]:
        return [self.first, self.second]

    @property
    def is_resolved(self) -> bool:
        return True


@dataclass
class Tile(Node):
    """Leaf pairing a rectangle with a single text label."""

    text: Text
    rect: Rect | None = None

    def with_format(self, fmt: str) -> Tile:
        self.text.format = fmt
        return self

    def with_font_size(self, size: int) -> Tile:
        _check_font_size(size)
        self.text.font_size = size
        return self

    @property
    def is_resolved(self) -> bool:
        return (
            self.rect is not None
            and self.text.offset is not None
            and self.text.resolved_font_size is not None
        )


@dataclass
class HorizontalSeparator(Node):
    """One pixel high rule."""

    rect: Rect | None = None


@dataclass
class VerticalSeparator(Node):
    """One pixel wide rule."""

    rect: Rect | None = None


@dataclass
class ListWidget(Node):
    """
    Vertical list of tiles.

    `visible_count` sets the slot height. Items past `visible_count` still get
    a slot of that height and land below the list's own rectangle; nothing
    scrolls.
    """

    items: list[Tile] = field(default_factory=list)
    visible_count: int = 0
    rect: Rect | None = None

    def with_format(self, fmt: str) -> ListWidget:
        for item in self.items:
            item.with_format(fmt)
        return self

    def with_font_size(self, size: int) -> ListWidget:
        _check_font_size(size)
        for item in self.items:
            item.text.font_size = size
        return self

    def children(self) -> list[Node]:
        return list(self.items)


SEPARATOR_TYPES = (HorizontalSeparator, VerticalSeparator)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_separator(node: Node) -> bool:
    return isinstance(node, SEPARATOR_TYPES)


def unresolved_nodes(root: Node) -> list[Node]:
    """Every node reachable from `root` whose geometry is missing."""
    return [node for node in root.walk() if not node.is_resolved]


def ensure_resolved(root: Node) -> None:
    """Raise RenderError if anything under `root` lacks geometry."""
    missing = unresolved_nodes(root)
    if missing:
        names = ", ".join(describe(node) for node in missing[:5])
        raise RenderError(f"Cannot render unresolved layout ({len(missing)} unresolved nodes: {names})")


def describe(node: Node) -> str:
    """Short human-readable label for error messages and logs."""
    if isinstance(node, Tile):
        return f"Tile({node.text.content!r})"
    if isinstance(node, ListWidget):
        return f"ListWidget({len(node.items)} items)"
    return type(node).__name__


def geometry(root: Node) -> list[dict[str, Any]]:
    """
    Flat, ordered dump of all resolved geometry under `root`.
    Used to compare two resolutions for equality.
    """
    dump: list[dict[str, Any]] = []
    for node in root.walk():
        if node.rect is None:
            continue
        entry: dict[str, Any] = {"node": describe(node), "rect": node.rect.to_dict()}
        if isinstance(node, Tile):
            offset = node.text.offset
            entry["offset"] = None if offset is None else {"x": offset.x, "y": offset.y}
            entry["font_size"] = node.text.resolved_font_size
        dump.append(entry)
    return dump


def _check_font_size(size: int) -> None:
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise ConfigurationError(f"Font size must be a positive integer, got {size!r}")
