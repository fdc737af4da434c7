"""
Screengen Kernel — Tree Builders

Factory functions for declaring a screen concisely. Nothing here computes
geometry; every node comes back unresolved.

    status = horizontal([
        tile("21:37").with_format("%T"),
        vertical_separator(),
        tile("GPS 3D").with_format("GPS %1d"),
    ])
    screen = split(status, 0.101, vertical([horizontal_separator(), tile("Hello")]))
"""

from __future__ import annotations

from collections.abc import Iterable

from screengen.kernel.types import (
    ConfigurationError,
    Horizontal,
    HorizontalSeparator,
    ListWidget,
    Node,
    Split,
    Text,
    Tile,
    Vertical,
    VerticalSeparator,
)


def tile(content: str) -> Tile:
    """A single text label."""
    return Tile(text=Text(content=content))


def horizontal(children: Iterable[Node]) -> Horizontal:
    """[] [] []"""
    return Horizontal(nodes=_nodes(children))


def vertical(children: Iterable[Node]) -> Vertical:
    """
    []
    []
    []
    """
    return Vertical(nodes=_nodes(children))


def split(first: Node, first_share: float, second: Node) -> Split:
    """`first` takes `first_share` of the height, `second` the rest."""
    if not 0.0 <= first_share <= 1.0:
        raise ConfigurationError(f"Split share must be within [0, 1], got {first_share}")
    return Split(
        first=first,
        first_share=first_share,
        second=second,
        second_share=1.0 - first_share,
    )


def horizontal_separator() -> HorizontalSeparator:
    return HorizontalSeparator()


def vertical_separator() -> VerticalSeparator:
    return VerticalSeparator()


def vlist(contents: Iterable[str]) -> ListWidget:
    """Vertical list of labels, all of them visible."""
    items = [tile(content) for content in contents]
    return ListWidget(items=items, visible_count=len(items))


def with_format(node: Node, fmt: str) -> Node:
    return node.with_format(fmt)


def with_font_size(node: Node, size: int) -> Node:
    """
    Set the font size explicitly. The resolver never second-guesses it,
    so make sure it fits the tile.
    """
    return node.with_font_size(size)


def _nodes(children: Iterable[Node]) -> list[Node]:
    nodes = list(children)
    for child in nodes:
        if not isinstance(child, Node):
            raise ConfigurationError(f"Layout children must be nodes, got {type(child).__name__}")
    return nodes
