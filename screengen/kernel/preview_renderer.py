"""
Screengen Kernel — Preview Renderer

Pure function: (resolved tree, bounds, profile) → .60 markup string
No IO. Deterministic: same input → same output, always.

Produces a SixtyFPS window the size of the device, so a screen can be
looked at on the desktop before any firmware is built:
- each tile and list item becomes a silver rectangle with centered text
- each separator becomes a black filled rectangle
Tiles come first, separators after, each group in document order.

Horizontal alignment is left to the markup because desktop fonts differ
significantly from the device's; only the vertical offset is carried over.
"""

from __future__ import annotations

import textwrap

import chevron

from screengen.kernel.profiles import DeviceProfile
from screengen.kernel.types import (
    Node,
    Rect,
    Tile,
    ensure_resolved,
    is_separator,
)

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

WINDOW_TEMPLATE = """\
MainWindow := Window {
    width: <% width %>phx;
    height: <% height %>phx;
    background: white;

<%& tiles %>

<%& separators %>
}
"""

TILE_TEMPLATE = """\
Rectangle {
    x: <% x %>phx;
    y: <% y %>phx;
    width: <% width %>phx;
    height: <% height %>phx;
    background: silver;
    border-color: black;
    border-width: 0px;
    Text {
        y: <% text_y %>phx;
        width: 100%;
        height: 100%;
        text: "<%& text %>";
        font-size: <% font_size %>phx;
        font-family: "<%& font_family %>";
        horizontal-alignment: center;
    }
}
"""

SEPARATOR_TEMPLATE = """\
Rectangle {
    x: <% x %>phx;
    y: <% y %>phx;
    width: <% width %>phx;
    height: <% height %>phx;
    background: black;
    border-color: black;
    border-width: 0px;
}
"""

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_preview(root: Node, bounds: Rect, profile: DeviceProfile) -> str:
    """
    Render the resolved tree as a .60 markup document.
    Raises RenderError if any node under `root` was never resolved.
    """
    ensure_resolved(root)

    tiles: list[str] = []
    separators: list[str] = []
    for node in root.walk():
        if isinstance(node, Tile):
            tiles.append(render_tile(node, profile))
        elif is_separator(node):
            separators.append(_render(SEPARATOR_TEMPLATE, node.rect.to_dict()))

    return _render(
        WINDOW_TEMPLATE,
        {
            "width": bounds.width,
            "height": bounds.height,
            "tiles": _indent("".join(tiles)),
            "separators": _indent("".join(separators)),
        },
    )


def render_tile(tile: Tile, profile: DeviceProfile) -> str:
    """Render one resolved tile (or list item) as a Rectangle block."""
    context = tile.rect.to_dict()
    context.update(
        {
            "text_y": tile.text.offset.y,
            "text": escape(tile.text.content),
            "font_size": tile.text.resolved_font_size,
            "font_family": escape(profile.preview_font_family),
        }
    )
    return _render(TILE_TEMPLATE, context)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def escape(text: str) -> str:
    """Escape content for a .60 string literal."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _render(template: str, context: dict) -> str:
    return chevron.render(template, context, def_ldel="<%", def_rdel="%>")


def _indent(block: str) -> str:
    return textwrap.indent(block.rstrip("\n"), "    ")
