"""
Screengen Kernel — Embedded Renderer

Pure function: (resolved tree, bounds, profile) → C++ draw-call source
No IO. Deterministic: same input → same output, always.

The display redraws partially, so output is split in two streams:
- dynamic: one enqueueDraw block per tile, re-run on every refresh because
  the text may change. Its invalidation rectangle is the tile shrunk by 1px
  on each side so a refresh never wipes an adjacent separator.
- static: one line call per separator, collected into a single drawStatic()
  routine that is drawn once and cached.

List items are drawn exactly like tiles, one dynamic block per item.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

import chevron

from screengen.kernel.profiles import DeviceProfile
from screengen.kernel.types import (
    HorizontalSeparator,
    Node,
    Rect,
    Tile,
    VerticalSeparator,
    ensure_resolved,
)

# ---------------------------------------------------------------------------
# Templates (C++ is brace-heavy, so mustache delimiters are <% %>)
# ---------------------------------------------------------------------------

DRAW_TEMPLATE = """\
// <%& label %>
display_->enqueueDraw(
    [&](Paint &paint) {
        const int msg_size = <% msg_size %>;
        char message[msg_size];

        <%& format_msg %>
        paint.DrawStringAt(<% x %>, <% y %>, message, &Font<% font %>, COLORED);
    },
    {<% x0 %>, <% y0 %>, <% x1 %>, <% y1 %>});

"""

HORIZONTAL_LINE_TEMPLATE = "paint.DrawHorizontalLine(<% x %>, <% y %>, <% width %>, COLORED);\n"

VERTICAL_LINE_TEMPLATE = "paint.DrawVerticalLine(<% x %>, <% y %>, <% height %>, COLORED);\n"

SOURCE_TEMPLATE = """\
<%& banner %>
<%& dynamic %>

void <%& view_class %>::drawStatic() {
    display_->enqueueStaticDraw(
        [&](Paint &paint) {
<%& static %>
        },
        // Rectangle needs to cover whole widget area
        {<% x %>, <% y %>, <% width %>, <% band %>});
}
"""

BANNER = """\
// Generated by screengen from the layout declaration.
// Edit the layout and regenerate instead of changing this file.
"""


@dataclass
class EmbeddedOptions:
    """Options controlling the generated source."""

    view_class: str = "StatusView"
    message_buffer_size: int = 128
    include_banner: bool = True


@dataclass
class DrawStreams:
    """The two independent command streams of one screen."""

    dynamic: str
    static: str


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_streams(root: Node, options: EmbeddedOptions | None = None) -> DrawStreams:
    """
    Render the resolved tree into its dynamic and static command streams.
    Raises RenderError if any node under `root` was never resolved.
    """
    opts = options or EmbeddedOptions()
    ensure_resolved(root)

    dynamic: list[str] = []
    static: list[str] = []
    for node in root.walk():
        if isinstance(node, Tile):
            dynamic.append(render_draw_call(node, opts))
        elif isinstance(node, HorizontalSeparator):
            static.append(_render(HORIZONTAL_LINE_TEMPLATE, node.rect.to_dict()))
        elif isinstance(node, VerticalSeparator):
            static.append(_render(VERTICAL_LINE_TEMPLATE, node.rect.to_dict()))

    return DrawStreams(dynamic="".join(dynamic), static="".join(static))


def render_embedded(
    root: Node,
    bounds: Rect,
    profile: DeviceProfile,
    options: EmbeddedOptions | None = None,
) -> str:
    """
    Render complete source: every dynamic draw block followed by the
    drawStatic() routine covering the top band of the screen.
    """
    opts = options or EmbeddedOptions()
    streams = render_streams(root, opts)

    return _render(
        SOURCE_TEMPLATE,
        {
            "banner": BANNER if opts.include_banner else "",
            "dynamic": streams.dynamic.rstrip("\n"),
            "view_class": opts.view_class,
            "static": textwrap.indent(streams.static.rstrip("\n"), " " * 12),
            "x": bounds.x,
            "y": bounds.y,
            "width": bounds.width,
            "band": profile.static_band_height,
        },
    )


def render_draw_call(tile: Tile, options: EmbeddedOptions | None = None) -> str:
    """Render one resolved tile as an enqueueDraw block."""
    opts = options or EmbeddedOptions()
    rect = tile.rect
    text = tile.text

    if text.format is not None:
        format_msg = f'snprintf(message, msg_size, "{c_escape(text.format)}" /* , runtime args */);'
    else:
        # Literal text still goes through printf, so % must be doubled
        format_msg = f'snprintf(message, msg_size, "{c_escape(text.content).replace("%", "%%")}");'

    return _render(
        DRAW_TEMPLATE,
        {
            "label": c_escape(text.content),
            "msg_size": opts.message_buffer_size,
            "format_msg": format_msg,
            "x": rect.x + text.offset.x,
            "y": rect.y + text.offset.y,
            "font": text.resolved_font_size,
            # Shrink the refresh area so static elements are not wiped out
            "x0": rect.x + 1,
            "y0": rect.y + 1,
            "x1": rect.right - 1,
            "y1": rect.bottom - 1,
        },
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def c_escape(text: str) -> str:
    """Escape content for a C string literal."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _render(template: str, context: dict) -> str:
    return chevron.render(template, context, def_ldel="<%", def_rdel="%>")
