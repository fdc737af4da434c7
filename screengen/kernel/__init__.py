"""
Screengen Kernel — the pure engine.

Components:
  builders          — declare a screen as a tree of nodes
  resolver          — (tree, bounds, profile) → resolved tree  (pure, deterministic)
  preview_renderer  — resolved tree → .60 desktop preview markup
  embedded_renderer — resolved tree → C++ draw calls (dynamic + static streams)
  assembly          — validate + resolve + render + write files (the only IO)

Device calibration (font tables, margins) lives in profiles.
"""

from screengen.kernel.assembly import generate, generate_screen, write_artifacts
from screengen.kernel.builders import (
    horizontal,
    horizontal_separator,
    split,
    tile,
    vertical,
    vertical_separator,
    vlist,
    with_font_size,
    with_format,
)
from screengen.kernel.embedded_renderer import EmbeddedOptions, render_embedded, render_streams
from screengen.kernel.preview_renderer import render_preview
from screengen.kernel.profiles import DeviceProfile, FontTable, get_profile
from screengen.kernel.resolver import resolve, resolve_in_place
from screengen.kernel.types import ConfigurationError, LayoutError, Rect, RenderError, ScreengenError
from screengen.kernel.validation import validate_layout

__all__ = [
    "tile",
    "horizontal",
    "vertical",
    "split",
    "horizontal_separator",
    "vertical_separator",
    "vlist",
    "with_format",
    "with_font_size",
    "resolve",
    "resolve_in_place",
    "validate_layout",
    "render_preview",
    "render_embedded",
    "render_streams",
    "EmbeddedOptions",
    "DeviceProfile",
    "FontTable",
    "get_profile",
    "generate",
    "generate_screen",
    "write_artifacts",
    "Rect",
    "ScreengenError",
    "ConfigurationError",
    "LayoutError",
    "RenderError",
]
