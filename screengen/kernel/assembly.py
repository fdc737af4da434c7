"""
Screengen Kernel — Assembly Layer

Sits between the pure functions (resolver, renderers) and the outside
world. Takes a declared screen through its whole lifecycle:

    validate → resolve → render preview + embedded source → write files

This is where IO happens. Everything it calls is pure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from screengen.kernel.embedded_renderer import EmbeddedOptions, render_embedded
from screengen.kernel.preview_renderer import render_preview
from screengen.kernel.profiles import DeviceProfile, get_profile
from screengen.kernel.resolver import resolve
from screengen.kernel.screens import Screen
from screengen.kernel.types import LayoutError, Node
from screengen.kernel.validation import validate_layout

logger = logging.getLogger(__name__)

PREVIEW_SUFFIX = ".60"
EMBEDDED_SUFFIX = ".inc"


@dataclass
class GeneratedScreen:
    """Both artifacts of one screen plus the layout they were rendered from."""

    name: str
    profile: DeviceProfile
    layout: Node
    preview: str
    embedded: str


def generate(
    root: Node,
    profile: DeviceProfile,
    name: str = "screen",
    options: EmbeddedOptions | None = None,
) -> GeneratedScreen:
    """
    Validate, resolve and render `root` for `profile`.
    Raises LayoutError listing every structural problem found.
    """
    errors = validate_layout(root, profile)
    if errors:
        raise LayoutError(f"Screen {name!r} is not valid for {profile.name}:\n  " + "\n  ".join(errors))

    bounds = profile.bounds
    layout = resolve(root, bounds, profile)

    return GeneratedScreen(
        name=name,
        profile=profile,
        layout=layout,
        preview=render_preview(layout, bounds, profile),
        embedded=render_embedded(layout, bounds, profile, options),
    )


def generate_screen(
    screen: Screen,
    profile: DeviceProfile | None = None,
    options: EmbeddedOptions | None = None,
) -> GeneratedScreen:
    """Generate a catalogue screen, on its own display unless told otherwise."""
    target = profile or get_profile(screen.profile_name)
    return generate(screen.build(), target, name=screen.name, options=options)


def write_artifacts(generated: GeneratedScreen, output_dir: str | Path) -> list[Path]:
    """
    Write `<name>.60` and `<name>.inc` into `output_dir`, creating it if needed.
    Returns the written paths.
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for suffix, content in ((PREVIEW_SUFFIX, generated.preview), (EMBEDDED_SUFFIX, generated.embedded)):
        path = directory / f"{generated.name}{suffix}"
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))
        written.append(path)

    return written
