"""
Screengen Kernel — Device Profiles

A device profile bundles the calibration data of one physical display:
resolution, bitmap font metrics and separator margins. The resolver and
both renderers take a profile instead of reading global constants, so
several displays can be targeted from the same process.

Font tables are hand-measured from the device fonts. They are opaque
calibration data, not derived from anything.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from screengen.kernel.types import ConfigurationError, LayoutError, Rect


class FontTable(BaseModel):
    """Fixed-width bitmap fonts available on a device, largest first."""

    model_config = {"frozen": True, "extra": "forbid"}

    # (font_size, glyph_width) pairs
    entries: tuple[tuple[int, int], ...] = Field(min_length=1)

    @field_validator("entries")
    @classmethod
    def _descending_and_positive(cls, entries: tuple[tuple[int, int], ...]) -> tuple[tuple[int, int], ...]:
        for size, width in entries:
            if size <= 0 or width <= 0:
                raise ValueError(f"font ({size}, {width}) must have a positive size and glyph width")
        sizes = [size for size, _ in entries]
        if any(a <= b for a, b in zip(sizes, sizes[1:])):
            raise ValueError(f"font sizes must be strictly descending, got {sizes}")
        return entries

    @property
    def sizes(self) -> list[int]:
        return [size for size, _ in self.entries]

    @property
    def smallest(self) -> int:
        return self.entries[-1][0]

    def has_size(self, size: int) -> bool:
        return any(s == size for s, _ in self.entries)

    def glyph_width(self, size: int) -> int:
        """Width in pixels of one character at `size`."""
        for s, width in self.entries:
            if s == size:
                return width
        raise LayoutError(f"Font size {size} is not available (known sizes: {self.sizes})")


class DeviceProfile(BaseModel):
    """Calibration bundle for one display target."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: str = Field(min_length=1, pattern=r"^[a-z0-9_]+$")
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    font_table: FontTable
    horizontal_separator_margin: int = Field(default=13, ge=0)
    vertical_separator_margin: int = Field(default=3, ge=0)
    list_item_margin: int = Field(default=1, ge=0)
    # Height of the band redrawn by the static routine
    static_band_height: int = Field(default=13, gt=0)
    # Closest desktop font to the device's bitmap font, still very different
    preview_font_family: str = "Ubuntu Mono"

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)


# ---------------------------------------------------------------------------
# Built-in profiles
# ---------------------------------------------------------------------------

# 2.9" e-paper, 296x128
WAVESHARE_2IN9 = DeviceProfile(
    name="waveshare_2in9",
    width=296,
    height=128,
    font_table=FontTable(entries=((56, 32), (42, 24), (31, 18), (24, 14), (19, 11))),
    horizontal_separator_margin=13,
    vertical_separator_margin=3,
    list_item_margin=1,
    static_band_height=13,
)

# 2.7" Sharp memory-in-pixel LCD, 400x240
SHARP_MIP_2IN7 = DeviceProfile(
    name="sharp_mip_2in7",
    width=400,
    height=240,
    font_table=FontTable(entries=((42, 24), (24, 17), (20, 14), (16, 11), (12, 7), (8, 5))),
    horizontal_separator_margin=13,
    vertical_separator_margin=3,
    list_item_margin=1,
    static_band_height=24,
)

PROFILES: dict[str, DeviceProfile] = {
    WAVESHARE_2IN9.name: WAVESHARE_2IN9,
    SHARP_MIP_2IN7.name: SHARP_MIP_2IN7,
}

DEFAULT_PROFILE = WAVESHARE_2IN9


def get_profile(name: str) -> DeviceProfile:
    """Look up a built-in profile by name."""
    profile = PROFILES.get(name)
    if profile is None:
        raise ConfigurationError(f"Unknown device profile {name!r} (known: {', '.join(sorted(PROFILES))})")
    return profile
