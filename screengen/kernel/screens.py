"""
Screengen Kernel — Screen Catalogue

Layout declarations for the watch's screens, one factory per screen.
Each factory returns a fresh, unresolved tree; `Screen.profile_name` says
which display the screen was designed for (explicit font sizes must exist
in that display's font table).

Every screen is the shared status bar on top of a page:

    split(status_bar(), 0.101, page)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from screengen.kernel.builders import (
    horizontal,
    horizontal_separator,
    split,
    tile,
    vertical,
    vertical_separator,
    vlist,
)
from screengen.kernel.types import ConfigurationError, Node

# Share of the screen height taken by the status bar
STATUS_BAR_SHARE = 0.101


@dataclass(frozen=True)
class Screen:
    """A named screen and the display it targets."""

    name: str
    profile_name: str
    build: Callable[[], Node]
    description: str = ""


def status_bar() -> Node:
    return horizontal(
        [
            tile("21:37").with_format("%T"),
            vertical_separator(),
            tile("GPS 3D").with_format("GPS %1d"),
            vertical_separator(),
            tile("02/09/21").with_format("%d/%m/%y"),
        ]
    )


def with_status_bar(page: Node) -> Node:
    return split(status_bar(), STATUS_BAR_SHARE, page)


def _splash(title: str) -> Node:
    return with_status_bar(vertical([horizontal_separator(), horizontal([tile(title)])]))


def _menu(title: str, subtitle: str, entries: list[str], font_size: int) -> Node:
    """Title on the left, selectable list on the right."""
    return with_status_bar(
        vertical(
            [
                horizontal_separator(),
                vertical_separator(),
                horizontal(
                    [
                        vertical([tile(title), horizontal_separator(), tile(subtitle)]),
                        vlist(entries).with_font_size(font_size),
                    ]
                ),
            ]
        )
    )


# ---------------------------------------------------------------------------
# 2.9" e-paper (waveshare_2in9)
# ---------------------------------------------------------------------------


def gps_status() -> Node:
    # Separators split the tiles declared after them, so they stick to
    # the top edge of the group that follows.
    page = vertical(
        [
            horizontal_separator(),
            vertical_separator(),
            horizontal(
                [
                    vertical(
                        [
                            tile("02/09/21").with_format("%d/%m/%y"),
                            tile("19:34:20").with_format("%T"),
                        ]
                    ),
                    vertical(
                        [
                            tile("in view / tracked"),
                            tile("13 / 11").with_format("%d / %d").with_font_size(19),
                        ]
                    ),
                ]
            ),
            horizontal_separator(),
            vertical_separator(),
            horizontal(
                [
                    vertical(
                        [
                            tile("23.19[*C]").with_format("%5.2f[*C]"),
                            tile("133.94[m]").with_format("%5.2f[m]"),
                        ]
                    ),
                    vertical(
                        [
                            tile("Hit button below"),
                            tile("to calculate your"),
                            tile("BMI"),
                        ]
                    ),
                ]
            ),
        ]
    )
    return with_status_bar(page)


def activity_splash() -> Node:
    return _splash("Activities")


def select_activity() -> Node:
    return _menu(
        "Activity",
        "",
        ["Running", "Cycling", "Hiking", "Ind. Cycling", "Yoga", "Swimming"],
        19,
    )


def select_running_workouts() -> Node:
    return _menu("Workouts", "Running", ["5k", "10k", "Half Marathon", "Marathon", "Cooper Test"], 19)


def cooper_test() -> Node:
    return _menu("Running", "Cooper Test", ["Do It", "View"], 19)


def cooper_test_view() -> Node:
    page = vertical(
        [
            horizontal_separator(),
            split(
                vertical([tile("Cooper Test"), horizontal_separator()]),
                0.2,
                vertical(
                    [
                        tile("Step 1: Warmup"),
                        tile("Step 2: Run for your life for 12 mins"),
                        tile("Step 3: Note the distance"),
                        tile("Step 4: Look at the table"),
                    ]
                ),
            ),
        ]
    )
    return with_status_bar(page)


def ready_to_start() -> Node:
    page = vertical(
        [
            horizontal_separator(),
            vertical_separator(),
            horizontal(
                [
                    vertical([tile("Running"), horizontal_separator(), tile("5k")]),
                    vertical(
                        [
                            tile("GPS 3D").with_font_size(19),
                            horizontal_separator(),
                            tile("Press OK").with_font_size(19),
                            tile("to start").with_font_size(19),
                        ]
                    ),
                ]
            ),
        ]
    )
    return with_status_bar(page)


# ---------------------------------------------------------------------------
# 2.7" memory-in-pixel LCD (sharp_mip_2in7)
# ---------------------------------------------------------------------------


def welcome() -> Node:
    page = vertical(
        [
            horizontal_separator(),
            horizontal(
                [
                    vertical(
                        [
                            tile("21:37:07").with_format("%T").with_font_size(42),
                            horizontal_separator(),
                            tile("02/09/21").with_format("%d/%m/%y").with_font_size(24),
                        ]
                    )
                ]
            ),
        ]
    )
    return with_status_bar(page)


def gps_overview() -> Node:
    page = vertical(
        [
            horizontal_separator(),
            vertical_separator(),
            horizontal(
                [
                    vertical(
                        [
                            tile("02/09/21").with_format("%d/%m/%y").with_font_size(24),
                            tile("19:34:19").with_format("%T").with_font_size(24),
                        ]
                    ),
                    vertical(
                        [
                            tile("in view: 13").with_format("in view: %d").with_font_size(24),
                            tile("tracked: 11").with_format("tracked: %d").with_font_size(24),
                        ]
                    ),
                ]
            ),
            horizontal_separator(),
            vertical_separator(),
            horizontal(
                [
                    vertical(
                        [
                            tile("23.19[*C]").with_format("%5.2f[*C]").with_font_size(24),
                            tile("8848.94[m]").with_format("%07.2f[m]").with_font_size(24),
                        ]
                    ),
                    vertical([tile("")]),
                ]
            ),
        ]
    )
    return with_status_bar(page)


def _metric(label: str, sample: str, fmt: str) -> Node:
    return vertical(
        [
            tile(label).with_font_size(16),
            tile(sample).with_format(fmt).with_font_size(20),
        ]
    )


def running_page_1() -> Node:
    page = horizontal(
        [
            vertical(
                [
                    _metric("pace", "10.20", "%.2f"),
                    horizontal_separator(),
                    vertical(
                        [
                            horizontal(
                                [
                                    tile("lap time").with_font_size(16),
                                    tile("02:03:04").with_format("%T").with_font_size(16),
                                ]
                            ),
                            horizontal(
                                [
                                    tile("lap dist").with_font_size(16),
                                    tile("21.37").with_format("%.2f").with_font_size(20),
                                ]
                            ),
                        ]
                    ),
                ]
            ),
            vertical_separator(),
            vertical(
                [
                    _metric("HR zone", "2.79", "%.2f"),
                    horizontal_separator(),
                    _metric("cadence", "158", "%3d"),
                ]
            ),
        ]
    )
    return with_status_bar(page)


def running_page_2() -> Node:
    page = horizontal(
        [
            vertical(
                [
                    _metric("total dist", "10.20", "%.2f"),
                    horizontal_separator(),
                    _metric("lap dist", "5.20", "%.2f"),
                ]
            ),
            vertical_separator(),
            vertical(
                [
                    _metric("total time", "02:12:20", "%T"),
                    horizontal_separator(),
                    _metric("lap time", "01:12:20", "%T"),
                ]
            ),
        ]
    )
    return with_status_bar(page)


def workout_steps() -> Node:
    return _splash("Workout Steps")


def workout_plan() -> Node:
    page = horizontal(
        [
            vlist(
                [
                    "run 5.00 1/5",
                    "cool down 2 minutes",
                    "run 5.00 2/5",
                    "cool down 2 minutes",
                ]
            ).with_font_size(16)
        ]
    )
    return with_status_bar(page)


def activity_paused() -> Node:
    return _menu("Paused", "", ["Resume", "Save", "Discard"], 24)


def statistics_splash() -> Node:
    return _splash("Statistics")


def select_stats() -> Node:
    return _menu("Stats", "", ["Running", "Cycling", "Hiking", "Ind. Cycling"], 24)


def stats_selected() -> Node:
    page = vertical(
        [
            horizontal_separator(),
            split(
                vertical([tile("Stats for: workout type"), horizontal_separator()]),
                0.2,
                vertical(
                    [
                        tile("All time:").with_font_size(24),
                        tile("5k: 50min").with_font_size(24),
                        tile("10k: 4hrs").with_font_size(24),
                        tile("Half M: 2 days 4hrs").with_font_size(24),
                    ]
                ),
            ),
        ]
    )
    return with_status_bar(page)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SCREENS: dict[str, Screen] = {
    screen.name: screen
    for screen in [
        Screen("gps_status", "waveshare_2in9", gps_status, "GPS fix, clock and sensor readout"),
        Screen("activity_splash", "waveshare_2in9", activity_splash, "Activities section title"),
        Screen("select_activity", "waveshare_2in9", select_activity, "Activity picker"),
        Screen("select_running_workouts", "waveshare_2in9", select_running_workouts, "Running workout picker"),
        Screen("cooper_test", "waveshare_2in9", cooper_test, "Cooper test actions"),
        Screen("cooper_test_view", "waveshare_2in9", cooper_test_view, "Cooper test steps"),
        Screen("ready_to_start", "waveshare_2in9", ready_to_start, "Waiting for OK to start"),
        Screen("welcome", "sharp_mip_2in7", welcome, "Large clock"),
        Screen("gps_overview", "sharp_mip_2in7", gps_overview, "GPS and sensor overview"),
        Screen("running_page_1", "sharp_mip_2in7", running_page_1, "Pace, laps, heart rate, cadence"),
        Screen("running_page_2", "sharp_mip_2in7", running_page_2, "Distance and time totals"),
        Screen("workout_steps", "sharp_mip_2in7", workout_steps, "Workout steps section title"),
        Screen("workout_plan", "sharp_mip_2in7", workout_plan, "Interval plan list"),
        Screen("activity_paused", "sharp_mip_2in7", activity_paused, "Paused activity menu"),
        Screen("statistics_splash", "sharp_mip_2in7", statistics_splash, "Statistics section title"),
        Screen("select_stats", "sharp_mip_2in7", select_stats, "Statistics picker"),
        Screen("stats_selected", "sharp_mip_2in7", stats_selected, "Personal records"),
    ]
}


def get_screen(name: str) -> Screen:
    screen = SCREENS.get(name)
    if screen is None:
        raise ConfigurationError(f"Unknown screen {name!r} (known: {', '.join(sorted(SCREENS))})")
    return screen
