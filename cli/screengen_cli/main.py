"""Main entry point for the screengen CLI."""
from __future__ import annotations

import logging
import sys

from screengen.kernel.assembly import generate_screen, write_artifacts
from screengen.kernel.profiles import PROFILES, get_profile
from screengen.kernel.screens import SCREENS, get_screen
from screengen.kernel.types import ScreengenError
from screengen_cli import __version__
from screengen_cli.config import settings

logger = logging.getLogger(__name__)


def print_help():
    """Print help message."""
    print(f"""
screengen v{__version__}

Usage:
  screengen [options] <command>

Commands:
  list                List screens and device profiles
  render <screen>     Generate preview markup and draw code for a screen
  render --all        Generate every screen

Options:
  --profile NAME      Render for this device profile instead of the screen's own
  --output DIR        Write files to DIR (default: {settings.DEFAULT_OUTPUT_DIR})
  --stdout            Print generated files instead of writing them
  -h, --help          Show this help
  -v, --version       Show version

Environment:
  SCREENGEN_PROFILE      Same as --profile
  SCREENGEN_OUTPUT_DIR   Same as --output
  SCREENGEN_LOG_LEVEL    Logging level (default: {settings.DEFAULT_LOG_LEVEL})

Examples:
  screengen list
  screengen render gps_status
  screengen render select_stats --stdout
  screengen render --all --output build/ui
""")


def parse_args(args: list[str]) -> dict:
    """
    Parse command line arguments.

    Returns dict with:
        command: str | None (list, render)
        screen: str | None
        all: bool
        profile: str | None
        output: str | None
        stdout: bool
        show_help: bool
        show_version: bool
    """
    result = {
        "command": None,
        "screen": None,
        "all": False,
        "profile": None,
        "output": None,
        "stdout": False,
        "show_help": False,
        "show_version": False,
    }

    i = 0
    while i < len(args):
        arg = args[i]

        if arg in ("list", "render") and result["command"] is None:
            result["command"] = arg
        elif arg == "--profile":
            if i + 1 < len(args):
                result["profile"] = args[i + 1]
                i += 1
            else:
                print("Error: --profile requires a name")
                sys.exit(1)
        elif arg == "--output":
            if i + 1 < len(args):
                result["output"] = args[i + 1]
                i += 1
            else:
                print("Error: --output requires a directory")
                sys.exit(1)
        elif arg == "--all":
            result["all"] = True
        elif arg == "--stdout":
            result["stdout"] = True
        elif arg in ("--help", "-h"):
            result["show_help"] = True
        elif arg in ("--version", "-v"):
            result["show_version"] = True
        elif arg.startswith("-"):
            print(f"Unknown option: {arg}")
            print("Run 'screengen --help' for usage.")
            sys.exit(1)
        elif result["command"] == "render" and result["screen"] is None:
            result["screen"] = arg
        else:
            print(f"Unknown command: {arg}")
            print("Run 'screengen --help' for usage.")
            sys.exit(1)

        i += 1

    return result


def list_screens():
    """Print every screen and profile."""
    print("Screens:")
    width = max(len(name) for name in SCREENS)
    for name, screen in SCREENS.items():
        print(f"  {name.ljust(width)}  {screen.profile_name:<16} {screen.description}")

    print()
    print("Profiles:")
    for name, profile in PROFILES.items():
        print(f"  {name:<16} {profile.width}x{profile.height}  fonts {profile.font_table.sizes}")


def render(args: dict) -> int:
    """Generate the requested screens. Returns the process exit code."""
    if args["all"]:
        names = list(SCREENS)
    elif args["screen"]:
        names = [args["screen"]]
    else:
        print("Error: render requires a screen name or --all")
        return 1

    profile_name = args["profile"] or settings.PROFILE
    profile = get_profile(profile_name) if profile_name else None
    output_dir = args["output"] or settings.OUTPUT_DIR

    for name in names:
        generated = generate_screen(get_screen(name), profile)

        if args["stdout"]:
            print(f"// ---- {generated.name} ({generated.profile.name}) preview ----")
            print(generated.preview)
            print(f"// ---- {generated.name} ({generated.profile.name}) draw code ----")
            print(generated.embedded)
            continue

        for path in write_artifacts(generated, output_dir):
            print(f"  wrote {path}")

    return 0


def main(argv: list[str] | None = None):
    """Main entry point."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Handle help and version first
    if args["show_help"]:
        print_help()
        return

    if args["show_version"]:
        print(f"screengen {__version__}")
        return

    if args["command"] is None:
        print_help()
        return

    try:
        if args["command"] == "list":
            list_screens()
            code = 0
        else:
            code = render(args)
    except ScreengenError as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {e}")
        code = 1
    except OSError as e:
        print(f"Error: could not write output: {e}")
        code = 1

    sys.exit(code)


if __name__ == "__main__":
    main()
