from __future__ import annotations

import argparse
from typing import List, Optional

from . import __version__
from .checks import check
from .display import Display
from .errors import ResGenError
from .generate import generate
from .manifest import print_manifest
from .platforms import PLATFORMS
from .settings import RunSettings


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="resgen",
        description="Generate icon and splash screen resources for Android, iOS, Windows and BlackBerry10.",
    )
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-i", "--icon", default=None, help="icon file path (default: ./resources/icon.png)")
    ap.add_argument("-s", "--splash", default=None, help="splash file path (default: ./resources/splash.png)")
    ap.add_argument(
        "-p",
        "--platforms",
        default=None,
        help="comma separated platform list, e.g. android,ios (default: all platforms)",
    )
    ap.add_argument("-o", "--outputdir", default=None, help="output directory (default: ./resources)")
    ap.add_argument("-I", "--makeicon", action="store_true", help="process icon files only")
    ap.add_argument("-S", "--makesplash", action="store_true", help="process splash files only")
    ap.add_argument("-m", "--makedir", action="store_true", help="create the output directory if missing")
    ap.add_argument("-c", "--printconfig", action="store_true", help="print a config.xml fragment for the generated files")
    ap.add_argument("-q", "--quiet", action="store_true", help="only print errors")
    ap.add_argument("--list-platforms", action="store_true", help="list supported platforms and exit")
    return ap


def list_platforms(display: Display) -> None:
    for name, groups in PLATFORMS.items():
        types = ", ".join(f"{g.type.value} ({len(g.definitions)})" for g in groups)
        print(f"{name}: {types}", file=display.out)


def run(settings: RunSettings, display: Display) -> None:
    ctx = check(settings, display)
    generate(ctx, display)
    if settings.print_manifest:
        display.header("Config")
        print_manifest(settings, ctx.platforms, out=display.out)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    display = Display(quiet=args.quiet)

    if args.list_platforms:
        list_platforms(display)
        return 0

    display.banner(f"resgen {__version__}")
    settings = RunSettings.from_args(args)
    try:
        run(settings, display)
    except ResGenError as e:
        display.progress_done()
        print(f"Error: {e}", file=display.err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
