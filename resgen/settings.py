from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .platforms import AssetType

DEFAULT_ICON = Path("resources") / "icon.png"
DEFAULT_SPLASH = Path("resources") / "splash.png"
DEFAULT_OUTPUT_DIR = Path("resources")


def parse_platform_list(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    """Split "android, ios" into ("android", "ios"). Empty input means every platform."""
    if value is None:
        return None
    names = tuple(p.strip() for p in value.split(",") if p.strip())
    return names or None


@dataclass(frozen=True)
class RunSettings:
    icon_file: Path = DEFAULT_ICON
    splash_file: Path = DEFAULT_SPLASH
    platforms: Optional[Tuple[str, ...]] = None
    output_dir: Path = DEFAULT_OUTPUT_DIR
    make_icon: bool = True
    make_splash: bool = True
    make_dir: bool = False
    print_manifest: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunSettings":
        # neither -I nor -S: process both
        both = not args.makeicon and not args.makesplash
        return cls(
            icon_file=Path(args.icon) if args.icon else DEFAULT_ICON,
            splash_file=Path(args.splash) if args.splash else DEFAULT_SPLASH,
            platforms=parse_platform_list(args.platforms),
            output_dir=Path(args.outputdir) if args.outputdir else DEFAULT_OUTPUT_DIR,
            make_icon=bool(args.makeicon) or both,
            make_splash=bool(args.makesplash) or both,
            make_dir=bool(args.makedir),
            print_manifest=bool(args.printconfig),
        )

    def enabled(self, asset_type: AssetType) -> bool:
        if asset_type is AssetType.ICON:
            return self.make_icon
        return self.make_splash
