"""
Preconditions of a run: platform list, source images and output directory.

Nothing is written to the output tree until all three have passed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from PIL import Image

from .display import Display
from .errors import (
    InvalidPlatformList,
    OutputDirCreateFailed,
    OutputDirMissing,
    SourceImageUnreadable,
    SourceImageWrongDimensions,
)
from .platforms import AssetType, all_platform_names, source_size
from .settings import RunSettings


@dataclass
class SourceImages:
    icon: Optional[Image.Image] = None
    splash: Optional[Image.Image] = None

    def get(self, asset_type: AssetType) -> Optional[Image.Image]:
        return self.icon if asset_type is AssetType.ICON else self.splash


@dataclass
class RunContext:
    settings: RunSettings
    platforms: List[str] = field(default_factory=list)
    images: SourceImages = field(default_factory=SourceImages)


def resolve_platforms(requested: Optional[Iterable[str]], display: Display) -> List[str]:
    known = all_platform_names()
    names = [p.strip() for p in (requested or ()) if p and p.strip()]
    if not names:
        display.success("Processing files for all platforms")
        return known

    unknown = [p for p in dict.fromkeys(names) if p not in known]
    if unknown:
        display.error("Bad platforms: " + ",".join(unknown))
        raise InvalidPlatformList(unknown)

    selected = [p for p in known if p in names]
    display.success("Processing files for: " + ",".join(selected))
    return selected


def load_source_image(asset_type: AssetType, path: Path, display: Display) -> Image.Image:
    kind = asset_type.value
    path = Path(path)
    try:
        with Image.open(path) as im:
            im.load()
            img = im.convert("RGBA")
    except (OSError, ValueError) as e:
        display.error(f"Could not load {kind} file ({path})")
        raise SourceImageUnreadable(kind, path, e) from e

    expected = source_size(asset_type)
    if img.size != expected:
        w, h = img.size
        display.error(f"Bad {kind} file ({w}x{h})")
        raise SourceImageWrongDimensions(kind, path, img.size, expected)

    display.success(f"{kind.capitalize()} file ok ({img.width}x{img.height})")
    return img


def load_source_images(settings: RunSettings, display: Display) -> SourceImages:
    images = SourceImages()
    if settings.make_icon:
        images.icon = load_source_image(AssetType.ICON, settings.icon_file, display)
    if settings.make_splash:
        images.splash = load_source_image(AssetType.SPLASH, settings.splash_file, display)
    return images


def ensure_output_directory(settings: RunSettings, display: Display) -> None:
    out = Path(settings.output_dir)
    if out.is_dir():
        display.success(f"Output directory ok ({out})")
        return

    if not settings.make_dir:
        display.error(f"Output directory not found ({out})")
        raise OutputDirMissing(out)

    display.header(f"Creating directory ({out})")
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        display.error(f"Output directory could not be created ({out})")
        raise OutputDirCreateFailed(out, e) from e
    display.success("Directory created successfully!")


def check(settings: RunSettings, display: Display) -> RunContext:
    display.header("Checking files and directories")
    ctx = RunContext(settings=settings)
    ctx.platforms = resolve_platforms(settings.platforms, display)
    ctx.images = load_source_images(settings, display)
    ensure_output_directory(settings, display)
    return ctx
