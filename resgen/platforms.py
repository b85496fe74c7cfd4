"""
Static catalog of the resources generated per platform.

Each platform maps to an ordered set of asset groups (one per asset type).
Icons are plain resizes of the 1024x1024 source icon, splash screens are
centered crops of the 2732x2732 source splash.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import UnknownPlatform

ICON_SOURCE_SIZE = 1024
SPLASH_SOURCE_SIZE = 2732


class AssetType(str, enum.Enum):
    ICON = "icon"
    SPLASH = "splash"


@dataclass(frozen=True)
class AssetDefinition:
    name: str
    size: Optional[int] = None  # icon edge
    width: Optional[int] = None  # splash crop
    height: Optional[int] = None
    density: Optional[str] = None
    include_in_manifest: bool = True

    @property
    def dimensions(self) -> Tuple[int, int]:
        if self.size is not None:
            return self.size, self.size
        return int(self.width or 0), int(self.height or 0)


@dataclass(frozen=True)
class PlatformAssetGroup:
    type: AssetType
    platform: str
    path: str
    definitions: Tuple[AssetDefinition, ...]


def _icon(name: str, size: int, density: Optional[str] = None, manifest: bool = True) -> AssetDefinition:
    return AssetDefinition(name=name, size=size, density=density, include_in_manifest=manifest)


def _splash(name: str, width: int, height: int, density: Optional[str] = None, manifest: bool = True) -> AssetDefinition:
    return AssetDefinition(name=name, width=width, height=height, density=density, include_in_manifest=manifest)


ANDROID_ICONS = PlatformAssetGroup(
    type=AssetType.ICON,
    platform="android",
    path="android/icon",
    definitions=(
        _icon("drawable-ldpi-icon.png", 36, "ldpi"),
        _icon("drawable-mdpi-icon.png", 48, "mdpi"),
        _icon("drawable-hdpi-icon.png", 72, "hdpi"),
        _icon("drawable-xhdpi-icon.png", 96, "xhdpi"),
        _icon("drawable-xxhdpi-icon.png", 144, "xxhdpi"),
        _icon("drawable-xxxhdpi-icon.png", 192, "xxxhdpi"),
    ),
)

ANDROID_SPLASH = PlatformAssetGroup(
    type=AssetType.SPLASH,
    platform="android",
    path="android/splash",
    definitions=(
        _splash("drawable-land-ldpi-screen.png", 320, 240, "land-ldpi"),
        _splash("drawable-land-mdpi-screen.png", 480, 320, "land-mdpi"),
        _splash("drawable-land-hdpi-screen.png", 800, 480, "land-hdpi"),
        _splash("drawable-land-xhdpi-screen.png", 1280, 720, "land-xhdpi"),
        _splash("drawable-land-xxhdpi-screen.png", 1600, 960, "land-xxhdpi"),
        _splash("drawable-land-xxxhdpi-screen.png", 1920, 1280, "land-xxxhdpi"),
        _splash("drawable-port-ldpi-screen.png", 240, 320, "port-ldpi"),
        _splash("drawable-port-mdpi-screen.png", 320, 480, "port-mdpi"),
        _splash("drawable-port-hdpi-screen.png", 480, 800, "port-hdpi"),
        _splash("drawable-port-xhdpi-screen.png", 720, 1280, "port-xhdpi"),
        _splash("drawable-port-xxhdpi-screen.png", 960, 1600, "port-xxhdpi"),
        _splash("drawable-port-xxxhdpi-screen.png", 1280, 1920, "port-xxxhdpi"),
    ),
)

IOS_ICONS = PlatformAssetGroup(
    type=AssetType.ICON,
    platform="ios",
    path="ios/icon",
    definitions=(
        _icon("icon-20.png", 20),
        _icon("icon-20@2x.png", 40),
        _icon("icon-20@3x.png", 60),
        _icon("icon-small.png", 29),
        _icon("icon-small@2x.png", 58),
        _icon("icon-small@3x.png", 87),
        _icon("icon-40.png", 40),
        _icon("icon-40@2x.png", 80),
        _icon("icon-40@3x.png", 120),
        _icon("icon-50.png", 50),
        _icon("icon-50@2x.png", 100),
        _icon("icon.png", 57),
        _icon("icon@2x.png", 114),
        _icon("icon-60.png", 60),
        _icon("icon-60@2x.png", 120),
        _icon("icon-60@3x.png", 180),
        _icon("icon-72.png", 72),
        _icon("icon-72@2x.png", 144),
        _icon("icon-76.png", 76),
        _icon("icon-76@2x.png", 152),
        _icon("icon-83.5@2x.png", 167),
        _icon("icon-1024.png", 1024),
        # Apple Watch, referenced from the watch extension only
        _icon("icon-24@2x.png", 48, manifest=False),
        _icon("icon-27.5@2x.png", 55, manifest=False),
        _icon("icon-44@2x.png", 88, manifest=False),
        _icon("icon-86@2x.png", 172, manifest=False),
        _icon("icon-98@2x.png", 196, manifest=False),
    ),
)

IOS_SPLASH = PlatformAssetGroup(
    type=AssetType.SPLASH,
    platform="ios",
    path="ios/splash",
    definitions=(
        _splash("Default~iphone.png", 320, 480),
        _splash("Default@2x~iphone.png", 640, 960),
        _splash("Default-568h@2x~iphone.png", 640, 1136),
        _splash("Default-667h.png", 750, 1334),
        _splash("Default-736h.png", 1242, 2208),
        _splash("Default-Landscape-736h.png", 2208, 1242),
        _splash("Default-2436h.png", 1125, 2436),
        _splash("Default-Landscape-2436h.png", 2436, 1125),
        _splash("Default-Portrait~ipad.png", 768, 1024),
        _splash("Default-Landscape~ipad.png", 1024, 768),
        _splash("Default-Portrait@2x~ipad.png", 1536, 2048),
        _splash("Default-Landscape@2x~ipad.png", 2048, 1536),
        _splash("Default-Portrait@~ipadpro.png", 2048, 2732),
        _splash("Default-Landscape@~ipadpro.png", 2732, 2048),
        _splash("Default@2x~universal~anyany.png", 2732, 2732),
    ),
)

# Windows resolves the .scale-NNN variants from the base name itself
WINDOWS_ICONS = PlatformAssetGroup(
    type=AssetType.ICON,
    platform="windows",
    path="windows/icon",
    definitions=(
        _icon("StoreLogo.png", 50),
        _icon("Square30x30Logo.png", 30),
        _icon("Square44x44Logo.png", 44),
        _icon("Square70x70Logo.png", 70),
        _icon("Square71x71Logo.png", 71),
        _icon("Square150x150Logo.png", 150),
        _icon("Square310x310Logo.png", 310),
        _icon("StoreLogo.scale-100.png", 50, manifest=False),
        _icon("StoreLogo.scale-240.png", 120, manifest=False),
        _icon("Square44x44Logo.scale-100.png", 44, manifest=False),
        _icon("Square44x44Logo.scale-125.png", 55, manifest=False),
        _icon("Square44x44Logo.scale-140.png", 62, manifest=False),
        _icon("Square44x44Logo.scale-150.png", 66, manifest=False),
        _icon("Square44x44Logo.scale-200.png", 88, manifest=False),
        _icon("Square44x44Logo.scale-240.png", 106, manifest=False),
        _icon("Square44x44Logo.scale-400.png", 176, manifest=False),
        _icon("Square71x71Logo.scale-100.png", 71, manifest=False),
        _icon("Square71x71Logo.scale-240.png", 170, manifest=False),
        _icon("Square150x150Logo.scale-100.png", 150, manifest=False),
        _icon("Square150x150Logo.scale-200.png", 300, manifest=False),
        _icon("Square150x150Logo.scale-240.png", 360, manifest=False),
    ),
)

WINDOWS_SPLASH = PlatformAssetGroup(
    type=AssetType.SPLASH,
    platform="windows",
    path="windows/splash",
    definitions=(
        _splash("SplashScreen.png", 620, 300),
        _splash("SplashScreenPhone.png", 480, 800),
        _splash("SplashScreen.scale-100.png", 620, 300, manifest=False),
        _splash("SplashScreen.scale-125.png", 775, 375, manifest=False),
        _splash("SplashScreen.scale-150.png", 930, 450, manifest=False),
        _splash("SplashScreen.scale-200.png", 1240, 600, manifest=False),
        _splash("SplashScreen.scale-400.png", 2480, 1200, manifest=False),
        _splash("SplashScreenPhone.scale-100.png", 480, 800, manifest=False),
        _splash("SplashScreenPhone.scale-140.png", 672, 1120, manifest=False),
        _splash("SplashScreenPhone.scale-240.png", 1152, 1920, manifest=False),
    ),
)

BLACKBERRY10_ICONS = PlatformAssetGroup(
    type=AssetType.ICON,
    platform="blackberry10",
    path="blackberry10/icon",
    definitions=(
        _icon("icon-80.png", 80),
        _icon("icon-86.png", 86),
        _icon("icon-90.png", 90),
        _icon("icon-96.png", 96),
        _icon("icon-110.png", 110),
        _icon("icon-144.png", 144),
        _icon("icon-150.png", 150),
    ),
)

PLATFORMS: Dict[str, Tuple[PlatformAssetGroup, ...]] = {
    "android": (ANDROID_ICONS, ANDROID_SPLASH),
    "ios": (IOS_ICONS, IOS_SPLASH),
    "windows": (WINDOWS_ICONS, WINDOWS_SPLASH),
    "blackberry10": (BLACKBERRY10_ICONS,),
}


def lookup(platform: str) -> Tuple[PlatformAssetGroup, ...]:
    try:
        return PLATFORMS[platform]
    except KeyError:
        raise UnknownPlatform(platform) from None


def all_platform_names() -> List[str]:
    return list(PLATFORMS)


def source_size(asset_type: AssetType) -> Tuple[int, int]:
    """Required (width, height) of the source image for an asset type."""
    if asset_type is AssetType.ICON:
        return ICON_SOURCE_SIZE, ICON_SOURCE_SIZE
    return SPLASH_SOURCE_SIZE, SPLASH_SOURCE_SIZE
