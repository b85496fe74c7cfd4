"""
config.xml fragment listing the generated resources.

The listing is rebuilt from the catalog and the run settings, it does not
look at what was actually written to disk.
"""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, TextIO

from .platforms import AssetDefinition, PlatformAssetGroup, lookup
from .settings import RunSettings

INDENT = "    "


def _attributes(platform: str, group: PlatformAssetGroup, definition: AssetDefinition) -> str:
    if platform == "android":
        return f'density="{definition.density}"'
    width, height = definition.dimensions
    return f'width="{width}" height="{height}"'


def manifest_lines(settings: RunSettings, platforms: List[str]) -> List[str]:
    by_platform: Dict[str, List[PlatformAssetGroup]] = {}
    for name in platforms:
        for group in lookup(name):
            by_platform.setdefault(group.platform, []).append(group)

    root = settings.output_dir.as_posix().rstrip("/")
    lines: List[str] = []
    for platform, groups in by_platform.items():
        lines.append(f'<platform name="{platform}">')
        for group in groups:
            if not settings.enabled(group.type):
                continue
            for definition in group.definitions:
                if not definition.include_in_manifest:
                    continue
                src = f"{root}/{group.path}/{definition.name}"
                attrs = _attributes(platform, group, definition)
                lines.append(f'{INDENT}<{group.type.value} src="{src}" {attrs} />')
        lines.append("</platform>")
    return lines


def print_manifest(settings: RunSettings, platforms: List[str], out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    for line in manifest_lines(settings, platforms):
        print(line, file=out)
