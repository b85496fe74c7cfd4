from __future__ import annotations

from pathlib import Path
from typing import List

from PIL import Image

from .checks import RunContext, SourceImages
from .display import Display
from .errors import GenerationFailed
from .platforms import AssetDefinition, AssetType, PlatformAssetGroup, lookup
from .settings import RunSettings


def selected_groups(settings: RunSettings, platforms: List[str]) -> List[PlatformAssetGroup]:
    """Groups of the selected platforms whose asset type is enabled, in catalog order."""
    groups: List[PlatformAssetGroup] = []
    for platform in platforms:
        groups.extend(lookup(platform))
    return [g for g in groups if settings.enabled(g.type)]


def transform_icon(source: Image.Image, definition: AssetDefinition) -> Image.Image:
    return source.copy().resize((definition.size, definition.size))


def transform_splash(source: Image.Image, definition: AssetDefinition) -> Image.Image:
    width, height = definition.dimensions
    # half-pixel offsets round up
    x = (source.width - width + 1) // 2
    y = (source.height - height + 1) // 2
    return source.copy().crop((x, y, x + width, y + height))


def generate_group(source: Image.Image, group: PlatformAssetGroup, output_dir: Path, display: Display) -> None:
    out_dir = Path(output_dir) / group.path
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        display.error(f"Could not create {out_dir}")
        raise GenerationFailed(group.platform, None, e) from e

    transform = transform_icon if group.type is AssetType.ICON else transform_splash
    section = f"Generating {group.type.value} files for {group.platform}"
    total = len(group.definitions)

    for index, definition in enumerate(group.definitions, start=1):
        display.progress(section, index, total, definition.name)
        out_path = out_dir / definition.name
        try:
            transform(source, definition).save(out_path, format="PNG", optimize=True)
        except (OSError, ValueError) as e:
            display.error(f"Could not write {out_path}")
            raise GenerationFailed(group.platform, definition.name, e) from e

    display.progress_done()
    display.success(f"Generated {group.type.value} files for {group.platform}")


def generate(ctx: RunContext, display: Display) -> None:
    display.header("Generating files")
    images: SourceImages = ctx.images
    for group in selected_groups(ctx.settings, ctx.platforms):
        source = images.get(group.type)
        if source is None:
            raise GenerationFailed(
                group.platform, None, ValueError(f"no {group.type.value} source image loaded")
            )
        generate_group(source, group, ctx.settings.output_dir, display)
