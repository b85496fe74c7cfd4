from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from resgen.display import Display
from resgen.platforms import ICON_SOURCE_SIZE, SPLASH_SOURCE_SIZE


def make_png(path: Path, width: int, height: int) -> Path:
    # horizontal/vertical gradient so resizes and crops are not trivially uniform
    im = Image.new("RGBA", (width, height))
    im.putdata([((x * 255) // max(width - 1, 1), (y * 255) // max(height - 1, 1), 128, 255)
                for y in range(height) for x in range(width)])
    im.save(path, format="PNG")
    return path


def make_solid_png(path: Path, width: int, height: int, color=(30, 120, 200, 255)) -> Path:
    Image.new("RGBA", (width, height), color).save(path, format="PNG")
    return path


@pytest.fixture(scope="session")
def sources(tmp_path_factory):
    d = tmp_path_factory.mktemp("sources")
    icon = make_png(d / "icon.png", ICON_SOURCE_SIZE, ICON_SOURCE_SIZE)
    # a full-size gradient would be slow to build pixel by pixel
    splash = d / "splash.png"
    im = Image.new("RGBA", (SPLASH_SOURCE_SIZE, SPLASH_SOURCE_SIZE), (255, 255, 255, 255))
    im.paste(Image.new("RGBA", (1000, 1000), (200, 0, 0, 255)), (866, 866))
    im.save(splash, format="PNG")
    return {"icon": icon, "splash": splash, "dir": d}


@pytest.fixture
def display():
    return Display(out=io.StringIO(), err=io.StringIO())
