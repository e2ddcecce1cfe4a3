"""Helpers for building synthetic atlas pages, regions and atlas files."""

from pathlib import Path
from typing import Dict, Optional

from PIL import Image

from atlas_unpacker.atlas.model import AtlasPage, NinePatchRegion, PlainRegion

DEFAULT_PAGE = AtlasPage(texture_file=Path("page.png"), width=32, height=32)


def make_page_image(width: int = 32, height: int = 32) -> Image.Image:
    """
    Create an opaque RGBA page where every pixel encodes its own position.

    Red is x, green is y, so any pixel found in an extracted image can be traced
    back to the page coordinate it came from.
    """
    image = Image.new("RGBA", (width, height))
    image.putdata([
        (x % 256, y % 256, (x * 7 + y * 13) % 256, 255)
        for y in range(height)
        for x in range(width)
    ])
    return image


def make_region(page: AtlasPage = DEFAULT_PAGE, **overrides) -> PlainRegion:
    fields = dict(
        name="sprite",
        page=page,
        left=0,
        top=0,
        width=4,
        height=4,
    )
    fields.update(overrides)
    fields.setdefault("original_width", fields["width"])
    fields.setdefault("original_height", fields["height"])
    return PlainRegion(**fields)


def make_nine_patch(page: AtlasPage = DEFAULT_PAGE, splits=(0, 0, 0, 0), pads=None, **overrides) -> NinePatchRegion:
    fields = dict(
        name="patch",
        page=page,
        left=0,
        top=0,
        width=10,
        height=8,
    )
    fields.update(overrides)
    fields.setdefault("original_width", fields["width"])
    fields.setdefault("original_height", fields["height"])
    return NinePatchRegion(splits=tuple(splits), pads=tuple(pads) if pads is not None else None, **fields)


LEGACY_ATLAS = """
sprites.png
size: 32,32
format: RGBA8888
filter: Nearest,Linear
repeat: none
icon
  rotate: false
  xy: 0, 0
  size: 8, 8
  orig: 8, 8
  offset: 0, 0
  index: -1
button
  rotate: true
  xy: 8, 0
  size: 10, 6
  split: 2, 2, 1, 1
  pad: 1, 1, 1, 1
  orig: 10, 6
  offset: 0, 0
  index: -1
walk
  rotate: false
  xy: 20, 0
  size: 4, 4
  orig: 10, 10
  offset: 3, 2
  index: 2
"""


def write_atlas(
    directory: Path,
    atlas_text: str = LEGACY_ATLAS,
    pages: Optional[Dict[str, Image.Image]] = None,
    atlas_name: str = "sprites.atlas",
) -> Path:
    """Write an atlas file and its page images into ``directory``."""
    if pages is None:
        pages = {"sprites.png": make_page_image(32, 32)}

    for file_name, image in pages.items():
        image.save(directory / file_name)

    atlas_path = directory / atlas_name
    atlas_path.write_text(atlas_text, encoding="utf-8")
    return atlas_path
