"""
Data model for parsed texture atlases.

An atlas is an ordered list of pages (one image file each) and an ordered list of
regions. Regions reference their page; pages never own regions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Tuple

Quad = Tuple[int, int, int, int]


@dataclass(frozen=True)
class AtlasPage:
    """One packed image file of an atlas."""
    texture_file: Path                  # Page image, resolved against the atlas directory
    width: int = 0                      # Declared size (0 when the header omits it)
    height: int = 0
    format: str = "RGBA8888"
    min_filter: str = "Nearest"
    mag_filter: str = "Nearest"
    repeat: str = "none"
    pma: bool = False


@dataclass(frozen=True, kw_only=True)
class Region:
    """
    A named rectangle packed into exactly one page.

    ``left``/``top`` locate the stored rectangle on the page. ``width``/``height``
    are the logical size of the packed image; when ``rotate`` is set the page holds
    it as ``height x width``. ``offset_x``/``offset_y`` place the packed image inside
    the original ``original_width x original_height`` canvas, with ``offset_y``
    measured from the bottom edge.
    """
    name: str
    page: AtlasPage = field(compare=False, repr=False)
    left: int
    top: int
    width: int
    height: int
    original_width: int
    original_height: int
    offset_x: int = 0
    offset_y: int = 0
    rotate: bool = False
    index: int = -1

    @property
    def is_stripped(self) -> bool:
        """Whether the packer removed transparent whitespace from this region."""
        return self.width != self.original_width or self.height != self.original_height

    @property
    def stored_size(self) -> Tuple[int, int]:
        """Size of the rectangle as it is laid out on the page."""
        if self.rotate:
            return (self.height, self.width)
        return (self.width, self.height)


@dataclass(frozen=True, kw_only=True)
class PlainRegion(Region):
    """A region saved as an ordinary image."""


@dataclass(frozen=True, kw_only=True)
class NinePatchRegion(Region):
    """A stretchable region; ``splits`` and ``pads`` are (left, right, top, bottom)."""
    splits: Quad
    pads: Optional[Quad] = None


@dataclass(frozen=True)
class TextureAtlas:
    """Pages and regions in the order they appear in the atlas file."""
    pages: Tuple[AtlasPage, ...] = ()
    regions: Tuple[Region, ...] = ()

    def regions_for(self, page: AtlasPage) -> Iterator[Region]:
        """Iterate over the regions packed into ``page``."""
        for region in self.regions:
            if region.page is page:
                yield region

    @property
    def nine_patch_count(self) -> int:
        return sum(1 for region in self.regions if isinstance(region, NinePatchRegion))
