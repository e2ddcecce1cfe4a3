"""
Atlas splitting: drives extraction and nine-patch encoding over every region.

The splitter holds no state and reads no files. Pages come from a loader callable
and results go to a sink callable, so callers decide where page images live and
where output ends up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, TypeVar

from PIL import Image

from .extraction import MalformedRegionError, extract_region, validate_region
from .ninepatch import encode_nine_patch
from ..atlas.model import AtlasPage, NinePatchRegion, Region, TextureAtlas
from ..config import Settings
from ..logging import get_logger

logger = get_logger(__name__)

PageLoader = Callable[[AtlasPage], Image.Image]
T = TypeVar("T")


@dataclass(frozen=True)
class UnpackedImage:
    region: Region
    image: Image.Image
    file_name: str              # Path relative to the output directory

    @property
    def is_nine_patch(self) -> bool:
        return isinstance(self.region, NinePatchRegion)


def output_file_name(region: Region, image_format: str = "png") -> str:
    """
    Name of the file a region is written to.

    ``name`` gets an ``_<index>`` suffix unless the index is -1; nine-patches use
    the double extension ``.9.<format>``. Slashes in the name become directories.
    """
    stem = region.name if region.index == -1 else f"{region.name}_{region.index}"
    if isinstance(region, NinePatchRegion):
        return f"{stem}.9.{image_format}"
    return f"{stem}.{image_format}"


def unpack_region(page_image: Image.Image, region: Region, settings: Optional[Settings] = None) -> Image.Image:
    """Produce the standalone image for one region of an already decoded page."""
    settings = settings or Settings()
    if isinstance(region, NinePatchRegion):
        return encode_nine_patch(
            page_image,
            region,
            marker_color=settings.marker_color,
        )
    return extract_region(page_image, region)


def iter_unpacked_images(
    atlas: TextureAtlas,
    load_page: PageLoader,
    settings: Optional[Settings] = None,
) -> Iterator[UnpackedImage]:
    """
    Yield every region's image in page-then-region order.

    Each page is decoded once. Loader errors and malformed regions propagate and
    end the iteration.
    """
    settings = settings or Settings()
    _check_page_references(atlas)

    for page_number, page in enumerate(atlas.pages):
        page_image = load_page(page)
        logger.info(f"Page {page_number}: {page.texture_file.name} ({page_image.width}x{page_image.height})")

        count = 0
        for region in atlas.regions_for(page):
            validate_region(page_image, region)
            image = unpack_region(page_image, region, settings)
            count += 1
            yield UnpackedImage(
                region=region,
                image=image,
                file_name=output_file_name(region, settings.image_format),
            )

        logger.debug(f"Page {page_number}: unpacked {count} regions")


def split_atlas(
    atlas: TextureAtlas,
    sink: Callable[[UnpackedImage], T],
    load_page: PageLoader,
    settings: Optional[Settings] = None,
) -> List[T]:
    """
    Unpack every region of ``atlas`` and hand each result to ``sink``.

    Args:
        atlas: Parsed atlas description
        sink: Called once per region, in order; its return values are collected
        load_page: Returns the decoded image of a page
        settings: Output options (defaults to ``Settings()``)

    Returns:
        The sink's return values in page-then-region order
    """
    results = [sink(unpacked) for unpacked in iter_unpacked_images(atlas, load_page, settings)]
    logger.info(f"Unpacked {len(results)} regions ({atlas.nine_patch_count} nine-patches)")
    return results


def _check_page_references(atlas: TextureAtlas) -> None:
    for region in atlas.regions:
        if not any(region.page is page for page in atlas.pages):
            raise MalformedRegionError(f"Region '{region.name}' references a page outside this atlas")
