"""
Region extraction from decoded atlas pages.

Cuts a region out of its page, undoes the packer's rotation and restores the
transparent whitespace the packer stripped away.
"""

from __future__ import annotations

from typing import Optional, Sequence

from PIL import Image

from ..atlas.model import NinePatchRegion, Region
from ..logging import get_logger

logger = get_logger(__name__)


class MalformedRegionError(Exception):
    """Raised when a region cannot be located or described consistently."""


def validate_region(page_image: Image.Image, region: Region) -> None:
    """
    Check a region against the page it is packed into.

    Raises:
        MalformedRegionError: if the stored rectangle is outside the page, a size is
            negative, the packed size exceeds the original size, or splits/pads are
            not four non-negative values
    """
    if min(region.width, region.height, region.original_width, region.original_height) < 0:
        raise MalformedRegionError(f"Region '{region.name}' has a negative size")

    if region.width > region.original_width or region.height > region.original_height:
        raise MalformedRegionError(
            f"Region '{region.name}': packed size {region.width}x{region.height} exceeds "
            f"original size {region.original_width}x{region.original_height}"
        )

    stored_width, stored_height = region.stored_size
    right = region.left + stored_width
    bottom = region.top + stored_height
    if region.left < 0 or region.top < 0 or right > page_image.width or bottom > page_image.height:
        raise MalformedRegionError(
            f"Region '{region.name}' at ({region.left}, {region.top}, {right}, {bottom}) "
            f"lies outside its {page_image.width}x{page_image.height} page"
        )

    if isinstance(region, NinePatchRegion):
        _check_quad(region, "splits", region.splits)
        _check_quad(region, "pads", region.pads)


def _check_quad(region: Region, label: str, values: Optional[Sequence[int]]) -> None:
    if values is None:
        return
    if len(values) != 4 or any(value < 0 for value in values):
        raise MalformedRegionError(
            f"Region '{region.name}': {label} must be four non-negative values, got {tuple(values)}"
        )


def extract_region(page_image: Image.Image, region: Region, padding: int = 0) -> Image.Image:
    """
    Extract a region's own image from its page.

    Args:
        page_image: Decoded page the region is packed into
        region: Region to extract
        padding: Width of a transparent border to add on every side

    Returns:
        New image of ``original_width x original_height`` plus ``2 * padding``
        in each dimension. Zero-area regions give an empty (or border-only) image.
    """
    stored_width, stored_height = region.stored_size
    image = page_image.crop((
        region.left,
        region.top,
        region.left + stored_width,
        region.top + stored_height,
    ))

    if region.rotate:
        # Stored a quarter turn counter-clockwise; turn it back clockwise.
        image = image.transpose(Image.Transpose.ROTATE_270)

    if region.is_stripped:
        # offset_y counts from the bottom edge of the original canvas
        position = (region.offset_x, region.original_height - region.height - region.offset_y)
        image = _place_on_canvas(image, (region.original_width, region.original_height), position)
        logger.debug(
            f"Restored whitespace of '{region.name}': {region.width}x{region.height} "
            f"-> {region.original_width}x{region.original_height} at {position}"
        )

    if padding > 0:
        size = (image.width + padding * 2, image.height + padding * 2)
        image = _place_on_canvas(image, size, (padding, padding))

    return image


def _place_on_canvas(image: Image.Image, size: tuple[int, int], position: tuple[int, int]) -> Image.Image:
    """Paste ``image`` onto a new transparent canvas of the same mode."""
    canvas = Image.new(image.mode, size)
    if image.width > 0 and image.height > 0:
        canvas.paste(image, position)
    return canvas
