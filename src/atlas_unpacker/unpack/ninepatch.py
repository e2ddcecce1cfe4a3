"""
Nine-patch encoding.

Writes split and pad metadata back into a one pixel border using the Android
``.9.png`` convention: black pixels on the top row and left column mark the
stretchable area, black pixels on the bottom row and right column mark the
content padding.
"""

from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image, ImageColor

from .extraction import extract_region
from ..atlas.model import NinePatchRegion, Quad

NINEPATCH_PADDING = 1


def encode_nine_patch(
    page_image: Image.Image,
    region: NinePatchRegion,
    marker_color: str = "black",
) -> Image.Image:
    """
    Extract a nine-patch region and draw its marker border.

    Args:
        page_image: Decoded page the region is packed into
        region: Region carrying splits and optional pads
        marker_color: Any Pillow color name or hex string; drawn fully opaque

    Returns:
        Image one pixel larger on each side with the marker lines drawn
    """
    image = extract_region(page_image, region, NINEPATCH_PADDING)
    color = ImageColor.getcolor(marker_color, image.mode)

    _draw_markers(image, region.splits, region, color, row=0, column=0)
    if region.pads is not None:
        _draw_markers(
            image, region.pads, region, color,
            row=image.height - 1, column=image.width - 1,
        )

    return image


def marker_span(start_inset: int, end_inset: int, length: int) -> Optional[Tuple[int, int]]:
    """
    Inclusive pixel span of a marker line along one axis of the padded image.

    Returns None when the span is empty, meaning no stretch (or padding) on that axis.
    """
    start = start_inset + NINEPATCH_PADDING
    end = length - end_inset + NINEPATCH_PADDING - 1
    if end < start:
        return None
    return (start, end)


def _draw_markers(
    image: Image.Image,
    quad: Quad,
    region: NinePatchRegion,
    color,
    row: int,
    column: int,
) -> None:
    left, right, top, bottom = quad

    horizontal = marker_span(left, right, region.width)
    if horizontal is not None:
        image.paste(color, (horizontal[0], row, horizontal[1] + 1, row + 1))

    vertical = marker_span(top, bottom, region.height)
    if vertical is not None:
        image.paste(color, (column, vertical[0], column + 1, vertical[1] + 1))
