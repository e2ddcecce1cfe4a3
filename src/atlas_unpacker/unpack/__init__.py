"""Region extraction, nine-patch encoding and atlas splitting."""

from .extraction import MalformedRegionError, extract_region, validate_region
from .ninepatch import NINEPATCH_PADDING, encode_nine_patch, marker_span
from .splitter import UnpackedImage, iter_unpacked_images, output_file_name, split_atlas, unpack_region

__all__ = [
    "MalformedRegionError",
    "extract_region",
    "validate_region",
    "NINEPATCH_PADDING",
    "encode_nine_patch",
    "marker_span",
    "UnpackedImage",
    "iter_unpacked_images",
    "output_file_name",
    "split_atlas",
    "unpack_region",
]
