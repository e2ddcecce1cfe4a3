"""Reading page images and writing unpacked images."""

from .pages import MissingPageFileError, PageDecodeError, PageImageError, load_page_image
from .writer import DirectoryImageWriter, pillow_format

__all__ = [
    "PageImageError",
    "MissingPageFileError",
    "PageDecodeError",
    "load_page_image",
    "DirectoryImageWriter",
    "pillow_format",
]
