from __future__ import annotations

from PIL import Image

from ..atlas.model import AtlasPage
from ..logging import get_logger

logger = get_logger(__name__)


class PageImageError(Exception):
    """Raised when an atlas page image cannot be loaded."""


class MissingPageFileError(PageImageError):
    """Raised when the page image referenced by the atlas does not exist."""


class PageDecodeError(PageImageError):
    """Raised when the page image exists but is not a readable raster image."""


def load_page_image(page: AtlasPage, mode: str = "RGBA") -> Image.Image:
    """Decode a page image fully into memory, converted to ``mode``."""
    path = page.texture_file
    if not path.exists():
        raise MissingPageFileError(f"Unable to find atlas image: {path.resolve()}")

    try:
        with Image.open(path) as source:
            source.load()
            image = source.convert(mode) if source.mode != mode else source.copy()
    except Exception as exc:
        raise PageDecodeError(f"Failed to decode atlas image: {path}") from exc

    if page.width and page.height and image.size != (page.width, page.height):
        logger.warning(
            f"{path.name}: declared size {page.width}x{page.height} "
            f"differs from image size {image.width}x{image.height}"
        )

    logger.debug(f"Loaded page {path.name} ({image.width}x{image.height}, {mode})")
    return image
