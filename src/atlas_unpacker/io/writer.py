from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from PIL import Image

from ..logging import get_logger

if TYPE_CHECKING:
    from ..unpack.splitter import UnpackedImage

logger = get_logger(__name__)


class DirectoryImageWriter:
    """Save unpacked images under an output directory, creating folders as needed."""

    def __init__(self, output_dir: Path, image_format: str = "png") -> None:
        self.output_dir = Path(output_dir)
        self.image_format = image_format
        self._pil_format = pillow_format(image_format)

    def __call__(self, unpacked: UnpackedImage) -> Optional[Path]:
        path = self.output_dir / unpacked.file_name
        image = unpacked.image

        if image.width == 0 or image.height == 0:
            logger.warning(f"Skipping {unpacked.file_name}: region has zero area")
            return None

        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, format=self._pil_format)
        logger.debug(f"Wrote {path} ({image.width}x{image.height})")
        return path


def pillow_format(image_format: str) -> str:
    """Map a file extension such as ``png`` to Pillow's format name."""
    extensions = Image.registered_extensions()
    key = f".{image_format.lower().lstrip('.')}"
    if key not in extensions:
        raise ValueError(f"Unsupported image format: {image_format}")
    return extensions[key]
