from dataclasses import dataclass
from pathlib import Path


@dataclass
class Settings:
    output_dir: Path = Path("output")
    image_format: str = "png"
    marker_color: str = "black"
    # Pillow mode every page image is converted to after decoding
    page_mode: str = "RGBA"
    write_manifest: bool = False
