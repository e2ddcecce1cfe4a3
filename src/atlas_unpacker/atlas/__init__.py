"""Atlas data model and ``.atlas`` file reader."""

from .model import AtlasPage, NinePatchRegion, PlainRegion, Region, TextureAtlas
from .parser import AtlasParseError, parse_atlas, read_atlas

__all__ = [
    "AtlasPage",
    "Region",
    "PlainRegion",
    "NinePatchRegion",
    "TextureAtlas",
    "AtlasParseError",
    "parse_atlas",
    "read_atlas",
]
