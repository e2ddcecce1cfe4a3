"""
Reader for libGDX/arc style ``.atlas`` text files.

Both layouts are accepted: the legacy one (indented ``xy``/``size``/``orig``/``offset``
entries) and the compact one introduced with libGDX 1.9.13 (``bounds``/``offsets``).
A blank line ends a page; the first non-blank line after it names the next page image.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .model import AtlasPage, NinePatchRegion, PlainRegion, Region, TextureAtlas
from ..logging import get_logger

logger = get_logger(__name__)

SUPPORTED_ROTATIONS = (0, 90)


class AtlasParseError(Exception):
    """Raised when an atlas description cannot be parsed."""


@dataclass(frozen=True)
class _Entry:
    key: str
    values: List[str]
    line_no: int


def read_atlas(atlas_path: Path | str) -> TextureAtlas:
    """Read an atlas file; page images are resolved next to it."""
    path = Path(atlas_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AtlasParseError(f"Cannot read atlas file: {path}") from exc

    atlas = parse_atlas(text, path.parent)
    logger.info(f"Parsed {path.name}: {len(atlas.pages)} pages, {len(atlas.regions)} regions")
    return atlas


def parse_atlas(text: str, images_dir: Path) -> TextureAtlas:
    """
    Parse atlas text into pages and regions.

    Args:
        text: Contents of the ``.atlas`` file
        images_dir: Directory page image names are relative to

    Returns:
        TextureAtlas with pages and regions in file order
    """
    lines = text.splitlines()
    pages: List[AtlasPage] = []
    regions: List[Region] = []
    page: Optional[AtlasPage] = None

    i = 0
    while i < len(lines) and not lines[i].strip():
        i += 1

    while i < len(lines):
        line = lines[i]
        if not line.strip():
            page = None
            i += 1
        elif page is None:
            entries, i = _read_entries(lines, i + 1)
            page = _build_page(images_dir / line.strip(), entries)
            pages.append(page)
        else:
            name_line_no = i + 1
            entries, i = _read_entries(lines, i + 1)
            regions.append(_build_region(line.strip(), page, entries, name_line_no))

    return TextureAtlas(pages=tuple(pages), regions=tuple(regions))


def _read_entries(lines: List[str], start: int) -> Tuple[Dict[str, _Entry], int]:
    """Collect ``key: value`` lines from ``start``; return them and the next line index."""
    entries: Dict[str, _Entry] = {}
    i = start
    while i < len(lines):
        line = lines[i].strip()
        colon = line.find(":")
        if not line or colon == -1:
            break
        key = line[:colon].strip()
        values = [value.strip() for value in line[colon + 1:].split(",")]
        entries[key] = _Entry(key=key, values=values, line_no=i + 1)
        i += 1
    return entries, i


def _ints(entry: _Entry, count: int) -> Tuple[int, ...]:
    if len(entry.values) != count:
        raise AtlasParseError(
            f"line {entry.line_no}: '{entry.key}' expects {count} values, got {len(entry.values)}"
        )
    try:
        return tuple(int(value) for value in entry.values)
    except ValueError as exc:
        raise AtlasParseError(
            f"line {entry.line_no}: '{entry.key}' has a non-integer value: {', '.join(entry.values)}"
        ) from exc


def _build_page(texture_file: Path, entries: Dict[str, _Entry]) -> AtlasPage:
    width = height = 0
    if "size" in entries:
        width, height = _ints(entries["size"], 2)

    min_filter = mag_filter = "Nearest"
    if "filter" in entries:
        filters = entries["filter"].values
        min_filter = filters[0]
        mag_filter = filters[1] if len(filters) > 1 else filters[0]

    return AtlasPage(
        texture_file=texture_file,
        width=width,
        height=height,
        format=entries["format"].values[0] if "format" in entries else "RGBA8888",
        min_filter=min_filter,
        mag_filter=mag_filter,
        repeat=entries["repeat"].values[0] if "repeat" in entries else "none",
        pma="pma" in entries and entries["pma"].values[0] == "true",
    )


def _rotation(entry: _Entry) -> bool:
    value = entry.values[0]
    if value == "true":
        degrees = 90
    elif value == "false":
        degrees = 0
    else:
        try:
            degrees = int(value)
        except ValueError as exc:
            raise AtlasParseError(f"line {entry.line_no}: invalid rotation '{value}'") from exc

    if degrees not in SUPPORTED_ROTATIONS:
        raise AtlasParseError(f"line {entry.line_no}: unsupported rotation of {degrees} degrees")
    return degrees == 90


def _build_region(name: str, page: AtlasPage, entries: Dict[str, _Entry], line_no: int) -> Region:
    if "bounds" in entries:
        left, top, width, height = _ints(entries["bounds"], 4)
    elif "xy" in entries and "size" in entries:
        left, top = _ints(entries["xy"], 2)
        width, height = _ints(entries["size"], 2)
    else:
        raise AtlasParseError(f"line {line_no}: region '{name}' has no position and size")

    offset_x = offset_y = 0
    original_width = original_height = 0
    if "offsets" in entries:
        offset_x, offset_y, original_width, original_height = _ints(entries["offsets"], 4)
    else:
        if "offset" in entries:
            offset_x, offset_y = _ints(entries["offset"], 2)
        if "orig" in entries:
            original_width, original_height = _ints(entries["orig"], 2)

    if original_width == 0 and original_height == 0:
        original_width, original_height = width, height

    common = dict(
        name=name,
        page=page,
        left=left,
        top=top,
        width=width,
        height=height,
        original_width=original_width,
        original_height=original_height,
        offset_x=offset_x,
        offset_y=offset_y,
        rotate=_rotation(entries["rotate"]) if "rotate" in entries else False,
        index=_ints(entries["index"], 1)[0] if "index" in entries else -1,
    )

    if "split" not in entries:
        if "pad" in entries:
            logger.debug(f"Region '{name}' has pads but no splits; pads ignored")
        return PlainRegion(**common)

    pads = _ints(entries["pad"], 4) if "pad" in entries else None
    return NinePatchRegion(splits=_ints(entries["split"], 4), pads=pads, **common)
