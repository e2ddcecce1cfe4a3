"""
JSON manifest describing the files produced from an atlas.

Each item records the region it came from, where it was written and how it was
reconstructed, so downstream tooling can map sprite files back to atlas entries.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..unpack.splitter import UnpackedImage
from ..logging import get_logger

logger = get_logger(__name__)

MANIFEST_VERSION = "1.0.0"


@dataclass(frozen=True)
class ManifestItem:
    """Single written (or skipped) region."""
    name: str                               # Region name as it appears in the atlas
    index: int                              # Region index, -1 when absent
    page: str                               # Page image file name
    file_name: str                          # Path relative to the output directory
    nine_patch: bool                        # Whether markers were drawn
    dimensions: Dict[str, int]              # Size of the written image
    rotated: bool                           # Stored rotated on the page
    whitespace_restored: bool               # Original canvas was rebuilt
    splits: Optional[List[int]] = None
    pads: Optional[List[int]] = None
    file_path: Optional[str] = None         # None when nothing was written

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_unpacked(cls, unpacked: UnpackedImage, written_path: Optional[Path]) -> "ManifestItem":
        region = unpacked.region
        splits = getattr(region, "splits", None)
        pads = getattr(region, "pads", None)
        return cls(
            name=region.name,
            index=region.index,
            page=region.page.texture_file.name,
            file_name=unpacked.file_name,
            nine_patch=unpacked.is_nine_patch,
            dimensions={"width": unpacked.image.width, "height": unpacked.image.height},
            rotated=region.rotate,
            whitespace_restored=region.is_stripped,
            splits=list(splits) if splits is not None else None,
            pads=list(pads) if pads is not None else None,
            file_path=str(written_path) if written_path is not None else None,
        )


@dataclass(frozen=True)
class Manifest:
    """All items produced from one atlas."""
    version: str
    source_atlas: str
    extraction_timestamp: str
    total_items: int
    summary: Dict[str, Any]
    items: List[ManifestItem]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "version": self.version,
            "source_atlas": self.source_atlas,
            "extraction_timestamp": self.extraction_timestamp,
            "total_items": self.total_items,
            "summary": self.summary,
            "items": [item.to_dict() for item in self.items],
        }


def build_manifest(source_atlas_path: Path, items: List[ManifestItem]) -> Manifest:
    manifest = Manifest(
        version=MANIFEST_VERSION,
        source_atlas=str(source_atlas_path),
        extraction_timestamp=datetime.now().isoformat(),
        total_items=len(items),
        summary=_generate_summary(items),
        items=list(items),
    )
    logger.info(f"Built manifest with {len(items)} items")
    return manifest


def write_manifest_json(manifest: Manifest, output_dir: Path) -> Path:
    """
    Write manifest to ``manifest.json`` in the output directory.

    Returns:
        Path to the written manifest file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = output_dir / "manifest.json"

    try:
        with open(manifest_path, 'w', encoding='utf-8') as f:
            json.dump(manifest.to_dict(), f, indent=2, ensure_ascii=False)
    except Exception as exc:
        logger.error(f"Failed to write manifest to {manifest_path}: {exc}")
        raise

    logger.info(f"Wrote manifest to {manifest_path}")
    return manifest_path


def _generate_summary(items: List[ManifestItem]) -> Dict[str, Any]:
    total = len(items)
    if total == 0:
        return {"total": 0}

    pages: Dict[str, int] = {}
    for item in items:
        pages[item.page] = pages.get(item.page, 0) + 1

    return {
        "total_items": total,
        "written": sum(1 for item in items if item.file_path is not None),
        "skipped": sum(1 for item in items if item.file_path is None),
        "nine_patches": sum(1 for item in items if item.nine_patch),
        "rotated": sum(1 for item in items if item.rotated),
        "whitespace_restored": sum(1 for item in items if item.whitespace_restored),
        "pages": pages,
    }
