from pathlib import Path

import typer

from .config import Settings
from .logging import get_logger
from .atlas.parser import AtlasParseError, read_atlas
from .io.pages import MissingPageFileError, PageDecodeError, load_page_image
from .io.writer import DirectoryImageWriter, pillow_format
from .unpack.extraction import MalformedRegionError
from .unpack.splitter import UnpackedImage, split_atlas
from .output.manifest import ManifestItem, build_manifest, write_manifest_json

logger = get_logger(__name__)

app = typer.Typer(help="atlas-unpacker – split texture atlases into sprites and nine-patches", no_args_is_help=True)


def safe_echo(message: str) -> None:
    """Echo message with an ASCII fallback for consoles without Unicode support."""
    try:
        typer.echo(message)
    except UnicodeEncodeError:
        fallback_message = (
            message.replace("✅", "[OK]")
            .replace("🗺️", "[ATLAS]")
            .replace("🖼️", "[IMG]")
            .replace("🧩", "[9P]")
            .replace("📁", "[DIR]")
            .replace("📋", "[LIST]")
        )
        typer.echo(fallback_message.encode("ascii", "replace").decode("ascii"))


@app.command()
def unpack(
    atlas_path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Path to the .atlas file to unpack"),
    out: Path = typer.Option(Path("output"), "--out", "-o", help="Output directory for extracted images"),
    image_format: str = typer.Option("png", "--format", help="Image format of the written files"),
    marker_color: str = typer.Option("black", help="Color of nine-patch marker pixels"),
    write_manifest: bool = typer.Option(False, "--write-manifest/--no-write-manifest", help="Write JSON manifest file"),
) -> None:
    """
    Unpack every region of a texture atlas into its own image file.

    Plain regions are written as <name>[_<index>].png; regions with split data are
    written as nine-patches, <name>[_<index>].9.png, with their marker border.
    """
    try:
        pillow_format(image_format)
    except ValueError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    settings = Settings(
        output_dir=out,
        image_format=image_format.lower().lstrip("."),
        marker_color=marker_color,
        write_manifest=write_manifest,
    )

    try:
        logger.info(f"Reading atlas: {atlas_path}")
        atlas = read_atlas(atlas_path)
    except AtlasParseError as exc:
        logger.error(f"Invalid atlas file: {exc}")
        raise typer.Exit(code=2) from exc

    if not atlas.regions:
        logger.warning("Atlas contains no regions")

    writer = DirectoryImageWriter(settings.output_dir, settings.image_format)

    def write(unpacked: UnpackedImage) -> ManifestItem:
        return ManifestItem.from_unpacked(unpacked, writer(unpacked))

    try:
        items = split_atlas(
            atlas,
            write,
            load_page=lambda page: load_page_image(page, mode=settings.page_mode),
            settings=settings,
        )
    except MissingPageFileError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc
    except PageDecodeError as exc:
        logger.error(f"{exc}: {exc.__cause__}")
        raise typer.Exit(code=1) from exc
    except MalformedRegionError as exc:
        logger.error(f"Malformed region: {exc}")
        raise typer.Exit(code=1) from exc

    if settings.write_manifest:
        manifest = build_manifest(atlas_path, items)
        write_manifest_json(manifest, settings.output_dir)

    written = sum(1 for item in items if item.file_path is not None)
    nine_patches = sum(1 for item in items if item.nine_patch and item.file_path is not None)

    safe_echo("\n✅ Unpacking complete!")
    safe_echo(f"🗺️  Atlas: {atlas_path} ({len(atlas.pages)} pages)")
    safe_echo(f"🖼️  Images written: {written}")
    safe_echo(f"🧩 Nine-patches: {nine_patches}")
    if written < len(items):
        safe_echo(f"   Skipped (zero area): {len(items) - written}")
    safe_echo(f"📁 Output directory: {settings.output_dir}")
    if settings.write_manifest:
        safe_echo("📋 Manifest: manifest.json")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
