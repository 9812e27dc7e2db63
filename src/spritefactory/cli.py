"""CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

if TYPE_CHECKING:
    from spritefactory.editor.session import EditSession

app = typer.Typer(
    name="spritefactory",
    help="Tileset keyframe animation authoring.",
    no_args_is_help=False,
)


def _fail(message: object) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _open(document: Path) -> EditSession:
    from spritefactory.config import load_config
    from spritefactory.errors import DocumentLoadError
    from spritefactory.pipeline.codec import open_document

    config = load_config()
    try:
        session = open_document(
            document, ticks_per_frame=config.editor.preview_ticks_per_frame,
        )
    except DocumentLoadError as e:
        raise _fail(e) from None
    if session.image_path is not None and not session.has_image:
        typer.echo(f"Warning: image not available: {session.image_path}", err=True)
    return session


@app.command()
def new(
    image: Annotated[Path, typer.Argument(help="Tileset image")],
    document: Annotated[Path, typer.Argument(help="Document to create")],
    tile_width: Annotated[
        int | None, typer.Option("--tile-width", "-W", help="Tile width in pixels"),
    ] = None,
    tile_height: Annotated[
        int | None, typer.Option("--tile-height", "-H", help="Tile height in pixels"),
    ] = None,
) -> None:
    """Create an empty sprite document for a tileset image."""
    from spritefactory.config import load_config
    from spritefactory.editor.session import EditSession
    from spritefactory.errors import ImageLoadError, PathResolutionError
    from spritefactory.models.grid import InvalidGridError
    from spritefactory.pipeline.codec import store_document
    from spritefactory.pipeline.imaging import read_image_size

    config = load_config()
    try:
        session = EditSession(
            tile_width=config.editor.tile_width if tile_width is None else tile_width,
            tile_height=config.editor.tile_height if tile_height is None else tile_height,
        )
        session.set_image(image, read_image_size(image))
        store_document(session, document)
    except (ImageLoadError, InvalidGridError, PathResolutionError) as e:
        raise _fail(e) from None
    typer.echo(f"Created {document} for {session.texture_name}")


@app.command()
def info(
    document: Annotated[Path, typer.Argument(help="Sprite document")],
) -> None:
    """Show the tileset, grid and animations of a document."""
    session = _open(document)
    grid = session.tile_grid

    typer.echo(f"Texture: {session.texture_name}")
    typer.echo(f"Tile size: {session.tile_width}x{session.tile_height}")
    if grid is not None:
        typer.echo(
            f"Image: {grid.image_width}x{grid.image_height} "
            f"({grid.columns} columns x {grid.rows} rows, {grid.tile_count} tiles)"
        )
    typer.echo(f"Animations: {len(session.animations)}")
    for cycle in session.animations:
        frames = ", ".join(str(f) for f in cycle.frames) or "-"
        typer.echo(f"  {cycle.name}: {frames}")


@app.command()
def tile(
    document: Annotated[Path, typer.Argument(help="Sprite document")],
    x: Annotated[float, typer.Argument(help="Image-space X")],
    y: Annotated[float, typer.Argument(help="Image-space Y")],
) -> None:
    """Report which tile lies under an image position."""
    from spritefactory.models.grid import InvalidGridError

    session = _open(document)
    grid = session.tile_grid
    if grid is None:
        raise _fail("no image loaded; tile positions are unknown")

    if not grid.is_configured:
        raise _fail(
            f"tile size {grid.tile_width}x{grid.tile_height} does not fit "
            f"the {grid.image_width}x{grid.image_height} image"
        )
    index = grid.tile_at(x, y)
    if index is None:
        typer.echo(f"({x:g}, {y:g}): outside the tile grid")
        return
    try:
        rect = grid.rect_of(index)
    except InvalidGridError as e:
        raise _fail(e) from None
    typer.echo(f"({x:g}, {y:g}): tile {index} at {rect.x},{rect.y} {rect.width}x{rect.height}")


@app.command()
def validate(
    document: Annotated[Path, typer.Argument(help="Sprite document")],
) -> None:
    """Check a document against the sprite document schema."""
    from spritefactory.errors import DocumentLoadError
    from spritefactory.pipeline.codec import read_document

    try:
        data = read_document(document)
    except DocumentLoadError as e:
        raise _fail(e) from None
    typer.echo(f"{document}: valid ({len(data.animations)} animations)")


@app.command()
def strip(
    document: Annotated[Path, typer.Argument(help="Sprite document")],
    animation: Annotated[str, typer.Argument(help="Animation name")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output PNG"),
    ] = None,
    vertical: Annotated[
        bool, typer.Option("--vertical", help="Stack frames in a column"),
    ] = False,
    padding: Annotated[
        int, typer.Option("--padding", "-p", help="Pixels between frames"),
    ] = 0,
) -> None:
    """Export one animation's frames as a sprite strip."""
    from spritefactory.pipeline.imaging import export_cycle_strip

    session = _open(document)
    grid = session.tile_grid
    if grid is None or session.image_path is None:
        raise _fail("no image loaded; cannot cut frames")

    cycle = next((c for c in session.animations if c.name == animation), None)
    if cycle is None:
        raise _fail(f"no animation named '{animation}'")

    output = output or document.with_name(f"{document.stem}_{animation}.png")
    try:
        export_cycle_strip(
            session.image_path,
            grid,
            cycle.frames,
            output,
            direction="vertical" if vertical else "horizontal",
            padding=padding,
        )
    except ValueError as e:
        raise _fail(e) from None
    typer.echo(f"Exported {len(cycle.frames)} frames to {output}")


@app.command()
def edit(
    document: Annotated[
        Path | None, typer.Argument(help="Sprite document to open or create"),
    ] = None,
    image: Annotated[
        Path | None, typer.Option("--image", "-i", help="Tileset image for a new document"),
    ] = None,
) -> None:
    """Launch the terminal editor."""
    from spritefactory.app import SpriteFactoryApp
    from spritefactory.errors import DocumentLoadError
    from spritefactory.pipeline.codec import read_document

    if document is not None and document.exists():
        try:
            read_document(document)
        except DocumentLoadError as e:
            raise _fail(e) from None

    SpriteFactoryApp(document_path=document, image_path=image).run()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log progress to stderr")
    ] = False,
) -> None:
    """SpriteFactory - tileset keyframe animation authoring."""
    if version:
        from spritefactory import __version__

        typer.echo(f"spritefactory {__version__}")
        raise typer.Exit()
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
