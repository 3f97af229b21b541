"""Command-line interface for tile layouts.

This module provides CLI commands for listing the slippy tiles visible in
a viewport and for wrapping tile coordinates, using the Typer framework.
Options that are not given on the command line fall back to the
configuration settings.
"""
from typing import Optional, Tuple

import typer

from . import config, utils
from .layout import TileLayout
from .utils import vprint
from .wrap import tile_wrap

app = typer.Typer(
    help="Find the slippy tiles covering a web map viewport."
)


@app.command()
def tiles(
    scale: float = typer.Option(..., help="Width in pixels of the world tile."),
    translate: Tuple[float, float] = typer.Option(
        (0.0, 0.0), help="Pixel position of the world tile center."),
    width: Optional[float] = typer.Option(None, help="Viewport width in pixels."),
    height: Optional[float] = typer.Option(None, help="Viewport height in pixels."),
    tile_size: Optional[float] = typer.Option(None, help="Native tile size in pixels."),
    zoom_delta: Optional[float] = typer.Option(None, help="Offset added to the zoom level."),
    clamp: Optional[bool] = typer.Option(
        None, "--clamp/--no-clamp", help="Restrict tiles to the world tile."),
    wrap: bool = typer.Option(False, "--wrap", help="Wrap tiles into the world tile."),
    env: str = typer.Option("DEFAULT", help="Settings environment to use."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print progress."),
):
    """List the tiles visible in the viewport, nearest to the center first."""
    if env != "DEFAULT":
        config.change_env(env)
    utils.VERBOSE = verbose or bool(config.settings.get("verbose", False))
    vprint(f"Environment: {env}")

    layout = TileLayout.from_settings(config.settings)
    if width is not None or height is not None:
        current_w, current_h = layout.size()
        layout.size((current_w if width is None else width,
                     current_h if height is None else height))
    if tile_size is not None:
        layout.tile_size(tile_size)
    if zoom_delta is not None:
        layout.zoom_delta(zoom_delta)
    if clamp is not None:
        layout.clamp(clamp)

    result = layout.scale(scale).translate(translate).compute()
    vprint(f"Total tiles: {len(result)}")
    if wrap:
        result = result.wrapped()

    tx, ty = result.translate
    print(f"zoom={result.zoom} scale={result.scale:g} translate={tx:g},{ty:g}")
    for x, y, z in result:
        print(f"{z}/{x}/{y}")


@app.command("wrap")
def wrap_tile(
    x: int = typer.Argument(..., help="Tile column."),
    y: int = typer.Argument(..., help="Tile row."),
    z: int = typer.Argument(..., help="Zoom level."),
):
    """Wrap a tile coordinate into the world tile."""
    try:
        wrapped = tile_wrap((x, y, z))
    except ValueError as err:
        raise typer.BadParameter(str(err)) from err
    print(f"{wrapped.z}/{wrapped.x}/{wrapped.y}")


if __name__ == "__main__":
    app()
