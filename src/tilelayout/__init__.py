"""Visible quad-tree tiles for a web map viewport.

Given a viewport extent, a world scale and a world translate, a
:class:`TileLayout` answers which integer tile coordinates ``(x, y, z)``
are visible and where they should be placed in viewport pixels.
:func:`tile_wrap` folds coordinates outside the world tile back into it.
"""

from . import config
from .layout import InvalidConfiguration, TileLayout, tile
from .tileset import Tile, TileSet
from .wrap import tile_wrap, wrap_coordinate

__all__ = [
    "InvalidConfiguration",
    "Tile",
    "TileLayout",
    "TileSet",
    "config",
    "tile",
    "tile_wrap",
    "wrap_coordinate",
]
