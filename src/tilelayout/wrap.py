"""Wrapping of tile coordinates into the world tile."""

from .tileset import Tile


def tile_wrap(tile) -> Tile:
    """Fold tile coordinates back into the range of the world tile.

    Given ``(x, y, z)`` where ``x`` and ``y`` may lie outside
    ``[0, 2**z)``, returns ``(x', y', z)`` with ``x' = x - floor(x / j) * j``
    and ``y' = y - floor(y / j) * j`` for ``j = 2**z``. Typically used on
    the output of a layout with x-clamping disabled to repeat the world
    horizontally.

    >>> tile_wrap((-1, 0, 1))
    Tile(x=1, y=0, z=1)
    >>> tile_wrap((-1, 0, 2))
    Tile(x=3, y=0, z=2)

    Parameters
    ----------
    tile : sequence of int
        Tile coordinates ``(x, y, z)``.

    Returns
    -------
    Tile
        The wrapped tile.

    Raises
    ------
    ValueError
        If ``z`` is negative.
    """
    x, y, z = tile
    if z < 0:
        raise ValueError(f"Zoom level must be non-negative, got {z}")
    j = 1 << int(z)
    # Python's % is floored, so negative indices wrap to the positive residue
    return Tile(x % j, y % j, z)


wrap_coordinate = tile_wrap
