"""Tile layout for quad-tree web map tiles.

A :class:`TileLayout` holds the viewport geometry and the accessors that
turn a caller-supplied context (typically a zoom transform with ``k``,
``x`` and ``y`` fields) into a world scale and translate. Calling the
layout returns the :class:`~tilelayout.tileset.TileSet` of tiles that
intersect the viewport at the zoom level nearest to the displayed
resolution.

The computation never raises on degenerate numbers: a non-positive or
non-finite scale, or a zero-area extent, yields an empty or minimal set.
"""
import logging
from collections.abc import Mapping

import numpy as np

from . import config
from .tileset import Tile, TileSet
from .utils import to_number, to_pair

logger = logging.getLogger(__name__)

DEFAULT_EXTENT = ((0.0, 0.0), (960.0, 500.0))
DEFAULT_TILE_SIZE = 256.0
MAX_CONTEXT_ARGS = 4

_MISSING = object()


class InvalidConfiguration(ValueError):
    """Raised when a layout option is malformed."""


def _field(obj, name):
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


def default_scale(transform):
    """Return the ``k`` field of a zoom transform."""
    return _field(transform, "k")


def default_translate(transform):
    """Return the ``(x, y)`` fields of a zoom transform."""
    return (_field(transform, "x"), _field(transform, "y"))


def _constant(value):
    def constant(*args):
        return value
    return constant


def _index_range(lo_px, hi_px, origin, k, zoom, clamp):
    """Half-open range of tile indices covering ``[lo_px, hi_px]`` on one axis.

    Returns None when the range is empty or unbounded.
    """
    a = (lo_px - origin) / k
    b = (hi_px - origin) / k
    start = np.floor(np.minimum(a, b))
    stop = np.ceil(np.maximum(a, b))
    if clamp:
        start = np.maximum(start, 0.0)
        stop = np.minimum(stop, np.exp2(zoom))
    if not (np.isfinite(start) and np.isfinite(stop)) or stop <= start:
        return None
    return int(start), int(stop)


class TileLayout:
    """Compute the quad-tree tiles visible in a rectangular viewport.

    Every option is read by calling its method without arguments and set
    by calling it with one; setters return the layout so calls can be
    chained::

        layout = TileLayout().size((512, 512)).clamp_x(False)
        tiles = layout({"k": 1024, "x": 256, "y": 256})

    Defaults
    --------
    extent : ((0, 0), (960, 500))
    scale : ``transform.k``
    translate : ``(transform.x, transform.y)``
    zoom_delta : 0
    tile_size : 256
    clamp_x, clamp_y : True
    """

    def __init__(self):
        self._extent = DEFAULT_EXTENT
        self._scale = default_scale
        self._translate = default_translate
        self._zoom_delta = 0.0
        self._tile_size = DEFAULT_TILE_SIZE
        self._clamp_x = True
        self._clamp_y = True

    @classmethod
    def from_settings(cls, settings=None):
        """Create a layout from configuration settings.

        Parameters
        ----------
        settings : mapping, optional
            Object with a ``get`` method. If None, uses the Dynaconf
            settings of :mod:`tilelayout.config`.

        Returns
        -------
        TileLayout
            Layout with every option found in the settings applied.
        """
        settings = config.settings if settings is None else settings
        layout = cls()
        if settings.get("extent") is not None:
            layout.extent(settings.get("extent"))
        elif settings.get("size") is not None:
            layout.size(settings.get("size"))
        layout.tile_size(settings.get("tile_size", DEFAULT_TILE_SIZE))
        layout.zoom_delta(settings.get("zoom_delta", 0))
        if settings.get("clamp") is not None:
            layout.clamp(settings.get("clamp"))
        if settings.get("clamp_x") is not None:
            layout.clamp_x(settings.get("clamp_x"))
        if settings.get("clamp_y") is not None:
            layout.clamp_y(settings.get("clamp_y"))
        return layout

    def __call__(self, *args):
        return self.compute(*args)

    def compute(self, *args) -> TileSet:
        """Compute the tiles that intersect the viewport.

        Parameters
        ----------
        *args
            Up to four context values, forwarded verbatim to both the
            scale and the translate accessor.

        Returns
        -------
        TileSet
            Visible tiles, nearest to the viewport center first, with the
            tile scale and translate needed to position them.

        Raises
        ------
        TypeError
            If more than four context values are given.
        """
        if len(args) > MAX_CONTEXT_ARGS:
            raise TypeError(
                f"compute() takes at most {MAX_CONTEXT_ARGS} context "
                f"arguments ({len(args)} given)"
            )
        scale = float(self._scale(*args))
        tx, ty = (float(v) for v in self._translate(*args))
        (x0, y0), (x1, y1) = self._extent

        with np.errstate(all="ignore"):
            z = np.log2(np.float64(scale) / self._tile_size)
            level = z + self._zoom_delta
            # round half up; non-finite levels fall back to the world tile
            zoom = int(np.floor(max(level, 0.0) + 0.5)) if np.isfinite(level) else 0
            k = np.exp2(z - zoom) * self._tile_size
            ox = np.float64(tx) - scale / 2
            oy = np.float64(ty) - scale / 2
            translate = (float(ox / k), float(oy / k))

            if x0 == x1 or y0 == y1:
                logger.debug("Zero-area extent, no tiles")
                return TileSet((), float(k), translate, zoom)

            cols = _index_range(x0, x1, ox, k, zoom, self._clamp_x)
            rows = _index_range(y0, y1, oy, k, zoom, self._clamp_y)
            if cols is None or rows is None:
                logger.debug(f"No tiles at zoom {zoom} for scale {scale}")
                return TileSet((), float(k), translate, zoom)

            xs, ys = np.meshgrid(np.arange(*cols), np.arange(*rows))
            xs, ys = xs.ravel(), ys.ravel()
            cx = ((x0 + x1) / 2 - ox) / k
            cy = ((y0 + y1) / 2 - oy) / k
            dist_sq = (xs + 0.5 - cx) ** 2 + (ys + 0.5 - cy) ** 2

        # lexsort uses the last key as primary: distance, then row, then column
        order = np.lexsort((xs, ys, dist_sq))
        tiles = tuple(Tile(int(xs[i]), int(ys[i]), zoom) for i in order)
        logger.debug(f"Zoom {zoom}: {len(tiles)} tiles, tile size {float(k):.2f}px")
        return TileSet(tiles, float(k), translate, zoom)

    def extent(self, extent=_MISSING):
        """Get or set the viewport extent ``((x0, y0), (x1, y1))``."""
        if extent is _MISSING:
            return self._extent
        try:
            corners = tuple(extent)
        except TypeError:
            raise InvalidConfiguration(
                f"extent must be [[x0, y0], [x1, y1]], got {extent!r}") from None
        if len(corners) != 2:
            raise InvalidConfiguration(
                f"extent must have exactly two corners, got {len(corners)}")
        self._extent = tuple(to_pair(c, "extent", InvalidConfiguration) for c in corners)
        return self

    def size(self, size=_MISSING):
        """Get or set the viewport size ``(width, height)``.

        Setting the size sets the extent to ``((0, 0), (width, height))``.
        """
        if size is _MISSING:
            (x0, y0), (x1, y1) = self._extent
            return (x1 - x0, y1 - y0)
        width, height = to_pair(size, "size", InvalidConfiguration)
        return self.extent(((0.0, 0.0), (width, height)))

    def scale(self, scale=_MISSING):
        """Get or set the scale accessor.

        The accessor receives the arguments passed to :meth:`compute` and
        returns the width and height in pixels of the world tile
        ``(0, 0, 0)``. A non-callable value is taken as a constant.
        """
        if scale is _MISSING:
            return self._scale
        if callable(scale):
            self._scale = scale
        else:
            self._scale = _constant(to_number(scale, "scale", InvalidConfiguration))
        return self

    def translate(self, translate=_MISSING):
        """Get or set the translate accessor.

        The accessor returns the pixel coordinates ``(x, y)`` of the center
        of the world tile. A non-callable value is taken as a constant pair.
        """
        if translate is _MISSING:
            return self._translate
        if callable(translate):
            self._translate = translate
        else:
            self._translate = _constant(
                to_pair(translate, "translate", InvalidConfiguration))
        return self

    def zoom_delta(self, zoom_delta=_MISSING):
        """Get or set the offset added to the zoom level before rounding.

        A delta of +1 picks tiles half as big (higher resolution), -1 tiles
        twice as big.
        """
        if zoom_delta is _MISSING:
            return self._zoom_delta
        self._zoom_delta = to_number(zoom_delta, "zoom_delta", InvalidConfiguration)
        return self

    def tile_size(self, tile_size=_MISSING):
        """Get or set the native tile size in pixels."""
        if tile_size is _MISSING:
            return self._tile_size
        self._tile_size = to_number(tile_size, "tile_size", InvalidConfiguration)
        return self

    def clamp(self, clamp=_MISSING):
        """Get or set clamping on both axes.

        Reading returns True only if both axes are clamped.
        """
        if clamp is _MISSING:
            return self._clamp_x and self._clamp_y
        self._clamp_x = self._clamp_y = bool(clamp)
        return self

    def clamp_x(self, clamp=_MISSING):
        if clamp is _MISSING:
            return self._clamp_x
        self._clamp_x = bool(clamp)
        return self

    def clamp_y(self, clamp=_MISSING):
        if clamp is _MISSING:
            return self._clamp_y
        self._clamp_y = bool(clamp)
        return self


def tile():
    """Construct a new tile layout with the default settings."""
    return TileLayout()
