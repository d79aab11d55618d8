"""Raster output: RGBA pixel buffers composited from scanline coverage."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from hashicon._constants import MIN_CIRCLE_SEGMENTS, SUPERSAMPLING
from hashicon.errors import InvalidInputError
from hashicon.model import Colour, Point, Rgba, as_rgba
from hashicon.rendering.base import Renderer
from hashicon.rendering.scanline import coverage_mask

logger = logging.getLogger(__name__)


def _circle_polygon(cx: float, cy: float, radius: float) -> np.ndarray:
    """Approximate a circle by a regular polygon.

    The segment count grows with the circumference so that the
    deviation from the true circle stays well below a pixel.
    """
    n = max(MIN_CIRCLE_SEGMENTS, int(math.ceil(2 * math.pi * radius / 2)))
    theta = np.linspace(0, 2 * np.pi, n, endpoint=False)
    return np.column_stack([
        cx + radius * np.cos(theta),
        cy + radius * np.sin(theta),
    ])


class RasterRenderer(Renderer):
    """Renders icons into an anti-aliased RGBA pixel buffer.

    All primitives drawn within one :meth:`render_shape` scope are
    filled together with the even-odd rule, so inverted inner
    primitives become holes.  Each finished shape is composited over
    the canvas with straight-alpha "over" blending.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        supersampling: Sub-scanlines per pixel row.

    Raises:
        InvalidInputError: If *width* or *height* is not positive.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        supersampling: int = SUPERSAMPLING,
    ) -> None:
        super().__init__()
        if width <= 0 or height <= 0:
            raise InvalidInputError(
                f"canvas size must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.supersampling = supersampling
        # Straight (non-premultiplied) RGBA in [0, 1].
        self._canvas = np.zeros((height, width, 4))
        self._fill: np.ndarray | None = None
        self._polygons: list[np.ndarray] = []

    def set_background(self, colour: Colour | Rgba) -> None:
        self._canvas[...] = np.asarray(as_rgba(colour), dtype=float) / 255.0

    def begin_shape(self, colour: Rgba) -> None:
        self._fill = np.asarray(colour, dtype=float) / 255.0
        self._polygons = []

    def end_shape(self) -> None:
        if self._fill is None:
            raise RuntimeError("end_shape() called without begin_shape()")
        coverage = coverage_mask(
            self._polygons, self.width, self.height, self.supersampling,
        )
        logger.debug(
            "rasterised %d polygons, covered area %.2f px",
            len(self._polygons), float(coverage.sum()),
        )
        self._composite(coverage, self._fill)
        self._fill = None
        self._polygons = []

    def abort_shape(self) -> None:
        self._fill = None
        self._polygons = []

    def add_polygon(self, points: Sequence[Point]) -> None:
        self._require_shape()
        if points:
            self._polygons.append(np.array([(p.x, p.y) for p in points], dtype=float))

    def add_circle(
        self, point: Point, diameter: float, counter_clockwise: bool,
    ) -> None:
        # Winding does not matter under the even-odd rule.
        self._require_shape()
        if diameter <= 0:
            return
        radius = diameter / 2
        self._polygons.append(
            _circle_polygon(point.x + radius, point.y + radius, radius)
        )

    def _require_shape(self) -> None:
        if self._fill is None:
            raise RuntimeError("primitives must be drawn inside render_shape()")

    def _composite(self, coverage: np.ndarray, fill: np.ndarray) -> None:
        """Blend *fill* over the canvas, weighted by *coverage*."""
        src_a = coverage * fill[3]
        dst = self._canvas
        dst_a = dst[..., 3] * (1.0 - src_a)
        out_a = src_a + dst_a
        rgb = fill[:3] * src_a[..., None] + dst[..., :3] * dst_a[..., None]
        np.divide(rgb, out_a[..., None], out=dst[..., :3], where=out_a[..., None] > 0)
        dst[..., 3] = out_a

    def to_float_array(self) -> np.ndarray:
        """The canvas as floats in ``[0, 1]``, shape ``(height, width, 4)``."""
        return self._canvas.copy()

    def to_array(self) -> np.ndarray:
        """The canvas as ``uint8`` RGBA, shape ``(height, width, 4)``."""
        return np.clip(np.rint(self._canvas * 255.0), 0, 255).astype(np.uint8)
