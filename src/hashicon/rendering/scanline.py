"""Anti-aliased polygon coverage by supersampled scanlines.

Every pixel row is sampled by several horizontal sub-scanlines.  On
each sub-scanline the crossings with the polygon edges are sorted and
paired with the even-odd rule; the resulting spans contribute their
exact horizontal overlap to each pixel they touch.  Averaging the
sub-scanlines gives a coverage value in ``[0, 1]`` per pixel.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from hashicon._constants import SUPERSAMPLING

# Edges shorter than this are treated as zero-length.
_EPSILON = 1e-12


@dataclass(frozen=True)
class Edge:
    """A directed polygon edge from ``(x0, y0)`` to ``(x1, y1)``."""

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def is_horizontal(self) -> bool:
        return self.y0 == self.y1

    def intersection(self, y: float) -> float | None:
        """Return the x where this edge crosses the line at *y*.

        The lower end of the edge is included and the upper end
        excluded, so a scanline through a shared vertex is counted
        exactly once.  Horizontal edges never intersect.
        """
        top, bottom = min(self.y0, self.y1), max(self.y0, self.y1)
        if not top <= y < bottom:
            return None
        t = (y - self.y0) / (self.y1 - self.y0)
        return self.x0 + t * (self.x1 - self.x0)


@dataclass(frozen=True)
class Intersection:
    """A crossing of a sub-scanline with *edge* at *x*."""

    edge: Edge
    x: float


def build_edges(polygons: Iterable[np.ndarray | Sequence[tuple[float, float]]]) -> list[Edge]:
    """Flatten closed polygons into a list of edges.

    Each polygon is closed implicitly from its last vertex back to
    the first.  Zero-length edges are dropped, and polygons left with
    fewer than three edges enclose no area and are skipped entirely.
    """
    edges: list[Edge] = []
    for polygon in polygons:
        pts = np.asarray(polygon, dtype=float).reshape(-1, 2)
        if len(pts) < 3:
            continue
        nxt = np.roll(pts, -1, axis=0)
        lengths = np.hypot(nxt[:, 0] - pts[:, 0], nxt[:, 1] - pts[:, 1])
        keep = lengths > _EPSILON
        if np.count_nonzero(keep) < 3:
            continue
        for (x0, y0), (x1, y1) in zip(pts[keep], nxt[keep]):
            edges.append(Edge(float(x0), float(y0), float(x1), float(y1)))
    return edges


def scanline_intersections(edges: Sequence[Edge], y: float) -> list[Intersection]:
    """Return the crossings of *edges* with the line at *y*, sorted by x.

    The sort is stable, so equal x values stay in edge order.
    """
    crossings = []
    for edge in edges:
        x = edge.intersection(y)
        if x is not None:
            crossings.append(Intersection(edge, x))
    crossings.sort(key=lambda c: c.x)
    return crossings


def _accumulate_span(row: np.ndarray, x_start: float, x_end: float) -> None:
    """Add the coverage of the span ``[x_start, x_end)`` to *row*."""
    x_start = max(x_start, 0.0)
    x_end = min(x_end, float(len(row)))
    if x_end <= x_start:
        return
    first = int(math.floor(x_start))
    last = min(int(math.ceil(x_end)) - 1, len(row) - 1)
    if first == last:
        row[first] += x_end - x_start
        return
    row[first] += first + 1 - x_start
    row[first + 1:last] += 1.0
    row[last] += x_end - last


def coverage_mask(
    polygons: Iterable[np.ndarray | Sequence[tuple[float, float]]],
    width: int,
    height: int,
    supersampling: int = SUPERSAMPLING,
) -> np.ndarray:
    """Compute per-pixel coverage of the even-odd union of *polygons*.

    Args:
        polygons: Closed polygons as ``(n, 2)`` arrays or sequences of
            ``(x, y)`` pairs, in pixel coordinates.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        supersampling: Sub-scanlines per pixel row.

    Returns:
        A float array of shape ``(height, width)`` with values in
        ``[0, 1]``.
    """
    if supersampling < 1:
        raise ValueError(f"supersampling must be positive, got {supersampling}")
    coverage = np.zeros((height, width))
    edges = build_edges(polygons)
    if not edges or width == 0 or height == 0:
        return coverage

    ys = [y for e in edges for y in (e.y0, e.y1)]
    first_row = max(int(math.floor(min(ys))), 0)
    last_row = min(int(math.ceil(max(ys))), height)
    offsets = (np.arange(supersampling) + 0.5) / supersampling

    row_acc = np.zeros(width)
    for row in range(first_row, last_row):
        row_acc[:] = 0.0
        for offset in offsets:
            crossings = scanline_intersections(edges, row + offset)
            for enter, leave in zip(crossings[0::2], crossings[1::2]):
                _accumulate_span(row_acc, enter.x, leave.x)
        coverage[row] = row_acc / supersampling

    np.clip(coverage, 0.0, 1.0, out=coverage)
    return coverage
