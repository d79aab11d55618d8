"""Shape primitives and the fixed shape catalog.

Shapes are described as data: each :class:`ShapeDefinition` builds a
primitive (a :class:`Circle`, a :class:`Polygon`, or a
:class:`Composite` of both) in cell-local coordinates ``[0, cell]``.
Renderers map primitives onto the canvas through their current
:class:`~hashicon.model.geometry.Transform`.

Primitives flagged ``invert`` are wound the other way round so that,
drawn inside a filled shape of the same colour, they cut a hole.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

PointTuple = tuple[float, float]


@dataclass(frozen=True)
class Circle:
    """A circle given by the top-left corner of its bounding box.

    Attributes:
        x: Left edge of the bounding box.
        y: Top edge of the bounding box.
        size: Diameter.
        invert: Draw counter-clockwise (cuts a hole).
    """

    x: float
    y: float
    size: float
    invert: bool = False


@dataclass(frozen=True)
class Polygon:
    """A closed polygon.

    Attributes:
        points: Vertices in drawing order.  The closing edge back to
            the first vertex is implicit.
        invert: Whether the vertices were reversed to cut a hole.
    """

    points: tuple[PointTuple, ...]
    invert: bool = False

    @classmethod
    def of(cls, points: list[PointTuple], invert: bool = False) -> Polygon:
        if invert:
            points = points[::-1]
        return cls(tuple(points), invert)


@dataclass(frozen=True)
class Composite:
    """Several primitives drawn together as one shape."""

    parts: tuple[Circle | Polygon | Composite, ...] = ()


Primitive = Circle | Polygon | Composite


def rectangle(
    x: float, y: float, w: float, h: float, invert: bool = False,
) -> Polygon:
    return Polygon.of([(x, y), (x + w, y), (x + w, y + h), (x, y + h)], invert)


def triangle(
    x: float, y: float, w: float, h: float, r: int, invert: bool = False,
) -> Polygon:
    """Right triangle filling half of the box ``(x, y, w, h)``.

    The box corner at index *r* (top-right, bottom-right,
    bottom-left, top-left) is the one left out.
    """
    points = [(x + w, y), (x + w, y + h), (x, y + h), (x, y)]
    del points[r % 4]
    return Polygon.of(points, invert)


def rhombus(
    x: float, y: float, w: float, h: float, invert: bool = False,
) -> Polygon:
    return Polygon.of([
        (x + w / 2, y),
        (x + w, y + h / 2),
        (x + w / 2, y + h),
        (x, y + h / 2),
    ], invert)


@dataclass(frozen=True)
class ShapeDefinition:
    """A named shape in the catalog.

    Attributes:
        name: Human-readable identifier, unique within a catalog.
        build: Callable ``(cell, index) -> Primitive`` producing the
            shape for a cell of side *cell*.  *index* is the position
            of the occurrence within its category, which lets a
            shape differ between occurrences.
    """

    name: str
    build: Callable[[float, int], Primitive]

    def __call__(self, cell: float, index: int = 0) -> Primitive:
        return self.build(cell, index)


# ---- Center shapes ----


def _cut_corner(cell: float, index: int) -> Primitive:
    k = cell * 0.42
    return Polygon.of([
        (0, 0), (cell, 0), (cell, cell - k * 2), (cell - k, cell), (0, cell),
    ])


def _side_triangle(cell: float, index: int) -> Primitive:
    w = int(cell * 0.5)
    h = int(cell * 0.8)
    return triangle(cell - w, 0, w, h, 2)


def _small_square(cell: float, index: int) -> Primitive:
    w = int(cell / 3)
    return rectangle(w, w, cell - w, cell - w)


def _offset_square(cell: float, index: int) -> Primitive:
    inner = cell * 0.1
    # Small icons get a fixed outer border so that it stays visible.
    if cell < 6:
        outer = 1
    elif cell < 8:
        outer = 2
    else:
        outer = int(cell * 0.25)
    if inner > 1:
        inner = int(inner)
    elif inner > 0.5:
        inner = 1
    return rectangle(outer, outer, cell - inner - outer, cell - inner - outer)


def _corner_circle(cell: float, index: int) -> Primitive:
    m = int(cell * 0.15)
    w = int(cell * 0.5)
    return Circle(cell - w - m, cell - w - m, w)


def _square_triangle_hole(cell: float, index: int) -> Primitive:
    inner = cell * 0.1
    outer = inner * 4
    if outer > 3:
        outer = int(outer)
    return Composite((
        rectangle(0, 0, cell, cell),
        Polygon.of([
            (outer, outer),
            (cell - inner, outer),
            (outer + (cell - outer - inner) / 2, cell - inner),
        ], invert=True),
    ))


def _notched_square(cell: float, index: int) -> Primitive:
    return Polygon.of([
        (0, 0),
        (cell, 0),
        (cell, cell * 0.7),
        (cell * 0.4, cell * 0.4),
        (cell * 0.7, cell),
        (0, cell),
    ])


def _quarter_triangle(cell: float, index: int) -> Primitive:
    return triangle(cell / 2, cell / 2, cell / 2, cell / 2, 3)


def _l_with_triangle(cell: float, index: int) -> Primitive:
    return Composite((
        rectangle(0, 0, cell, cell / 2),
        rectangle(0, cell / 2, cell / 2, cell / 2),
        triangle(cell / 2, cell / 2, cell / 2, cell / 2, 1),
    ))


def _square_square_hole(cell: float, index: int) -> Primitive:
    inner = cell * 0.14
    if cell < 4:
        outer = 1
    elif cell < 6:
        outer = 2
    else:
        outer = int(cell * 0.35)
    if cell >= 8:
        inner = int(inner)
    return Composite((
        rectangle(0, 0, cell, cell),
        rectangle(outer, outer, cell - outer - inner, cell - outer - inner, invert=True),
    ))


def _square_circle_hole(cell: float, index: int) -> Primitive:
    inner = cell * 0.12
    outer = inner * 3
    return Composite((
        rectangle(0, 0, cell, cell),
        Circle(outer, outer, cell - inner - outer, invert=True),
    ))


def _square_rhombus_hole(cell: float, index: int) -> Primitive:
    m = cell * 0.25
    return Composite((
        rectangle(0, 0, cell, cell),
        rhombus(m, m, cell - m, cell - m, invert=True),
    ))


def _large_circle(cell: float, index: int) -> Primitive:
    # One circle spans the whole centre; later occurrences draw nothing.
    if index != 0:
        return Composite()
    m = cell * 0.4
    return Circle(m, m, cell * 1.2)


# ---- Outer shapes ----


def _corner_triangle(cell: float, index: int) -> Primitive:
    return triangle(0, 0, cell, cell, 0)


def _half_triangle(cell: float, index: int) -> Primitive:
    return triangle(0, cell / 2, cell, cell / 2, 0)


def _diamond(cell: float, index: int) -> Primitive:
    return rhombus(0, 0, cell, cell)


def _inset_circle(cell: float, index: int) -> Primitive:
    m = cell / 6
    return Circle(m, m, cell - 2 * m)


#: Shapes drawn in the twelve border cells (edges and corners).
OUTER_SHAPES: tuple[ShapeDefinition, ...] = (
    ShapeDefinition("corner_triangle", _corner_triangle),
    ShapeDefinition("half_triangle", _half_triangle),
    ShapeDefinition("diamond", _diamond),
    ShapeDefinition("inset_circle", _inset_circle),
)

#: Shapes drawn in the four centre cells.  The quarter triangle
#: appears twice, doubling its selection weight.
CENTER_SHAPES: tuple[ShapeDefinition, ...] = (
    ShapeDefinition("cut_corner", _cut_corner),
    ShapeDefinition("side_triangle", _side_triangle),
    ShapeDefinition("small_square", _small_square),
    ShapeDefinition("offset_square", _offset_square),
    ShapeDefinition("corner_circle", _corner_circle),
    ShapeDefinition("square_triangle_hole", _square_triangle_hole),
    ShapeDefinition("notched_square", _notched_square),
    ShapeDefinition("quarter_triangle", _quarter_triangle),
    ShapeDefinition("l_with_triangle", _l_with_triangle),
    ShapeDefinition("square_square_hole", _square_square_hole),
    ShapeDefinition("square_circle_hole", _square_circle_hole),
    ShapeDefinition("quarter_triangle_alt", _quarter_triangle),
    ShapeDefinition("square_rhombus_hole", _square_rhombus_hole),
    ShapeDefinition("large_circle", _large_circle),
)
