"""The renderer capability interface shared by all output targets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from hashicon.model import (
    Circle,
    Colour,
    Composite,
    Point,
    Polygon,
    Primitive,
    Rgba,
    Transform,
    as_rgba,
)


class Renderer(ABC):
    """Output sink that placed shapes are drawn against.

    Subclasses implement the background, the shape scope hooks, and
    the two drawing primitives.  :meth:`draw` maps every primitive
    through :attr:`transform` before calling them, so subclasses only
    ever see canvas coordinates.

    Attributes:
        transform: Placement applied to subsequently drawn primitives.
    """

    def __init__(self) -> None:
        self.transform = Transform()
        self._in_shape = False

    @abstractmethod
    def set_background(self, colour: Colour | Rgba) -> None:
        """Paint the whole canvas with *colour*.

        Called once, before any shape is rendered.
        """

    @abstractmethod
    def begin_shape(self, colour: Rgba) -> None:
        """Start collecting primitives filled with *colour*."""

    @abstractmethod
    def end_shape(self) -> None:
        """Finish the shape started by :meth:`begin_shape`."""

    def abort_shape(self) -> None:
        """Discard the shape started by :meth:`begin_shape`.

        Called instead of :meth:`end_shape` when drawing fails, so that
        nothing of the unfinished shape reaches the output.  The default
        does nothing.
        """

    @abstractmethod
    def add_polygon(self, points: Sequence[Point]) -> None:
        """Add a closed polygon given in canvas coordinates."""

    @abstractmethod
    def add_circle(
        self, point: Point, diameter: float, counter_clockwise: bool,
    ) -> None:
        """Add a circle whose bounding box has top-left corner *point*."""

    def render_shape(self, colour: Colour | Rgba, draw: Callable[[], None]) -> None:
        """Run *draw* inside a shape scope filled with *colour*.

        Every primitive *draw* issues through :meth:`draw` belongs to
        the same shape.  If *draw* raises, the shape is discarded
        with :meth:`abort_shape` and the exception propagates.

        Raises:
            RuntimeError: If called from inside another shape scope.
        """
        if self._in_shape:
            raise RuntimeError("render_shape() calls cannot be nested")
        self.begin_shape(as_rgba(colour))
        self._in_shape = True
        try:
            draw()
        except BaseException:
            self._in_shape = False
            self.abort_shape()
            raise
        self._in_shape = False
        self.end_shape()

    def draw(self, primitive: Primitive) -> None:
        """Draw *primitive* with the current :attr:`transform`.

        Raises:
            RuntimeError: If called outside :meth:`render_shape`.
            TypeError: If *primitive* is not a known primitive type.
        """
        if not self._in_shape:
            raise RuntimeError("primitives must be drawn inside render_shape()")
        match primitive:
            case Circle(x=x, y=y, size=size, invert=invert):
                point = self.transform.transform_icon_point(x, y, size, size)
                self.add_circle(point, size, invert)
            case Polygon(points=points):
                self.add_polygon([
                    self.transform.transform_icon_point(px, py)
                    for px, py in points
                ])
            case Composite(parts=parts):
                for part in parts:
                    self.draw(part)
            case _:
                raise TypeError(f"Unsupported primitive: {primitive!r}")
