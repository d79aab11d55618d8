"""Geometry value types: points, rectangles, and cell transforms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 2D point in canvas coordinates (y grows downwards)."""

    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent.  May be zero.
        height: Vertical extent.  May be zero.

    Raises:
        ValueError: If *width* or *height* is negative.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must be non-negative, got {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be non-negative, got {self.height}")

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def normalised(self, cell_count: int) -> Rectangle:
        """Return the largest centred square whose side is a multiple of
        *cell_count*.

        Args:
            cell_count: Number of grid cells along each side.

        Returns:
            A square :class:`Rectangle` inside this one.
        """
        size = min(self.width, self.height)
        size -= size % cell_count
        return Rectangle(
            x=self.x + (self.width - size) / 2,
            y=self.y + (self.height - size) / 2,
            width=size,
            height=size,
        )


@dataclass(frozen=True)
class Transform:
    """Placement of a unit shape inside one grid cell.

    Shape coordinates are given in the range ``[0, size]`` and mapped
    onto the cell whose top-left corner is ``(x, y)``, after rotating
    by *rotation* clockwise quarter turns around the cell centre.

    Attributes:
        x: Left edge of the cell.
        y: Top edge of the cell.
        size: Side length of the cell.
        rotation: Number of clockwise quarter turns, taken modulo 4.
    """

    x: float = 0.0
    y: float = 0.0
    size: float = 0.0
    rotation: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "rotation", self.rotation % 4)

    def transform_icon_point(
        self,
        x: float,
        y: float,
        w: float = 0.0,
        h: float = 0.0,
    ) -> Point:
        """Map a point of a shape into canvas coordinates.

        *w* and *h* give the extent of an object anchored at its
        top-left corner (a circle's bounding box), so that the
        returned point is again its top-left corner after rotation.
        """
        right = self.x + self.size
        bottom = self.y + self.size
        if self.rotation == 1:
            return Point(right - y - h, self.y + x)
        if self.rotation == 2:
            return Point(right - x - w, bottom - y - h)
        if self.rotation == 3:
            return Point(self.x + y, bottom - x - w)
        return Point(self.x + x, self.y + y)
