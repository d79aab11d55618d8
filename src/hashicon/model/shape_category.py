from __future__ import annotations

from dataclasses import dataclass

from hashicon.errors import ConfigurationError
from hashicon.model.shapes import CENTER_SHAPES, OUTER_SHAPES, ShapeDefinition


@dataclass(frozen=True)
class ShapeCategory:
    """A group of grid cells sharing one shape, colour and rotation.

    Attributes:
        colour_octet: Hash octet that picks the palette entry.
        shape_octet: Hash octet that picks the shape from *shapes*.
        rotation_octet: Hash octet giving the starting rotation, or
            ``None`` to always start unrotated.
        shapes: Candidate shapes, in selection order.
        positions: ``(col, row)`` grid cells the shape is drawn in.
            Each successive position is rotated one more quarter turn.

    Raises:
        ConfigurationError: If *shapes* or *positions* is empty, or an
            octet index is negative.
    """

    colour_octet: int
    shape_octet: int
    rotation_octet: int | None
    shapes: tuple[ShapeDefinition, ...]
    positions: tuple[tuple[int, int], ...]

    def __post_init__(self) -> None:
        if not self.shapes:
            raise ConfigurationError("shapes must not be empty")
        if not self.positions:
            raise ConfigurationError("positions must not be empty")
        octets = [self.colour_octet, self.shape_octet]
        if self.rotation_octet is not None:
            octets.append(self.rotation_octet)
        if any(o < 0 for o in octets):
            raise ConfigurationError(
                f"octet indices must be non-negative, got {octets}"
            )


#: The categories used by default, in rendering order.
DEFAULT_CATEGORIES: tuple[ShapeCategory, ...] = (
    # Sides
    ShapeCategory(
        colour_octet=8,
        shape_octet=2,
        rotation_octet=3,
        shapes=OUTER_SHAPES,
        positions=((1, 0), (2, 0), (2, 3), (1, 3), (0, 1), (3, 1), (3, 2), (0, 2)),
    ),
    # Corners
    ShapeCategory(
        colour_octet=9,
        shape_octet=4,
        rotation_octet=5,
        shapes=OUTER_SHAPES,
        positions=((0, 0), (3, 0), (3, 3), (0, 3)),
    ),
    # Centre
    ShapeCategory(
        colour_octet=10,
        shape_octet=1,
        rotation_octet=None,
        shapes=CENTER_SHAPES,
        positions=((1, 1), (2, 1), (2, 2), (1, 2)),
    ),
)
