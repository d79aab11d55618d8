from __future__ import annotations

from dataclasses import dataclass

from hashicon.model.colour import Rgba
from hashicon.model.shapes import ShapeDefinition


@dataclass(frozen=True)
class PlacedShape:
    """A shape chosen for one category, ready to be rendered.

    Attributes:
        definition: The shape drawn in every position.
        colour: Fill colour taken from the icon's palette.
        positions: ``(col, row)`` grid cells, in drawing order.
        start_rotation: Quarter turns applied at the first position;
            each following position adds one more.
    """

    definition: ShapeDefinition
    colour: Rgba
    positions: tuple[tuple[int, int], ...]
    start_rotation: int = 0

    def rotation_at(self, occurrence: int) -> int:
        """Quarter turns for the *occurrence*-th position."""
        return (self.start_rotation + occurrence) % 4
