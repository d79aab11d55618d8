"""Core data model for hashicon: geometry, colours, styles, and shapes.

Everything is re-exported here so that ``from hashicon.model import
IdenticonStyle`` works without knowing the submodule layout.
"""

from hashicon.model.colour import (
    Colour,
    Rgba,
    as_rgba,
    corrected_hsl,
    hsl,
    normalise_colour,
    to_hex,
)
from hashicon.model.colour_theme import ColorTheme
from hashicon.model.geometry import Point, Rectangle, Transform
from hashicon.model.placed_shape import PlacedShape
from hashicon.model.shape_category import DEFAULT_CATEGORIES, ShapeCategory
from hashicon.model.shapes import (
    CENTER_SHAPES,
    OUTER_SHAPES,
    Circle,
    Composite,
    Polygon,
    Primitive,
    ShapeDefinition,
)
from hashicon.model.style import IdenticonStyle

__all__ = [
    "CENTER_SHAPES",
    "Circle",
    "ColorTheme",
    "Colour",
    "Composite",
    "DEFAULT_CATEGORIES",
    "IdenticonStyle",
    "OUTER_SHAPES",
    "PlacedShape",
    "Point",
    "Polygon",
    "Primitive",
    "Rectangle",
    "Rgba",
    "ShapeCategory",
    "ShapeDefinition",
    "Transform",
    "as_rgba",
    "corrected_hsl",
    "hsl",
    "normalise_colour",
    "to_hex",
]
