"""Generation: hash decoding, shape selection, and grid layout."""

from hashicon.generation.generator import IconGenerator, IconPlan, as_hash
from hashicon.generation.strategies import (
    BigEndianHue,
    DefaultShapeSelection,
    HueStrategy,
    OctetStrategy,
    ShapeSelectionStrategy,
    WrappingOctets,
)

__all__ = [
    "BigEndianHue",
    "DefaultShapeSelection",
    "HueStrategy",
    "IconGenerator",
    "IconPlan",
    "OctetStrategy",
    "ShapeSelectionStrategy",
    "WrappingOctets",
    "as_hash",
]
