"""hashicon: deterministic identicons from byte hashes.

hashicon maps the bytes of a hash to a small grid of coloured shapes
and renders them either as SVG path data or as an anti-aliased RGBA
pixel buffer.  The same hash and style always give identical output.

Example usage::

    import hashlib

    from hashicon import render_raster, render_vector

    digest = hashlib.sha1(b"alice@example.com").digest()
    paths = render_vector(digest, 64).paths   # {"#rrggbb": "M...Z", ...}
    pixels = render_raster(digest, 64)        # (64, 64, 4) uint8
"""

from hashicon.errors import (
    ConfigurationError,
    HashiconError,
    InternalInvariantError,
    InvalidInputError,
)
from hashicon.generation import (
    BigEndianHue,
    DefaultShapeSelection,
    HueStrategy,
    IconGenerator,
    IconPlan,
    OctetStrategy,
    ShapeSelectionStrategy,
    WrappingOctets,
)
from hashicon.identicon import (
    hash_from_hex,
    icon_bounds,
    render_raster,
    render_vector,
)
from hashicon.model import (
    DEFAULT_CATEGORIES,
    ColorTheme,
    Colour,
    IdenticonStyle,
    PlacedShape,
    Rectangle,
    ShapeCategory,
    Transform,
    normalise_colour,
)
from hashicon.rendering import (
    RasterRenderer,
    Renderer,
    VectorPathRenderer,
    parse_path_data,
)

__all__ = [
    "BigEndianHue",
    "ColorTheme",
    "Colour",
    "ConfigurationError",
    "DEFAULT_CATEGORIES",
    "DefaultShapeSelection",
    "HashiconError",
    "HueStrategy",
    "IconGenerator",
    "IconPlan",
    "IdenticonStyle",
    "InternalInvariantError",
    "InvalidInputError",
    "OctetStrategy",
    "PlacedShape",
    "RasterRenderer",
    "Rectangle",
    "Renderer",
    "ShapeCategory",
    "ShapeSelectionStrategy",
    "Transform",
    "VectorPathRenderer",
    "WrappingOctets",
    "hash_from_hex",
    "icon_bounds",
    "normalise_colour",
    "parse_path_data",
    "render_raster",
    "render_vector",
]
