"""Shared constants used across the generation and rendering layers."""

CELL_COUNT: int = 4
"""Grid cells along each side of an icon."""

MIN_PALETTE_SIZE: int = 5
"""Palette indices 0-4 are referenced by the colour clash rule."""

SUPERSAMPLING: int = 8
"""Sub-scanlines sampled per pixel row by the rasteriser."""

MIN_CIRCLE_SEGMENTS: int = 16
"""Fewest polygon segments used to approximate a circle when rasterising."""

PATH_PRECISION: int = 2
"""Decimal places kept for coordinates in serialised path data."""
