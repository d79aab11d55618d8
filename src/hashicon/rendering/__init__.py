"""Rendering: the renderer interface and its vector and raster targets."""

from hashicon.rendering.base import Renderer
from hashicon.rendering.path import (
    PathBuilder,
    PathCommand,
    VectorPathRenderer,
    parse_path_data,
)
from hashicon.rendering.raster import RasterRenderer
from hashicon.rendering.scanline import Edge, Intersection, coverage_mask

__all__ = [
    "Edge",
    "Intersection",
    "PathBuilder",
    "PathCommand",
    "RasterRenderer",
    "Renderer",
    "VectorPathRenderer",
    "coverage_mask",
    "parse_path_data",
]
