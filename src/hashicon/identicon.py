"""Convenience entry points rendering a hash at a given pixel size."""

from __future__ import annotations

import dataclasses
from dataclasses import replace
from typing import Any

import numpy as np

from hashicon.errors import InvalidInputError
from hashicon.generation import IconGenerator
from hashicon.generation.generator import HashLike
from hashicon.model import IdenticonStyle, Rectangle
from hashicon.rendering import RasterRenderer, VectorPathRenderer

_STYLE_FIELDS = frozenset(f.name for f in dataclasses.fields(IdenticonStyle))
_DEFAULT_STYLE = IdenticonStyle()
_DEFAULT_GENERATOR = IconGenerator()


def hash_from_hex(text: str) -> bytes:
    """Decode a hex digest such as ``hashlib.sha1(...).hexdigest()``.

    Raises:
        InvalidInputError: If *text* is empty or not valid hex.
    """
    try:
        data = bytes.fromhex(text.strip())
    except ValueError as exc:
        raise InvalidInputError(f"hash is not valid hex: {text!r}") from exc
    if not data:
        raise InvalidInputError("hash must not be empty")
    return data


def _resolve_style(style: IdenticonStyle | None, **kwargs: Any) -> IdenticonStyle:
    """Build an :class:`IdenticonStyle` from an optional base plus overrides.

    Keyword arguments whose value is ``None`` are ignored.

    Raises:
        TypeError: If a kwarg name does not match any style field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )
    s = style if style is not None else _DEFAULT_STYLE
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        s = replace(s, **overrides)
    return s


def icon_bounds(size: int, style: IdenticonStyle) -> Rectangle:
    """Return the area shapes are drawn in for a *size* x *size* icon.

    The style's padding is rounded to whole pixels on every side.

    Raises:
        InvalidInputError: If *size* is not positive.
    """
    if size <= 0:
        raise InvalidInputError(f"size must be positive, got {size}")
    padding = int(0.5 + size * style.padding)
    inner = max(size - 2 * padding, 0)
    return Rectangle(padding, padding, inner, inner)


def render_vector(
    hash: HashLike,
    size: int,
    style: IdenticonStyle | None = None,
    *,
    generator: IconGenerator | None = None,
    **style_kwargs: Any,
) -> VectorPathRenderer:
    """Render *hash* as path data for a *size* x *size* icon.

    Args:
        hash: Bytes the icon is derived from (at least four).
        size: Icon side length in output units.
        style: Base style.  Defaults to :class:`IdenticonStyle`.
        generator: Generator to use.  Defaults to a standard
            :class:`IconGenerator`.
        **style_kwargs: Overrides for individual style fields, e.g.
            ``padding=0`` or ``background_colour="#00000000"``.

    Returns:
        The renderer, holding one path per fill colour.
    """
    s = _resolve_style(style, **style_kwargs)
    renderer = VectorPathRenderer()
    gen = generator if generator is not None else _DEFAULT_GENERATOR
    gen.generate(hash, icon_bounds(size, s), s, renderer)
    return renderer


def render_raster(
    hash: HashLike,
    size: int,
    style: IdenticonStyle | None = None,
    *,
    generator: IconGenerator | None = None,
    supersampling: int | None = None,
    **style_kwargs: Any,
) -> np.ndarray:
    """Render *hash* as an anti-aliased RGBA image.

    Accepts the same arguments as :func:`render_vector`, plus
    *supersampling* to change the number of sub-scanlines per row.

    Returns:
        A ``uint8`` array of shape ``(size, size, 4)``.
    """
    s = _resolve_style(style, **style_kwargs)
    bounds = icon_bounds(size, s)
    if supersampling is None:
        renderer = RasterRenderer(size, size)
    else:
        renderer = RasterRenderer(size, size, supersampling=supersampling)
    gen = generator if generator is not None else _DEFAULT_GENERATOR
    gen.generate(hash, bounds, s, renderer)
    return renderer.to_array()
