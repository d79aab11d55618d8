from __future__ import annotations

import colorsys

#: A colour specification accepted throughout hashicon.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"red"``, ``"#ff0000"``,
#:   ``"#ff000080"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB or RGBA tuple or list with values in ``[0, 1]``
#:   (e.g. ``(1.0, 0.0, 0.0)``).
#:
#: See :func:`normalise_colour` for conversion to 8-bit RGBA.
Colour = str | float | tuple[float, ...] | list[float]

#: An 8-bit ``(r, g, b, a)`` colour, each channel in ``[0, 255]``.
Rgba = tuple[int, int, int, int]

# Perceived middle lightness for each sixth of the colour wheel.  The
# seventh entry covers hue == 1.0.
_LIGHTNESS_CORRECTORS = (0.55, 0.5, 0.5, 0.46, 0.6, 0.55, 0.55)


def _channel(value: float) -> int:
    """Convert a ``[0, 1]`` channel to a byte, truncating decimals."""
    v = int(value * 255)
    return min(max(v, 0), 255)


def normalise_colour(colour: Colour) -> Rgba:
    """Convert a colour specification to an 8-bit (r, g, b, a) tuple.

    Accepts CSS colour names (e.g. ``"red"``), hex strings
    (e.g. ``"#FF0000"``), grey floats (e.g. ``0.7``), or RGB / RGBA
    tuples (e.g. ``(1.0, 0.3, 0.3)``).  Colours without an alpha
    component are opaque.

    Args:
        colour: The colour to normalise.

    Returns:
        A tuple of four ints in [0, 255].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        f = float(colour)
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {f}")
        g = round(f * 255)
        return (g, g, g, 255)

    if isinstance(colour, (tuple, list)):
        if len(colour) not in (3, 4):
            raise ValueError(
                f"colour sequence must have 3 or 4 elements, got {len(colour)}"
            )
        components = [float(c) for c in colour]
        for name, val in zip("rgba", components):
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"colour component {name} must be in [0, 1], got {val}"
                )
        if len(components) == 3:
            components.append(1.0)
        r, g, b, a = (round(c * 255) for c in components)
        return (r, g, b, a)

    if isinstance(colour, str):
        from matplotlib.colors import to_rgba

        try:
            rgba = to_rgba(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")
        r, g, b, a = (round(c * 255) for c in rgba)
        return (r, g, b, a)

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def _is_rgba(colour: object) -> bool:
    return (
        isinstance(colour, tuple)
        and len(colour) == 4
        and all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
            for c in colour
        )
    )


def as_rgba(colour: Colour | Rgba) -> Rgba:
    """Return *colour* as an 8-bit (r, g, b, a) tuple.

    A tuple of four ints in ``[0, 255]`` is already an :data:`Rgba`
    (palette entries, :attr:`IdenticonStyle.background_rgba`) and is
    returned unchanged.  Anything else goes through
    :func:`normalise_colour`.

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if _is_rgba(colour):
        return colour  # type: ignore[return-value]
    return normalise_colour(colour)  # type: ignore[arg-type]


def to_hex(colour: Rgba) -> str:
    """Format an 8-bit colour as ``#rrggbb``, or ``#rrggbbaa`` when
    it is not fully opaque."""
    r, g, b, a = colour
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def hsl(hue: float, saturation: float, lightness: float) -> Rgba:
    """Convert an HSL colour with all components in [0, 1] to RGBA.

    Channels are truncated rather than rounded so that the palette of
    a given hash never changes between releases.
    """
    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    return (_channel(r), _channel(g), _channel(b), 255)


def corrected_hsl(hue: float, saturation: float, lightness: float) -> Rgba:
    """Like :func:`hsl`, but with lightness adjusted for perceived
    brightness.

    Yellows and greens look lighter than blues at the same HSL
    lightness, so *lightness* is remapped around a per-hue middle
    value before conversion.
    """
    corrector = _LIGHTNESS_CORRECTORS[int(hue * 6 + 0.5)]
    if lightness < 0.5:
        lightness = lightness * corrector * 2
    else:
        lightness = corrector + (lightness - 0.5) * (1 - corrector) * 2
    return hsl(hue, saturation, lightness)
