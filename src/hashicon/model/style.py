from __future__ import annotations

from dataclasses import dataclass

from hashicon.errors import ConfigurationError
from hashicon.model._util import _field_defaults
from hashicon.model.colour import Colour, normalise_colour, to_hex

_RANGE_FIELDS = frozenset({"colour_lightness", "grayscale_lightness"})


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be in [0, 1], got {value}")


@dataclass(frozen=True)
class IdenticonStyle:
    """Colour and spacing parameters for generated icons.

    Attributes:
        background_colour: Colour painted behind the shapes.  Accepts
            any format understood by :func:`normalise_colour`.
        colour_saturation: Saturation of the coloured palette entries.
        grayscale_saturation: Saturation of the grey palette entries.
            Non-zero values tint the greys with the icon hue.
        colour_lightness: ``(min, max)`` lightness of the coloured
            entries; the dark colour uses *min*, the light colour
            *max* and the mid colour their average.
        grayscale_lightness: ``(min, max)`` lightness of the grey
            entries.
        padding: Empty margin on each side of the icon, as a fraction
            of the icon size.  Must be below 0.5.

    Raises:
        ConfigurationError: If any value lies outside ``[0, 1]``, a
            range has ``min > max``, or *padding* is 0.5 or more.
    """

    background_colour: Colour = "white"
    colour_saturation: float = 0.5
    grayscale_saturation: float = 0.0
    colour_lightness: tuple[float, float] = (0.4, 0.8)
    grayscale_lightness: tuple[float, float] = (0.3, 0.9)
    padding: float = 0.08

    def __post_init__(self) -> None:
        _check_unit("colour_saturation", self.colour_saturation)
        _check_unit("grayscale_saturation", self.grayscale_saturation)
        for name in sorted(_RANGE_FIELDS):
            value = tuple(getattr(self, name))
            if len(value) != 2:
                raise ConfigurationError(
                    f"{name} must have exactly 2 elements, got {len(value)}"
                )
            lo, hi = value
            _check_unit(name, lo)
            _check_unit(name, hi)
            if lo > hi:
                raise ConfigurationError(
                    f"{name} minimum must not exceed maximum, got {value}"
                )
            object.__setattr__(self, name, (float(lo), float(hi)))
        if not 0.0 <= self.padding < 0.5:
            raise ConfigurationError(
                f"padding must be in [0, 0.5), got {self.padding}"
            )
        try:
            normalise_colour(self.background_colour)
        except ValueError as exc:
            raise ConfigurationError(
                f"invalid background_colour: {exc}"
            ) from exc

    @property
    def background_rgba(self) -> tuple[int, int, int, int]:
        return normalise_colour(self.background_colour)

    def colour_lightness_at(self, value: float) -> float:
        """Interpolate *value* in ``[0, 1]`` across the colour lightness range."""
        return _interpolate(self.colour_lightness, value)

    def grayscale_lightness_at(self, value: float) -> float:
        """Interpolate *value* in ``[0, 1]`` across the grey lightness range."""
        return _interpolate(self.grayscale_lightness, value)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  The background
        colour is written as a hex string.
        """
        defaults = _field_defaults(type(self))
        d: dict = {}
        if self.background_rgba != normalise_colour(defaults["background_colour"]):
            d["background_colour"] = to_hex(self.background_rgba)
        for key, default in defaults.items():
            if key == "background_colour":
                continue
            val = getattr(self, key)
            if val != default:
                d[key] = list(val) if key in _RANGE_FIELDS else val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> IdenticonStyle:
        """Deserialise from a dictionary.

        Raises:
            ConfigurationError: If *d* contains unknown keys.
        """
        defaults = _field_defaults(cls)
        unknown = set(d) - set(defaults)
        if unknown:
            raise ConfigurationError(
                f"unknown style keys: {sorted(unknown)}"
            )
        kwargs: dict = {}
        for key, val in d.items():
            if key in _RANGE_FIELDS or (
                key == "background_colour" and isinstance(val, list)
            ):
                val = tuple(val)
            kwargs[key] = val
        return cls(**kwargs)


def _interpolate(value_range: tuple[float, float], value: float) -> float:
    lo, hi = value_range
    result = lo + value * (hi - lo)
    return min(max(result, 0.0), 1.0)
