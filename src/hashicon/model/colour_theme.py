from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from hashicon.model.colour import Rgba, corrected_hsl
from hashicon.model.style import IdenticonStyle

DARK_GRAY = 0
MID_COLOUR = 1
LIGHT_GRAY = 2
LIGHT_COLOUR = 3
DARK_COLOUR = 4


@dataclass(frozen=True)
class ColorTheme(Sequence[Rgba]):
    """The palette an icon's shapes are painted with.

    A theme built by :meth:`from_hue` holds five colours, indexed by
    the module constants ``DARK_GRAY``, ``MID_COLOUR``, ``LIGHT_GRAY``,
    ``LIGHT_COLOUR`` and ``DARK_COLOUR``.

    Attributes:
        colours: The palette entries as 8-bit RGBA tuples.
    """

    colours: tuple[Rgba, ...]

    @classmethod
    def from_hue(cls, hue: float, style: IdenticonStyle) -> ColorTheme:
        """Build the standard five-colour palette for *hue*.

        Args:
            hue: Colour wheel position in ``[0, 1]``.
            style: Saturation and lightness settings.
        """
        return cls((
            corrected_hsl(
                hue, style.grayscale_saturation, style.grayscale_lightness_at(0.0),
            ),
            corrected_hsl(
                hue, style.colour_saturation, style.colour_lightness_at(0.5),
            ),
            corrected_hsl(
                hue, style.grayscale_saturation, style.grayscale_lightness_at(1.0),
            ),
            corrected_hsl(
                hue, style.colour_saturation, style.colour_lightness_at(1.0),
            ),
            corrected_hsl(
                hue, style.colour_saturation, style.colour_lightness_at(0.0),
            ),
        ))

    @overload
    def __getitem__(self, index: int) -> Rgba: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Rgba, ...]: ...

    def __getitem__(self, index: int | slice) -> Rgba | tuple[Rgba, ...]:
        return self.colours[index]

    def __len__(self) -> int:
        return len(self.colours)

    def __iter__(self) -> Iterator[Rgba]:
        return iter(self.colours)
