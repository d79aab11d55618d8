"""Pluggable decisions made while turning a hash into an icon.

:class:`~hashicon.generation.generator.IconGenerator` delegates three
choices to strategy objects supplied at construction time:

- a :class:`HueStrategy` deriving the palette hue from the hash,
- an :class:`OctetStrategy` reading single bytes from the hash,
- a :class:`ShapeSelectionStrategy` picking shape, colour and
  rotation for every category.

The defaults reproduce the standard icon for every hash.  Alternates
only need to provide the matching method; no subclassing is required.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from hashicon.errors import InvalidInputError
from hashicon.model import PlacedShape, Rgba, ShapeCategory

# Palette index pairs that must not appear together in one icon:
# dark gray with dark colour, and light gray with light colour.
_EXCLUSIVE_PAIRS: tuple[frozenset[int], ...] = (
    frozenset({0, 4}),
    frozenset({2, 3}),
)

# Palette index substituted when a pair would be completed.
_FALLBACK_COLOUR_INDEX = 1


class OctetStrategy(Protocol):
    def get_octet(self, hash: bytes, index: int) -> int:
        """Return the byte at *index* of *hash*, in ``[0, 255]``."""
        ...


class HueStrategy(Protocol):
    def compute_hue(self, hash: bytes) -> float:
        """Return a hue in ``[0, 1]`` for *hash*."""
        ...


class ShapeSelectionStrategy(Protocol):
    def select(
        self,
        hash: bytes,
        palette: Sequence[Rgba],
        categories: Sequence[ShapeCategory],
        octets: OctetStrategy,
    ) -> list[PlacedShape]:
        """Return one :class:`PlacedShape` per category, in order."""
        ...


class WrappingOctets:
    """Read octets with the index wrapped around the hash length.

    Any non-negative index is valid, so categories may refer to octets
    beyond the end of short hashes.
    """

    def get_octet(self, hash: bytes, index: int) -> int:
        if len(hash) == 0:
            raise InvalidInputError("hash must not be empty")
        return hash[index % len(hash)] & 0xFF


class BigEndianHue:
    """Hue from the first four bytes read as a big-endian unsigned int."""

    def compute_hue(self, hash: bytes) -> float:
        if len(hash) < 4:
            raise InvalidInputError(
                f"hash must be at least 4 bytes to compute a hue, got {len(hash)}"
            )
        value = int.from_bytes(hash[:4], "big")
        return value / 0xFFFFFFFF


def _completes_pair(used: list[int], index: int) -> bool:
    """Return True if *index* belongs to a pair already present in *used*."""
    for pair in _EXCLUSIVE_PAIRS:
        if index in pair and any(u in pair for u in used):
            return True
    return False


class DefaultShapeSelection:
    """Pick shapes per category, avoiding clashing palette pairs.

    Categories are visited in order.  When a category's colour index
    belongs to an exclusive pair and any member of that pair was used
    by an earlier category, the mid colour is used instead.  Only
    earlier categories are consulted, so the outcome depends on
    category order.
    """

    def select(
        self,
        hash: bytes,
        palette: Sequence[Rgba],
        categories: Sequence[ShapeCategory],
        octets: OctetStrategy,
    ) -> list[PlacedShape]:
        shapes: list[PlacedShape] = []
        used: list[int] = []

        for category in categories:
            colour_index = octets.get_octet(hash, category.colour_octet) % len(palette)
            if _completes_pair(used, colour_index):
                colour_index = _FALLBACK_COLOUR_INDEX
            used.append(colour_index)

            if category.rotation_octet is None:
                start_rotation = 0
            else:
                start_rotation = octets.get_octet(hash, category.rotation_octet)

            shape_index = (
                octets.get_octet(hash, category.shape_octet) % len(category.shapes)
            )
            shapes.append(PlacedShape(
                definition=category.shapes[shape_index],
                colour=palette[colour_index],
                positions=category.positions,
                start_rotation=start_rotation,
            ))

        return shapes
