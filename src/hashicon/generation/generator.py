"""Turn a hash into placed shapes and drive a renderer with them."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from hashicon._constants import CELL_COUNT, MIN_PALETTE_SIZE
from hashicon.errors import (
    ConfigurationError,
    InternalInvariantError,
    InvalidInputError,
)
from hashicon.generation.strategies import (
    BigEndianHue,
    DefaultShapeSelection,
    HueStrategy,
    OctetStrategy,
    ShapeSelectionStrategy,
    WrappingOctets,
)
from hashicon.model import (
    DEFAULT_CATEGORIES,
    ColorTheme,
    IdenticonStyle,
    PlacedShape,
    Rectangle,
    Rgba,
    ShapeCategory,
    Transform,
)
from hashicon.rendering.base import Renderer

logger = logging.getLogger(__name__)

#: Any byte-like value accepted as a hash.
HashLike = bytes | bytearray | memoryview | Sequence[int]

ThemeFactory = Callable[[float, IdenticonStyle], Sequence[Rgba]]


def as_hash(value: HashLike) -> bytes:
    """Copy *value* into an immutable ``bytes`` hash.

    Raises:
        InvalidInputError: If *value* is empty or contains integers
            outside ``[0, 255]``.
    """
    if isinstance(value, str):
        raise InvalidInputError(
            "hash must be bytes; use hash_from_hex() for hex digests"
        )
    try:
        data = bytes(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"cannot interpret hash: {exc}") from exc
    if not data:
        raise InvalidInputError("hash must not be empty")
    return data


@dataclass(frozen=True)
class IconPlan:
    """Everything decided about an icon before rendering.

    Attributes:
        hue: Palette hue in ``[0, 1]``.
        palette: Colours available to the shapes.
        shapes: One placed shape per category, in rendering order.
    """

    hue: float
    palette: tuple[Rgba, ...]
    shapes: tuple[PlacedShape, ...]


class IconGenerator:
    """Generates identicons from hashes.

    The generator is stateless between calls and may be shared; each
    call must be given its own :class:`Renderer`.

    Args:
        hue: Strategy deriving the hue.  Defaults to
            :class:`BigEndianHue`.
        octets: Strategy reading hash bytes.  Defaults to
            :class:`WrappingOctets`.
        selection: Strategy choosing shapes and colours.  Defaults to
            :class:`DefaultShapeSelection`.
        categories: Shape categories in rendering order.
        theme_factory: Callable ``(hue, style) -> palette``.  The
            palette must hold at least five colours.
        cell_count: Number of grid cells along each side.
    """

    def __init__(
        self,
        *,
        hue: HueStrategy | None = None,
        octets: OctetStrategy | None = None,
        selection: ShapeSelectionStrategy | None = None,
        categories: Sequence[ShapeCategory] = DEFAULT_CATEGORIES,
        theme_factory: ThemeFactory = ColorTheme.from_hue,
        cell_count: int = CELL_COUNT,
    ) -> None:
        if cell_count < 1:
            raise ConfigurationError(
                f"cell_count must be positive, got {cell_count}"
            )
        self.hue = hue if hue is not None else BigEndianHue()
        self.octets = octets if octets is not None else WrappingOctets()
        self.selection = selection if selection is not None else DefaultShapeSelection()
        self.categories = tuple(categories)
        self.theme_factory = theme_factory
        self.cell_count = cell_count

    def compute_hue(self, hash: HashLike) -> float:
        """Return the hue for *hash*, checked to lie in ``[0, 1]``.

        Raises:
            InvalidInputError: If the hash is empty or too short.
            InternalInvariantError: If the hue strategy returned a
                value outside ``[0, 1]``.
        """
        hue = self.hue.compute_hue(as_hash(hash))
        if not 0.0 <= hue <= 1.0:
            raise InternalInvariantError(
                f"computed hue must be in [0, 1], got {hue}"
            )
        return hue

    def palette(self, hue: float, style: IdenticonStyle) -> tuple[Rgba, ...]:
        """Build the palette for *hue*.

        Raises:
            ConfigurationError: If the theme factory returned fewer
                than five colours.
        """
        palette = tuple(self.theme_factory(hue, style))
        if len(palette) < MIN_PALETTE_SIZE:
            raise ConfigurationError(
                f"palette must have at least {MIN_PALETTE_SIZE} colours, "
                f"got {len(palette)}"
            )
        return palette

    def plan(self, hash: HashLike, style: IdenticonStyle | None = None) -> IconPlan:
        """Decide hue, palette and shapes for *hash* without rendering."""
        data = as_hash(hash)
        style = style if style is not None else IdenticonStyle()
        hue = self.compute_hue(data)
        palette = self.palette(hue, style)
        shapes = self.selection.select(data, palette, self.categories, self.octets)
        logger.debug("hue %.6f for hash %s", hue, data.hex())
        for shape in shapes:
            logger.debug(
                "placed %s colour=%s rotation=%d at %d cells",
                shape.definition.name, shape.colour,
                shape.start_rotation % 4, len(shape.positions),
            )
        return IconPlan(hue=hue, palette=palette, shapes=tuple(shapes))

    def generate(
        self,
        hash: HashLike,
        outer_bounds: Rectangle,
        style: IdenticonStyle | None,
        renderer: Renderer,
    ) -> None:
        """Render the icon for *hash* into *renderer*.

        The background is painted first over the whole of
        *outer_bounds*; the shapes are then drawn on a square grid
        centred in it.

        Args:
            hash: The bytes the icon is derived from.
            outer_bounds: Area to draw in, in renderer coordinates.
            style: Colour settings, or ``None`` for the defaults.
            renderer: Output sink.  Mutated in place.
        """
        style = style if style is not None else IdenticonStyle()
        plan = self.plan(hash, style)
        renderer.set_background(style.background_rgba)
        self.render_foreground(renderer, outer_bounds, plan.shapes)

    def render_foreground(
        self,
        renderer: Renderer,
        outer_bounds: Rectangle,
        shapes: Sequence[PlacedShape],
    ) -> None:
        """Draw *shapes* on the cell grid inside *outer_bounds*."""
        rect = outer_bounds.normalised(self.cell_count)
        cell = rect.width / self.cell_count
        if cell <= 0:
            logger.debug("empty icon bounds %s; foreground skipped", outer_bounds)
            return

        for shape in shapes:
            def draw(shape: PlacedShape = shape) -> None:
                for i, (col, row) in enumerate(shape.positions):
                    renderer.transform = Transform(
                        rect.x + col * cell,
                        rect.y + row * cell,
                        cell,
                        shape.rotation_at(i),
                    )
                    renderer.draw(shape.definition(cell, i))

            renderer.render_shape(shape.colour, draw)
