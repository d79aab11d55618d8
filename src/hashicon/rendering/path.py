"""Vector output: SVG-compatible path data per fill colour.

Drawing calls are recorded as :class:`PathCommand` objects and only
turned into text on demand, so the command stream can be inspected
independently of its textual form.  The text uses absolute ``M``,
``L``, ``A`` and ``Z`` commands and can be placed in the ``d``
attribute of an SVG ``<path>`` element.

Command arguments are rounded to the precision of the text when they
are recorded, so writing a path out and parsing it back with
:func:`parse_path_data` gives the recorded commands again.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from svgpathtools import Arc, Line, parse_path

from hashicon._constants import PATH_PRECISION
from hashicon.model import Colour, Point, Rgba, as_rgba, to_hex
from hashicon.rendering.base import Renderer

# Number of arguments taken by each command letter.
_ARITY = {"M": 2, "L": 2, "A": 7, "Z": 0}

_RELATIVE_COMMANDS = frozenset("mlhvcsqtaz")


def _round(value: float) -> float:
    # ``or 0.0`` folds -0.0 into 0.0.
    return round(float(value), PATH_PRECISION) or 0.0


def _fmt(value: float) -> str:
    """Format a coordinate with at most two decimals and no trailing zeros."""
    text = f"{_round(value):.{PATH_PRECISION}f}".rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class PathCommand:
    """One path drawing instruction.

    Arguments are rounded to :data:`~hashicon._constants.PATH_PRECISION`
    decimals on creation.

    Attributes:
        command: ``"M"`` (move), ``"L"`` (line), ``"A"`` (elliptical
            arc) or ``"Z"`` (close).
        args: Numeric arguments.  Arcs carry ``(rx, ry, rotation,
            large_arc, sweep, x, y)``.
    """

    command: str
    args: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if self.command not in _ARITY:
            raise ValueError(f"Unknown path command: {self.command!r}")
        if len(self.args) != _ARITY[self.command]:
            raise ValueError(
                f"{self.command} takes {_ARITY[self.command]} arguments, "
                f"got {len(self.args)}"
            )
        object.__setattr__(self, "args", tuple(_round(a) for a in self.args))

    def to_svg(self) -> str:
        if self.command == "A":
            rx, ry, rot, large, sweep, x, y = self.args
            return (
                f"A{_fmt(rx)},{_fmt(ry)} {_fmt(rot)} {int(large)},{int(sweep)} "
                f"{_fmt(x)},{_fmt(y)}"
            )
        if self.command == "Z":
            return "Z"
        x, y = self.args
        return f"{self.command}{_fmt(x)} {_fmt(y)}"


class PathBuilder:
    """Accumulates drawing commands for one path."""

    def __init__(self) -> None:
        self.commands: list[PathCommand] = []

    def add_circle(
        self, location: Point, diameter: float, counter_clockwise: bool,
    ) -> None:
        """Add a circle as two half arcs.

        Circles whose radius rounds to zero are skipped.

        Args:
            location: Top-left corner of the circle's bounding box.
            diameter: Circle diameter.
            counter_clockwise: Sweep direction; reversing it inside a
                clockwise shape cuts a hole under the non-zero rule.
        """
        radius = _round(diameter / 2)
        if radius <= 0:
            return
        sweep = 0.0 if counter_clockwise else 1.0
        x = _round(location.x)
        cy = location.y + diameter / 2
        self.commands.append(PathCommand("M", (x, cy)))
        self.commands.append(PathCommand(
            "A", (radius, radius, 0.0, 1.0, sweep, x + 2 * radius, cy),
        ))
        self.commands.append(PathCommand(
            "A", (radius, radius, 0.0, 1.0, sweep, x, cy),
        ))

    def add_polygon(self, points: Sequence[Point]) -> None:
        """Add a closed polygon.  Empty polygons are ignored.

        Trailing vertices that repeat the first one are dropped, as
        ``Z`` already draws the closing edge.
        """
        coords = [(_round(p.x), _round(p.y)) for p in points]
        while len(coords) > 1 and coords[-1] == coords[0]:
            coords.pop()
        if not coords:
            return
        first, *rest = coords
        self.commands.append(PathCommand("M", first))
        for point in rest:
            self.commands.append(PathCommand("L", point))
        self.commands.append(PathCommand("Z"))

    def __str__(self) -> str:
        return "".join(cmd.to_svg() for cmd in self.commands)


def _parse_subpath(text: str) -> list[PathCommand]:
    segments = list(parse_path(text))
    if not segments:
        return []
    start = segments[0].start
    closed = text.rstrip().endswith("Z")
    # svgpathtools turns Z into an explicit line back to the start.
    if closed and isinstance(segments[-1], Line) and segments[-1].end == start:
        segments.pop()

    commands = [PathCommand("M", (start.real, start.imag))]
    for segment in segments:
        match segment:
            case Line(end=end):
                commands.append(PathCommand("L", (end.real, end.imag)))
            case Arc(radius=radius, end=end):
                commands.append(PathCommand("A", (
                    radius.real, radius.imag, segment.rotation,
                    float(segment.large_arc), float(segment.sweep),
                    end.real, end.imag,
                )))
            case _:
                raise ValueError(
                    f"Unsupported path segment: {type(segment).__name__}"
                )
    if closed:
        commands.append(PathCommand("Z"))
    return commands


def parse_path_data(data: str) -> list[PathCommand]:
    """Parse path data written by :class:`PathBuilder`.

    Every ``M`` starts a subpath, which is parsed with
    :func:`svgpathtools.parse_path`.  Lines come back as ``L``,
    elliptical arcs as ``A``, and a subpath ending in ``Z`` is closed.
    Subpaths are split on ``M`` rather than on geometry, so polygons
    that touch end to end stay separate.

    Raises:
        ValueError: If the text does not start with ``M``, uses
            relative commands, has malformed arguments, or contains
            segments other than lines and arcs.
    """
    relative = _RELATIVE_COMMANDS.intersection(data)
    if relative:
        raise ValueError(
            f"Relative path commands are not supported: {''.join(sorted(relative))}"
        )
    head, *bodies = data.split("M")
    if head.strip():
        raise ValueError(f"Path data must start with M, got {head.strip()!r}")
    commands: list[PathCommand] = []
    for body in bodies:
        commands.extend(_parse_subpath("M" + body))
    return commands


class VectorPathRenderer(Renderer):
    """Renders icons to path data, one path per fill colour.

    Shapes sharing a colour are merged into the same path, in the
    order they were drawn.  A shape is buffered until it ends, so a
    shape whose drawing fails leaves nothing behind.

    Attributes:
        background: Background colour, or ``None`` until
            :meth:`set_background` is called.
    """

    def __init__(self) -> None:
        super().__init__()
        self.background: Rgba | None = None
        self._builders: dict[Rgba, PathBuilder] = {}
        self._colour: Rgba | None = None
        self._current: PathBuilder | None = None

    def set_background(self, colour: Colour | Rgba) -> None:
        self.background = as_rgba(colour)

    def begin_shape(self, colour: Rgba) -> None:
        self._colour = colour
        self._current = PathBuilder()

    def end_shape(self) -> None:
        if self._current is None or self._colour is None:
            raise RuntimeError("end_shape() called without begin_shape()")
        if self._current.commands:
            builder = self._builders.setdefault(self._colour, PathBuilder())
            builder.commands.extend(self._current.commands)
        self.abort_shape()

    def abort_shape(self) -> None:
        self._colour = None
        self._current = None

    def add_polygon(self, points: Sequence[Point]) -> None:
        self._builder().add_polygon(points)

    def add_circle(
        self, point: Point, diameter: float, counter_clockwise: bool,
    ) -> None:
        self._builder().add_circle(point, diameter, counter_clockwise)

    def _builder(self) -> PathBuilder:
        if self._current is None:
            raise RuntimeError("primitives must be drawn inside render_shape()")
        return self._current

    @property
    def commands(self) -> dict[Rgba, list[PathCommand]]:
        """Recorded commands keyed by fill colour."""
        return {
            colour: list(builder.commands)
            for colour, builder in self._builders.items()
        }

    @property
    def paths(self) -> dict[str, str]:
        """Path data keyed by hex fill colour."""
        return {
            to_hex(colour): str(builder)
            for colour, builder in self._builders.items()
        }

    def to_string(self) -> str:
        """All path data concatenated in colour order."""
        return "".join(self.paths.values())
