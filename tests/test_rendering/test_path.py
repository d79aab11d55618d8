"""Tests for the vector path emitter and path data parsing."""

import pytest
import svgpathtools

from hashicon.identicon import render_vector
from hashicon.model import (
    Circle,
    ColorTheme,
    Composite,
    IdenticonStyle,
    Point,
    Transform,
    to_hex,
)
from hashicon.model.shapes import rectangle
from hashicon.rendering.path import (
    PathBuilder,
    PathCommand,
    VectorPathRenderer,
    _fmt,
    parse_path_data,
)


class TestFormatting:
    @pytest.mark.parametrize("value, text", [
        (0, "0"),
        (10.0, "10"),
        (2.5, "2.5"),
        (3.333333, "3.33"),
        (-1.25, "-1.25"),
        (-0.001, "0"),
    ])
    def test_fmt(self, value, text):
        assert _fmt(value) == text


class TestPathCommand:
    def test_unknown_command_raises(self):
        with pytest.raises(ValueError, match="Unknown path command"):
            PathCommand("C", (0, 0, 1, 1, 2, 2))

    def test_wrong_arity_raises(self):
        with pytest.raises(ValueError, match="takes 2 arguments"):
            PathCommand("L", (1.0,))

    def test_arc_text(self):
        cmd = PathCommand("A", (5, 5, 0, 1, 0, 10, 5))
        assert cmd.to_svg() == "A5,5 0 1,0 10,5"

    def test_args_rounded_on_creation(self):
        cmd = PathCommand("M", (1 / 3, 2 / 3))
        assert cmd.args == (0.33, 0.67)

    def test_negative_zero_folded(self):
        assert PathCommand("L", (-0.001, 0.0)).args == (0.0, 0.0)


class TestPathBuilder:
    def test_polygon(self):
        builder = PathBuilder()
        builder.add_polygon([Point(0, 0), Point(10, 0), Point(10, 10)])
        assert str(builder) == "M0 0L10 0L10 10Z"

    def test_empty_polygon_emits_nothing(self):
        builder = PathBuilder()
        builder.add_polygon([])
        assert builder.commands == []
        assert str(builder) == ""

    def test_repeated_first_vertex_dropped(self):
        builder = PathBuilder()
        builder.add_polygon([
            Point(0, 0), Point(10, 0), Point(10, 10), Point(0.001, 0),
        ])
        assert str(builder) == "M0 0L10 0L10 10Z"

    def test_thirds_round_trip_exactly(self):
        builder = PathBuilder()
        builder.add_polygon([Point(1 / 3, 2 / 3), Point(5, 1 / 3), Point(2, 2)])
        assert builder.commands[0] == PathCommand("M", (0.33, 0.67))
        assert parse_path_data(str(builder)) == builder.commands

    def test_tiny_circle_skipped(self):
        builder = PathBuilder()
        builder.add_circle(Point(1, 1), 0.004, counter_clockwise=False)
        assert builder.commands == []

    def test_clockwise_circle(self):
        builder = PathBuilder()
        builder.add_circle(Point(0, 0), 10, counter_clockwise=False)
        assert str(builder) == "M0 5A5,5 0 1,1 10,5A5,5 0 1,1 0,5"

    def test_counter_clockwise_circle(self):
        builder = PathBuilder()
        builder.add_circle(Point(2, 4), 4, counter_clockwise=True)
        assert str(builder) == "M2 6A2,2 0 1,0 6,6A2,2 0 1,0 2,6"

    def test_commands_in_order(self):
        builder = PathBuilder()
        builder.add_polygon([Point(0, 0), Point(1, 0), Point(0, 1)])
        builder.add_circle(Point(0, 0), 2, counter_clockwise=False)
        assert [c.command for c in builder.commands] == [
            "M", "L", "L", "Z", "M", "A", "A",
        ]


class TestParsePathData:
    def test_round_trip(self):
        builder = PathBuilder()
        builder.add_polygon([Point(0.5, 1.25), Point(10, 0), Point(-3.75, 8)])
        builder.add_circle(Point(2.25, 3), 4.5, counter_clockwise=True)
        assert parse_path_data(str(builder)) == builder.commands

    def test_touching_polygons_stay_separate(self):
        builder = PathBuilder()
        builder.add_polygon([Point(0, 0), Point(4, 0), Point(4, 4)])
        builder.add_polygon([Point(0, 0), Point(0, 4), Point(4, 4)])
        parsed = parse_path_data(str(builder))
        assert [c.command for c in parsed] == [
            "M", "L", "L", "Z", "M", "L", "L", "Z",
        ]
        assert parsed == builder.commands

    def test_unclosed_subpath(self):
        assert parse_path_data("M0 0L3 4") == [
            PathCommand("M", (0, 0)),
            PathCommand("L", (3, 4)),
        ]

    def test_empty_string(self):
        assert parse_path_data("") == []

    def test_missing_argument_raises(self):
        with pytest.raises(ValueError):
            parse_path_data("M0L1 2Z")

    def test_must_start_with_move(self):
        with pytest.raises(ValueError, match="must start with M"):
            parse_path_data("L1 2M0 0")

    def test_curve_rejected(self):
        with pytest.raises(ValueError, match="Unsupported path segment"):
            parse_path_data("M0 0C1 1 2 2 3 3")

    def test_quadratic_rejected(self):
        with pytest.raises(ValueError, match="Unsupported path segment"):
            parse_path_data("M0 0Q1 2 3 4")

    def test_relative_commands_rejected(self):
        with pytest.raises(ValueError, match="Relative"):
            parse_path_data("M0 0l1 1z")


class TestVectorPathRenderer:
    def test_background_recorded(self):
        renderer = VectorPathRenderer()
        renderer.set_background("#ff0000")
        assert renderer.background == (255, 0, 0, 255)

    def test_draw_outside_shape_raises(self):
        renderer = VectorPathRenderer()
        with pytest.raises(RuntimeError, match="render_shape"):
            renderer.draw(rectangle(0, 0, 1, 1))

    def test_add_outside_shape_raises(self):
        renderer = VectorPathRenderer()
        with pytest.raises(RuntimeError, match="render_shape"):
            renderer.add_polygon([Point(0, 0)])

    def test_nested_shapes_rejected(self):
        renderer = VectorPathRenderer()

        def draw():
            renderer.render_shape("blue", lambda: None)

        with pytest.raises(RuntimeError, match="nested"):
            renderer.render_shape("red", draw)

    def test_transform_applied(self):
        renderer = VectorPathRenderer()

        def draw():
            renderer.transform = Transform(10, 0, 10, 1)
            renderer.draw(rectangle(0, 0, 5, 10))

        renderer.render_shape("red", draw)
        assert renderer.paths == {"#ff0000": "M20 0L20 5L10 5L10 0Z"}

    def test_circle_primitive(self):
        renderer = VectorPathRenderer()

        def draw():
            renderer.transform = Transform(0, 0, 12, 2)
            renderer.draw(Circle(2, 2, 4, invert=True))

        renderer.render_shape("black", draw)
        assert renderer.paths["#000000"] == "M6 8A2,2 0 1,0 10,8A2,2 0 1,0 6,8"

    def test_composite_draws_all_parts(self):
        renderer = VectorPathRenderer()
        shape = Composite((rectangle(0, 0, 1, 1), Circle(0, 0, 1)))
        renderer.render_shape("red", lambda: renderer.draw(shape))
        commands = renderer.commands[(255, 0, 0, 255)]
        assert [c.command for c in commands] == [
            "M", "L", "L", "L", "Z", "M", "A", "A",
        ]

    def test_unknown_primitive_raises(self):
        renderer = VectorPathRenderer()
        with pytest.raises(TypeError, match="Unsupported primitive"):
            renderer.render_shape("red", lambda: renderer.draw("square"))

    def test_same_colour_merged(self):
        renderer = VectorPathRenderer()
        renderer.render_shape("red", lambda: renderer.draw(rectangle(0, 0, 1, 1)))
        renderer.render_shape("blue", lambda: renderer.draw(rectangle(0, 0, 2, 2)))
        renderer.render_shape("red", lambda: renderer.draw(rectangle(5, 5, 1, 1)))
        assert list(renderer.paths) == ["#ff0000", "#0000ff"]
        assert renderer.paths["#ff0000"].count("M") == 2

    def test_shape_without_primitives_omitted(self):
        renderer = VectorPathRenderer()
        renderer.render_shape("red", lambda: None)
        assert renderer.paths == {}

    def test_palette_colour_accepted(self):
        renderer = VectorPathRenderer()
        colour = ColorTheme.from_hue(0.0, IdenticonStyle())[0]
        renderer.render_shape(colour, lambda: renderer.draw(rectangle(0, 0, 1, 1)))
        assert list(renderer.commands) == [colour]

    def test_failed_shape_discarded(self):
        renderer = VectorPathRenderer()

        def draw():
            renderer.draw(rectangle(0, 0, 1, 1))
            raise KeyError("boom")

        with pytest.raises(KeyError):
            renderer.render_shape("black", draw)
        assert renderer.paths == {}
        with pytest.raises(RuntimeError, match="render_shape"):
            renderer.add_polygon([Point(0, 0), Point(1, 0), Point(0, 1)])

    def test_shapes_after_failure_still_drawn(self):
        renderer = VectorPathRenderer()

        def draw():
            renderer.draw(rectangle(5, 5, 1, 1))
            raise KeyError("boom")

        with pytest.raises(KeyError):
            renderer.render_shape("black", draw)
        renderer.render_shape("black", lambda: renderer.draw(rectangle(0, 0, 1, 1)))
        assert renderer.paths == {"#000000": "M0 0L1 0L1 1L0 1Z"}


ZERO_HASH_PATHS = {
    "#545454": (
        "M20 10L10 10L10 0ZM20 10L20 0L30 0Z"
        "M20 30L30 30L30 40ZM20 30L20 40L10 40Z"
        "M10 20L0 20L0 10ZM30 20L30 10L40 10Z"
        "M30 20L40 20L40 30ZM10 20L10 30L0 30Z"
    ),
    "#d17575": (
        "M10 10L0 10L0 0ZM30 10L30 0L40 0Z"
        "M30 30L40 30L40 40ZM10 30L10 40L0 40Z"
        "M10 10L20 10L20 11.6L15.8 20L10 20Z"
        "M30 10L30 20L28.4 20L20 15.8L20 10Z"
        "M30 30L20 30L20 28.4L24.2 20L30 20Z"
        "M10 30L10 20L11.6 20L20 24.2L20 30Z"
    ),
}


class TestIconPaths:
    def test_zero_hash_golden(self, zero_hash):
        renderer = render_vector(zero_hash, 40, padding=0)
        assert renderer.paths == ZERO_HASH_PATHS
        assert list(renderer.paths) == ["#545454", "#d17575"]
        assert renderer.background == (255, 255, 255, 255)

    def test_zero_hash_round_trip(self, zero_hash):
        renderer = render_vector(zero_hash, 40, padding=0)
        for colour, commands in renderer.commands.items():
            assert parse_path_data(renderer.paths[to_hex(colour)]) == commands

    def test_round_trip_full_icon(self, sha1_hash):
        renderer = render_vector(sha1_hash, 64)
        for colour, commands in renderer.commands.items():
            assert parse_path_data(renderer.paths[to_hex(colour)]) == commands

    def test_standard_parser_accepts_output(self, sha1_hash):
        renderer = render_vector(sha1_hash, 64)
        for d in renderer.paths.values():
            assert len(svgpathtools.parse_path(d)) > 0

    def test_to_string_concatenates(self, sha1_hash):
        renderer = render_vector(sha1_hash, 64)
        assert renderer.to_string() == "".join(renderer.paths.values())
