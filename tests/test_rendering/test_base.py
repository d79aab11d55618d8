"""Tests for the Renderer shape scope."""

import pytest

from hashicon.model import ColorTheme, IdenticonStyle
from hashicon.model.shapes import rectangle


class TestRenderShape:
    def test_scope_events(self, recorder):
        recorder.render_shape("red", lambda: recorder.draw(rectangle(0, 0, 1, 1)))
        assert [e[0] for e in recorder.events] == ["begin", "polygon", "end"]
        assert recorder.events[0] == ("begin", (255, 0, 0, 255))

    def test_palette_colour_not_rescaled(self, recorder):
        colour = ColorTheme.from_hue(0.0, IdenticonStyle())[1]
        recorder.render_shape(colour, lambda: None)
        assert recorder.events[0] == ("begin", (209, 117, 117, 255))

    def test_failure_aborts_shape(self, recorder):
        def draw():
            recorder.draw(rectangle(0, 0, 1, 1))
            raise KeyError("boom")

        with pytest.raises(KeyError):
            recorder.render_shape("red", draw)
        assert [e[0] for e in recorder.events] == ["begin", "polygon", "abort"]

    def test_scope_closed_after_failure(self, recorder):
        def draw():
            raise KeyError("boom")

        with pytest.raises(KeyError):
            recorder.render_shape("red", draw)
        with pytest.raises(RuntimeError, match="render_shape"):
            recorder.draw(rectangle(0, 0, 1, 1))
        recorder.render_shape("blue", lambda: None)
        assert recorder.events[-1] == ("end",)
