"""Shared test fixtures for hashicon."""

import hashlib

import pytest

from hashicon.model import as_rgba
from hashicon.rendering.base import Renderer


class RecordingRenderer(Renderer):
    """Renderer that records every call it receives, in order."""

    def __init__(self):
        super().__init__()
        self.events = []

    def set_background(self, colour):
        self.events.append(("background", as_rgba(colour)))

    def begin_shape(self, colour):
        self.events.append(("begin", colour))

    def end_shape(self):
        self.events.append(("end",))

    def abort_shape(self):
        self.events.append(("abort",))

    def add_polygon(self, points):
        self.events.append(("polygon", self.transform, tuple(points)))

    def add_circle(self, point, diameter, counter_clockwise):
        self.events.append(
            ("circle", self.transform, point, diameter, counter_clockwise)
        )

    def of_kind(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def recorder():
    """Return a fresh :class:`RecordingRenderer`."""
    return RecordingRenderer()


@pytest.fixture
def zero_hash():
    """Return a 32-byte all-zero hash."""
    return bytes(32)


@pytest.fixture
def sha1_hash():
    """Return the SHA-1 digest of a fixed string."""
    return hashlib.sha1(b"hashicon").digest()
