import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from sigil.graphics.canvas import Canvas  # noqa: E402


class RecordingContext:
    """
    Stand-in drawing context: a dict of style values with push/pop
    snapshots, plus a log of every step call.
    """

    def __init__(self):
        self.style = {}
        self.calls = []  # (name, t, gt, depth)
        self._saved = []

    @property
    def depth(self) -> int:
        return len(self._saved)

    def push(self):
        self._saved.append(dict(self.style))

    def pop(self):
        self.style = self._saved.pop()

    def record(self, name):
        def draw(ctx, t, gt):
            ctx.calls.append((name, t, gt, ctx.depth))

        return draw

    def names(self):
        return [c[0] for c in self.calls]

    def progress(self):
        return {c[0]: c[1] for c in self.calls}


@pytest.fixture
def ctx():
    """Returns a fresh RecordingContext for each test."""
    return RecordingContext()


@pytest.fixture
def canvas():
    """A 64x64 offscreen canvas cleared to black."""
    pygame.font.init()
    c = Canvas(pygame.Surface((64, 64)))
    c.background(0)
    return c
