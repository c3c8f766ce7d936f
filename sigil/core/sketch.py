# sigil/core/sketch.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional

from sigil.animation.sequence import Sequencer
from sigil.core.timing import FrameClock
from sigil.graphics.canvas import Canvas

if TYPE_CHECKING:
    from sigil.assets.server import AssetServer


@dataclass(frozen=True, slots=True)
class SketchMeta:
    name: str
    title: str = ""
    description: str = ""
    width: int = 800
    height: int = 800


class Sketch:
    """
    An animation program driven by the host loop.
    Subclasses set `meta` and override the hooks they need.
    """

    meta: ClassVar[SketchMeta]

    def preload(self, assets: AssetServer) -> None:
        """Request assets. Called once, before setup(); loads are awaited."""
        pass

    def setup(self, canvas: Canvas) -> None:
        """Called once the canvas exists."""
        pass

    def draw(self, canvas: Canvas, clock: FrameClock) -> None:
        """Called once per rendering tick."""
        pass

    def key_released(self, key: int, clock: FrameClock) -> None:
        pass

    def total_frames(self) -> Optional[int]:
        """Length of one loop in frames, or None if the sketch has no timeline."""
        return None


class SequencedSketch(Sketch):
    """A sketch whose whole drawing is a Sequencer, restarted on any key release."""

    def __init__(self):
        self.sequence = self.build_sequence()

    def build_sequence(self) -> Sequencer:
        raise NotImplementedError

    def draw(self, canvas: Canvas, clock: FrameClock) -> None:
        self.sequence.draw(clock.frame_count, clock.seconds, canvas)

    def key_released(self, key: int, clock: FrameClock) -> None:
        self.sequence.restart(clock.frame_count, clock.seconds)

    def total_frames(self) -> Optional[int]:
        return self.sequence.total_frames()
