# sigil/core/timing.py
import time
from dataclasses import dataclass


@dataclass
class FrameClock:
    """
    Frame counter and wall clock for a real-time render loop.
    `frame_count` goes up by exactly one per `advance()`.
    """

    fps: int = 60

    frame_count: int = 0
    _start_time: float = 0.0
    _now: float = 0.0

    def start(self) -> None:
        """Call this right before the main loop starts."""
        self._start_time = time.perf_counter()
        self._now = self._start_time
        self.frame_count = 0

    def advance(self) -> None:
        self.frame_count += 1
        self._now = time.perf_counter()

    @property
    def seconds(self) -> float:
        """Wall-clock seconds since start(), sampled at the last advance()."""
        return self._now - self._start_time

    @property
    def dt(self) -> float:
        """The nominal frame time (e.g., 0.0166 for 60fps)."""
        return 1.0 / self.fps


@dataclass
class FixedFrameClock(FrameClock):
    """
    Deterministic clock where time is derived from the frame count.
    Used for offline export and tests.
    """

    def start(self) -> None:
        self.frame_count = 0

    def advance(self) -> None:
        self.frame_count += 1

    @property
    def seconds(self) -> float:
        return self.frame_count / self.fps
