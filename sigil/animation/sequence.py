# sigil/animation/sequence.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from numbers import Integral
from typing import Any, Callable, List, Tuple

from sigil.animation.easing import clamp, ease_in_out_cubic
from sigil.graphics.context import DrawingContext, scoped

# Trailing hold after the last step before the timeline loops.
# One second at the nominal 60 fps, counted in frames rather than seconds.
GRACE_FRAMES = 61

Animation = Callable[[Any, float, float], None]
"""
Draws one frame of a step.

Args:
    context: The rendering context to draw into.
    t: Eased local progress in [0, 1]; 0 is the beginning of the step,
       1 the end.
    gt: Seconds since the sequence last restarted. Useful for steady motion
        that should not depend on step progress (e.g. rotation).
"""


class SequenceConfigError(ValueError):
    pass


class PlaybackState(Enum):
    PLAYING = auto()
    RESTARTING = auto()  # the tick on which the timeline looped


@dataclass(frozen=True, slots=True)
class Step:
    duration: int
    draw_fn: Animation
    persists_state: bool
    blocks_timeline: bool

    @property
    def is_setting(self) -> bool:
        return self.duration == 0 and self.persists_state

    def progress(self, frame: int) -> float:
        """Eased progress of this step when `frame` frames remain in the cursor."""
        if self.duration == 0:
            return 1.0
        raw = clamp(frame, 0, self.duration) / self.duration
        return ease_in_out_cubic(raw)


class Sequencer:
    """
    Composes short drawing callbacks into one looping, frame-based timeline.

    Example:

        sequence = (
            Sequencer()
            .add_setting(lambda c, t, gt: c.background(0))
            .add_step(30, lambda c, t, gt: c.circle(0, 0, 20 + t * 20))
            .add_step(30, lambda c, t, gt: line_lerp(c, -100, 0, 100, 0, t))
        )

    Then once per rendering tick:

        sequence.draw(clock.frame_count, clock.seconds, canvas)
    """

    def __init__(self):
        self._steps: List[Step] = []
        self.origin_frame = 0
        self.origin_time = 0.0
        self.state = PlaybackState.PLAYING

    @property
    def steps(self) -> Tuple[Step, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def add_setting(self, draw_fn: Animation) -> Sequencer:
        """
        A setting runs every tick, in order, before the steps that follow it,
        and the state changes it makes are kept.
        """
        self._steps.append(
            Step(
                duration=0,
                draw_fn=draw_fn,
                persists_state=True,
                blocks_timeline=False,
            )
        )
        return self

    def add_step(
        self,
        duration: int,
        draw_fn: Animation,
        blocks_timeline: bool = True,
    ) -> Sequencer:
        """
        Add a timed step.

        A blocking step starts after every earlier blocking step has finished
        and keeps being drawn at progress 1 once complete. A non-blocking step
        draws alongside whatever is current without consuming frames.

        State changes made by the step are discarded when it returns; use
        `add_setting` to keep them.
        """
        if isinstance(duration, bool) or not isinstance(duration, Integral):
            raise SequenceConfigError(
                f"Step duration must be an integer frame count, not {type(duration).__name__}"
            )
        duration = int(duration)
        if duration <= 0:
            raise SequenceConfigError(
                f"Step duration must be positive, got {duration}. "
                "Use add_setting() for zero-length steps."
            )

        self._steps.append(
            Step(
                duration=duration,
                draw_fn=draw_fn,
                persists_state=False,
                blocks_timeline=blocks_timeline,
            )
        )
        return self

    def total_frames(self) -> int:
        return sum(step.duration for step in self._steps)

    def restart(self, now_frame: int, now_wallclock: float) -> None:
        self.origin_frame = now_frame
        self.origin_time = now_wallclock

    def draw(
        self,
        current_frame: int,
        current_wallclock: float,
        context: DrawingContext,
    ) -> None:
        global_time = current_wallclock - self.origin_time
        frame = current_frame - self.origin_frame

        if frame > self.total_frames() + GRACE_FRAMES:
            self.state = PlaybackState.RESTARTING
            self.restart(current_frame, current_wallclock)
            global_time = 0.0
            frame = 0
        else:
            self.state = PlaybackState.PLAYING

        for step in self._steps:
            t = step.progress(frame)

            if step.persists_state:
                step.draw_fn(context, t, global_time)
            else:
                with scoped(context):
                    step.draw_fn(context, t, global_time)

            if step.blocks_timeline:
                frame -= step.duration
            if frame <= 0:
                break
