# sigil/export/gif.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Type

import pygame
from PIL import Image

from sigil.assets import AssetServer
from sigil.core.sketch import Sketch
from sigil.core.timing import FixedFrameClock
from sigil.graphics.canvas import Canvas

DEFAULT_EXTRA_FRAMES = 60


def render_frames(
    sketch_cls: Type[Sketch],
    frame_count: int,
    fps: int = 60,
    assets: Optional[AssetServer] = None,
) -> List[Image.Image]:
    """
    Render `frame_count` ticks of a sketch offscreen.
    Time advances by exactly 1/fps per frame regardless of how long
    drawing takes.
    """
    if not pygame.font.get_init():
        pygame.font.init()

    sketch = sketch_cls()
    meta = sketch_cls.meta

    if assets is not None:
        sketch.preload(assets)
        assets.wait()

    canvas = Canvas(pygame.Surface((meta.width, meta.height)), assets=assets)
    sketch.setup(canvas)

    clock = FixedFrameClock(fps=fps)
    clock.start()

    frames: List[Image.Image] = []
    for _ in range(frame_count):
        clock.advance()
        sketch.draw(canvas, clock)
        frames.append(canvas.snapshot().convert("RGB"))

    return frames


def export_gif(
    sketch_cls: Type[Sketch],
    path: Path,
    extra_frames: int = DEFAULT_EXTRA_FRAMES,
    fps: int = 60,
    assets: Optional[AssetServer] = None,
) -> int:
    """
    Save an animated GIF covering one full loop of the sketch plus
    `extra_frames` of hold. Returns the number of frames written.
    """
    total = sketch_cls().total_frames()
    if total is None:
        raise ValueError(
            f"Sketch '{sketch_cls.meta.name}' has no sequence to export"
        )

    frame_count = total + extra_frames
    if frame_count <= 0:
        raise ValueError(f"Nothing to export ({frame_count} frames)")

    frames = render_frames(sketch_cls, frame_count, fps=fps, assets=assets)

    path.parent.mkdir(parents=True, exist_ok=True)
    first, *rest = frames
    first.save(
        path,
        save_all=True,
        append_images=rest,
        duration=round(1000 / fps),
        loop=0,
    )
    print(f"[export] wrote {path} ({frame_count} frames)")

    return frame_count
