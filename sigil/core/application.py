# sigil/core/application.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Type

import pygame

from sigil.assets import AssetServer
from sigil.core.sketch import Sketch
from sigil.core.timing import FrameClock
from sigil.graphics.canvas import Canvas


@dataclass(frozen=True, slots=True)
class AppSettings:
    fps: int = 60
    title: str = "Sigil"
    asset_root: Path = Path(".") / "assets"
    # Stop after this many frames; None runs until the window closes.
    max_frames: Optional[int] = None


class Application:
    def __init__(self, settings: AppSettings = AppSettings()):
        self.settings = settings
        self.window: pygame.Surface | None = None
        self.canvas: Canvas | None = None

        self.asset_server = AssetServer(asset_root=settings.asset_root)

        self.clock = FrameClock(fps=settings.fps)
        self._pg_clock: pygame.time.Clock | None = None
        self._pygame_initialized = False
        self.running = False
        self.sketch: Optional[Sketch] = None

    def _ensure_window(self, width: int, height: int, title: str) -> None:
        if self.window is not None:
            return

        pygame.init()
        self._pygame_initialized = True

        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        print(f"[app] opened {width}x{height} window '{title}'")

        self.canvas = Canvas(self.window, assets=self.asset_server)
        self._pg_clock = pygame.time.Clock()

    def _handle_events(self) -> None:
        assert self.sketch is not None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
            elif event.type == pygame.KEYUP:
                self.sketch.key_released(event.key, self.clock)

    def run(self, sketch_cls: Type[Sketch]) -> int:
        """Run a sketch until the window closes. Returns frames drawn."""
        self.sketch = sketch_cls()
        meta = sketch_cls.meta
        self._ensure_window(
            meta.width,
            meta.height,
            f"{self.settings.title} - {meta.title or meta.name}",
        )
        assert self.canvas is not None

        self.sketch.preload(self.asset_server)
        loaded = self.asset_server.wait()
        if loaded:
            print(f"[app] loaded {len(loaded)} asset(s)")

        self.sketch.setup(self.canvas)

        total = self.sketch.total_frames()
        if total is not None:
            print(f"[app] '{meta.name}' loops every {total} frames")

        self.running = True
        self.clock.start()

        try:
            while self.running:
                self._handle_events()
                if not self.running:
                    break

                self.clock.advance()
                self.sketch.draw(self.canvas, self.clock)
                pygame.display.flip()

                if (
                    self.settings.max_frames is not None
                    and self.clock.frame_count >= self.settings.max_frames
                ):
                    self.running = False

                if self._pg_clock is not None:
                    self._pg_clock.tick(self.settings.fps)
        finally:
            self.asset_server.shutdown()
            if self._pygame_initialized:
                pygame.quit()

        return self.clock.frame_count
