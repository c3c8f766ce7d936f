# sigil/graphics/canvas.py
from __future__ import annotations

import io
import math
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

import numpy as np
import pygame
from PIL import Image

from sigil.graphics.context import StateGuard
from sigil.graphics.style import DrawState, HAlign, VAlign, parse_color
from sigil.types import RGBA, ColorArg, Scalar

if TYPE_CHECKING:
    from sigil.assets.handle import AssetHandle
    from sigil.assets.server import AssetServer


class CanvasStateError(RuntimeError):
    pass


MAX_SEGMENTS = 512


class Canvas:
    """
    Immediate-mode 2D drawing surface with a p5-like API.

    Coordinates start at the top-left corner with y pointing down. All
    primitives go through the current transform, so rotation and
    non-uniform scale apply to curves and text as well as lines.
    """

    PI = math.pi
    HALF_PI = math.pi / 2.0
    TWO_PI = math.pi * 2.0

    def __init__(
        self,
        surface: pygame.Surface,
        assets: Optional[AssetServer] = None,
    ):
        self.surface = surface
        self.assets = assets

        self._stack: List[DrawState] = [DrawState()]
        self._fonts: Dict[Tuple[Optional[int], int], pygame.font.Font] = {}

    # -- Properties --
    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @property
    def state(self) -> DrawState:
        return self._stack[-1]

    @property
    def matrix(self) -> np.ndarray:
        return self.state.matrix

    @property
    def depth(self) -> int:
        """Number of pushed states above the base state."""
        return len(self._stack) - 1

    # -- State stack --
    def push(self) -> None:
        self._stack.append(self.state.copy())

    def pop(self) -> None:
        if len(self._stack) == 1:
            raise CanvasStateError("pop() called without a matching push()")
        self._stack.pop()

    def scoped(self) -> StateGuard:
        return StateGuard(self)

    # -- Transform --
    def _apply(self, m: np.ndarray) -> None:
        self.state.matrix = self.state.matrix @ m

    def translate(self, x: Scalar, y: Scalar) -> None:
        self._apply(
            np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]])
        )

    def rotate(self, angle: Scalar) -> None:
        """Rotate by `angle` radians; positive turns clockwise on screen."""
        c = math.cos(angle)
        s = math.sin(angle)
        self._apply(np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]))

    def scale(self, sx: Scalar, sy: Optional[Scalar] = None) -> None:
        if sy is None:
            sy = sx
        self._apply(
            np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])
        )

    def reset_matrix(self) -> None:
        self.state.matrix = np.eye(3, dtype=np.float64)

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """Map (N, 2) local points to screen space."""
        m = self.state.matrix
        return points @ m[:2, :2].T + m[:2, 2]

    def _linear_scale(self) -> float:
        m = self.state.matrix
        return math.sqrt(abs(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]))

    # -- Style --
    def fill(self, *color: ColorArg) -> None:
        self.state.fill = parse_color(*color)

    def no_fill(self) -> None:
        self.state.fill = None

    def stroke(self, *color: ColorArg) -> None:
        self.state.stroke = parse_color(*color)

    def no_stroke(self) -> None:
        self.state.stroke = None

    def stroke_weight(self, weight: Scalar) -> None:
        self.state.stroke_weight = float(weight)

    def text_size(self, size: Scalar) -> None:
        self.state.text_size = float(size)

    def text_align(
        self, halign: HAlign | str, valign: VAlign | str = VAlign.BASELINE
    ) -> None:
        self.state.text_halign = HAlign(halign)
        self.state.text_valign = VAlign(valign)

    def text_font(self, handle: Optional[AssetHandle]) -> None:
        self.state.font = handle

    # -- Drawing --
    def _target(self, color: RGBA) -> pygame.Surface:
        if color[3] >= 255:
            return self.surface
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 0))
        return overlay

    def _commit(self, target: pygame.Surface) -> None:
        if target is not self.surface:
            self.surface.blit(target, (0, 0))

    def _stroke_px(self) -> int:
        return max(1, round(self.state.stroke_weight * self._linear_scale()))

    def _polyline(self, points: np.ndarray, closed: bool) -> None:
        color = self.state.stroke
        if color is None or len(points) < 2:
            return
        if self.state.stroke_weight <= 0:
            return

        target = self._target(color)
        pts = [tuple(p) for p in self.transform_points(points)]
        pygame.draw.lines(target, color, closed, pts, self._stroke_px())
        self._commit(target)

    def _polygon(self, points: np.ndarray) -> None:
        color = self.state.fill
        if color is None or len(points) < 3:
            return

        target = self._target(color)
        pts = [tuple(p) for p in self.transform_points(points)]
        pygame.draw.polygon(target, color, pts)
        self._commit(target)

    def background(self, *color: ColorArg) -> None:
        """Clear the whole surface, ignoring the current transform."""
        rgba = parse_color(*color)
        if rgba[3] >= 255:
            self.surface.fill(rgba)
            return
        target = self._target(rgba)
        target.fill(rgba)
        self._commit(target)

    def line(self, x1: Scalar, y1: Scalar, x2: Scalar, y2: Scalar) -> None:
        self._polyline(np.array([[x1, y1], [x2, y2]], dtype=np.float64), False)

    def _segments(self, w: Scalar, h: Scalar, sweep: float) -> int:
        radius_px = 0.5 * max(abs(w), abs(h)) * self._linear_scale()
        n = int(abs(sweep) * radius_px / 4.0)
        return max(8, min(MAX_SEGMENTS, n))

    def _arc_points(
        self,
        x: Scalar,
        y: Scalar,
        w: Scalar,
        h: Scalar,
        start: float,
        stop: float,
    ) -> np.ndarray:
        n = self._segments(w, h, stop - start)
        angles = np.linspace(start, stop, n + 1)
        return np.column_stack(
            (x + 0.5 * w * np.cos(angles), y + 0.5 * h * np.sin(angles))
        )

    def ellipse(self, x: Scalar, y: Scalar, w: Scalar, h: Scalar) -> None:
        if w == 0 and h == 0:
            return
        points = self._arc_points(x, y, w, h, 0.0, self.TWO_PI)[:-1]
        self._polygon(points)
        self._polyline(points, True)

    def circle(self, x: Scalar, y: Scalar, d: Scalar) -> None:
        self.ellipse(x, y, d, d)

    def arc(
        self,
        x: Scalar,
        y: Scalar,
        w: Scalar,
        h: Scalar,
        start: float,
        stop: float,
    ) -> None:
        """
        Draw part of an ellipse from `start` to `stop` radians.
        The fill is a pie slice; the stroke follows only the curved edge.
        """
        if stop == start:
            return
        points = self._arc_points(x, y, w, h, start, stop)
        if self.state.fill is not None:
            self._polygon(np.vstack(([[x, y]], points)))
        self._polyline(points, False)

    # -- Text --
    def _font(self, px: int) -> pygame.font.Font:
        handle = self.state.font
        key = (handle.id if handle is not None else None, px)

        font = self._fonts.get(key)
        if font is not None:
            return font

        if not pygame.font.get_init():
            pygame.font.init()

        data = None
        if handle is not None and self.assets is not None:
            data = self.assets.registry.get(handle.id)

        if data is not None:
            font = pygame.font.Font(io.BytesIO(data.data), px)
        else:
            font = pygame.font.Font(None, px)

        self._fonts[key] = font
        return font

    def text(self, s: str, x: Scalar, y: Scalar) -> None:
        color = self.state.fill
        if color is None or not s:
            return

        scale = self._linear_scale()
        px = round(self.state.text_size * scale)
        if px < 1:
            return

        font = self._font(px)
        rendered = font.render(s, True, color)

        m = self.state.matrix
        det = m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]
        angle = math.atan2(m[1, 0], m[0, 0])
        if det < 0:
            rendered = pygame.transform.flip(rendered, False, True)
        rotated = pygame.transform.rotate(rendered, -math.degrees(angle))
        if color[3] < 255:
            rotated.set_alpha(color[3])

        # Offset from the anchor to the centre of the text box, in local units.
        w_local = rendered.get_width() / scale
        h_local = rendered.get_height() / scale
        dx = {HAlign.LEFT: 0.5, HAlign.CENTER: 0.0, HAlign.RIGHT: -0.5}[
            self.state.text_halign
        ] * w_local
        if self.state.text_valign is VAlign.BASELINE:
            dy = 0.5 * h_local - font.get_ascent() / scale
        else:
            dy = {VAlign.TOP: 0.5, VAlign.CENTER: 0.0, VAlign.BOTTOM: -0.5}[
                self.state.text_valign
            ] * h_local

        cx, cy = self.transform_points(np.array([[x + dx, y + dy]]))[0]
        rect = rotated.get_rect(center=(round(cx), round(cy)))
        self.surface.blit(rotated, rect)

    # -- Output --
    def snapshot(self) -> Image.Image:
        data = pygame.image.tobytes(self.surface, "RGBA")
        return Image.frombytes("RGBA", self.surface.get_size(), data)

    def pixel(self, x: int, y: int) -> RGBA:
        c = self.surface.get_at((x, y))
        return (c.r, c.g, c.b, c.a)
