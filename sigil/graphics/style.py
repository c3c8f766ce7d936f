# sigil/graphics/style.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

import numpy as np
import pygame

from sigil.types import RGBA, ColorArg


class HAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
    BASELINE = "baseline"


def _channel(v: float) -> int:
    return int(max(0, min(255, round(v))))


def parse_color(*args: ColorArg) -> RGBA:
    """
    Normalise p5-style colour arguments to an RGBA tuple.

    parse_color(255)            -> white
    parse_color(255, 128)       -> white, half alpha
    parse_color(10, 20, 30)     -> opaque rgb
    parse_color(10, 20, 30, 40) -> rgba
    parse_color("grey")         -> anything pygame.Color accepts
    """
    if len(args) == 1 and isinstance(args[0], (tuple, list)):
        args = tuple(args[0])

    if len(args) == 1 and isinstance(args[0], str):
        c = pygame.Color(args[0])
        return (c.r, c.g, c.b, c.a)

    if len(args) == 1:
        g = _channel(args[0])  # type: ignore[arg-type]
        return (g, g, g, 255)
    if len(args) == 2:
        g = _channel(args[0])  # type: ignore[arg-type]
        return (g, g, g, _channel(args[1]))  # type: ignore[arg-type]
    if len(args) == 3:
        r, g, b = (_channel(v) for v in args)  # type: ignore[arg-type]
        return (r, g, b, 255)
    if len(args) == 4:
        r, g, b, a = (_channel(v) for v in args)  # type: ignore[arg-type]
        return (r, g, b, a)

    raise ValueError(f"Cannot interpret colour from {args!r}")


@dataclass(slots=True)
class DrawState:
    """
    Mutable drawing state of a canvas: the current transform and style.
    One of these lives on top of the canvas state stack.
    """

    matrix: np.ndarray = field(
        default_factory=lambda: np.eye(3, dtype=np.float64)
    )
    fill: Optional[RGBA] = (255, 255, 255, 255)
    stroke: Optional[RGBA] = (0, 0, 0, 255)
    stroke_weight: float = 1.0
    text_size: float = 12.0
    text_halign: HAlign = HAlign.LEFT
    text_valign: VAlign = VAlign.BASELINE
    font: Optional[Any] = None  # AssetHandle of a loaded font, or None

    def copy(self) -> DrawState:
        return replace(self, matrix=self.matrix.copy())
