# sigil/animation/animations.py
from sigil.animation.easing import lerp
from sigil.graphics.canvas import Canvas
from sigil.types import Scalar


def circle_arc_lerp(
    canvas: Canvas,
    cx: Scalar,
    cy: Scalar,
    diameter: Scalar,
    t: float,
    direction: float = 0.0,
) -> None:
    """
    Draw a circle being traced out by growing its arc.

    Args:
        cx, cy: Centre of the circle.
        diameter: Diameter of the circle.
        t: Interpolation factor in [0, 1]; the arc sweeps TWO_PI * t.
        direction: Rotation applied while sweeping, in turns per unit t.
                   1 turns with the sweep, -1 against it, 0 holds still.
    """
    with canvas.scoped():
        canvas.translate(cx, cy)
        canvas.rotate(direction * Canvas.TWO_PI * t)
        canvas.arc(0, 0, diameter, diameter, 0, Canvas.TWO_PI * t)


def line_lerp(
    canvas: Canvas,
    sx: Scalar,
    sy: Scalar,
    ex: Scalar,
    ey: Scalar,
    t: float,
) -> None:
    """Draw the first `t` of the segment from (sx, sy) to (ex, ey)."""
    canvas.line(sx, sy, lerp(sx, ex, t), lerp(sy, ey, t))
