# sigil/animation/easing.py
from sigil.types import Scalar


def clamp(x: Scalar, lo: Scalar, hi: Scalar) -> Scalar:
    return max(lo, min(hi, x))


def lerp(a: Scalar, b: Scalar, t: Scalar) -> Scalar:
    return a + (b - a) * t


def ease_in_out_cubic(x: Scalar) -> Scalar:
    """
    Cubic ease-in/ease-out over [0, 1].
    Slow start, fast middle, slow finish; maps 0 -> 0, 0.5 -> 0.5, 1 -> 1.
    """
    if x < 0.5:
        return 4.0 * x * x * x
    return 1.0 - (-2.0 * x + 2.0) ** 3 / 2.0
