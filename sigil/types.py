# sigil/types.py
from __future__ import annotations

from typing import NewType, Tuple, TypeAlias, Union

SketchName = NewType("SketchName", str)

Scalar: TypeAlias = float

# p5-style colour arguments: gray, (gray, alpha), (r, g, b), (r, g, b, a)
# or anything pygame.Color understands ("grey", "#ff8800").
ColorArg: TypeAlias = Union[int, float, str, Tuple[float, ...]]
RGBA = Tuple[int, int, int, int]

