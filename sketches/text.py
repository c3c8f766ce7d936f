# sketches/text.py
from sigil.core.registry import registry
from sigil.core.sketch import Sketch, SketchMeta
from sigil.core.timing import FrameClock
from sigil.graphics.canvas import Canvas


@registry.register
class TextOrSomething(Sketch):
    meta = SketchMeta(
        name="text",
        title="Text Or Something",
        description="Not sure yet.",
        width=400,
        height=800,
    )

    def draw(self, canvas: Canvas, clock: FrameClock) -> None:
        canvas.background("grey")
