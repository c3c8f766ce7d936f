# sketches/inscribed_square.py
import math

from sigil.animation.animations import circle_arc_lerp, line_lerp
from sigil.animation.sequence import Sequencer
from sigil.assets import AssetHandle, AssetServer
from sigil.core.registry import registry
from sigil.core.sketch import SequencedSketch, SketchMeta
from sigil.graphics.canvas import Canvas

SIZE = 800
DIAMETER = SIZE * 0.75
RADIUS = DIAMETER * 0.5
EM = SIZE / 800
BISECT_Y = math.sqrt((9 / 64) * DIAMETER * DIAMETER)
ROTATE_SPEED = Canvas.TWO_PI / 10  # radians per second

HOLD_FRAMES = 60 * 5


@registry.register
class InscribedSquare(SequencedSketch):
    meta = SketchMeta(
        name="inscribed_square",
        title="Inscribed Square",
        description="An animation based on the geometric construction of an inscribed square.",
        width=SIZE,
        height=SIZE,
    )

    def __init__(self):
        self.font: AssetHandle | None = None
        super().__init__()

    def preload(self, assets: AssetServer) -> None:
        self.font = assets.load("fonts/Daedra.otf")

    def build_sequence(self) -> Sequencer:
        return (
            Sequencer()
            .add_setting(self._frame_setup)
            # Perimeter
            .add_step(60, lambda c, t, gt: circle_arc_lerp(c, 0, 0, DIAMETER, t, -1))
            .add_step(60, self._outer_ring)
            .add_step(30, self._center_line)
            # Bisect the centre line
            .add_step(60, self._bisecting_arcs)
            .add_step(30, self._bisector)
            # Inscribed square
            .add_step(30, self._square_top)
            .add_step(30, self._square_bottom)
            .add_step(75, self._rune_circles)
            # Letters
            .add_setting(self._letter_style)
            .add_step(30, self._letter("H", 0, RADIUS))
            .add_step(30, self._letter("E", RADIUS, 0))
            .add_step(30, self._letter("A", 0, -RADIUS))
            .add_step(30, self._letter("T", -RADIUS, 0))
            # Fire circles into the centre
            .add_setting(self._fire_style)
            .add_step(60, self._fire_circles)
            .add_step(30, self._center_letter)
            # Hold the final image before restarting
            .add_step(HOLD_FRAMES, lambda c, t, gt: None)
        )

    def _frame_setup(self, c: Canvas, t: float, gt: float) -> None:
        c.background(0)
        c.translate(c.width / 2, c.height / 2)
        c.scale(1, -1)
        c.no_fill()
        c.stroke(255)
        c.stroke_weight(4 * EM)
        c.rotate(gt * ROTATE_SPEED)

    def _outer_ring(self, c: Canvas, t: float, gt: float) -> None:
        c.scale(-1, 1)
        circle_arc_lerp(c, 0, 0, DIAMETER + 16 * EM, t)

    def _center_line(self, c: Canvas, t: float, gt: float) -> None:
        c.stroke_weight(2 * EM)
        line_lerp(c, RADIUS, 0, -RADIUS, 0, t)

    def _bisecting_arcs(self, c: Canvas, t: float, gt: float) -> None:
        c.stroke_weight(EM)
        c.stroke(255, 128)
        circle_arc_lerp(c, RADIUS, 0, DIAMETER * 1.25, t, -0.5)
        c.scale(-1, 1)
        circle_arc_lerp(c, RADIUS, 0, DIAMETER * 1.25, t, -0.5)

    def _bisector(self, c: Canvas, t: float, gt: float) -> None:
        c.stroke_weight(2 * EM)
        line_lerp(c, 0, BISECT_Y, 0, 0, t)
        line_lerp(c, 0, BISECT_Y, 0, RADIUS, t)
        line_lerp(c, 0, -BISECT_Y, 0, -RADIUS, t)
        line_lerp(c, 0, -BISECT_Y, 0, 0, t)

    def _square_top(self, c: Canvas, t: float, gt: float) -> None:
        c.stroke_weight(3 * EM)
        line_lerp(c, 0, RADIUS, RADIUS, 0, t)
        line_lerp(c, 0, RADIUS, -RADIUS, 0, t)

    def _square_bottom(self, c: Canvas, t: float, gt: float) -> None:
        c.stroke_weight(3 * EM)
        line_lerp(c, RADIUS, 0, 0, -RADIUS, t)
        line_lerp(c, -RADIUS, 0, 0, -RADIUS, t)

    def _rune_circles(self, c: Canvas, t: float, gt: float) -> None:
        c.fill(0)
        c.rotate(Canvas.HALF_PI * (1.0 - t))
        r = t * RADIUS * 0.5
        c.circle(0, RADIUS, r)
        c.circle(-RADIUS, 0, r)
        c.circle(0, -RADIUS, r)
        c.circle(RADIUS, 0, r)

    def _letter_style(self, c: Canvas, t: float, gt: float) -> None:
        c.text_align("center", "center")
        c.text_font(self.font)
        c.no_stroke()
        c.fill(255)

    def _letter(self, glyph: str, x: float, y: float):
        def draw(c: Canvas, t: float, gt: float) -> None:
            c.text_size(t * RADIUS * 0.35)
            c.translate(x, y)
            c.rotate(-1.0 * gt * ROTATE_SPEED + Canvas.PI)
            c.text(glyph, 0, 0)

        return draw

    def _fire_style(self, c: Canvas, t: float, gt: float) -> None:
        c.fill(0)
        c.stroke_weight(2 * EM)
        c.stroke(255)

    def _fire_circles(self, c: Canvas, t: float, gt: float) -> None:
        d = RADIUS * (1.0 - t)
        c.circle(0, d, RADIUS * 0.3 * t)
        c.circle(0, -d, RADIUS * 0.3 * t)
        c.circle(d, 0, RADIUS * 0.3 * t)
        c.circle(-d, 0, RADIUS * 0.3 * t)

    def _center_letter(self, c: Canvas, t: float, gt: float) -> None:
        c.no_stroke()
        c.fill(255)
        c.rotate(-1.0 * gt * ROTATE_SPEED + Canvas.PI)
        c.text_size(t * RADIUS * 0.2)
        c.text("F", 0, 0)
