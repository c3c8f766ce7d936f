import numpy as np

from sigil.animation.animations import circle_arc_lerp, line_lerp
from sigil.animation.sequence import Sequencer


def test_line_lerp_draws_partial_segment(canvas):
    canvas.stroke(255)
    line_lerp(canvas, 0, 32, 60, 32, 0.5)

    assert canvas.pixel(20, 32)[:3] == (255, 255, 255)
    assert canvas.pixel(50, 32)[:3] == (0, 0, 0)


def test_line_lerp_at_zero_draws_a_point_only(canvas):
    canvas.stroke(255)
    line_lerp(canvas, 0, 32, 60, 32, 0.0)
    assert canvas.pixel(30, 32)[:3] == (0, 0, 0)


def test_circle_arc_lerp_leaves_state_untouched(canvas):
    canvas.stroke(255)
    canvas.no_fill()
    circle_arc_lerp(canvas, 32, 32, 40, 0.5, direction=-1)

    assert canvas.depth == 0
    np.testing.assert_allclose(canvas.matrix, np.eye(3))


def test_circle_arc_lerp_full_sweep(canvas):
    canvas.stroke(255)
    canvas.stroke_weight(3)
    canvas.no_fill()
    circle_arc_lerp(canvas, 32, 32, 40, 1.0)

    # Every quadrant of the ring is drawn.
    for x, y in [(52, 32), (32, 52), (12, 32), (32, 12)]:
        assert canvas.pixel(x, y)[:3] == (255, 255, 255)
    assert canvas.pixel(32, 32)[:3] == (0, 0, 0)


def test_sequence_on_canvas_keeps_setting_transform(canvas):
    def setting(c, t, gt):
        c.translate(32, 32)
        c.stroke(255)

    def step(c, t, gt):
        c.translate(5, 5)
        c.stroke(255, 0, 0)
        line_lerp(c, -20, 0, 20, 0, t)

    seq = Sequencer().add_setting(setting).add_step(10, step)
    seq.draw(10, 0.0, canvas)

    np.testing.assert_allclose(canvas.matrix[:2, 2], [32, 32])
    assert canvas.state.stroke == (255, 255, 255, 255)
    assert canvas.depth == 0
    # The step drew in red, shifted by its own translate.
    assert canvas.pixel(37, 37)[:3] == (255, 0, 0)
