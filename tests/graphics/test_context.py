import pytest

from sigil.graphics.context import DrawingContext, StateGuard, scoped


def test_recording_context_satisfies_protocol(ctx):
    assert isinstance(ctx, DrawingContext)


def test_guard_pushes_and_pops(ctx):
    ctx.style["fill"] = "black"

    with scoped(ctx) as inner:
        assert inner is ctx
        assert ctx.depth == 1
        ctx.style["fill"] = "white"

    assert ctx.depth == 0
    assert ctx.style == {"fill": "black"}


def test_guard_restores_on_exception(ctx):
    with pytest.raises(ZeroDivisionError):
        with StateGuard(ctx):
            ctx.style["alpha"] = 0.5
            1 / 0

    assert ctx.depth == 0
    assert ctx.style == {}


def test_guards_nest(ctx):
    with scoped(ctx):
        ctx.style["a"] = 1
        with scoped(ctx):
            ctx.style["b"] = 2
            assert ctx.depth == 2
        assert ctx.style == {"a": 1}
    assert ctx.style == {}


def test_guard_unwinds_unbalanced_pushes(ctx):
    with pytest.raises(RuntimeError):
        with scoped(ctx):
            ctx.push()
            ctx.push()
            ctx.style["leak"] = True
            raise RuntimeError("fault")

    assert ctx.depth == 0
    assert ctx.style == {}


def test_guard_returns_to_entry_depth_when_nested(ctx):
    ctx.push()
    ctx.style["outer"] = 1
    with scoped(ctx):
        ctx.push()
        ctx.style["inner"] = 2

    assert ctx.depth == 1
    assert ctx.style == {"outer": 1}
