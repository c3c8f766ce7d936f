# sigil/graphics/context.py
from __future__ import annotations

from types import TracebackType
from typing import Optional, Protocol, Type, runtime_checkable


@runtime_checkable
class DrawingContext(Protocol):
    """
    The slice of a rendering surface the sequencer relies on.
    Everything else a step draws is opaque to the engine.
    """

    @property
    def depth(self) -> int:
        """Number of pushed states above the base state."""
        ...

    def push(self) -> None: ...

    def pop(self) -> None: ...


class StateGuard:
    """
    Saves the context's drawing state on enter and restores it on exit.

    Exit unwinds the stack back to the depth recorded on enter, so pushes
    left unbalanced by the guarded block are discarded too. Restoration
    happens on every exit path, including exceptions, which are never
    suppressed.
    """

    def __init__(self, context: DrawingContext):
        self._context = context
        self._depth: Optional[int] = None

    def __enter__(self) -> DrawingContext:
        self._depth = self._context.depth
        self._context.push()
        return self._context

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        if self._depth is None:
            return False

        depth, self._depth = self._depth, None
        while self._context.depth > depth:
            self._context.pop()
        # A block that popped past its own push has already dropped back
        # to (or below) the saved state; there is nothing left to undo.
        return False


def scoped(context: DrawingContext) -> StateGuard:
    return StateGuard(context)
