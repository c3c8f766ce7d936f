# sketches/__init__.py
from sigil.core.registry import registry
from sketches.inscribed_square import InscribedSquare
from sketches.text import TextOrSomething

__all__ = ["registry", "InscribedSquare", "TextOrSomething"]
