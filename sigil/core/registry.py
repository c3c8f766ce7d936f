# sigil/core/registry.py
from typing import Dict, List, Tuple, Type

from sigil.core.sketch import Sketch
from sigil.types import SketchName


class SketchRegistry:
    """
    Name -> Sketch class lookup for the CLI and exporters.
    """

    def __init__(self) -> None:
        self._sketches: Dict[SketchName, Type[Sketch]] = {}

    def register(self, sketch_cls: Type[Sketch]) -> Type[Sketch]:
        """Add a sketch class. Usable as a class decorator."""
        name = SketchName(sketch_cls.meta.name)
        if name in self._sketches:
            raise KeyError(f"Sketch already registered: {name!r}")

        self._sketches[name] = sketch_cls
        return sketch_cls

    def get(self, name: str) -> Type[Sketch]:
        try:
            return self._sketches[SketchName(name)]
        except KeyError:
            known = ", ".join(self.names()) or "none"
            raise KeyError(f"Unknown sketch {name!r} (known: {known})") from None

    def names(self) -> List[SketchName]:
        return sorted(self._sketches)

    def items(self) -> List[Tuple[SketchName, Type[Sketch]]]:
        return sorted(self._sketches.items())

    def __contains__(self, name: str) -> bool:
        return name in self._sketches

    def __len__(self) -> int:
        return len(self._sketches)


registry = SketchRegistry()
