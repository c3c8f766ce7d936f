# sigil/assets/types.py
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FontData:
    """Raw font file contents; sized pygame fonts are built from this on demand."""

    data: bytes
    name: str
