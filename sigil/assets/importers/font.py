# sigil/assets/importers/font.py
from pathlib import Path

from sigil.assets.importers.base import AssetImporter
from sigil.assets.types import FontData


class FontImporter(AssetImporter):
    def import_file(self, path: Path) -> FontData:
        data = path.read_bytes()
        if not data:
            raise ValueError(f"Font file is empty: {path}")
        return FontData(data=data, name=path.stem)
