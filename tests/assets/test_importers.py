import pytest

from sigil.assets.importers.font import FontImporter
from sigil.assets.types import FontData


def test_font_importer_reads_bytes(tmp_path):
    f = tmp_path / "Daedra.otf"
    f.write_bytes(b"abc")

    data = FontImporter().import_file(f)

    assert isinstance(data, FontData)
    assert data.data == b"abc"
    assert data.name == "Daedra"


def test_font_importer_empty_file(tmp_path):
    f = tmp_path / "empty.ttf"
    f.write_bytes(b"")

    with pytest.raises(ValueError, match="empty"):
        FontImporter().import_file(f)
