from sigil.assets.handle import AssetHandle
from sigil.assets.server import AssetServer
from sigil.assets.types import FontData


def test_asset_server_async_load(tmp_path):
    fonts = tmp_path / "fonts"
    fonts.mkdir()
    (fonts / "glyphs.otf").write_bytes(b"OTTO-fake-font-bytes")

    server = AssetServer(asset_root=tmp_path)

    handle = server.load("fonts/glyphs.otf")

    assert isinstance(handle, AssetHandle)
    assert handle.path == "fonts/glyphs.otf"

    loaded_ids = server.wait()

    assert handle.id in loaded_ids
    assert server.is_loaded(handle)

    loaded_data = server.registry.get(handle.id)
    assert isinstance(loaded_data, FontData)
    assert loaded_data.data == b"OTTO-fake-font-bytes"
    assert loaded_data.name == "glyphs"

    server.shutdown()


def test_asset_server_caching(tmp_path):
    (tmp_path / "cached.ttf").write_bytes(b"\x00\x01\x00\x00")

    server = AssetServer(asset_root=tmp_path)

    h1 = server.load("cached.ttf")
    h2 = server.load("cached.ttf")

    assert h1 == h2
    assert h1.id == h2.id

    server.shutdown()


def test_missing_file_stays_unloaded(tmp_path, capsys):
    server = AssetServer(asset_root=tmp_path)
    handle = server.load("fonts/missing.otf")

    assert server.wait() == []
    assert not server.is_loaded(handle)
    assert "[assets] failed to load" in capsys.readouterr().out

    server.shutdown()


def test_unknown_extension_is_reported(tmp_path, capsys):
    (tmp_path / "notes.txt").write_text("hello")
    server = AssetServer(asset_root=tmp_path)
    handle = server.load("notes.txt")

    server.wait()
    assert not server.is_loaded(handle)
    assert "No importer for .txt" in capsys.readouterr().out

    server.shutdown()
