# sigil/assets/__init__.py
from sigil.assets.handle import AssetHandle, AssetId
from sigil.assets.server import AssetServer
from sigil.assets.types import FontData

__all__ = [
    "AssetServer",
    "AssetHandle",
    "AssetId",
    "FontData",
]
