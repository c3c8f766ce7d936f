# sigil/assets/registry.py
from typing import Any, Dict, Optional

from sigil.assets.handle import AssetId


class AssetRegistry:
    """
    Stores loaded asset data mapped by AssetId.
    """

    def __init__(self) -> None:
        self._storage: Dict[AssetId, Any] = {}

    def store(self, asset_id: AssetId, data: Any) -> None:
        self._storage[asset_id] = data

    def get(self, asset_id: AssetId) -> Optional[Any]:
        """Retrieve asset data if available."""
        return self._storage.get(asset_id)

    def __contains__(self, asset_id: AssetId) -> bool:
        return asset_id in self._storage
