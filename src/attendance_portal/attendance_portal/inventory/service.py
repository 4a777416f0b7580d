from __future__ import annotations

from typing import List

from ..core.enums import Capability
from ..users.service import PortalSession
from .model import InventoryItem
from .repository import InventoryCatalog


class InventoryService:
    def __init__(self, catalog: InventoryCatalog):
        self._catalog = catalog

    def list_items(self, session: PortalSession) -> List[InventoryItem]:
        session.require(Capability.MANAGE_INVENTORY)
        return self._catalog.list_all()

    def to_ui(self, item: InventoryItem) -> dict:
        return {
            "id": item.item_id,
            "name": item.name,
            "color": item.color,
            "sizes": dict(item.sizes),
            "sizes_label": item.sizes_label(),
            "total_stock": item.total_stock,
        }
