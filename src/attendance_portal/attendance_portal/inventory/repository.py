from __future__ import annotations

import logging
from typing import List

from ..gateway.base import PortalGateway
from .model import InventoryItem

logger = logging.getLogger(__name__)


class InventoryCatalog:
    """Last-fetched snapshot of inventory items (read-only)."""

    def __init__(self, gateway: PortalGateway):
        self._gateway = gateway
        self._items: List[InventoryItem] = []

    def refresh(self) -> int:
        self._items = list(self._gateway.fetch_inventory())
        logger.debug("Loaded %d inventory items", len(self._items))
        return len(self._items)

    def list_all(self) -> List[InventoryItem]:
        return list(self._items)
