from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class InventoryItem:
    """Stock item keyed by its tracking number, with size-wise quantities."""

    item_id: str
    name: str
    color: str
    sizes: Dict[str, int] = field(default_factory=dict)

    @property
    def total_stock(self) -> int:
        return sum(self.sizes.values())

    def sizes_label(self) -> str:
        return ", ".join(f"{size}: {qty}" for size, qty in self.sizes.items())
