"""Gateways that keep everything in process memory."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from ..core.exceptions import GatewayError
from ..inventory.model import InventoryItem
from ..users.model import User
from .base import PortalGateway
from .codec import attendance_from_json, inventory_from_json, user_from_json
from .seed_data import DEMO_SEED

logger = logging.getLogger(__name__)


class InMemoryGateway(PortalGateway):
    """Mutable mock backend.

    Each instance owns copies of its input lists, so two gateways built from
    the same seed never share state.
    """

    def __init__(
        self,
        users: Iterable[User] = (),
        attendance: Iterable[AttendanceRecord] = (),
        inventory: Iterable[InventoryItem] = (),
    ):
        self._users: List[User] = list(users)
        self._attendance: List[AttendanceRecord] = list(attendance)
        self._inventory: List[InventoryItem] = list(inventory)

    @classmethod
    def from_payload(cls, payload: Mapping) -> "InMemoryGateway":
        """Build from wire-format data: ``{"users": [...], "attendance": [...], "inventory": [...]}``."""

        return cls(
            users=[user_from_json(u) for u in payload.get("users", [])],
            attendance=[attendance_from_json(a) for a in payload.get("attendance", [])],
            inventory=[inventory_from_json(i) for i in payload.get("inventory", [])],
        )

    @classmethod
    def from_file(cls, path: Path) -> "InMemoryGateway":
        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise GatewayError(f"Cannot load seed file {path}: {e}") from e
        return cls.from_payload(payload)

    @classmethod
    def demo(cls) -> "InMemoryGateway":
        return cls.from_payload(DEMO_SEED)

    def fetch_users(self) -> List[User]:
        return list(self._users)

    def fetch_attendance(self) -> List[AttendanceRecord]:
        return list(self._attendance)

    def fetch_inventory(self) -> List[InventoryItem]:
        return list(self._inventory)

    def close(self) -> None:
        pass

    def create_attendance(self, record: AttendanceRecord) -> AttendanceRecord:
        # No uniqueness check here; duplicates are rejected by the service.
        self._attendance.append(record)
        return record

    def update_attendance_status(self, attendance_id: str, status: AttendanceStatus) -> AttendanceRecord:
        for idx, rec in enumerate(self._attendance):
            if rec.attendance_id == attendance_id:
                updated = replace(rec, status=AttendanceStatus(status))
                self._attendance[idx] = updated
                return updated
        raise GatewayError("Attendance record not found.", status_code=404)


class SeedGateway(InMemoryGateway):
    """Read-only view over static seed data."""

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "SeedGateway":
        if path:
            logger.info("Loading seed data from %s", path)
            return cls.from_file(path)
        return cls.from_payload(DEMO_SEED)

    def create_attendance(self, record: AttendanceRecord) -> AttendanceRecord:
        raise GatewayError("Seed data is read-only.")

    def update_attendance_status(self, attendance_id: str, status: AttendanceStatus) -> AttendanceRecord:
        raise GatewayError("Seed data is read-only.")
