from __future__ import annotations

from typing import Protocol, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from ..inventory.model import InventoryItem
from ..users.model import User


class PortalGateway(Protocol):
    """Backing-store interface the services depend on.

    Note (DIP): services only see this contract, never a concrete backend.
    Every implementation raises ``GatewayError`` on failure and never retries.
    """

    def fetch_users(self) -> Sequence[User]:
        raise NotImplementedError

    def fetch_attendance(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def fetch_inventory(self) -> Sequence[InventoryItem]:
        raise NotImplementedError

    def create_attendance(self, record: AttendanceRecord) -> AttendanceRecord:
        """Persist a new pending record; returns the record as stored."""

        raise NotImplementedError

    def update_attendance_status(self, attendance_id: str, status: AttendanceStatus) -> AttendanceRecord:
        raise NotImplementedError

    def close(self) -> None:
        """Release transport resources (connection pools)."""

        raise NotImplementedError
