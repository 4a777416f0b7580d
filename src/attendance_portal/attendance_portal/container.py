from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.service import AttendanceService
from .attendance.store import AttendanceStore
from .core.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT_SECONDS
from .core.enums import GatewayMode
from .core.exceptions import ValidationError
from .gateway.base import PortalGateway
from .gateway.http_gateway import HttpGateway
from .gateway.memory_gateway import InMemoryGateway, SeedGateway
from .inventory.repository import InventoryCatalog
from .inventory.service import InventoryService
from .users.repository import UserDirectory
from .users.service import PortalSession, UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewaySettings:
    mode: GatewayMode
    base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS
    seed_path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: dict) -> "GatewaySettings":
        try:
            mode = GatewayMode(str(data.get("mode", GatewayMode.HTTP.value)).lower())
        except ValueError:
            raise ValidationError(f"Unknown gateway mode: {data.get('mode')!r}")
        seed_path = data.get("seed_path")
        return cls(
            mode=mode,
            base_url=str(data.get("base_url") or DEFAULT_API_BASE_URL),
            timeout=float(data.get("timeout") or DEFAULT_API_TIMEOUT_SECONDS),
            seed_path=Path(seed_path) if seed_path else None,
        )


def build_gateway(settings: GatewaySettings) -> PortalGateway:
    if settings.mode == GatewayMode.HTTP:
        return HttpGateway(settings.base_url, timeout=settings.timeout)
    if settings.mode == GatewayMode.SEED:
        return SeedGateway.load(settings.seed_path)
    if settings.seed_path:
        return InMemoryGateway.from_file(settings.seed_path)
    return InMemoryGateway.demo()


@dataclass(frozen=True)
class Container:
    gateway: PortalGateway

    users: UserDirectory
    inventory: InventoryCatalog
    attendance_store: AttendanceStore

    user_service: UserService
    attendance_service: AttendanceService
    inventory_service: InventoryService

    def refresh(self) -> None:
        """Reload every snapshot from the gateway."""
        self.users.refresh()
        self.attendance_service.refresh()
        self.inventory.refresh()

    def new_session(self) -> PortalSession:
        """A fresh, logged-out session; the web layer builds one per request."""
        return PortalSession(self.users)

    def close(self) -> None:
        self.gateway.close()


def build_container(*, gateway_config: Optional[dict] = None, gateway: Optional[PortalGateway] = None) -> Container:
    if gateway is None:
        settings = GatewaySettings.from_dict(gateway_config or {})
        logger.info("Using %s gateway", settings.mode.value)
        gateway = build_gateway(settings)

    users = UserDirectory(gateway)
    inventory = InventoryCatalog(gateway)
    store = AttendanceStore()

    user_service = UserService(users)
    attendance_service = AttendanceService(store, gateway, users)
    inventory_service = InventoryService(inventory)

    return Container(
        gateway=gateway,
        users=users,
        inventory=inventory,
        attendance_store=store,
        user_service=user_service,
        attendance_service=attendance_service,
        inventory_service=inventory_service,
    )
