"""Gateway backed by the portal's REST API."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

import httpx

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.enums import AttendanceStatus
from ..core.exceptions import GatewayError
from ..inventory.model import InventoryItem
from ..users.model import User
from .base import PortalGateway
from .codec import attendance_from_json, inventory_from_json, user_from_json

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HttpGateway(PortalGateway):
    """Simple sync wrapper around the backend endpoints used by the portal."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, *, default_error: str, json: Any = None) -> Any:
        try:
            response = self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise GatewayError(default_error) from e

        if not response.is_success:
            message = _error_message(response) or default_error
            logger.warning("%s %s -> %s: %s", method, path, response.status_code, message)
            raise GatewayError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise GatewayError(f"{default_error} (invalid JSON response)") from e

    def _fetch_list(self, path: str, decode: Callable[[Any], T], *, default_error: str) -> List[T]:
        data = self._request("GET", path, default_error=default_error)
        if not isinstance(data, list):
            raise GatewayError(f"{default_error} (expected a list)")
        return [decode(row) for row in data]

    def fetch_users(self) -> List[User]:
        return self._fetch_list("/users", user_from_json, default_error="Failed to fetch users")

    def fetch_attendance(self) -> List[AttendanceRecord]:
        return self._fetch_list("/attendance", attendance_from_json, default_error="Failed to fetch attendance")

    def fetch_inventory(self) -> List[InventoryItem]:
        return self._fetch_list("/inventory", inventory_from_json, default_error="Failed to fetch inventory")

    def create_attendance(self, record: AttendanceRecord) -> AttendanceRecord:
        # The backend assigns id, date and timestamp itself.
        data = self._request(
            "POST",
            "/attendance",
            json={"userId": record.user_id},
            default_error="Failed to mark attendance.",
        )
        return attendance_from_json(data)

    def update_attendance_status(self, attendance_id: str, status: AttendanceStatus) -> AttendanceRecord:
        data = self._request(
            "PUT",
            f"/attendance/{attendance_id}",
            json={"status": AttendanceStatus(status).value},
            default_error="Failed to update status.",
        )
        return attendance_from_json(data)


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
