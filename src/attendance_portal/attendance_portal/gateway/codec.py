"""JSON wire format <-> domain models.

Field names follow the portal backend (camelCase).
"""

from __future__ import annotations

from typing import Any, Mapping

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_iso_date, parse_iso_date, parse_timestamp
from ..core.enums import AttendanceStatus, Role, SalaryType, UserStatus
from ..core.exceptions import GatewayError
from ..inventory.model import InventoryItem
from ..users.model import User


def user_from_json(data: Mapping[str, Any]) -> User:
    try:
        return User(
            user_id=str(data["id"]),
            name=str(data["name"]),
            role=Role(data["role"]),
            status=UserStatus(data.get("status", UserStatus.ACTIVE.value)),
            job_profile=str(data.get("jobProfile") or ""),
            salary_type=SalaryType(data.get("salaryType", SalaryType.MONTHLY.value)),
            salary_amount=float(data.get("salaryAmount") or 0),
            image_url=data.get("imageUrl"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise GatewayError(f"Malformed user payload: {e}") from e


def user_to_json(user: User) -> dict:
    data = {
        "id": user.user_id,
        "name": user.name,
        "role": user.role.value,
        "status": user.status.value,
        "jobProfile": user.job_profile,
        "salaryType": user.salary_type.value,
        "salaryAmount": user.salary_amount,
    }
    if user.image_url:
        data["imageUrl"] = user.image_url
    return data


def attendance_from_json(data: Mapping[str, Any]) -> AttendanceRecord:
    try:
        return AttendanceRecord(
            attendance_id=str(data["id"]),
            user_id=str(data["userId"]),
            work_date=parse_iso_date(str(data["date"])),
            timestamp=parse_timestamp(str(data["timestamp"])),
            status=AttendanceStatus(data.get("status", AttendanceStatus.PENDING.value)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise GatewayError(f"Malformed attendance payload: {e}") from e


def attendance_to_json(record: AttendanceRecord) -> dict:
    return {
        "id": record.attendance_id,
        "userId": record.user_id,
        "date": format_iso_date(record.work_date),
        "timestamp": record.timestamp.isoformat(),
        "status": record.status.value,
    }


def inventory_from_json(data: Mapping[str, Any]) -> InventoryItem:
    try:
        sizes = {str(size): int(qty) for size, qty in (data.get("sizes") or {}).items()}
        return InventoryItem(
            item_id=str(data["id"]),
            name=str(data["name"]),
            color=str(data.get("color") or ""),
            sizes=sizes,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise GatewayError(f"Malformed inventory payload: {e}") from e


def inventory_to_json(item: InventoryItem) -> dict:
    return {
        "id": item.item_id,
        "name": item.name,
        "color": item.color,
        "sizes": dict(item.sizes),
    }
