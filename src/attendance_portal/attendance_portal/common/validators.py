from __future__ import annotations

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def parse_decision(value: AttendanceStatus | str) -> AttendanceStatus:
    """Accept only the two review outcomes (approved / rejected)."""
    try:
        status = AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}")
    if status == AttendanceStatus.PENDING:
        raise ValidationError("Decision must be 'approved' or 'rejected'")
    return status
