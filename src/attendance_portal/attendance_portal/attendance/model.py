from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one presence mark per user per calendar day."""

    attendance_id: str
    user_id: str
    work_date: date
    timestamp: datetime
    status: AttendanceStatus = AttendanceStatus.PENDING

    @property
    def is_pending(self) -> bool:
        return self.status == AttendanceStatus.PENDING


@dataclass(frozen=True)
class AttendanceReviewRow:
    """Read-model for the admin review table."""

    attendance_id: str
    user_id: str
    user_name: str
    work_date: date
    timestamp: datetime
    status: AttendanceStatus
    can_review: bool
