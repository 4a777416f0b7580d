from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from .model import AttendanceRecord


class AttendanceStore:
    """Ordered, owned collection of attendance records.

    Only ``AttendanceService`` mutates it, and only after the gateway has
    confirmed the write. Readers get copies.
    """

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._records: List[AttendanceRecord] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def snapshot(self) -> List[AttendanceRecord]:
        return list(self._records)

    def replace_all(self, records: Iterable[AttendanceRecord]) -> None:
        self._records = list(records)

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        for rec in self._records:
            if rec.attendance_id == attendance_id:
                return rec
        return None

    def get_for_user_and_date(self, user_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for rec in self._records:
            if rec.user_id == user_id and rec.work_date == work_date:
                return rec
        return None

    def append(self, record: AttendanceRecord) -> None:
        self._records.append(record)

    def replace(self, attendance_id: str, record: AttendanceRecord) -> bool:
        for idx, rec in enumerate(self._records):
            if rec.attendance_id == attendance_id:
                self._records[idx] = record
                return True
        return False

    def sorted_for_display(self) -> List[AttendanceRecord]:
        """Newest first; display only, the service logic never relies on order."""
        return sorted(self._records, key=lambda r: r.timestamp, reverse=True)
