from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import List, Optional

from ..common.datetime_utils import format_iso_date, now_local
from ..common.validators import parse_decision
from ..core.constants import UNKNOWN_USER_NAME
from ..core.enums import AttendanceStatus, Capability
from ..core.exceptions import (
    AlreadyMarkedError,
    AuthorizationError,
    InvalidTransitionError,
    NotFoundError,
)
from ..gateway.base import PortalGateway
from ..users.model import User
from ..users.repository import UserDirectory
from ..users.service import PortalSession
from .model import AttendanceRecord, AttendanceReviewRow
from .store import AttendanceStore

logger = logging.getLogger(__name__)


class AttendanceService:
    """The only component allowed to create or transition attendance records.

    Every write goes to the gateway first; the store is touched only after
    the gateway returned successfully, so a failed call leaves it unchanged.
    Gateway failures propagate as ``GatewayError`` without retries.
    """

    def __init__(
        self,
        store: AttendanceStore,
        gateway: PortalGateway,
        users: Optional[UserDirectory] = None,
    ):
        self._store = store
        self._gateway = gateway
        self._users = users

    def refresh(self) -> int:
        records = list(self._gateway.fetch_attendance())
        self._store.replace_all(records)
        logger.debug("Loaded %d attendance records", len(records))
        return len(records)

    def mark_present(self, session: PortalSession, acting: User, *, now: Optional[datetime] = None) -> AttendanceRecord:
        if not session.is_holder(acting):
            raise AuthorizationError("You can only mark your own attendance.")
        session.require(Capability.SUBMIT_OWN_ATTENDANCE)

        now = now or now_local()
        today = now.date()

        if self._store.get_for_user_and_date(acting.user_id, today):
            raise AlreadyMarkedError(f"Attendance for {format_iso_date(today)} is already marked.")

        draft = AttendanceRecord(
            attendance_id=uuid.uuid4().hex,
            user_id=acting.user_id,
            work_date=today,
            timestamp=now,
            status=AttendanceStatus.PENDING,
        )
        created = self._gateway.create_attendance(draft)

        self._store.append(created)
        logger.info("Attendance %s marked for %s on %s", created.attendance_id, acting.user_id, today)
        return created

    def review_attendance(
        self,
        session: PortalSession,
        acting: User,
        attendance_id: str,
        decision: AttendanceStatus | str,
    ) -> AttendanceRecord:
        if not session.is_holder(acting):
            raise AuthorizationError("You do not have permission for this action.")
        session.require(Capability.REVIEW_ALL_ATTENDANCE)

        status = parse_decision(decision)

        record = self._store.get_by_id(str(attendance_id))
        if not record:
            raise NotFoundError("Attendance record not found.")
        if not record.is_pending:
            raise InvalidTransitionError(f"Attendance record is already {record.status.value}.")

        updated = self._gateway.update_attendance_status(record.attendance_id, status)

        # Keyed by the requested id; the backend may answer with a reformatted one.
        self._store.replace(record.attendance_id, updated)
        logger.info("Attendance %s %s by %s", record.attendance_id, status.value, acting.user_id)
        return updated

    def today_record(self, user_id: str, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        today = (now or now_local()).date()
        return self._store.get_for_user_and_date(user_id, today)

    def list_for_review(self, session: PortalSession) -> List[AttendanceReviewRow]:
        session.require(Capability.REVIEW_ALL_ATTENDANCE)
        return [
            AttendanceReviewRow(
                attendance_id=r.attendance_id,
                user_id=r.user_id,
                user_name=self._user_name(r.user_id),
                work_date=r.work_date,
                timestamp=r.timestamp,
                status=r.status,
                can_review=r.is_pending,
            )
            for r in self._store.sorted_for_display()
        ]

    def _user_name(self, user_id: str) -> str:
        if not self._users:
            return UNKNOWN_USER_NAME
        return self._users.display_name(user_id, UNKNOWN_USER_NAME)

    @staticmethod
    def to_ui(r: AttendanceRecord | AttendanceReviewRow) -> dict:
        row = {
            "id": r.attendance_id,
            "userId": r.user_id,
            "date": format_iso_date(r.work_date),
            "timestamp": r.timestamp.isoformat(),
            "time": r.timestamp.strftime("%H:%M:%S"),
            "status": r.status.value,
        }
        if isinstance(r, AttendanceReviewRow):
            row["userName"] = r.user_name
            row["canReview"] = r.can_review
        return row
