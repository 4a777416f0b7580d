from datetime import date, datetime, timezone

from src.attendance_portal.attendance_portal.attendance.model import AttendanceRecord
from src.attendance_portal.attendance_portal.attendance.store import AttendanceStore
from src.attendance_portal.attendance_portal.core.enums import AttendanceStatus


def _rec(attendance_id: str, user_id: str, day: int, hour: int) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=attendance_id,
        user_id=user_id,
        work_date=date(2024, 7, day),
        timestamp=datetime(2024, 7, day, hour, 0, tzinfo=timezone.utc),
    )


def test_lookup_by_owner_and_date():
    store = AttendanceStore([_rec("a", "emp-1", 27, 9), _rec("b", "emp-1", 28, 9)])

    assert store.get_for_user_and_date("emp-1", date(2024, 7, 28)).attendance_id == "b"
    assert store.get_for_user_and_date("emp-2", date(2024, 7, 28)) is None


def test_replace_swaps_record_keeping_position():
    store = AttendanceStore([_rec("a", "emp-1", 27, 9), _rec("b", "emp-2", 27, 10)])
    approved = AttendanceRecord(
        attendance_id="a",
        user_id="emp-1",
        work_date=date(2024, 7, 27),
        timestamp=datetime(2024, 7, 27, 9, 0, tzinfo=timezone.utc),
        status=AttendanceStatus.APPROVED,
    )

    assert store.replace("a", approved) is True
    assert [r.attendance_id for r in store.snapshot()] == ["a", "b"]
    assert store.get_by_id("a").status == AttendanceStatus.APPROVED
    assert store.replace("zzz", _rec("zzz", "emp-1", 1, 1)) is False


def test_snapshot_is_a_copy():
    store = AttendanceStore([_rec("a", "emp-1", 27, 9)])
    snap = store.snapshot()
    snap.clear()

    assert len(store) == 1


def test_sorted_for_display_newest_first():
    store = AttendanceStore([_rec("a", "emp-1", 27, 9), _rec("c", "emp-2", 28, 8), _rec("b", "emp-2", 27, 11)])

    assert [r.attendance_id for r in store.sorted_for_display()] == ["c", "b", "a"]
    # insertion order untouched
    assert [r.attendance_id for r in store.snapshot()] == ["a", "c", "b"]
