from __future__ import annotations

import json
from datetime import date, datetime, timezone

import pytest

from src.attendance_portal.attendance_portal.attendance.model import AttendanceRecord
from src.attendance_portal.attendance_portal.core.enums import AttendanceStatus
from src.attendance_portal.attendance_portal.core.exceptions import GatewayError
from src.attendance_portal.attendance_portal.gateway.codec import attendance_to_json, user_to_json
from src.attendance_portal.attendance_portal.gateway.memory_gateway import InMemoryGateway, SeedGateway


def _draft(attendance_id: str = "new-1") -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=attendance_id,
        user_id="emp-2",
        work_date=date(2024, 7, 28),
        timestamp=datetime(2024, 7, 28, 9, 0, tzinfo=timezone.utc),
    )


def test_demo_gateways_do_not_share_state():
    first = InMemoryGateway.demo()
    second = InMemoryGateway.demo()

    first.create_attendance(_draft())

    assert len(first.fetch_attendance()) == len(second.fetch_attendance()) + 1


def test_update_status_in_place():
    gw = InMemoryGateway.demo()

    updated = gw.update_attendance_status("att-2", AttendanceStatus.REJECTED)

    assert updated.status == AttendanceStatus.REJECTED
    assert [r.status for r in gw.fetch_attendance() if r.attendance_id == "att-2"] == [AttendanceStatus.REJECTED]


def test_update_unknown_record_raises():
    with pytest.raises(GatewayError):
        InMemoryGateway.demo().update_attendance_status("nope", AttendanceStatus.APPROVED)


def test_seed_gateway_is_read_only():
    gw = SeedGateway.load()

    assert {u.user_id for u in gw.fetch_users()} >= {"admin-1", "emp-1"}
    with pytest.raises(GatewayError):
        gw.create_attendance(_draft())
    with pytest.raises(GatewayError):
        gw.update_attendance_status("att-2", AttendanceStatus.APPROVED)


def test_seed_gateway_from_file(tmp_path):
    gw = InMemoryGateway.demo()
    payload = {
        "users": [user_to_json(u) for u in gw.fetch_users()],
        "attendance": [attendance_to_json(a) for a in gw.fetch_attendance()],
        "inventory": [],
    }
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    seeded = SeedGateway.load(path)

    assert isinstance(seeded, SeedGateway)
    assert seeded.fetch_users() == gw.fetch_users()
    assert seeded.fetch_attendance() == gw.fetch_attendance()
    assert seeded.fetch_inventory() == []


def test_missing_seed_file_raises_gateway_error(tmp_path):
    with pytest.raises(GatewayError):
        SeedGateway.load(tmp_path / "missing.json")
