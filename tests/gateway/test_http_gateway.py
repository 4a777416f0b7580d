from __future__ import annotations

import json
from datetime import date, datetime, timezone

import httpx
import pytest

from src.attendance_portal.attendance_portal.attendance.model import AttendanceRecord
from src.attendance_portal.attendance_portal.core.enums import AttendanceStatus, Role, SalaryType, UserStatus
from src.attendance_portal.attendance_portal.core.exceptions import GatewayError
from src.attendance_portal.attendance_portal.gateway.http_gateway import HttpGateway


def _now():
    return datetime(2024, 7, 28, 9, 5, tzinfo=timezone.utc)


RECORD_JSON = {
    "id": "att-77",
    "userId": "emp-1",
    "date": "2024-07-28",
    "timestamp": "2024-07-28T09:05:00.000Z",
    "status": "pending",
}


class Recorder:
    def __init__(self, responses):
        self.responses = responses
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        status, body = self.responses[key]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)


def _gateway(responses):
    recorder = Recorder(responses)
    gw = HttpGateway("http://testserver/api", transport=httpx.MockTransport(recorder))
    return gw, recorder


def test_fetch_users_decodes_wire_shape():
    gw, _ = _gateway(
        {
            ("GET", "/api/users"): (
                200,
                [
                    {
                        "id": "emp-1",
                        "name": "Sunita",
                        "role": "employee",
                        "jobProfile": "Tailor",
                        "salaryType": "piece_rate",
                        "salaryAmount": 0,
                        "status": "terminated",
                    }
                ],
            )
        }
    )

    [user] = gw.fetch_users()

    assert user.user_id == "emp-1"
    assert user.role == Role.EMPLOYEE
    assert user.status == UserStatus.TERMINATED
    assert user.salary_type == SalaryType.PIECE_RATE
    assert not user.is_active


def test_fetch_attendance_and_inventory():
    gw, _ = _gateway(
        {
            ("GET", "/api/attendance"): (200, [RECORD_JSON]),
            ("GET", "/api/inventory"): (200, [{"id": "TRK-1", "name": "Kurta", "color": "Blue", "sizes": {"S": 2, "M": 3}}]),
        }
    )

    [rec] = gw.fetch_attendance()
    [item] = gw.fetch_inventory()

    assert rec.work_date == date(2024, 7, 28)
    assert rec.status == AttendanceStatus.PENDING
    assert rec.timestamp.tzinfo is not None
    assert item.total_stock == 5
    assert item.sizes_label() == "S: 2, M: 3"


def test_create_attendance_posts_owner_id():
    gw, recorder = _gateway({("POST", "/api/attendance"): (201, RECORD_JSON)})
    draft = AttendanceRecord(
        attendance_id="local",
        user_id="emp-1",
        work_date=date(2024, 7, 28),
        timestamp=_now(),
    )

    created = gw.create_attendance(draft)

    assert created.attendance_id == "att-77"
    assert json.loads(recorder.requests[0].content) == {"userId": "emp-1"}


def test_update_status_puts_status():
    gw, recorder = _gateway({("PUT", "/api/attendance/att-77"): (200, dict(RECORD_JSON, status="approved"))})

    updated = gw.update_attendance_status("att-77", AttendanceStatus.APPROVED)

    assert updated.status == AttendanceStatus.APPROVED
    assert json.loads(recorder.requests[0].content) == {"status": "approved"}


def test_error_response_passes_backend_message():
    gw, _ = _gateway({("POST", "/api/attendance"): (409, {"message": "Attendance already marked for today."})})

    with pytest.raises(GatewayError) as exc:
        gw.create_attendance(
            AttendanceRecord(attendance_id="x", user_id="emp-1", work_date=date(2024, 7, 28), timestamp=_now())
        )

    assert exc.value.message == "Attendance already marked for today."
    assert exc.value.status_code == 409


def test_error_response_without_message_uses_default():
    gw, _ = _gateway({("PUT", "/api/attendance/att-1"): (500, "<html>oops</html>")})

    with pytest.raises(GatewayError) as exc:
        gw.update_attendance_status("att-1", AttendanceStatus.REJECTED)

    assert exc.value.message == "Failed to update status."


def test_transport_error_becomes_gateway_error():
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    gw = HttpGateway("http://testserver/api", transport=httpx.MockTransport(boom))

    with pytest.raises(GatewayError) as exc:
        gw.fetch_users()
    assert exc.value.message == "Failed to fetch users"


def test_malformed_payload_becomes_gateway_error():
    gw, _ = _gateway({("GET", "/api/attendance"): (200, [{"id": "att-1"}])})

    with pytest.raises(GatewayError):
        gw.fetch_attendance()


def test_offset_free_timestamp_is_read_as_local_time():
    gw, _ = _gateway({("GET", "/api/attendance"): (200, [dict(RECORD_JSON, timestamp="2024-07-27T09:15:40")])})

    [rec] = gw.fetch_attendance()

    assert rec.timestamp.tzinfo is not None
    assert rec.timestamp.replace(tzinfo=None) == datetime(2024, 7, 27, 9, 15, 40)
    # comparable with aware local "now" values
    assert rec.timestamp < _now()


def test_close_releases_http_client():
    gw, _ = _gateway({})

    gw.close()

    assert gw._client.is_closed
