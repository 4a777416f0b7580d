"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

from src.attendance_portal.attendance_portal.container import build_container


def main():
    container = build_container(gateway_config={"mode": "memory"})
    container.refresh()
    attendance = container.attendance_service

    employee_session = container.new_session()
    employee = employee_session.login("emp-1")
    record = attendance.mark_present(employee_session, employee)
    print("marked:", attendance.to_ui(record))

    admin_session = container.new_session()
    admin = admin_session.login("admin-1")
    approved = attendance.review_attendance(admin_session, admin, record.attendance_id, "approved")
    print("reviewed:", attendance.to_ui(approved))

    for row in attendance.list_for_review(admin_session):
        print(attendance.to_ui(row))

    container.close()


if __name__ == "__main__":
    main()
