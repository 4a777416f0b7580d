from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for capability lookups."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class UserStatus(str, Enum):
    ACTIVE = "active"
    TERMINATED = "terminated"


class SalaryType(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    PIECE_RATE = "piece_rate"


class AttendanceStatus(str, Enum):
    """Approval state of an attendance record.

    PENDING is the only initial state; APPROVED and REJECTED are terminal.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Capability(str, Enum):
    """Named permission granted by role."""

    VIEW_DASHBOARD = "view_dashboard"
    VIEW_WORK_IN_PROGRESS = "view_work_in_progress"
    SUBMIT_OWN_ATTENDANCE = "submit_own_attendance"
    REVIEW_ALL_ATTENDANCE = "review_all_attendance"
    MANAGE_EMPLOYEES = "manage_employees"
    MANAGE_INVENTORY = "manage_inventory"


class GatewayMode(str, Enum):
    HTTP = "http"
    MEMORY = "memory"
    SEED = "seed"
