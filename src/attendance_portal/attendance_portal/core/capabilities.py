"""Role -> capability lookup table.

Computed once at import; the web layer and services only query it.
"""

from __future__ import annotations

from typing import FrozenSet, Mapping, Optional, Sequence, Tuple

from .enums import Capability, Role

_COMMON: FrozenSet[Capability] = frozenset({Capability.VIEW_DASHBOARD, Capability.VIEW_WORK_IN_PROGRESS})

CAPABILITIES_BY_ROLE: Mapping[Role, FrozenSet[Capability]] = {
    Role.EMPLOYEE: _COMMON | {Capability.SUBMIT_OWN_ATTENDANCE},
    Role.ADMIN: _COMMON
    | {
        Capability.REVIEW_ALL_ATTENDANCE,
        Capability.MANAGE_EMPLOYEES,
        Capability.MANAGE_INVENTORY,
    },
}

# (page id, label, capability needed to see it); None means any logged-in user.
NAVIGATION: Sequence[Tuple[str, str, Optional[Capability]]] = (
    ("dashboard", "Dashboard", Capability.VIEW_DASHBOARD),
    ("employees", "Employees", Capability.MANAGE_EMPLOYEES),
    ("attendance", "Attendance", None),
    ("inventory", "Inventory", Capability.MANAGE_INVENTORY),
    ("wip", "Work In Progress", Capability.VIEW_WORK_IN_PROGRESS),
)


def capabilities_for(role: Optional[Role]) -> FrozenSet[Capability]:
    if role is None:
        return frozenset()
    return CAPABILITIES_BY_ROLE.get(role, frozenset())


def navigation_for(role: Optional[Role]) -> list[dict]:
    if role is None:
        return []
    caps = capabilities_for(role)
    return [
        {"id": page_id, "label": label}
        for page_id, label, needed in NAVIGATION
        if needed is None or needed in caps
    ]
