from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role, SalaryType, UserStatus


@dataclass(frozen=True)
class User:
    """Domain entity: a person known to the portal.

    Note: read-only for this package; hiring and termination happen upstream.
    """

    user_id: str
    name: str
    role: Role
    status: UserStatus = UserStatus.ACTIVE
    job_profile: str = ""
    salary_type: SalaryType = SalaryType.MONTHLY
    salary_amount: float = 0.0
    image_url: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE
