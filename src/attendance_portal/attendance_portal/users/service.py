from __future__ import annotations

import logging
from typing import FrozenSet, List, Optional

from ..core.capabilities import capabilities_for, navigation_for
from ..core.enums import Capability, Role
from ..core.exceptions import AuthorizationError, InactiveUserError, NotFoundError
from .model import User
from .repository import UserDirectory, UserRepository

logger = logging.getLogger(__name__)


class PortalSession:
    """Who is acting now, and what they may do.

    Nothing here survives a restart; the web layer re-validates the stored
    user id through ``login`` on each request.
    """

    def __init__(self, users: UserRepository):
        self._users = users
        self._current: Optional[User] = None

    @property
    def current_user(self) -> Optional[User]:
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    def login(self, user_id: str) -> User:
        user = self._users.get_by_id(str(user_id))
        if not user:
            raise NotFoundError("This user does not exist.")
        if not user.is_active:
            raise InactiveUserError("This user is terminated.")

        self._current = user
        logger.debug("Session started for %s (%s)", user.user_id, user.role.value)
        return user

    def logout(self) -> None:
        self._current = None

    def current_capabilities(self) -> FrozenSet[Capability]:
        return capabilities_for(self._current.role if self._current else None)

    def can(self, capability: Capability) -> bool:
        return capability in self.current_capabilities()

    def require(self, capability: Capability) -> User:
        if not self._current:
            raise AuthorizationError("Please log in to continue.")
        if not self.can(capability):
            raise AuthorizationError("You do not have permission for this action.")
        return self._current

    def navigation(self) -> List[dict]:
        return navigation_for(self._current.role if self._current else None)

    def is_holder(self, user: User) -> bool:
        return self._current is not None and self._current.user_id == user.user_id


class UserService:
    """Use case: employee listing for admins and the login picker."""

    def __init__(self, users: UserDirectory):
        self._users = users

    def login_choices(self) -> List[User]:
        return [u for u in self._users.list_all() if u.is_active]

    def list_employees(self, session: PortalSession) -> List[User]:
        session.require(Capability.MANAGE_EMPLOYEES)
        return self._users.list_by_role(Role.EMPLOYEE)
