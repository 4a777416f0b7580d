from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, Sequence

from ..core.enums import Role
from ..gateway.base import PortalGateway
from .model import User

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Read-only lookup interface for users.

    Note (DIP): the session depends on this interface, not on a concrete gateway.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError


class UserDirectory(UserRepository):
    """Last-fetched snapshot of users, refreshed from the gateway."""

    def __init__(self, gateway: PortalGateway):
        self._gateway = gateway
        self._users: List[User] = []
        self._by_id: Dict[str, User] = {}

    def refresh(self) -> int:
        users = list(self._gateway.fetch_users())
        self._users = users
        self._by_id = {u.user_id: u for u in users}
        logger.debug("Loaded %d users", len(users))
        return len(users)

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._by_id.get(str(user_id))

    def list_all(self) -> List[User]:
        return list(self._users)

    def list_by_role(self, role: Role) -> List[User]:
        return [u for u in self._users if u.role == role]

    def display_name(self, user_id: str, default: str) -> str:
        user = self._by_id.get(str(user_id))
        return user.name if user else default
