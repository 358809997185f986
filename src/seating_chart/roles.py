"""Current user role and admin login."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .models import Role, Seat, SeatState

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_PASSWORD = "admin123"

RoleListener = Callable[[Role], None]


class RoleManager:
    """Holds the active role and notifies listeners when it changes.

    Roles live for the process lifetime only. Everyone starts as an
    Attendant and must log in with the admin password to edit the layout.
    """

    def __init__(self, admin_password: str = DEFAULT_ADMIN_PASSWORD) -> None:
        self.admin_password = admin_password
        self._role = Role.ATTENDANT
        self._listeners: List[RoleListener] = []

    @property
    def current_role(self) -> Role:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == Role.ADMIN

    def add_listener(self, listener: RoleListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: RoleListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_role(self, role: Role) -> None:
        """Switch role. Listeners only fire on an actual change."""
        if role == self._role:
            return
        self._role = role
        logger.info("Role changed to %s", role.value)
        for listener in list(self._listeners):
            listener(role)

    def login(self, password: str) -> str:
        """Try to elevate to Admin and return the feedback message."""
        if password == self.admin_password:
            self.set_role(Role.ADMIN)
            return "Admin mode activated"
        logger.warning("Rejected admin login attempt")
        return "Incorrect password"

    def logout(self) -> None:
        self.set_role(Role.ATTENDANT)

    def require_admin(self, action: str = "") -> bool:
        """Authorization check for admin-only actions.

        Callers treat ``False`` as a silent no-op.
        """
        if self.is_admin:
            return True
        if action:
            logger.debug("Ignoring %s: admin role required", action)
        return False

    def can_interact(self, seat: Optional[Seat]) -> bool:
        """Attendants cannot open out-of-service seats, admins can."""
        if seat is None:
            return False
        if seat.state == SeatState.OUT_OF_SERVICE:
            return self.is_admin
        return True


_manager: Optional[RoleManager] = None


def get_role_manager() -> RoleManager:
    """Return the process-wide role manager, creating it on first use."""
    global _manager
    if _manager is None:
        _manager = RoleManager()
    return _manager


def reset_role_manager(admin_password: str = DEFAULT_ADMIN_PASSWORD) -> RoleManager:
    """Replace the process-wide role manager (startup and tests)."""
    global _manager
    _manager = RoleManager(admin_password)
    return _manager
