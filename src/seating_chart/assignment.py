"""Guest assignment workflow for a single selected seat."""
from __future__ import annotations

import logging
from typing import Optional

from .clock import Clock, SystemClock
from .layout import Layout
from .models import CapacityError, Guest, Role, Seat, SeatState, parse_party_size

logger = logging.getLogger(__name__)


class SeatingSession:
    """Backs the assignment panel: pick a seat, then assign, clear or toggle.

    Errors meant for the user (capacity overflow) are returned as strings
    and also kept on ``error``. Actions without an open seat do nothing, and
    a role change closes the open seat.
    """

    def __init__(self, layout: Layout, clock: Optional[Clock] = None) -> None:
        self.layout = layout
        self.clock = clock or SystemClock()
        self.active_seat: Optional[Seat] = None
        self.last_guest: Optional[Guest] = None
        self.error = ""
        self.roles.add_listener(self._on_role_changed)

    @property
    def roles(self):
        return self.layout.roles

    def open_seat(self, seat_id: int) -> Optional[Seat]:
        seat = self.layout.get(seat_id)
        if not self.roles.can_interact(seat):
            return None
        self.active_seat = seat
        self.error = ""
        return seat

    def close(self) -> None:
        self.active_seat = None

    def _on_role_changed(self, role: Role) -> None:
        self.close()

    def _seat_in_reach(self) -> bool:
        """True when a seat is open and the current role may still act on it."""
        if self.active_seat is None:
            return False
        if not self.roles.can_interact(self.active_seat):
            logger.debug("Closing seat %s: no longer available to %s",
                         self.active_seat.seat_id, self.roles.current_role.value)
            self.close()
            return False
        return True

    # ----------------------------- panel state -----------------------------
    @property
    def can_clear(self) -> bool:
        seat = self.active_seat
        return seat is not None and seat.state not in (SeatState.AVAILABLE, SeatState.OUT_OF_SERVICE)

    @property
    def can_assign_previous(self) -> bool:
        return self.last_guest is not None

    @property
    def toggle_label(self) -> str:
        if self.active_seat is not None and self.active_seat.state == SeatState.OUT_OF_SERVICE:
            return "Set Available"
        return "Out of Service"

    # ----------------------------- actions -----------------------------
    def _assign(self, guest: Guest) -> Optional[str]:
        seat = self.active_seat
        try:
            seat.assign_guest(guest, self.clock.now())
        except CapacityError as exc:
            self.error = str(exc)
            return self.error
        self.error = ""
        logger.info("Seat %s assigned to %s", seat.seat_id, guest)
        self.close()
        return None

    def assign(self, first_name: str, last_name: str, room_number: str, party_size: object) -> Optional[str]:
        """Assign a guest built from form input. Returns an error message or None."""
        if not self._seat_in_reach():
            return None
        guest = Guest(first_name, last_name, room_number, parse_party_size(party_size))
        error = self._assign(guest)
        if error is None:
            self.last_guest = guest
        return error

    def assign_previous(self) -> Optional[str]:
        """Seat a copy of the last assigned guest on the open seat."""
        if self.last_guest is None or not self._seat_in_reach():
            return None
        return self._assign(self.last_guest.copy())

    def clear(self) -> None:
        if not self._seat_in_reach():
            return
        self.active_seat.clear()
        self.close()

    def toggle_out_of_service(self) -> None:
        if not self._seat_in_reach():
            return
        if not self.roles.require_admin("toggle out of service"):
            return
        self.active_seat.toggle_out_of_service()
        self.layout.mark_dirty()
        self.close()
