"""Data models for SeatingChart."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class SeatState(str, Enum):
    """Lifecycle states of a seat. Order matters for index based selection."""

    AVAILABLE = "Available"
    RESERVED = "Reserved"
    OCCUPIED = "Occupied"
    CLEANING = "Cleaning"
    OUT_OF_SERVICE = "OutOfService"

    @classmethod
    def parse(cls, value: object) -> "SeatState":
        """Parse a state name such as ``"OutOfService"`` or ``"out_of_service"``."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for state in cls:
            if text == state.value or text.upper() == state.name:
                return state
        raise ValueError(f"Unknown seat state: {value}")


class Role(str, Enum):
    """Access levels. Attendants assign and clear, admins edit the layout."""

    ATTENDANT = "Attendant"
    ADMIN = "Admin"


STATE_COLORS = {
    SeatState.AVAILABLE: "#00FF00",
    SeatState.RESERVED: "#FFA300",
    SeatState.OCCUPIED: "#FF0000",
    SeatState.CLEANING: "#FFEB04",
    SeatState.OUT_OF_SERVICE: "#808080",
}


class CapacityError(ValueError):
    """Raised when a party does not fit the seat it is assigned to."""


def parse_party_size(value: object) -> int:
    """Parse a party size typed into a form. Anything unparsable becomes 0."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


@dataclass
class Guest:
    """Occupant record attached to an occupied seat."""

    first_name: str
    last_name: str
    room_number: str = ""
    party_size: int = 1

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def copy(self) -> "Guest":
        return Guest(self.first_name, self.last_name, self.room_number, self.party_size)

    def __str__(self) -> str:
        return f"{self.full_name} (Room: {self.room_number}, Party: {self.party_size})"


@dataclass
class Seat:
    """A bookable unit on the seating canvas.

    A seat holds a guest only while it is ``Occupied``. Clearing it or taking
    it out of service drops the guest and the occupancy timer.
    """

    seat_id: int
    capacity: int = 1
    state: SeatState = SeatState.AVAILABLE
    guest: Optional[Guest] = None
    occupied_since: Optional[datetime] = None
    x: float = 0.0
    y: float = 0.0

    def can_assign_guest(self, guest: Optional[Guest]) -> bool:
        if guest is None:
            return False
        return guest.party_size <= self.capacity

    def assign_guest(self, guest: Guest, now: datetime) -> None:
        """Seat ``guest`` and start the occupancy timer at ``now``.

        Raises :class:`CapacityError` and leaves the seat untouched when the
        party is larger than the seat capacity.
        """
        if not self.can_assign_guest(guest):
            party = guest.party_size if guest is not None else 0
            raise CapacityError(
                f"This seat cannot accommodate a party of {party}. Capacity: {self.capacity}"
            )
        self.guest = guest
        self.occupied_since = now
        self.state = SeatState.OCCUPIED

    def clear(self) -> None:
        self.guest = None
        self.occupied_since = None
        self.state = SeatState.AVAILABLE

    def toggle_out_of_service(self) -> None:
        if self.state == SeatState.OUT_OF_SERVICE:
            self.state = SeatState.AVAILABLE
        else:
            self.guest = None
            self.state = SeatState.OUT_OF_SERVICE
        self.occupied_since = None

    def set_state(self, state: SeatState) -> None:
        """Force a state, dropping any guest (bulk edits)."""
        self.guest = None
        self.occupied_since = None
        self.state = state

    def occupied_minutes(self, now: datetime) -> float:
        if self.state != SeatState.OCCUPIED or self.occupied_since is None:
            return 0.0
        return max(0.0, (now - self.occupied_since).total_seconds() / 60.0)

    def elapsed_label(self, now: datetime) -> str:
        """Timer text shown on an occupied seat, ``MM:SS``."""
        if self.state != SeatState.OCCUPIED or self.occupied_since is None:
            return ""
        elapsed = int(max(0.0, (now - self.occupied_since).total_seconds()))
        minutes, seconds = divmod(elapsed, 60)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def state_color(self) -> str:
        return STATE_COLORS[self.state]
