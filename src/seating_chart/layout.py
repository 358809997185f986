"""Seat layout: the ordered list of seats plus save/load."""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .models import Guest, Seat, SeatState
from .roles import RoleManager, get_role_manager

logger = logging.getLogger(__name__)


def seat_to_dict(seat: Seat) -> Dict[str, Any]:
    guest = None
    if seat.guest is not None:
        guest = {
            "first_name": seat.guest.first_name,
            "last_name": seat.guest.last_name,
            "room_number": seat.guest.room_number,
            "party_size": seat.guest.party_size,
        }
    return {
        "seat_id": seat.seat_id,
        "capacity": seat.capacity,
        "state": seat.state.value,
        "guest": guest,
        "occupied_since": seat.occupied_since.isoformat() if seat.occupied_since else None,
        "x": seat.x,
        "y": seat.y,
    }


def seat_from_dict(data: Dict[str, Any]) -> Seat:
    guest_data = data.get("guest")
    guest = Guest(**guest_data) if guest_data else None
    since = data.get("occupied_since")
    occupied_since = datetime.fromisoformat(since) if since else None
    if occupied_since is not None and occupied_since.tzinfo is None:
        occupied_since = occupied_since.replace(tzinfo=timezone.utc)
    return Seat(
        seat_id=int(data["seat_id"]),
        capacity=int(data.get("capacity", 1)),
        state=SeatState.parse(data.get("state", SeatState.AVAILABLE.value)),
        guest=guest,
        occupied_since=occupied_since,
        x=float(data.get("x", 0.0)),
        y=float(data.get("y", 0.0)),
    )


class Layout:
    """Ordered collection of seats, saved and reloaded as a whole.

    ``dirty`` marks edits that have not been written yet. Structural edits
    (adding, removing, moving seats) require the Admin role and are silent
    no-ops otherwise.
    """

    def __init__(self, seats: Iterable[Seat] = (), roles: Optional[RoleManager] = None) -> None:
        self.seats: List[Seat] = []
        self.dirty = False
        self._roles = roles
        for seat in seats:
            self._append(seat)

    @property
    def roles(self) -> RoleManager:
        return self._roles if self._roles is not None else get_role_manager()

    def _append(self, seat: Seat) -> None:
        if seat.seat_id < 1:
            raise ValueError(f"Seat id must be a positive integer: {seat.seat_id}")
        if self.get(seat.seat_id) is not None:
            raise ValueError(f"Duplicate seat id: {seat.seat_id}")
        self.seats.append(seat)

    def __iter__(self) -> Iterator[Seat]:
        return iter(self.seats)

    def __len__(self) -> int:
        return len(self.seats)

    def get(self, seat_id: int) -> Optional[Seat]:
        return next((s for s in self.seats if s.seat_id == seat_id), None)

    def next_seat_id(self) -> int:
        """Lowest unused positive seat id."""
        used = {s.seat_id for s in self.seats}
        seat_id = 1
        while seat_id in used:
            seat_id += 1
        return seat_id

    def mark_dirty(self) -> None:
        self.dirty = True

    def extend(self, seats: Iterable[Seat]) -> None:
        """Append pre-built seats (seeding from CSV) and mark the layout dirty."""
        for seat in seats:
            self._append(seat)
        self.mark_dirty()

    # ----------------------------- admin edits -----------------------------
    def add_seat(self, capacity: int = 1, x: float = 0.0, y: float = 0.0) -> Optional[Seat]:
        if not self.roles.require_admin("add seat"):
            return None
        if capacity < 1:
            raise ValueError(f"Seat capacity must be positive: {capacity}")
        seat = Seat(seat_id=self.next_seat_id(), capacity=capacity, x=x, y=y)
        self.seats.append(seat)
        self.mark_dirty()
        logger.info("Added seat %s (capacity %s)", seat.seat_id, capacity)
        return seat

    def remove_seat(self, seat_id: int) -> bool:
        if not self.roles.require_admin("remove seat"):
            return False
        seat = self.get(seat_id)
        if seat is None:
            return False
        self.seats.remove(seat)
        self.mark_dirty()
        logger.info("Removed seat %s", seat_id)
        return True

    def move_seat(self, seat_id: int, x: float, y: float) -> bool:
        if not self.roles.require_admin("move seat"):
            return False
        seat = self.get(seat_id)
        if seat is None:
            return False
        seat.x, seat.y = float(x), float(y)
        self.mark_dirty()
        return True

    # ----------------------------- persistence -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"seats": [seat_to_dict(s) for s in self.seats]}

    def save(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
                f.write("\n")
            os.replace(temp_path, path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        self.dirty = False
        logger.info("Saved layout with %d seats to %s", len(self.seats), path)

    def save_if_dirty(self, path: Path | str) -> bool:
        if not self.dirty:
            return False
        self.save(path)
        return True

    @classmethod
    def load(cls, path: Path | str, roles: Optional[RoleManager] = None) -> "Layout":
        """Load a layout file. A missing file yields an empty layout."""
        path = Path(path)
        if not path.exists():
            logger.info("No layout at %s, starting empty", path)
            return cls(roles=roles)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return cls((seat_from_dict(d) for d in data.get("seats", [])), roles=roles)
