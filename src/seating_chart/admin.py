"""Admin tools: bulk edits, search, filtering, alerts and reporting."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .clock import Clock, SystemClock
from .layout import Layout
from .models import Seat, SeatState
from .report import write_report

logger = logging.getLogger(__name__)


class AdminTools:
    """Layout-wide operations.

    Clearing everything and bulk state changes need the Admin role. Search,
    filtering, alerts and report export are open to any role.
    """

    def __init__(
        self,
        layout: Layout,
        clock: Optional[Clock] = None,
        layout_path: Path | str | None = None,
        report_filename: str = "session_report.csv",
        alert_threshold_minutes: float = 90.0,
    ) -> None:
        self.layout = layout
        self.clock = clock or SystemClock()
        self.layout_path = Path(layout_path) if layout_path else None
        self.report_filename = report_filename
        self.alert_threshold_minutes = alert_threshold_minutes

    def clear_all(self) -> bool:
        if not self.layout.roles.require_admin("clear all"):
            return False
        for seat in self.layout:
            seat.clear()
        self.layout.mark_dirty()
        if self.layout_path is not None:
            self.layout.save(self.layout_path)
        logger.info("Cleared all %d seats", len(self.layout))
        return True

    def bulk_set_state(self, state: SeatState | str) -> bool:
        if not self.layout.roles.require_admin("bulk state change"):
            return False
        state = SeatState.parse(state)
        for seat in self.layout:
            seat.set_state(state)
        self.layout.mark_dirty()
        logger.info("Set all seats to %s", state.value)
        return True

    def search(self, query: str) -> Optional[Seat]:
        """First seat whose guest name or room contains ``query`` (case-insensitive)."""
        if not query:
            return None
        query = query.lower()
        for seat in self.layout:
            if seat.guest is None:
                continue
            room = (seat.guest.room_number or "").lower()
            if query in seat.guest.full_name.lower() or query in room:
                return seat
        return None

    def filter_by_state(self, state: SeatState | str | None = None) -> List[Seat]:
        if state is None:
            return list(self.layout)
        state = SeatState.parse(state)
        return [s for s in self.layout if s.state == state]

    def alerts(self) -> List[Seat]:
        """Occupied seats at or over the occupancy alert threshold."""
        now = self.clock.now()
        return [
            s for s in self.layout
            if s.state == SeatState.OCCUPIED and s.occupied_minutes(now) >= self.alert_threshold_minutes
        ]

    def export_report(self, directory: Path | str) -> Optional[Path]:
        path = Path(directory) / self.report_filename
        if write_report(self.layout, path, self.clock.now()):
            return path
        return None
