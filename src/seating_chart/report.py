"""Session utilisation report.

One row per seat::

    Seat ID,State,Guest Name,Room,Party Size,Occupied Minutes

Occupied minutes use one decimal place and are only counted for seats that
are currently ``Occupied``; every other seat reports ``0.0``.
"""
from __future__ import annotations

import csv
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List

from .models import Seat

logger = logging.getLogger(__name__)

REPORT_HEADER = ["Seat ID", "State", "Guest Name", "Room", "Party Size", "Occupied Minutes"]


def report_rows(seats: Iterable[Seat], now: datetime) -> List[List[str]]:
    rows = []
    for seat in seats:
        guest = seat.guest
        rows.append([
            str(seat.seat_id),
            seat.state.value,
            guest.full_name if guest else "",
            guest.room_number if guest else "",
            str(guest.party_size) if guest else "",
            f"{seat.occupied_minutes(now):.1f}",
        ])
    return rows


def render_report(seats: Iterable[Seat], now: datetime) -> str:
    """Return the report as CSV text."""
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(REPORT_HEADER)
    w.writerows(report_rows(seats, now))
    return buf.getvalue()


def write_report(seats: Iterable[Seat], path: Path | str, now: datetime) -> bool:
    """Write the report to ``path``. Failures are logged, not raised."""
    path = Path(path)
    text = render_report(seats, now)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to export report: %s", exc)
        return False
    logger.info("Session report exported to: %s", path)
    return True
