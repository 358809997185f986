"""CSV loading utilities."""
from __future__ import annotations

import math
from pathlib import Path
from typing import IO, Any, List

import pandas as pd

from .models import Seat, SeatState

REQUIRED_COLUMNS = ["seat_id", "capacity"]


def _is_missing(value: object) -> bool:
    """``pandas`` hands back ``float('nan')`` for empty cells."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return not str(value).strip()


def load_seats(path: Path | str | IO[Any]) -> List[Seat]:
    """Load seat definitions from ``seats.csv``.

    Required columns are ``seat_id`` and ``capacity``. Optional ``state``,
    ``x`` and ``y`` columns set the initial state and canvas position.
    Seat ids must be positive and unique.
    """
    df = pd.read_csv(path)
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"seats.csv is missing columns: {', '.join(missing)}")

    seats: List[Seat] = []
    seen = set()
    for idx, row in df.iterrows():
        seat_id = int(row["seat_id"])
        capacity = int(row["capacity"])
        if seat_id < 1:
            raise ValueError(f"Row {idx + 2}: seat_id must be positive, got {seat_id}")
        if seat_id in seen:
            raise ValueError(f"Row {idx + 2}: duplicate seat_id {seat_id}")
        if capacity < 1:
            raise ValueError(f"Row {idx + 2}: capacity must be positive, got {capacity}")
        seen.add(seat_id)

        state_val = row.get("state", None)
        state = SeatState.AVAILABLE if _is_missing(state_val) else SeatState.parse(state_val)
        # Guests are never seeded from CSV, so an occupied row starts available.
        if state == SeatState.OCCUPIED:
            state = SeatState.AVAILABLE

        x_val = row.get("x", None)
        y_val = row.get("y", None)
        seats.append(
            Seat(
                seat_id=seat_id,
                capacity=capacity,
                state=state,
                x=0.0 if _is_missing(x_val) else float(x_val),
                y=0.0 if _is_missing(y_val) else float(y_val),
            )
        )
    return seats
