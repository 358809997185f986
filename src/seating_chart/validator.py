"""Sanity checks for a loaded layout."""
from __future__ import annotations

import logging
from collections import Counter
from typing import List

from .layout import Layout
from .models import SeatState

logger = logging.getLogger(__name__)


def validate_layout(layout: Layout) -> List[str]:
    """Return a list of problems found in ``layout``; empty when it is sound."""
    problems: List[str] = []
    if not len(layout):
        problems.append("Layout has no seats")

    counts = Counter(s.seat_id for s in layout)
    for seat_id, n in sorted(counts.items()):
        if n > 1:
            problems.append(f"Seat id {seat_id} is used {n} times")

    for seat in layout:
        if seat.seat_id < 1:
            problems.append(f"Seat {seat.seat_id}: id must be positive")
        if seat.capacity < 1:
            problems.append(f"Seat {seat.seat_id}: capacity must be positive")
        if seat.guest is not None and seat.state != SeatState.OCCUPIED:
            problems.append(f"Seat {seat.seat_id}: has a guest but is {seat.state.value}")
        if seat.state == SeatState.OCCUPIED:
            if seat.guest is None:
                problems.append(f"Seat {seat.seat_id}: occupied without a guest")
            elif seat.guest.party_size > seat.capacity:
                problems.append(
                    f"Seat {seat.seat_id}: party of {seat.guest.party_size} exceeds capacity {seat.capacity}"
                )

    for problem in problems:
        logger.warning(problem)
    return problems
