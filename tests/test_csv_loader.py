import io
import pathlib

import pytest

from seating_chart.csv_loader import load_seats
from seating_chart.models import SeatState

DATA_DIR = pathlib.Path(__file__).parent / "data"


def test_load_seats_from_file():
    seats = load_seats(DATA_DIR / "seats.csv")
    assert [s.seat_id for s in seats] == [1, 2, 3, 4, 5]
    assert seats[2].capacity == 4
    assert seats[3].state == SeatState.RESERVED
    assert (seats[3].x, seats[3].y) == (0.0, 0.0)
    assert seats[4].state == SeatState.OUT_OF_SERVICE
    assert (seats[0].x, seats[0].y) == (100.0, 100.0)


def test_minimal_columns():
    seats = load_seats(io.StringIO("seat_id,capacity\n7,2\n"))
    assert seats[0].seat_id == 7
    assert seats[0].state == SeatState.AVAILABLE


def test_occupied_rows_start_available():
    seats = load_seats(io.StringIO("seat_id,capacity,state\n1,1,Occupied\n"))
    assert seats[0].state == SeatState.AVAILABLE
    assert seats[0].guest is None


@pytest.mark.parametrize(
    "content",
    [
        "seat_id\n1\n",
        "seat_id,capacity\n1,1\n1,2\n",
        "seat_id,capacity\n0,1\n",
        "seat_id,capacity\n1,0\n",
        "seat_id,capacity,state\n1,1,Broken\n",
    ],
)
def test_invalid_seats_rejected(content):
    with pytest.raises(ValueError):
        load_seats(io.StringIO(content))
