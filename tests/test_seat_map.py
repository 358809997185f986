from generate_seat_map import _grid_positions, _seat_positions, generate_seat_map
from seating_chart.models import Guest, Seat


def test_grid_positions_for_unplaced_seats():
    seats = [Seat(1), Seat(2), Seat(3), Seat(4)]
    positions = _seat_positions(seats, 1600, 1000)
    assert len(set(positions.values())) == 4
    assert _grid_positions([], 100, 100) == {}


def test_saved_positions_are_kept():
    seats = [Seat(1, x=10, y=20), Seat(2)]
    assert _seat_positions(seats, 1600, 1000) == {1: (10, 20), 2: (0.0, 0.0)}


def test_generate_seat_map_html(clock):
    seats = [Seat(1, capacity=2), Seat(2, capacity=2)]
    seats[0].assign_guest(Guest("Ada", "Lovelace", "101", 1), clock.now())
    seats[1].assign_guest(Guest("Byron", "Lovelace", "101", 1), clock.now())
    html = generate_seat_map(seats, now=clock.now(), alert_seat_ids=[1])
    assert "legend-box" in html
    assert "Ada Lovelace" in html
