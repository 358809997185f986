import pathlib

from seating_chart import AdminTools, Layout, SeatingSession, SeatState, load_seats, validate_layout
from seating_chart.report import render_report


def test_full_flow(tmp_path, roles, clock):
    data_dir = pathlib.Path(__file__).parent / "data"
    layout = Layout(load_seats(data_dir / "seats.csv"), roles=roles)
    session = SeatingSession(layout, clock=clock)
    tools = AdminTools(layout, clock=clock, layout_path=tmp_path / "layout.json")

    # attendant seats two parties, one too big
    session.open_seat(3)
    assert session.assign("Grace", "Hopper", "12", "4") is None
    session.open_seat(1)
    assert session.assign("Big", "Party", "13", "2") is not None
    assert session.assign("Solo", "Guest", "13", "1") is None

    # capacity respected everywhere
    for seat in layout:
        if seat.state == SeatState.OCCUPIED:
            assert seat.guest.party_size <= seat.capacity

    # attendant cannot touch out of service seat 5 or add seats
    assert session.open_seat(5) is None
    assert layout.add_seat() is None

    # admin restores seat 5 and adds seat 6
    roles.login("admin123")
    session.open_seat(5)
    session.toggle_out_of_service()
    assert layout.get(5).state == SeatState.AVAILABLE
    assert layout.add_seat(capacity=2).seat_id == 6

    clock.advance(minutes=95)
    assert [s.seat_id for s in tools.alerts()] == [1, 3]
    assert "3,Occupied,Grace Hopper,12,4,95.0" in render_report(layout, clock.now())
    assert validate_layout(layout) == []

    assert tools.clear_all()
    reloaded = Layout.load(tmp_path / "layout.json")
    assert len(reloaded) == 6
    assert all(s.state == SeatState.AVAILABLE for s in reloaded)
