"""Command line interface for SeatingChart."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .admin import AdminTools
from .assignment import SeatingSession
from .config import load_settings
from .csv_loader import load_seats
from .layout import Layout
from .models import SeatState
from .report import render_report
from .roles import reset_role_manager
from .validator import validate_layout

STATE_NAMES = [s.value for s in SeatState]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seating chart management")
    parser.add_argument("--config", type=Path, help="Path to a YAML settings file.")
    parser.add_argument("--layout", type=Path, help="Layout JSON file (overrides config).")
    parser.add_argument("--seats", type=Path,
                        help="Seats CSV used to seed the layout when the layout file does not exist.")
    parser.add_argument("--password", help="Log in as admin with this password.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="List seats and their state.")

    p = sub.add_parser("assign", help="Assign a guest to a seat.")
    p.add_argument("seat", type=int)
    p.add_argument("first_name")
    p.add_argument("last_name")
    p.add_argument("room")
    p.add_argument("party_size")

    p = sub.add_parser("clear", help="Clear a seat.")
    p.add_argument("seat", type=int)

    p = sub.add_parser("toggle", help="Toggle out of service (admin).")
    p.add_argument("seat", type=int)

    p = sub.add_parser("add-seat", help="Add a seat with the lowest free id (admin).")
    p.add_argument("--capacity", type=int, default=1)

    p = sub.add_parser("remove-seat", help="Remove a seat (admin).")
    p.add_argument("seat", type=int)

    sub.add_parser("clear-all", help="Clear every seat (admin).")

    p = sub.add_parser("bulk-state", help="Set every seat to one state (admin).")
    p.add_argument("state", choices=STATE_NAMES)

    p = sub.add_parser("search", help="Find a seat by guest name or room.")
    p.add_argument("query")

    p = sub.add_parser("filter", help="List seats in a given state.")
    p.add_argument("state", nargs="?", choices=STATE_NAMES)

    p = sub.add_parser("report", help="Print or write the session report.")
    p.add_argument("--write", action="store_true", help="Write the report CSV instead of printing it.")
    p.add_argument("--out-dir", type=Path, help="Directory for --write (defaults to report_dir).")

    sub.add_parser("validate", help="Check the layout for problems.")
    return parser


def _seat_line(seat) -> str:
    guest = f" {seat.guest}" if seat.guest else ""
    return f"{seat.seat_id},{seat.state.value},capacity={seat.capacity}{guest}"


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``python -m seating_chart.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.config)
    layout_path = args.layout or settings.layout_path
    roles = reset_role_manager(settings.admin_password)
    if args.password is not None:
        message = roles.login(args.password)
        print(message)
        if not roles.is_admin:
            return 1

    layout = Layout.load(layout_path, roles=roles)
    if not len(layout) and args.seats:
        layout = Layout(load_seats(args.seats), roles=roles)
        layout.mark_dirty()

    session = SeatingSession(layout)
    tools = AdminTools(
        layout,
        layout_path=layout_path,
        report_filename=settings.report_filename,
        alert_threshold_minutes=settings.alert_threshold_minutes,
    )

    status = 0
    if args.command == "show":
        for seat in layout:
            print(_seat_line(seat))
        for seat in tools.alerts():
            print(f"[ALERT] seat {seat.seat_id} occupied for {seat.elapsed_label(tools.clock.now())}")
    elif args.command == "assign":
        if session.open_seat(args.seat) is None:
            print(f"Seat {args.seat} is not available", file=sys.stderr)
            status = 1
        else:
            error = session.assign(args.first_name, args.last_name, args.room, args.party_size)
            if error:
                print(error, file=sys.stderr)
                status = 1
            else:
                layout.mark_dirty()
    elif args.command == "clear":
        if session.open_seat(args.seat) is None:
            print(f"Seat {args.seat} is not available", file=sys.stderr)
            status = 1
        else:
            session.clear()
            layout.mark_dirty()
    elif args.command == "toggle":
        if session.open_seat(args.seat) is not None:
            session.toggle_out_of_service()
    elif args.command == "add-seat":
        seat = layout.add_seat(capacity=args.capacity)
        if seat is not None:
            print(f"Added seat {seat.seat_id}")
    elif args.command == "remove-seat":
        if roles.is_admin and layout.get(args.seat) is None:
            print(f"No seat {args.seat}", file=sys.stderr)
            status = 1
        elif layout.remove_seat(args.seat):
            print(f"Removed seat {args.seat}")
    elif args.command == "clear-all":
        tools.clear_all()
    elif args.command == "bulk-state":
        tools.bulk_set_state(args.state)
    elif args.command == "search":
        seat = tools.search(args.query)
        if seat is None:
            status = 1
        else:
            print(_seat_line(seat))
    elif args.command == "filter":
        for seat in tools.filter_by_state(args.state):
            print(_seat_line(seat))
    elif args.command == "report":
        if args.write:
            path = tools.export_report(args.out_dir or settings.report_dir)
            status = 0 if path else 1
        else:
            sys.stdout.write(render_report(layout, tools.clock.now()))
    elif args.command == "validate":
        problems = validate_layout(layout)
        for problem in problems:
            print(problem)
        status = 1 if problems else 0

    layout.save_if_dirty(layout_path)
    return status


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
