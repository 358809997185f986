"""SeatingChart package."""
from .models import CapacityError, Guest, Role, Seat, SeatState
from .roles import RoleManager, get_role_manager, reset_role_manager
from .layout import Layout
from .csv_loader import load_seats
from .assignment import SeatingSession
from .admin import AdminTools
from .report import REPORT_HEADER, render_report, write_report
from .validator import validate_layout

__all__ = [
    "CapacityError",
    "Guest",
    "Role",
    "Seat",
    "SeatState",
    "RoleManager",
    "get_role_manager",
    "reset_role_manager",
    "Layout",
    "load_seats",
    "SeatingSession",
    "AdminTools",
    "REPORT_HEADER",
    "render_report",
    "write_report",
    "validate_layout",
]
