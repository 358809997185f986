import pathlib
import sys
from datetime import datetime, timezone

import pytest

# Ensure src package and repository root are on sys.path
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT / "src"))
sys.path.append(str(ROOT))

from seating_chart.clock import FixedClock
from seating_chart.layout import Layout
from seating_chart.models import Seat
from seating_chart.roles import RoleManager, reset_role_manager

START = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return FixedClock(START)


@pytest.fixture
def roles():
    return RoleManager()


@pytest.fixture
def admin(roles):
    roles.login("admin123")
    return roles


@pytest.fixture
def layout(roles):
    return Layout([Seat(1, capacity=1), Seat(2, capacity=4), Seat(3, capacity=2)], roles=roles)


@pytest.fixture(autouse=True)
def fresh_role_manager():
    """Each test starts from a new process-wide role manager."""
    reset_role_manager()
    yield
    reset_role_manager()
