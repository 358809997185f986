from seating_chart.models import Role, Seat, SeatState
from seating_chart.roles import RoleManager, get_role_manager, reset_role_manager


def test_defaults_to_attendant():
    assert RoleManager().current_role == Role.ATTENDANT
    assert get_role_manager().current_role == Role.ATTENDANT


def test_login_with_correct_password(roles):
    assert roles.login("admin123") == "Admin mode activated"
    assert roles.is_admin


def test_login_with_wrong_password_keeps_role(roles):
    assert roles.login("letmein") == "Incorrect password"
    assert roles.current_role == Role.ATTENDANT


def test_logout(admin):
    admin.logout()
    assert admin.current_role == Role.ATTENDANT


def test_listeners_fire_only_on_change(roles):
    seen = []
    roles.add_listener(seen.append)
    roles.set_role(Role.ATTENDANT)
    roles.set_role(Role.ADMIN)
    roles.set_role(Role.ADMIN)
    roles.remove_listener(seen.append)
    roles.set_role(Role.ATTENDANT)
    assert seen == [Role.ADMIN]


def test_custom_password():
    manager = reset_role_manager("s3cret")
    assert manager is get_role_manager()
    assert manager.login("admin123") == "Incorrect password"
    assert manager.login("s3cret") == "Admin mode activated"


def test_out_of_service_interaction(roles):
    seat = Seat(1, state=SeatState.OUT_OF_SERVICE)
    assert not roles.can_interact(seat)
    assert roles.can_interact(Seat(2))
    roles.login("admin123")
    assert roles.can_interact(seat)
    assert not roles.can_interact(None)
