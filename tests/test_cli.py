import json
import pathlib

from seating_chart.cli import main

DATA_DIR = pathlib.Path(__file__).parent / "data"


def run(tmp_path, *args):
    layout = tmp_path / "layout.json"
    return main(["--layout", str(layout), "--seats", str(DATA_DIR / "seats.csv"), *args])


def load(tmp_path):
    return {s["seat_id"]: s for s in json.loads((tmp_path / "layout.json").read_text())["seats"]}


def test_seed_and_show(tmp_path, capsys):
    assert run(tmp_path, "show") == 0
    out = capsys.readouterr().out
    assert "1,Available,capacity=1" in out
    assert "5,OutOfService,capacity=6" in out
    assert len(load(tmp_path)) == 5


def test_assign_and_clear(tmp_path):
    assert run(tmp_path, "assign", "3", "Ada", "Lovelace", "101", "4") == 0
    assert load(tmp_path)[3]["state"] == "Occupied"
    assert load(tmp_path)[3]["guest"]["party_size"] == 4
    assert run(tmp_path, "clear", "3") == 0
    assert load(tmp_path)[3]["guest"] is None


def test_assign_oversized_party(tmp_path, capsys):
    assert run(tmp_path, "assign", "1", "Big", "Party", "7", "3") == 1
    assert "cannot accommodate a party of 3" in capsys.readouterr().err
    assert load(tmp_path)[1]["state"] == "Available"


def test_attendant_cannot_assign_out_of_service(tmp_path):
    assert run(tmp_path, "assign", "5", "A", "B", "1", "1") == 1


def test_admin_commands_need_password(tmp_path, capsys):
    assert run(tmp_path, "add-seat") == 0
    assert len(load(tmp_path)) == 5
    assert run(tmp_path, "--password", "nope", "add-seat") == 1
    assert "Incorrect password" in capsys.readouterr().out
    assert run(tmp_path, "--password", "admin123", "add-seat", "--capacity", "2") == 0
    assert load(tmp_path)[6]["capacity"] == 2


def test_remove_seat(tmp_path, capsys):
    assert run(tmp_path, "remove-seat", "2") == 0
    assert 2 in load(tmp_path)
    assert run(tmp_path, "--password", "admin123", "remove-seat", "2") == 0
    assert "Removed seat 2" in capsys.readouterr().out
    assert sorted(load(tmp_path)) == [1, 3, 4, 5]
    assert run(tmp_path, "--password", "admin123", "remove-seat", "2") == 1
    assert "No seat 2" in capsys.readouterr().err
    assert run(tmp_path, "--password", "admin123", "add-seat") == 0
    assert 2 in load(tmp_path)


def test_admin_toggle_and_bulk(tmp_path):
    assert run(tmp_path, "--password", "admin123", "toggle", "5") == 0
    assert load(tmp_path)[5]["state"] == "Available"
    assert run(tmp_path, "--password", "admin123", "bulk-state", "Cleaning") == 0
    assert {s["state"] for s in load(tmp_path).values()} == {"Cleaning"}


def test_search_filter_and_report(tmp_path, capsys):
    run(tmp_path, "assign", "2", "Alan", "Turing", "B-204", "1")
    capsys.readouterr()
    assert run(tmp_path, "search", "turing") == 0
    assert capsys.readouterr().out.startswith("2,Occupied")
    assert run(tmp_path, "search", "nobody") == 1
    assert run(tmp_path, "filter", "Reserved") == 0
    assert capsys.readouterr().out.strip() == "4,Reserved,capacity=2"
    assert run(tmp_path, "report") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Seat ID,State,Guest Name,Room,Party Size,Occupied Minutes"
    assert lines[2].startswith("2,Occupied,Alan Turing,B-204,1,")
    assert run(tmp_path, "report", "--write", "--out-dir", str(tmp_path)) == 0
    assert (tmp_path / "session_report.csv").exists()


def test_validate(tmp_path):
    assert run(tmp_path, "validate") == 0
