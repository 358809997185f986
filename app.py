"""Streamlit UI for SeatingChart: seat grid, assignment panel and admin tools."""
from __future__ import annotations

# Add src to sys.path so seating_chart can be found
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from seating_chart.admin import AdminTools
from seating_chart.assignment import SeatingSession
from seating_chart.config import load_settings
from seating_chart.csv_loader import load_seats
from seating_chart.layout import Layout
from seating_chart.models import SeatState
from seating_chart.report import render_report
from seating_chart.roles import reset_role_manager
from seating_chart.validator import validate_layout

# -----------------------------
# Helpers
# -----------------------------

def init_state() -> None:
    """Create the role manager, layout and tools once per browser session."""
    if "layout" in st.session_state:
        return
    settings = load_settings(os.environ.get("SEATING_CHART_CONFIG"))
    roles = reset_role_manager(settings.admin_password)
    layout = Layout.load(settings.layout_path, roles=roles)
    st.session_state.settings = settings
    st.session_state.roles = roles
    st.session_state.layout = layout
    st.session_state.session = SeatingSession(layout)
    st.session_state.tools = AdminTools(
        layout,
        layout_path=settings.layout_path,
        report_filename=settings.report_filename,
        alert_threshold_minutes=settings.alert_threshold_minutes,
    )
    st.session_state.feedback = ""


def seats_to_df(seats, now) -> pd.DataFrame:
    """Tabular view of seats for st.dataframe."""
    return pd.DataFrame(
        [
            {
                "seat": s.seat_id,
                "state": s.state.value,
                "capacity": s.capacity,
                "guest": s.guest.full_name if s.guest else "",
                "room": s.guest.room_number if s.guest else "",
                "party": s.guest.party_size if s.guest else "",
                "occupied": s.elapsed_label(now),
            }
            for s in seats
        ],
        columns=["seat", "state", "capacity", "guest", "room", "party", "occupied"],
    )


def persist() -> None:
    layout = st.session_state.layout
    layout.save_if_dirty(st.session_state.settings.layout_path)


init_state()
settings = st.session_state.settings
roles = st.session_state.roles
layout = st.session_state.layout
session = st.session_state.session
tools = st.session_state.tools

# -----------------------------
# Sidebar: login and setup
# -----------------------------

st.sidebar.header("Access")
st.sidebar.write(f"Role: **{roles.current_role.value}**")
if roles.is_admin:
    if st.sidebar.button("Log out"):
        roles.logout()
        st.session_state.feedback = ""
        st.rerun()
else:
    password = st.sidebar.text_input("Admin password", type="password")
    if st.sidebar.button("Log in"):
        st.session_state.feedback = roles.login(password)
        st.rerun()
if st.session_state.feedback:
    st.sidebar.info(st.session_state.feedback)

if roles.is_admin and not len(layout):
    st.sidebar.header("Seed layout")
    _seats_file = st.sidebar.file_uploader("Seats CSV", type="csv")
    if _seats_file is not None and st.sidebar.button("Load seats"):
        try:
            layout.extend(load_seats(_seats_file))
            persist()
            st.rerun()
        except ValueError as e:
            st.sidebar.error(f"Input validation error: {e}")

# -----------------------------
# Main UI
# -----------------------------

st.title("Seating Chart")
now = tools.clock.now()

state_options = ["All"] + [s.value for s in SeatState]
filter_choice = st.selectbox("Show seats", state_options)
visible = tools.filter_by_state(None if filter_choice == "All" else filter_choice)
st.dataframe(seats_to_df(visible, now), use_container_width=True)

for seat in tools.alerts():
    st.warning(f"Seat {seat.seat_id} has been occupied for {seat.elapsed_label(now)}")

query = st.text_input("Search guest name or room")
if query:
    found = tools.search(query)
    if found is None:
        st.caption("No match")
    else:
        st.success(f"Seat {found.seat_id}: {found.guest}")

# -----------------------------
# Assignment panel
# -----------------------------

st.subheader("Seat assignment")
seat_ids = [s.seat_id for s in layout]
if seat_ids:
    chosen = st.selectbox("Seat", seat_ids)
    if session.active_seat is None or session.active_seat.seat_id != chosen:
        if session.open_seat(chosen) is None:
            session.close()
    if session.active_seat is None:
        st.info("This seat is out of service.")
    else:
        with st.form("assign_form", clear_on_submit=True):
            c1, c2 = st.columns(2)
            first_name = c1.text_input("First name")
            last_name = c2.text_input("Last name")
            room = c1.text_input("Room number")
            party = c2.text_input("Party size")
            submitted = st.form_submit_button("Assign")
        if submitted:
            error = session.assign(first_name, last_name, room, party)
            if error:
                st.error(error)
            else:
                layout.mark_dirty()
                persist()
                st.rerun()

        b1, b2, b3 = st.columns(3)
        if b1.button("Assign previous", disabled=not session.can_assign_previous):
            error = session.assign_previous()
            if error:
                st.error(error)
            else:
                layout.mark_dirty()
                persist()
                st.rerun()
        if b2.button("Clear", disabled=not session.can_clear):
            session.clear()
            layout.mark_dirty()
            persist()
            st.rerun()
        if roles.is_admin and b3.button(session.toggle_label):
            session.toggle_out_of_service()
            persist()
            st.rerun()
else:
    st.info("No seats yet. An admin can add seats or load a seats CSV.")

# -----------------------------
# Admin tools
# -----------------------------

if roles.is_admin:
    st.subheader("Admin tools")
    c1, c2 = st.columns(2)
    capacity = c1.number_input("New seat capacity", min_value=1, max_value=20, value=1)
    if c1.button("Add seat"):
        layout.add_seat(capacity=int(capacity))
        persist()
        st.rerun()
    bulk_state = c2.selectbox("Bulk state", [s.value for s in SeatState])
    if c2.button("Apply to all seats"):
        tools.bulk_set_state(bulk_state)
        persist()
        st.rerun()
    m1, m2, m3 = st.columns(3)
    move_id = m1.selectbox("Move seat", seat_ids) if seat_ids else None
    move_x = m2.number_input("x", value=0.0, step=10.0)
    move_y = m3.number_input("y", value=0.0, step=10.0)
    if move_id is not None and st.button("Move"):
        layout.move_seat(move_id, move_x, move_y)
        persist()
        st.rerun()
    r1, r2 = st.columns(2)
    remove_id = r1.selectbox("Remove seat", seat_ids, key="remove_seat") if seat_ids else None
    if remove_id is not None and r2.button("Remove"):
        if session.active_seat is not None and session.active_seat.seat_id == remove_id:
            session.close()
        layout.remove_seat(remove_id)
        persist()
        st.rerun()
    confirm = st.checkbox("I want to clear every seat")
    if st.button("Clear all", disabled=not confirm):
        tools.clear_all()
        st.rerun()

    problems = validate_layout(layout)
    for problem in problems:
        st.warning(problem)

# -----------------------------
# Report and map
# -----------------------------

st.subheader("Session report")
csv_text = render_report(layout, now)
st.download_button(
    "Download session report",
    csv_text.encode("utf-8"),
    file_name=settings.report_filename,
)
if st.button("Export report to disk"):
    path = tools.export_report(settings.report_dir)
    if path is None:
        st.error("Failed to export report")
    else:
        st.success(f"Session report exported to: {path}")

st.subheader("Seat Map")
from generate_seat_map import generate_seat_map
html = generate_seat_map(layout, now=now, alert_seat_ids=[s.seat_id for s in tools.alerts()])
components.html(html, height=720, scrolling=True)
