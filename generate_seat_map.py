import math
from itertools import combinations
from typing import Dict, Iterable, List, Tuple

import networkx as nx
from pyvis.network import Network

# ---------------------------
# Public API
# ---------------------------

def generate_seat_map(
    seats: Iterable,
    now=None,
    show_room_links: bool = True,
    alert_seat_ids: Iterable[int] = (),
    canvas_size: Tuple[int, int] = (1600, 1000),
) -> str:
    """
    Build an interactive seat map.

    Parameters:
      seats: iterable of Seat dataclass.
      now: datetime used for the occupancy timer in tooltips.
      show_room_links: draw an edge between occupied seats that share a room number.
      alert_seat_ids: seats drawn with a thick border because they passed the alert threshold.
      canvas_size: width, height in pixels used when seats have no saved position.

    Returns:
      HTML string with embedded network.
    """
    seats = list(seats)
    alerts = set(alert_seat_ids)
    positions = _seat_positions(seats, *canvas_size)

    G = nx.Graph()

    # Nodes
    for seat in seats:
        x, y = positions[seat.seat_id]
        label = str(seat.seat_id)
        if seat.guest is not None:
            label = f"{seat.seat_id}: {seat.guest.last_name}"
        G.add_node(
            seat.seat_id,
            label=label,
            title=_node_tooltip(seat, now),
            color=seat.state_color,
            x=x,
            y=y,
            physics=False,
            borderWidth=5 if seat.seat_id in alerts else 1,
            shape="box",
            size=12 + 4 * seat.capacity,
        )

    # Edges: parties split across seats under the same room
    if show_room_links:
        occupied = [s for s in seats if s.guest is not None and s.guest.room_number]
        for a, b in combinations(occupied, 2):
            if a.guest.room_number.strip().lower() == b.guest.room_number.strip().lower():
                G.add_edge(a.seat_id, b.seat_id, color="#84B6F4", width=2, label=f"room {a.guest.room_number}")

    net = Network(height="700px", width="100%", bgcolor="#111111", font_color="#EEEEEE")
    net.toggle_physics(False)  # positions are fixed
    net.from_nx(G)

    return _inject_legend_html(net.generate_html())

# ---------------------------
# Internals
# ---------------------------

def _seat_positions(seats: List, width: int, height: int) -> Dict[int, Tuple[float, float]]:
    """
    Use saved canvas positions. When every seat sits at the origin (a freshly
    seeded layout) spread them on a grid instead.
    """
    if any(s.x or s.y for s in seats):
        return {s.seat_id: (s.x, s.y) for s in seats}
    return _grid_positions([s.seat_id for s in seats], width, height)


def _grid_positions(seat_ids: List[int], width: int, height: int) -> Dict[int, Tuple[int, int]]:
    if not seat_ids:
        return {}
    n = len(seat_ids)
    cols = max(1, int(math.ceil(math.sqrt(n))))
    rows = int(math.ceil(n / cols))
    margin_x = 120
    margin_y = 120
    usable_w = max(1, width - 2 * margin_x)
    usable_h = max(1, height - 2 * margin_y)
    step_x = usable_w // max(1, cols)
    step_y = usable_h // max(1, rows)

    positions: Dict[int, Tuple[int, int]] = {}
    for idx, seat_id in enumerate(seat_ids):
        r, c = divmod(idx, cols)
        positions[seat_id] = (margin_x + c * step_x + step_x // 2, margin_y + r * step_y + step_y // 2)
    return positions


def _node_tooltip(seat, now) -> str:
    lines = [
        f"<b>Seat {seat.seat_id}</b>",
        f"State: {seat.state.value}",
        f"Capacity: {seat.capacity}",
    ]
    if seat.guest is not None:
        lines.append(f"Guest: {seat.guest.full_name}")
        lines.append(f"Room: {seat.guest.room_number or 'n/a'}")
        lines.append(f"Party: {seat.guest.party_size}")
        if now is not None:
            lines.append(f"Occupied: {seat.elapsed_label(now)}")
    return "<br>".join(lines)


def _inject_legend_html(page: str) -> str:
    css = """
    <style>
    .legend-box{
      position:absolute;right:12px;bottom:12px;
      background:#222;color:#eee;border:1px solid #444;border-radius:8px;
      padding:8px 12px;font-family:system-ui, -apple-system, Segoe UI, Roboto, Arial;font-size:12px;
      z-index:10;
    }
    .legend-swatch{display:inline-block;width:12px;height:12px;margin-right:6px;vertical-align:middle;border:1px solid #444;}
    </style>
    """
    html = f"""
    {css}
    <div class="legend-box">
      <div><span class="legend-swatch" style="background:#00FF00"></span>available</div>
      <div><span class="legend-swatch" style="background:#FFA300"></span>reserved</div>
      <div><span class="legend-swatch" style="background:#FF0000"></span>occupied</div>
      <div><span class="legend-swatch" style="background:#FFEB04"></span>cleaning</div>
      <div><span class="legend-swatch" style="background:#808080"></span>out of service</div>
      <div style="margin-top:6px;">thick border: occupancy alert</div>
    </div>
    """
    if "</body>" in page:
        return page.replace("</body>", html + "</body>", 1)
    return page + html
