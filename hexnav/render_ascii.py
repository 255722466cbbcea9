# hexnav/render_ascii.py
from __future__ import annotations

from typing import Optional, Sequence

from hexnav.hexgrid import HexCoordinate
from hexnav.map import HexGridMap
from hexnav.movement import Boat
from hexnav.tiles import Terrain, Tile

LEGEND = "Legend: ~~ water | ## land | ^^ land+obstacle | XX water+obstacle | ** path | B  boat"


def render_tile_symbol(tile: Optional[Tile]) -> str:
    """2-char symbol for a tile; blank when the hex is not on the map."""
    if tile is None:
        return "  "
    if tile.terrain is Terrain.WATER:
        return "XX" if tile.obstacle else "~~"
    return "^^" if tile.obstacle else "##"


def render_map_ascii(grid: HexGridMap,
                     path: Optional[Sequence[HexCoordinate]] = None,
                     boat: Optional[Boat] = None) -> str:
    if grid.tile_count() == 0:
        return "(empty map)"

    offsets = [c.to_offset() for c in grid.coordinates()]
    min_x = min(x for x, _ in offsets)
    max_x = max(x for x, _ in offsets)
    min_y = min(y for _, y in offsets)
    max_y = max(y for _, y in offsets)

    on_path = set(path or ())
    boat_hex = boat.current_hex if boat is not None else None

    lines = [
        f"Map ({grid.tile_count()} tiles, hex size {grid.hex_size:g})",
        LEGEND,
        "",
    ]
    header = "       " + " ".join(f"{x:>2}" for x in range(min_x, max_x + 1))
    lines.append(header)

    for y in range(min_y, max_y + 1):
        # odd rows sit half a hex to the right
        indent = " " if (y & 1) else ""
        row = [f"y={y:>2}  {indent}"]
        for x in range(min_x, max_x + 1):
            h = HexCoordinate.from_offset(x, y)
            if h == boat_hex:
                row.append("B ")
            elif h in on_path:
                row.append("**")
            else:
                row.append(render_tile_symbol(grid.get_tile(h)))
        lines.append(" ".join(row).rstrip())

    return "\n".join(lines)
