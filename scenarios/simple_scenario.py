import random
from typing import Optional

from hexnav import config
from hexnav.hexgrid import HexCoordinate
from hexnav.map import HexGridMap
from hexnav.map_loader import generate_map, load_map_file, scatter_obstacles
from hexnav.movement import Boat
from hexnav.session import NavigationSession

# 0 = water, 1 = land. Rows are offset y, columns offset x.
DEFAULT_MAP = """
0 0 0 0 0 0 0 0 0 0
0 0 1 1 0 0 0 1 0 0
0 0 1 1 1 0 0 1 1 0
0 0 0 1 0 0 0 0 1 0
0 0 0 0 0 1 0 0 0 0
0 1 1 0 0 1 1 0 0 0
0 1 0 0 0 0 1 0 1 0
0 0 0 0 0 0 0 0 0 0
"""

BOAT_START = HexCoordinate(0, 0)


def build_map(map_text: Optional[str] = None,
              hex_size: Optional[float] = None,
              seed: Optional[int] = None) -> HexGridMap:
    grid = HexGridMap(hex_size)

    if map_text is not None:
        tiles = generate_map(grid, map_text)
    elif config.map_path():
        tiles = load_map_file(grid, config.map_path())
    else:
        tiles = generate_map(grid, DEFAULT_MAP)

    scatter_obstacles(tiles, rng=random.Random(seed))
    return grid


def build_session(map_text: Optional[str] = None,
                  hex_size: Optional[float] = None,
                  seed: Optional[int] = None) -> NavigationSession:
    grid = build_map(map_text, hex_size, seed)
    return NavigationSession(grid, Boat(grid, BOAT_START))
