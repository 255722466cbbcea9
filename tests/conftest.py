import random

import pytest

from hexnav.hexgrid import HexCoordinate
from hexnav.map import HexGridMap
from hexnav.tiles import Terrain, Tile

HEX_SIZE = 1.0


def build_grid(width=5, height=5, hex_size=HEX_SIZE, terrain=Terrain.WATER):
    """Rectangular offset-layout map, every tile registered exactly once."""
    grid = HexGridMap(hex_size)
    for y in range(height):
        for x in range(width):
            coord = HexCoordinate.from_offset(x, y)
            grid.register_tile(coord, Tile(coord, terrain, position=grid.hex_to_world(coord)))
    return grid


def build_axial_grid(radius, hex_size=HEX_SIZE):
    """Hexagon-shaped all-water map centred on (0, 0)."""
    grid = HexGridMap(hex_size)
    for q in range(-radius, radius + 1):
        for r in range(-radius, radius + 1):
            coord = HexCoordinate(q, r)
            if coord.distance_to(HexCoordinate(0, 0)) <= radius:
                grid.register_tile(coord, Tile(coord, position=grid.hex_to_world(coord)))
    return grid


def dump_map(grid, path=None):
    from hexnav.render_ascii import render_map_ascii
    print("\n" + render_map_ascii(grid, path))


@pytest.fixture
def water_grid():
    """5x5 all-water map."""
    return build_grid()


@pytest.fixture
def open_sea():
    """Radius-4 all-water hexagon around the origin."""
    return build_axial_grid(4)


@pytest.fixture
def rng():
    return random.Random(1234)
