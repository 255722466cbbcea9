# hexnav/map_loader.py
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Union

from hexnav import config
from hexnav.hexgrid import HexCoordinate
from hexnav.map import HexGridMap
from hexnav.tiles import Terrain, Tile

log = logging.getLogger(__name__)


def parse_map_text(text: str) -> List[List[int]]:
    """
    Parse whitespace-separated terrain codes into rows.

    Row index is the offset y, column index the offset x. The first row fixes
    the width; later rows must be at least that wide (extra values are
    dropped). Blank lines are skipped.
    """
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if not lines:
        raise ValueError("map text is empty")

    width = len(lines[0].split())
    rows: List[List[int]] = []
    for y, line in enumerate(lines):
        tokens = line.split()
        if len(tokens) < width:
            raise ValueError(f"map row {y} has {len(tokens)} values, expected {width}")
        try:
            rows.append([int(tok) for tok in tokens[:width]])
        except ValueError:
            raise ValueError(f"map row {y} contains a non-integer value: {line.strip()!r}") from None
    return rows


def terrain_from_code(code: int) -> Terrain:
    try:
        return Terrain(code)
    except ValueError:
        raise ValueError(f"unknown terrain code {code}") from None


def generate_map(grid: HexGridMap, text: str) -> List[List[Tile]]:
    """Rebuild `grid` from map text. Returns the tiles indexed [y][x]."""
    rows = parse_map_text(text)
    # Validate every code before touching the registry.
    terrains = [[terrain_from_code(code) for code in row] for row in rows]

    grid.clear()
    tiles: List[List[Tile]] = []
    for y, row in enumerate(terrains):
        tile_row: List[Tile] = []
        for x, terrain in enumerate(row):
            coord = HexCoordinate.from_offset(x, y)
            tile = Tile(coord, terrain, position=grid.hex_to_world(coord))
            grid.register_tile(coord, tile)
            tile_row.append(tile)
        tiles.append(tile_row)

    water = sum(1 for t in grid.all_tiles() if t.terrain is Terrain.WATER)
    log.info(f"Generated {len(rows[0])}x{len(rows)} map: {grid.tile_count()} tiles, {water} water")
    return tiles


def scatter_obstacles(tiles: List[List[Tile]],
                      chance: float = config.OBSTACLE_CHANCE,
                      rng: Optional[random.Random] = None) -> int:
    """Randomly drop rocks and vegetation on land tiles. Returns how many were placed."""
    if not 0.0 <= chance <= 1.0:
        raise ValueError(f"chance must be within [0, 1], got {chance}")
    rng = rng or random.Random()

    placed = 0
    for row in tiles:
        for tile in row:
            if tile.terrain is Terrain.TERRAIN and rng.random() < chance:
                tile.set_obstacle(True)
                placed += 1
    return placed


def load_map_file(grid: HexGridMap, path: Union[str, Path]) -> List[List[Tile]]:
    text = Path(path).read_text(encoding="utf-8")
    return generate_map(grid, text)
