# hexnav/map.py
from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from hexnav import config
from hexnav.hexgrid import HexCoordinate, WorldPosition
from hexnav.tiles import Tile

log = logging.getLogger(__name__)

GridCell = Tuple[int, int, int]


def world_cell(pos: WorldPosition) -> GridCell:
    """Integer world-grid cell used by the reverse lookup."""
    return round(pos.x), round(pos.y), round(pos.z)


class HexGridMap:
    """Registry of the tiles that make up the current map.

    Holds the coordinate -> tile mapping plus a reverse index from rounded
    world cells to coordinates, so clicks resolve in O(1). At small hex sizes
    several tiles can share a cell; such cells keep every claimant and are
    resolved by distance. Not synchronized: do not register or unregister
    while a search is running.
    """

    def __init__(self, hex_size: Optional[float] = None):
        self._hex_size = config.hex_size()
        if hex_size is not None:
            self.set_hex_size(hex_size)
        self.tiles: Dict[HexCoordinate, Tile] = {}
        self._cells: Dict[GridCell, List[HexCoordinate]] = {}

    # --- scale ---

    @property
    def hex_size(self) -> float:
        return self._hex_size

    @hex_size.setter
    def hex_size(self, size: float) -> None:
        self.set_hex_size(size)

    def get_hex_size(self) -> float:
        return self._hex_size

    def set_hex_size(self, size: float) -> None:
        # Tiles already placed keep their positions; regenerate the map after this.
        if not size > 0:
            log.warning(f"Ignoring hex size {size!r}: must be > 0")
            return
        self._hex_size = float(size)

    # --- registration ---

    def register_tile(self, coord: HexCoordinate, tile: Optional[Tile]) -> None:
        if tile is None:
            log.warning(f"Cannot register null tile at coordinate {coord}")
            return

        previous = self.tiles.get(coord)
        if previous is not None:
            self._drop_cell(coord, previous)

        self.tiles[coord] = tile
        cell = world_cell(self._tile_position(coord, tile))
        claimants = self._cells.setdefault(cell, [])
        if claimants:
            log.debug(f"World cell {cell} shared by {coord} and {claimants}")
        claimants.append(coord)

    def unregister_tile(self, coord: HexCoordinate) -> None:
        tile = self.tiles.pop(coord, None)
        if tile is not None:
            self._drop_cell(coord, tile)

    def clear(self) -> None:
        self.tiles.clear()
        self._cells.clear()

    def _tile_position(self, coord: HexCoordinate, tile: Tile) -> WorldPosition:
        if tile.position is not None:
            return tile.position
        return self.hex_to_world(coord)

    def _drop_cell(self, coord: HexCoordinate, tile: Tile) -> None:
        cell = world_cell(self._tile_position(coord, tile))
        claimants = self._cells.get(cell)
        if claimants and coord in claimants:
            claimants.remove(coord)
            if not claimants:
                del self._cells[cell]

    # --- queries ---

    def get_tile(self, coord: HexCoordinate) -> Optional[Tile]:
        return self.tiles.get(coord)

    def is_valid_hex(self, coord: HexCoordinate) -> bool:
        return coord in self.tiles

    def is_walkable(self, coord: HexCoordinate) -> bool:
        tile = self.tiles.get(coord)
        return tile is not None and tile.walkable

    def set_obstacle(self, coord: HexCoordinate, obstacle: bool) -> bool:
        tile = self.tiles.get(coord)
        if tile is None:
            log.debug(f"set_obstacle ignored: {coord} is not registered")
            return False
        tile.set_obstacle(obstacle)
        return True

    def walkable_neighbors(self, coord: HexCoordinate) -> Iterator[HexCoordinate]:
        for n in coord.neighbors():
            if self.is_walkable(n):
                yield n

    def tile_count(self) -> int:
        return len(self.tiles)

    def coordinates(self) -> Iterable[HexCoordinate]:
        return self.tiles.keys()

    def all_tiles(self) -> Iterable[Tile]:
        return self.tiles.values()

    # --- world conversions ---

    def hex_to_world(self, coord: HexCoordinate) -> WorldPosition:
        return coord.to_world(self._hex_size)

    def world_to_hex(self, pos: WorldPosition) -> HexCoordinate:
        if not all(math.isfinite(v) for v in pos):
            log.debug(f"world_to_hex ignoring non-finite position {tuple(pos)}")
            return HexCoordinate(0, 0)

        claimants = self._cells.get(world_cell(pos))
        if claimants:
            if len(claimants) == 1:
                return claimants[0]
            return self._closest_hex(pos, claimants)

        if not self.tiles:
            return HexCoordinate(0, 0)
        log.debug(f"world_to_hex fallback scan for {tuple(pos)}")
        return self._closest_hex(pos, self.tiles)

    def _closest_hex(self, pos: WorldPosition, candidates: Iterable[HexCoordinate]) -> HexCoordinate:
        best = HexCoordinate(0, 0)
        best_dist = float("inf")
        for coord in candidates:
            tp = self._tile_position(coord, self.tiles[coord])
            d = (pos.x - tp.x) ** 2 + (pos.y - tp.y) ** 2 + (pos.z - tp.z) ** 2
            if d < best_dist:
                best_dist = d
                best = coord
        return best
