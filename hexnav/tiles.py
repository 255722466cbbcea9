# hexnav/tiles.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hexnav.hexgrid import HexCoordinate, WorldPosition


class Terrain(Enum):
    # Values are the codes used in map text files.
    WATER = 0
    TERRAIN = 1


@dataclass(eq=False)
class Tile:
    """A registered map cell.

    Only `obstacle` is expected to change after the map generator has built
    the tile. `position` is the world position the tile was placed at; when it
    is missing the registry derives one from the coordinate.
    """
    coordinate: HexCoordinate
    terrain: Terrain = Terrain.WATER
    obstacle: bool = False
    position: Optional[WorldPosition] = None

    @property
    def walkable(self) -> bool:
        return self.terrain is Terrain.WATER and not self.obstacle

    def set_obstacle(self, obstacle: bool) -> None:
        self.obstacle = bool(obstacle)

    def __repr__(self) -> str:
        flag = " obstacle" if self.obstacle else ""
        return f"Tile{self.coordinate} {self.terrain.name.lower()}{flag}"
