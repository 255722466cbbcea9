# hexnav/session.py
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from hexnav.hexgrid import HexCoordinate, WorldPosition
from hexnav.map import HexGridMap
from hexnav.movement import Boat
from hexnav.pathfinding import find_path, path_length

log = logging.getLogger(__name__)


class NavigationSession:
    """Click-to-move loop for one boat on one map.

    A click resolves to a hex, the boat's route is computed and the boat
    starts following it. The path is returned to the caller directly;
    fanning it out to renderers is the caller's business.
    """

    def __init__(self, grid: HexGridMap, boat: Optional[Boat] = None):
        self.grid = grid
        self.boat = boat or Boat(grid)
        self.active = True
        self.last_path: List[HexCoordinate] = []

    def pause(self) -> None:
        self.active = False

    def resume(self) -> None:
        self.active = True

    def click_world(self, pos: WorldPosition) -> List[HexCoordinate]:
        hex_ = self.grid.world_to_hex(pos)
        if not self.grid.is_valid_hex(hex_):
            return []
        x, y = hex_.to_offset()
        return self.click_offset(x, y)

    def click_offset(self, x: int, y: int) -> List[HexCoordinate]:
        if not self.active or self.boat.is_moving:
            return []

        target = HexCoordinate.from_offset(x, y)
        if not self.grid.is_walkable(target):
            log.info(f"Cannot move to non-walkable hex {target}")
            return []

        path = find_path(self.grid, self.boat.current_hex, target)
        if not path:
            log.info(f"No valid path found {self.boat.current_hex} -> {target}")
            return []

        self.last_path = path
        self.boat.begin(path)
        return path

    def go_to(self, target: HexCoordinate) -> Tuple[bool, str]:
        """Route the boat to `target` and move it there immediately."""
        x, y = target.to_offset()
        path = self.click_offset(x, y)
        if not path:
            return False, f"No route from {self.boat.current_hex} to {target}."
        self.finish()
        return True, f"Boat moved to {target} in {path_length(path)} steps."

    def advance(self) -> Optional[WorldPosition]:
        return self.boat.step()

    def finish(self) -> List[WorldPosition]:
        visited = []
        while self.boat.is_moving:
            visited.append(self.boat.step())
        return visited
