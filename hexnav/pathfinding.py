# hexnav/pathfinding.py
from __future__ import annotations

import heapq
import logging
from typing import Dict, List, Tuple

from hexnav.hexgrid import HexCoordinate, hex_distance
from hexnav.map import HexGridMap

log = logging.getLogger(__name__)

STEP_COST = 1


def find_path(grid: HexGridMap, start: HexCoordinate, goal: HexCoordinate) -> List[HexCoordinate]:
    """
    A* over the walkable tiles of `grid`.

    Returns the path INCLUDING start and goal, or [] when either end is not
    walkable or the two are in disconnected regions. Steps cost 1 and the
    heuristic is hex distance, so the result is a shortest path.

    Open-set ties are broken by (f, h, q, r): lowest f, then the node closest
    to the goal, then the lexicographically smallest coordinate. The same map
    always yields the same path.
    """
    if not grid.is_walkable(start) or not grid.is_walkable(goal):
        return []

    if start == goal:
        return [start]

    g_score: Dict[HexCoordinate, int] = {start: 0}
    came_from: Dict[HexCoordinate, HexCoordinate] = {}
    closed = set()

    h0 = hex_distance(start, goal)
    open_heap: List[Tuple[int, int, HexCoordinate]] = [(h0, h0, start)]

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            # stale entry, a cheaper one was already expanded
            continue

        if current == goal:
            return reconstruct_path(came_from, current)

        closed.add(current)
        next_g = g_score[current] + STEP_COST

        for neighbor in grid.walkable_neighbors(current):
            if neighbor in closed:
                continue
            if next_g < g_score.get(neighbor, next_g + 1):
                came_from[neighbor] = current
                g_score[neighbor] = next_g
                h = hex_distance(neighbor, goal)
                heapq.heappush(open_heap, (next_g + h, h, neighbor))

    log.debug(f"No path {start} -> {goal}: regions are disconnected")
    return []


def reconstruct_path(came_from: Dict[HexCoordinate, HexCoordinate],
                     current: HexCoordinate) -> List[HexCoordinate]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def has_valid_path(grid: HexGridMap, start: HexCoordinate, goal: HexCoordinate) -> bool:
    return len(find_path(grid, start, goal)) > 0


def path_length(path: List[HexCoordinate]) -> int:
    """Number of steps along `path` (0 for a single-hex or empty path)."""
    return max(len(path) - 1, 0)
