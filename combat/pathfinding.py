"""
Shortest paths on the battle board.

Every answer is a (distance, first_step) pair. Among all shortest paths to a
tile, the one whose first step comes first in reading order wins. The search
pops partial paths ordered by (steps, first_step, tile), so the first path to
reach a tile is already the preferred one and later arrivals are ignored.
"""
import heapq
from typing import Dict, Iterable, Optional, Tuple

from .model import Coord, State, neighbours

PathInfo = Tuple[int, Coord]  # (distance, first_step)


def shortest_paths(state: State, start: Coord) -> Dict[Coord, PathInfo]:
    """(distance, first_step) for every tile reachable from start."""
    found: Dict[Coord, PathInfo] = {start: (0, start)}
    frontier = [(0, start, start)]
    while frontier:
        steps, first_step, pos = heapq.heappop(frontier)
        for n in neighbours(pos):
            if n in found or not state.is_open(n):
                continue
            step = n if pos == start else first_step
            found[n] = (steps + 1, step)
            heapq.heappush(frontier, (steps + 1, step, n))
    return found


def find_paths(state: State, start: Coord,
               destinations: Iterable[Coord]) -> Dict[Coord, Optional[PathInfo]]:
    """Answer many destinations from a single search."""
    found = shortest_paths(state, start)
    return {d: found.get(d) for d in destinations}


def shortest_distance(state: State, start: Coord, end: Coord) -> Optional[PathInfo]:
    """(distance, first_step) from start to end, or None if unreachable."""
    return find_paths(state, start, [end])[end]
