from dataclasses import dataclass
from typing import List, Optional, Tuple

from .model import Coord, State, Unit, manhattan, neighbours, reading_order
from .pathfinding import find_paths


@dataclass(frozen=True)
class MovePlan:
    distance: int
    destination: Coord
    enemy_pos: Coord
    first_step: Coord

    def sort_key(self) -> Tuple:
        return (self.distance, reading_order(self.destination), reading_order(self.enemy_pos))


def enemies_of(state: State, unit: Unit) -> List[Unit]:
    return [t for t in state.units if t.alive and t.side != unit.side]


def candidate_destinations(state: State, unit: Unit, enemy: Unit) -> List[Coord]:
    """Tiles next to enemy that unit could stand on (its own tile included)."""
    return [n for n in neighbours(enemy.pos) if n == unit.pos or state.is_open(n)]


def choose_move(state: State, unit: Unit) -> Tuple[bool, Optional[MovePlan]]:
    """Returns (enemies_remaining, plan). plan is None when nothing is reachable."""
    enemies = enemies_of(state, unit)
    if not enemies:
        return False, None

    wanted = [(dest, enemy.pos)
              for enemy in enemies
              for dest in candidate_destinations(state, unit, enemy)]
    paths = find_paths(state, unit.pos, {dest for dest, _ in wanted})

    plans: List[MovePlan] = []
    for dest, enemy_pos in wanted:
        path = paths[dest]
        if path is None:
            continue
        distance, first_step = path
        plans.append(MovePlan(distance, dest, enemy_pos, first_step))

    if not plans:
        return True, None
    return True, min(plans, key=MovePlan.sort_key)


def choose_attack(state: State, unit: Unit) -> Optional[Unit]:
    """Adjacent living enemy with the fewest hp, ties by reading order."""
    adjacent = [t for t in enemies_of(state, unit) if manhattan(unit.pos, t.pos) == 1]
    if not adjacent:
        return None
    return min(adjacent, key=lambda t: (t.hp, reading_order(t.pos)))
