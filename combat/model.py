from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from .board import Board
from .errors import InvariantViolation

Coord = Tuple[int, int]  # (row, col)


def reading_order(pos: Coord) -> Coord:
    """Sort key for reading order: top to bottom, then left to right."""
    return (pos[0], pos[1])


def neighbours(pos: Coord) -> List[Coord]:
    """Orthogonal neighbours of pos, already in reading order."""
    row, col = pos
    return [(row - 1, col), (row, col - 1), (row, col + 1), (row + 1, col)]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Faction(Enum):
    """The two sides of a battle, keyed by their map glyph."""
    ELF = "E"
    GOBLIN = "G"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return "Elves" if self is Faction.ELF else "Goblins"


@dataclass
class Unit:
    id: str
    side: Faction
    pos: Coord
    hp: int

    @property
    def alive(self) -> bool:
        return self.hp > 0


@dataclass
class Event:
    kind: str
    round: int
    data: Dict


@dataclass
class State:
    board: Board
    units: List[Unit] = field(default_factory=list)
    occupied: Set[Coord] = field(default_factory=set)
    attack_power: Dict[Faction, int] = field(default_factory=dict)

    def clone(self) -> "State":
        """Copy units and occupancy; the board is immutable and shared."""
        return State(
            board=self.board,
            units=[replace(u) for u in self.units],
            occupied=set(self.occupied),
            attack_power=dict(self.attack_power),
        )

    def living(self, side: Optional[Faction] = None) -> List[Unit]:
        return [u for u in self.units if u.alive and (side is None or u.side == side)]

    def living_sides(self) -> Set[Faction]:
        return {u.side for u in self.units if u.alive}

    def deaths(self, side: Faction) -> int:
        return sum(1 for u in self.units if u.side == side and not u.alive)

    def remaining_hp(self) -> int:
        return sum(u.hp for u in self.units if u.alive)

    def power_of(self, unit: Unit) -> int:
        return self.attack_power[unit.side]

    def is_open(self, pos: Coord) -> bool:
        """A floor tile that no living unit stands on."""
        return self.board.contains(pos) and pos not in self.occupied

    def move_unit(self, unit: Unit, dest: Coord) -> None:
        self.occupied.discard(unit.pos)
        unit.pos = dest
        self.occupied.add(dest)

    def apply_damage(self, attacker: Unit, target: Unit) -> bool:
        """Hit target with attacker's power. Returns True if target died."""
        if not target.alive or target.side == attacker.side or target.pos not in self.occupied:
            raise InvariantViolation(
                f"{attacker.id} at {attacker.pos} attacked {target.id} at {target.pos}, "
                f"which is not a living enemy"
            )
        target.hp -= self.power_of(attacker)
        if target.hp <= 0:
            self.occupied.discard(target.pos)
            return True
        return False

    def sort_units(self) -> None:
        """Re-sort into reading order by position; stable for dead units."""
        self.units.sort(key=lambda u: reading_order(u.pos))

    def check_invariants(self) -> None:
        expected = {u.pos for u in self.units if u.alive}
        if expected != self.occupied:
            raise InvariantViolation(
                f"occupancy drifted: missing={sorted(expected - self.occupied)} "
                f"stale={sorted(self.occupied - expected)}"
            )
