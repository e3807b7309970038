import logging
from enum import Enum
from typing import List, NamedTuple, Optional

from .errors import RoundLimitExceeded, Stalemate
from .model import Event, Faction, State, Unit
from .targeting import choose_attack, choose_move

logger = logging.getLogger(__name__)


class BattleStatus(Enum):
    CONTINUING = "continuing"
    ENDED = "ended"


class BattleOutcome(NamedTuple):
    rounds: int
    remaining_hp: int
    winner: Optional[Faction]

    @property
    def score(self) -> int:
        return self.rounds * self.remaining_hp


class Engine:
    """Pure, deterministic round-by-round battle engine."""

    def __init__(self, state: State, strict: bool = True):
        self.state = state
        self.strict = strict
        self.rounds = 0
        self.status = BattleStatus.CONTINUING
        self.winner: Optional[Faction] = None
        self.state.sort_units()

    def _turn(self, unit: Unit) -> Optional[List[Event]]:
        """Move then attack. Returns None when unit has no enemies left."""
        evts: List[Event] = []
        enemies_remaining, plan = choose_move(self.state, unit)
        if not enemies_remaining:
            return None
        if plan is None:
            return evts

        if plan.first_step != unit.pos:
            old = unit.pos
            self.state.move_unit(unit, plan.first_step)
            logger.debug("%s moved %s -> %s (heading for %s)", unit.id, old, unit.pos, plan.destination)
            evts.append(Event("UnitMoved", self.rounds + 1,
                              {"unit_id": unit.id, "from": old, "to": unit.pos}))

        target = choose_attack(self.state, unit)
        if target is not None:
            killed = self.state.apply_damage(unit, target)
            logger.debug("%s hit %s for %d (hp %d)", unit.id, target.id, self.state.power_of(unit), target.hp)
            evts.append(Event("Attack", self.rounds + 1,
                              {"attacker": unit.id, "target": target.id, "hp": target.hp}))
            if killed:
                evts.append(Event("UnitKilled", self.rounds + 1,
                                  {"unit_id": target.id, "pos": target.pos, "killer": unit.id}))

        if self.strict:
            self.state.check_invariants()
        return evts

    def _finish(self) -> Event:
        self.status = BattleStatus.ENDED
        sides = self.state.living_sides()
        self.winner = next(iter(sides)) if len(sides) == 1 else None
        logger.debug("Battle over after %d full rounds, winner %s", self.rounds, self.winner)
        return Event("BattleEnded", self.rounds,
                     {"winner": self.winner.name if self.winner else None,
                      "remaining_hp": self.state.remaining_hp()})

    def step(self) -> List[Event]:
        """Play one round. A round cut short by victory is not counted."""
        if self.status == BattleStatus.ENDED:
            return []
        if not self.state.living():
            return [self._finish()]
        evts: List[Event] = []
        for unit in list(self.state.units):
            if not unit.alive:
                continue
            turn = self._turn(unit)
            if turn is None:
                evts.append(self._finish())
                return evts
            evts += turn

        self.state.sort_units()
        self.rounds += 1
        evts.append(Event("RoundCompleted", self.rounds, {"living": len(self.state.living())}))
        if len(self.state.living_sides()) < 2:
            evts.append(self._finish())
        elif not any(e.kind in ("UnitMoved", "Attack") for e in evts):
            # nothing changed, so every later round would repeat this one
            raise Stalemate(self.rounds)
        return evts

    def outcome(self) -> BattleOutcome:
        return BattleOutcome(self.rounds, self.state.remaining_hp(), self.winner)

    def run(self, max_rounds: Optional[int] = None) -> BattleOutcome:
        """Play rounds until one faction is left standing."""
        while self.status == BattleStatus.CONTINUING:
            if max_rounds is not None and self.rounds >= max_rounds:
                raise RoundLimitExceeded(max_rounds)
            self.step()
        return self.outcome()

    def snapshot(self) -> State:
        """Return current state."""
        return self.state


def run_to_completion(state: State, max_rounds: Optional[int] = None) -> BattleOutcome:
    """Fight the battle in place on state; returns (rounds, remaining_hp, winner)."""
    return Engine(state).run(max_rounds)
