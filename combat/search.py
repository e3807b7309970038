import logging
from typing import List, NamedTuple, Optional

from .engine import BattleOutcome, Engine
from .errors import NoSolutionFound, Stalemate
from .model import Faction, State

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    rounds: int
    remaining_hp: int
    power: int

    @property
    def score(self) -> int:
        return self.rounds * self.remaining_hp


class Attempt(NamedTuple):
    power: int
    deaths: int
    outcome: BattleOutcome
    stalled: bool = False


class PowerSearch:
    """
    Find the smallest attack power for the protected faction that wins
    without a single loss.

    Powers are tried one at a time, upwards, each on a fresh copy of the
    initial layout. Fewer deaths at higher power holds in practice but is not
    guaranteed, so the scan stays linear.
    """

    def __init__(self, initial: State, protected: Faction = Faction.ELF,
                 start_power: Optional[int] = None, max_power: int = 200,
                 max_rounds: Optional[int] = None):
        self.initial = initial
        self.protected = protected
        self.start_power = start_power if start_power is not None else initial.attack_power[protected]
        self.max_power = max_power
        self.max_rounds = max_rounds
        self.attempts: List[Attempt] = []
        self.final_state: Optional[State] = None

    def attempt(self, power: int) -> Attempt:
        """Replay the whole battle from the pristine layout at the given power."""
        state = self.initial.clone()
        state.attack_power[self.protected] = power
        engine = Engine(state)
        stalled = False
        try:
            outcome = engine.run(self.max_rounds)
        except Stalemate as exc:
            logger.warning("Power %d: %s", power, exc)
            stalled = True
            outcome = engine.outcome()
        result = Attempt(power, state.deaths(self.protected), outcome, stalled)
        self.attempts.append(result)
        self.final_state = state
        logger.info("%s win with %d hp and %d %s deaths after %d rounds at power %d",
                    outcome.winner.name if outcome.winner else "Nobody", outcome.remaining_hp,
                    result.deaths, self.protected.name.lower(), outcome.rounds, power)
        return result

    def run(self) -> SearchResult:
        for power in range(self.start_power, self.max_power + 1):
            result = self.attempt(power)
            if result.deaths == 0 and not result.stalled:
                return SearchResult(result.outcome.rounds, result.outcome.remaining_hp, power)
        raise NoSolutionFound(self.max_power)


def search_minimal_power(initial: State, protected: Faction = Faction.ELF,
                         start_power: Optional[int] = None, max_power: int = 200,
                         max_rounds: Optional[int] = None) -> SearchResult:
    """Returns (rounds, remaining_hp, power) for the minimal lossless power."""
    return PowerSearch(initial, protected, start_power, max_power, max_rounds).run()
