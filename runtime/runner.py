import logging
from typing import Callable, List, Optional

from combat.engine import BattleOutcome, BattleStatus, Engine
from combat.errors import RoundLimitExceeded
from combat.model import Event, State
from .eventlog import EventLog

logger = logging.getLogger(__name__)

RoundHook = Callable[[int, State, List[Event]], None]


class BattleRunner:
    """Synchronous driver that plays an engine round by round and logs events."""

    def __init__(self, engine: Engine, on_round: Optional[RoundHook] = None,
                 max_rounds: Optional[int] = None):
        self.engine = engine
        self.on_round = on_round
        self.max_rounds = max_rounds
        self.events = EventLog()

    def step(self) -> List[Event]:
        """Play one round, record its events and fire the hook."""
        evts = self.engine.step()
        if evts:
            self.events.append_many(evts)
        logger.debug("Round %d produced %d events", self.engine.rounds, len(evts))
        if self.on_round is not None:
            self.on_round(self.engine.rounds, self.engine.snapshot(), evts)
        return evts

    def run(self) -> BattleOutcome:
        """Play until the battle ends or the round cap is reached."""
        while self.engine.status == BattleStatus.CONTINUING:
            if self.max_rounds is not None and self.engine.rounds >= self.max_rounds:
                raise RoundLimitExceeded(self.max_rounds)
            self.step()
        outcome = self.engine.outcome()
        logger.info("%s win after %d rounds with %d hp left",
                    outcome.winner.name if outcome.winner else "Nobody",
                    outcome.rounds, outcome.remaining_hp)
        return outcome

    def snapshot(self) -> State:
        """Get current state."""
        return self.engine.snapshot()
