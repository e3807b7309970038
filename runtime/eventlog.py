from typing import Dict, List, Optional, Tuple
from combat.model import Event

class EventLog:
    """Append-only record of a battle, indexed by the round events belong to."""

    def __init__(self):
        self._log: List[Event] = []
        self._by_round: Dict[int, List[int]] = {}

    def append_many(self, evts: List[Event]) -> Tuple[int, int]:
        """Append events and return (start_offset, end_offset)."""
        start = len(self._log)
        for offset, e in enumerate(evts, start):
            self._by_round.setdefault(e.round, []).append(offset)
        self._log.extend(evts)
        return start, len(self._log) - 1

    def since(self, offset: int, limit: int = 1000) -> Tuple[List[Event], int]:
        """Return events starting from offset, up to limit."""
        offset = max(0, offset)
        chunk = self._log[offset: offset + limit]
        return chunk, offset + len(chunk)

    def rounds(self) -> List[int]:
        return sorted(self._by_round)

    def query(self, kind: Optional[str] = None, round: Optional[int] = None,
              unit_id: Optional[str] = None) -> List[Event]:
        """Events matching every given filter, in the order they happened."""
        if round is not None:
            candidates = [self._log[i] for i in self._by_round.get(round, [])]
        else:
            candidates = self._log
        return [e for e in candidates
                if (kind is None or e.kind == kind)
                and (unit_id is None or unit_id in (e.data.get("unit_id"),
                                                    e.data.get("attacker"),
                                                    e.data.get("target")))]

    def page_rounds(self, first_round: int, max_rounds: int = 10) -> Tuple[Dict[int, List[Event]], Optional[int]]:
        """Events grouped by round for up to max_rounds rounds from first_round.

        Returns the page and the round to ask for next, or None at the end.
        """
        wanted = [r for r in self.rounds() if r >= first_round]
        page = {r: self.query(round=r) for r in wanted[:max_rounds]}
        next_round = wanted[max_rounds] if len(wanted) > max_rounds else None
        return page, next_round

    def __len__(self) -> int:
        return len(self._log)
