import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from combat.config import BattleConfig
from combat.engine import Engine
from combat.errors import CombatError
from combat.model import Event, Faction, State
from combat.parse import parse_initial_state
from combat.render import render_state
from combat.search import PowerSearch
from .runner import BattleRunner
from .schemas import OutcomeOut, PowerSearchOut, SimulationReport

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate an elves-vs-goblins cavern battle.")
    parser.add_argument("-i", "--input", default="inputs/day15.txt", help="map file")
    parser.add_argument("--power", type=int, default=3, help="starting elf attack power")
    parser.add_argument("--max-power", type=int, default=200, help="give up searching past this power")
    parser.add_argument("--max-rounds", type=int, default=None, help="abort a battle past this many rounds")
    parser.add_argument("--skip-search", action="store_true", help="only fight at the starting power")
    parser.add_argument("--trace", action="store_true", help="print the board after every round")
    parser.add_argument("--json", action="store_true", help="print a JSON report")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _print_round(rounds: int, state: State, evts: List[Event]) -> None:
    print(f"After {rounds} rounds:")
    print(render_state(state))
    print()


def simulate(text: str, config: BattleConfig, trace: bool = False,
             search: bool = True, source: str = "<input>") -> SimulationReport:
    initial = parse_initial_state(text, config)

    runner = BattleRunner(Engine(initial.clone()), on_round=_print_round if trace else None,
                          max_rounds=config.max_rounds)
    outcome = runner.run()
    report = SimulationReport(
        input=source,
        outcome=OutcomeOut(winner=outcome.winner.name if outcome.winner else None,
                           rounds=outcome.rounds, remaining_hp=outcome.remaining_hp,
                           score=outcome.score),
    )
    if search:
        searcher = PowerSearch(initial, protected=config.protected, max_power=config.max_power,
                               max_rounds=config.max_rounds)
        found = searcher.run()
        report.search = PowerSearchOut(power=found.power, rounds=found.rounds,
                                       remaining_hp=found.remaining_hp, score=found.score,
                                       attempts=len(searcher.attempts))
    return report


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.input)
    logger.info("Using input %s", path)
    try:
        config = BattleConfig(protected_power=args.power, max_power=args.max_power,
                              max_rounds=args.max_rounds)
        report = simulate(path.read_text(), config, trace=args.trace,
                          search=not args.skip_search, source=str(path))
    except (OSError, CombatError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(report.model_dump_json(indent=2))
        return 0

    o = report.outcome
    winner = Faction[o.winner].label if o.winner else "Nobody"
    print(f"{winner} win after {o.rounds} rounds "
          f"with {o.remaining_hp} hp left. Score: {o.score}")
    if report.search is not None:
        s = report.search
        print(f"{config.protected.label} win with {s.power} power after {s.rounds} rounds "
              f"with {s.remaining_hp} hp left. Score: {s.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
