import logging
from typing import List, Optional

from .board import Board
from .config import BattleConfig
from .errors import MapParseError
from .model import Coord, Faction, State, Unit

logger = logging.getLogger(__name__)

WALL = "#"
FLOOR = "."


def parse_initial_state(text: str, config: Optional[BattleConfig] = None) -> State:
    """Scan board text into a fresh State.

    Blank lines before and after the map are dropped; a blank line inside it
    is kept as a row of wall so later rows keep their line numbers.
    """
    config = config or BattleConfig()
    lines = [line.rstrip("\r\n") for line in text.splitlines()]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    lines = [line if line.strip() else "" for line in lines]

    tiles: List[Coord] = []
    units: List[Unit] = []
    counts = {side: 0 for side in Faction}
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == WALL:
                continue
            if char == FLOOR:
                tiles.append((row, col))
                continue
            try:
                side = Faction(char)
            except ValueError:
                raise MapParseError(row, col, char) from None
            tiles.append((row, col))
            counts[side] += 1
            units.append(Unit(id=f"{side.glyph}{counts[side]}", side=side,
                              pos=(row, col), hp=config.start_hp))

    width = max((len(line) for line in lines), default=0)
    board = Board.from_tiles(tiles, (len(lines), width))
    state = State(
        board=board,
        units=units,
        occupied={u.pos for u in units},
        attack_power=config.attack_powers(),
    )
    logger.debug("Parsed %dx%d board with %d tiles and %d units",
                 len(lines), width, len(board), len(units))
    return state
