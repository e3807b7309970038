from typing import Dict, List

from .model import State, Unit, reading_order


def render_state(state: State, show_hp: bool = True) -> str:
    """Draw the board with living units; optionally list hp after each row."""
    grid = state.board.glyphs()
    by_row: Dict[int, List[Unit]] = {}
    for u in sorted(state.living(), key=lambda u: reading_order(u.pos)):
        grid[u.pos] = u.side.glyph
        by_row.setdefault(u.pos[0], []).append(u)

    lines = []
    for row, cells in enumerate(grid):
        line = "".join(cells)
        if show_hp and row in by_row:
            line += "   " + ", ".join(f"{u.side.glyph}({u.hp})" for u in by_row[row])
        lines.append(line)
    return "\n".join(lines)
