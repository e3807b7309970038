class CombatError(Exception):
    """Base class for all simulator errors."""


class MapParseError(CombatError):
    """The board text contains a character outside the map alphabet."""

    def __init__(self, row: int, col: int, char: str):
        self.row = row
        self.col = col
        self.char = char
        super().__init__(f"Unrecognized map character {char!r} at row {row}, column {col}")


class InvariantViolation(CombatError):
    """Units and occupancy are out of sync. Not recoverable."""


class RoundLimitExceeded(CombatError):
    def __init__(self, max_rounds: int):
        self.max_rounds = max_rounds
        super().__init__(f"Battle still running after {max_rounds} rounds")


class NoSolutionFound(CombatError):
    """No attack power up to the ceiling saves every protected unit."""

    def __init__(self, max_power: int):
        self.max_power = max_power
        super().__init__(f"No attack power up to {max_power} avoids losses")


class Stalemate(CombatError):
    """A full round passed in which nobody moved or attacked."""

    def __init__(self, rounds: int):
        self.rounds = rounds
        super().__init__(f"Stalemate: no unit can move or attack after {rounds} rounds")
