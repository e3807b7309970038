from typing import Optional
from pydantic import BaseModel

class OutcomeOut(BaseModel):
    """Battle result at the configured power."""
    winner: Optional[str]
    rounds: int
    remaining_hp: int
    score: int

class PowerSearchOut(BaseModel):
    """Minimal lossless power and the battle it produces."""
    power: int
    rounds: int
    remaining_hp: int
    score: int
    attempts: int

class SimulationReport(BaseModel):
    """Everything the command line prints, as one document."""
    input: str
    outcome: OutcomeOut
    search: Optional[PowerSearchOut] = None
