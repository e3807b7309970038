from typing import Dict, Optional

from pydantic import BaseModel, Field

from .model import Faction


class BattleConfig(BaseModel):
    """Battle setup and the caller-imposed safety limits."""
    start_hp: int = Field(default=200, ge=1)
    default_power: int = Field(default=3, ge=1)
    protected: Faction = Faction.ELF  # the faction whose power is configurable
    protected_power: int = Field(default=3, ge=1)
    max_power: int = Field(default=200, ge=1)
    max_rounds: Optional[int] = Field(default=None, ge=1)

    def attack_powers(self) -> Dict[Faction, int]:
        return {
            side: self.protected_power if side == self.protected else self.default_power
            for side in Faction
        }
