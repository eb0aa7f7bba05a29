from enum import Enum
from dataclasses import dataclass

from constants import (
    MIN_STAT, MAX_STAT, LOW_STAT_THRESHOLD,
    BABY_MAX_AGE, ADULT_MAX_AGE,
    BABY_DECAY_MULTIPLIER, ADULT_DECAY_MULTIPLIER, ELDERLY_DECAY_MULTIPLIER,
)

STAT_NAMES = ("health", "hunger", "happiness", "cleanliness")


def clamp(value):
    """Clamp a stat value to the inclusive range [0, 100]."""
    return max(MIN_STAT, min(MAX_STAT, value))


class Species(Enum):
    """
    The three kinds of pet a player can adopt.
    Lookup is forgiving so that 'dog', 'DOG' and menu numbers all resolve.
    """
    DOG = "Dog"
    CAT = "Cat"
    BIRD = "Bird"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.name == normalized:
                    return member
        return super()._missing_(value)

    @classmethod
    def from_choice(cls, choice: int) -> "Species":
        """Map the 1-3 pet selection menu to a species."""
        order = [cls.DOG, cls.CAT, cls.BIRD]
        if not 1 <= choice <= len(order):
            raise ValueError(f"Pet choice must be between 1 and {len(order)}, got {choice}")
        return order[choice - 1]


class AgeStage(Enum):
    BABY = "Baby"
    ADULT = "Adult"
    ELDERLY = "Elderly"


_DECAY_MULTIPLIERS = {
    AgeStage.BABY: BABY_DECAY_MULTIPLIER,
    AgeStage.ADULT: ADULT_DECAY_MULTIPLIER,
    AgeStage.ELDERLY: ELDERLY_DECAY_MULTIPLIER,
}


def age_stage_for(age_minutes: float) -> AgeStage:
    if age_minutes < BABY_MAX_AGE:
        return AgeStage.BABY
    if age_minutes < ADULT_MAX_AGE:
        return AgeStage.ADULT
    return AgeStage.ELDERLY


def decay_multiplier_for(stage: AgeStage) -> float:
    return _DECAY_MULTIPLIERS.get(stage, ADULT_DECAY_MULTIPLIER)


@dataclass
class Stats:
    """
    The four bounded pet stats. 100 hunger means full, 100 cleanliness means clean.
    Every assignment to a stat goes through clamp(), including construction,
    so an out-of-range value is never stored.
    """
    health: int = MAX_STAT
    hunger: int = MAX_STAT
    happiness: int = MAX_STAT
    cleanliness: int = MAX_STAT

    def __setattr__(self, name, value):
        if name in STAT_NAMES:
            value = clamp(int(value))
        super().__setattr__(name, value)

    def critical_count(self) -> int:
        """Number of hunger/cleanliness/happiness stats below the low threshold."""
        return sum(
            1 for value in (self.hunger, self.cleanliness, self.happiness)
            if value < LOW_STAT_THRESHOLD
        )


@dataclass(frozen=True)
class Status:
    """Read-only snapshot of a pet, assembled on demand for display."""
    name: str
    type: str
    variant: str
    age: float  # minutes
    age_stage: AgeStage
    health: int
    hunger: int
    happiness: int
    cleanliness: int
    special_ability: str
    ability_status: str
    status_message: str
    is_alive: bool
    is_ill: bool = False
    illness_name: str = ""
