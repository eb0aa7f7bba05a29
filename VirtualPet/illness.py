import logging
import random
from dataclasses import dataclass

from constants import (
    CLEANLINESS_CRITICAL_THRESHOLD, CLEANLINESS_LOW_THRESHOLD,
    ILLNESS_CHANCE_CRITICAL, ILLNESS_CHANCE_LOW,
    ILLNESS_CURE_THRESHOLD, ILLNESS_HEALTH_DECAY_MULTIPLIER, ILLNESS_NAMES,
)

logger = logging.getLogger(__name__)


def illness_chance(cleanliness: int) -> float:
    """Probability of falling ill on one tick. Never increases as cleanliness rises."""
    if cleanliness < CLEANLINESS_CRITICAL_THRESHOLD:
        return ILLNESS_CHANCE_CRITICAL
    if cleanliness < CLEANLINESS_LOW_THRESHOLD:
        return ILLNESS_CHANCE_LOW
    return 0.0


@dataclass
class Illness:
    """
    Healthy -> Ill -> Healthy state machine.

    A pet falls ill only through roll() and recovers only through cure(),
    which the Clean action calls once cleanliness is above the cure threshold.
    """
    is_ill: bool = False
    name: str = ""

    @property
    def health_decay_multiplier(self) -> float:
        return ILLNESS_HEALTH_DECAY_MULTIPLIER if self.is_ill else 1.0

    def roll(self, cleanliness: int, rng: random.Random):
        """Draw one sample and maybe fall ill. Returns the new illness name, or None."""
        if self.is_ill:
            return None
        chance = illness_chance(cleanliness)
        if rng.random() < chance:
            self.is_ill = True
            self.name = rng.choice(ILLNESS_NAMES)
            logger.info("Pet fell ill with %s (cleanliness=%d, chance=%.3f)",
                        self.name, cleanliness, chance)
            return self.name
        return None

    def can_be_cured_at(self, cleanliness: int) -> bool:
        return self.is_ill and cleanliness > ILLNESS_CURE_THRESHOLD

    def cure(self):
        if self.is_ill:
            logger.info("Illness %s cured", self.name)
        self.is_ill = False
        self.name = ""
