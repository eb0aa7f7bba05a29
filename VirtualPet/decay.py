import logging
import random
from typing import Optional

from constants import (
    HUNGER_DECAY_RATE, CLEANLINESS_DECAY_RATE, HAPPINESS_DECAY_RATE, HEALTH_DECAY_RATE,
    CRITICAL_STAT_THRESHOLD,
)
from models import Stats
from illness import Illness

logger = logging.getLogger(__name__)


class DecayEngine:
    """
    Applies time-based stat decay: Vt = V0 - floor(rate * dt * age_multiplier).

    The random source is injected so illness rolls can be seeded in tests.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def tick(self, stats: Stats, illness: Illness, delta_time: float,
             multiplier: float, happiness_modifier: float = 1.0) -> Optional[str]:
        """Decay stats for delta_time seconds. Returns an illness name if the pet fell ill."""
        # Clock anomalies must never regenerate stats
        dt = max(0.0, delta_time)
        if dt == 0.0:
            return None

        stats.hunger -= int(HUNGER_DECAY_RATE * dt * multiplier)
        stats.cleanliness -= int(CLEANLINESS_DECAY_RATE * dt * multiplier)

        if stats.hunger < CRITICAL_STAT_THRESHOLD or stats.cleanliness < CRITICAL_STAT_THRESHOLD:
            stats.happiness -= int(HAPPINESS_DECAY_RATE * dt * multiplier * happiness_modifier)

        # Roll before health so a pet falling ill this tick already decays faster
        fell_ill = illness.roll(stats.cleanliness, self.rng)

        if stats.critical_count() >= 2 or illness.is_ill:
            health_decay = HEALTH_DECAY_RATE * dt * multiplier * illness.health_decay_multiplier
            stats.health -= int(health_decay)

        return fell_ill
