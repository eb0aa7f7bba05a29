import time
import random
import logging
from typing import Callable, List, Optional

from constants import (
    FEED_HUNGER_INCREASE, FEED_HAPPINESS_INCREASE,
    SLEEP_HEALTH_INCREASE, SLEEP_HUNGER_DECREASE,
    CLEAN_CLEANLINESS_INCREASE, CLEAN_HAPPINESS_INCREASE,
    INTERACT_HAPPINESS,
)
from models import Species, Stats, Status, AgeStage, age_stage_for, decay_multiplier_for
from illness import Illness
from decay import DecayEngine
from species import create_traits

logger = logging.getLogger(__name__)


class Pet:
    """
    One virtual pet: stats, age, illness and a species specialization.

    Every action returns a message for the player. Time only moves through
    update(), which the game loop calls with the seconds elapsed since the
    previous turn.
    """

    def __init__(self, name: str, species: Species, variant: str = "",
                 clock: Callable[[], float] = time.time,
                 rng: Optional[random.Random] = None):
        self.name = name
        self.species = Species(species)
        self.variant = variant
        self.clock = clock
        self.stats = Stats()
        self.illness = Illness()
        self.traits = create_traits(self.species)
        self.decay = DecayEngine(rng)

        self.birth_time = clock()
        self.last_update = self.birth_time

    # --- Age ---
    def age_minutes(self) -> float:
        return max(0.0, self.clock() - self.birth_time) / 60.0

    def age_stage(self) -> AgeStage:
        return age_stage_for(self.age_minutes())

    def decay_multiplier(self) -> float:
        return decay_multiplier_for(self.age_stage())

    def is_alive(self) -> bool:
        return self.stats.health > 0

    # --- Actions ---
    def feed(self) -> str:
        self.stats.hunger += FEED_HUNGER_INCREASE
        self.stats.happiness += FEED_HAPPINESS_INCREASE
        return f"{self.name} enjoyed the meal! Hunger restored"

    def play(self) -> str:
        return self.traits.play(self)

    def sleep(self) -> str:
        self.stats.health += SLEEP_HEALTH_INCREASE
        self.stats.hunger -= SLEEP_HUNGER_DECREASE
        return f"{self.name} took a nice nap! Health Restored"

    def clean(self) -> str:
        self.stats.cleanliness += CLEAN_CLEANLINESS_INCREASE
        self.stats.happiness += CLEAN_HAPPINESS_INCREASE
        if self.illness.can_be_cured_at(self.stats.cleanliness):
            cured = self.illness.name
            self.illness.cure()
            return f"{self.name} is now clean and fresh! The {cured} has been cured!"
        return f"{self.name} is now clean and fresh! Feels much better."

    def make_sound(self) -> str:
        return self.traits.sound

    def interact(self) -> str:
        self.stats.happiness += INTERACT_HAPPINESS.get(self.species.value, 0)
        return self.traits.interact_message(self.name)

    def can_use_ability(self) -> bool:
        return self.traits.can_use_ability()

    def use_special_ability(self) -> str:
        if not self.can_use_ability():
            return "Special ability is not available right now!"
        return self.traits.use_ability(self, self.clock())

    # --- Time ---
    def update(self, delta_time: float) -> List[str]:
        """Advance the pet by delta_time seconds. Returns notices for the player."""
        dt = max(0.0, delta_time)
        notices = []

        fell_ill = self.decay.tick(
            self.stats, self.illness, dt,
            multiplier=self.decay_multiplier(),
            happiness_modifier=self.traits.happiness_decay_modifier(),
        )
        if fell_ill:
            notices.append(f"{self.name} has become ill with {fell_ill}! "
                           f"Health will decay faster until cleaned.")

        now = self.clock()
        species_notice = self.traits.after_update(self, dt, now)
        if species_notice:
            notices.append(species_notice)

        self.last_update = now
        if not self.is_alive():
            logger.info("%s has died (age %.2f min)", self.name, self.age_minutes())
        return notices

    # --- Status ---
    def status_message(self) -> str:
        if not self.is_alive():
            return "Dead..."
        if self.illness.is_ill:
            return "ILL! Health decaying fast - needs cleaning!"

        critical = self.stats.critical_count()
        if critical >= 3:
            return "Critical condition! Needs immediate care!"
        elif critical == 2:
            return "Needs attention!"
        elif critical == 1:
            return "Doing okay, but could use some care."
        return "Alive and well!"

    def get_status(self) -> Status:
        return Status(
            name=self.name,
            type=self.species.value,
            variant=self.variant,
            age=self.age_minutes(),
            age_stage=self.age_stage(),
            health=self.stats.health,
            hunger=self.stats.hunger,
            happiness=self.stats.happiness,
            cleanliness=self.stats.cleanliness,
            special_ability=self.traits.ability_description,
            ability_status=self.traits.ability_status(),
            status_message=self.status_message(),
            is_alive=self.is_alive(),
            is_ill=self.illness.is_ill,
            illness_name=self.illness.name,
        )


def create_pet(species, name: str, variant: str = "",
               clock: Callable[[], float] = time.time,
               rng: Optional[random.Random] = None) -> Pet:
    """Build a pet from a Species, a species name ('dog') or a menu number (1-3)."""
    if isinstance(species, int) and not isinstance(species, bool):
        species = Species.from_choice(species)
    try:
        species = Species(species)
    except ValueError:
        raise ValueError(f"Unknown species: {species!r}") from None
    pet = Pet(name, species, variant, clock=clock, rng=rng)
    logger.info("Created %s named %s (%s)", species.value, name, variant or "no variant")
    return pet
