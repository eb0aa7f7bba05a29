"""
Species specializations.

Each species is a small dataclass holding its own ability state. The Pet
aggregate owns exactly one of them and dispatches Play, Interact and the
special ability through it. Feed, Sleep and Clean are shared and live on Pet.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from constants import (
    PLAY_HAPPINESS_INCREASE, PLAY_HUNGER_DECREASE,
    LOYALTY_DURATION, LOYALTY_HAPPINESS_REDUCTION, DOG_PLAY_HAPPINESS, DOG_PLAY_HUNGER,
    MAX_LIVES, MAX_STAT, CAT_PLAY_HAPPINESS_BONUS, CAT_PLAY_HUNGER_RESTORE,
    SONG_COOLDOWN, SONG_HUNGER_BOOST, SONG_HAPPINESS_BOOST, SONG_HEALTH_BOOST,
    SONG_CLEANLINESS_BOOST, BIRD_PLAY_HUNGER_RESTORE,
)
from models import Species, Stats

logger = logging.getLogger(__name__)


def base_play(stats: Stats):
    stats.happiness += PLAY_HAPPINESS_INCREASE
    stats.hunger -= PLAY_HUNGER_DECREASE


@dataclass
class DogTraits:
    """Loyalty: halves happiness decay for a minute. One activation at a time."""
    loyalty_active: bool = False
    loyalty_end_time: float = 0.0

    species = Species.DOG
    sound = "Woof! Woof!"
    sound_effect = "woof"
    variant_label = "breed"
    ability_description = "Loyalty - Maintains happiness longer!"

    def play(self, pet) -> str:
        pet.stats.happiness += DOG_PLAY_HAPPINESS
        pet.stats.hunger -= DOG_PLAY_HUNGER
        return f"{pet.name} loves playing fetch! Extra happiness gained"

    def interact_message(self, name: str) -> str:
        return f"{name} says {self.sound}"

    def can_use_ability(self) -> bool:
        return not self.loyalty_active

    def use_ability(self, pet, now: float) -> str:
        if not self.can_use_ability():
            return f"{pet.name} is already feeling loyal!"
        self.loyalty_active = True
        self.loyalty_end_time = now + LOYALTY_DURATION
        logger.info("%s activated Loyalty until %.1f", pet.name, self.loyalty_end_time)
        return (f"{pet.name} is feeling extra loyal! Happiness will decay slower "
                f"for the next {int(LOYALTY_DURATION)} seconds.")

    def happiness_decay_modifier(self) -> float:
        return LOYALTY_HAPPINESS_REDUCTION if self.loyalty_active else 1.0

    def after_update(self, pet, delta_time: float, now: float) -> Optional[str]:
        if self.loyalty_active and now > self.loyalty_end_time:
            self.loyalty_active = False
            logger.info("%s's Loyalty wore off", pet.name)
            return f"{pet.name}'s loyalty boost has worn off."
        return None

    def ability_status(self) -> str:
        return "(Active)" if self.loyalty_active else "(Inactive)"


@dataclass
class CatTraits:
    """Nine Lives: a consumable pool that restores health, on demand or on death."""
    lives_remaining: int = MAX_LIVES

    species = Species.CAT
    sound = "Meow~"
    sound_effect = "meow"
    variant_label = "fur color"
    ability_description = "Nine Lives - Can regenerate health!"

    def play(self, pet) -> str:
        base_play(pet.stats)
        pet.stats.happiness += CAT_PLAY_HAPPINESS_BONUS
        pet.stats.hunger += CAT_PLAY_HUNGER_RESTORE
        return f"{pet.name} plays independently! Purrs contentedly."

    def interact_message(self, name: str) -> str:
        return f"{name} is meowing {self.sound}"

    def can_use_ability(self) -> bool:
        return self.lives_remaining > 0

    def _spend_life(self, pet):
        pet.stats.health = MAX_STAT
        self.lives_remaining -= 1

    def use_ability(self, pet, now: float) -> str:
        if not self.can_use_ability():
            return f"{pet.name} has no lives remaining"
        self._spend_life(pet)
        logger.info("%s used Nine Lives, %d left", pet.name, self.lives_remaining)
        return (f"{pet.name} used Nine Lives! Health restored to {MAX_STAT}. "
                f"({self.lives_remaining} lives remaining)")

    def happiness_decay_modifier(self) -> float:
        return 1.0

    def after_update(self, pet, delta_time: float, now: float) -> Optional[str]:
        # Revival leaves illness untouched
        if not pet.is_alive() and self.can_use_ability():
            self._spend_life(pet)
            logger.info("%s revived automatically, %d lives left", pet.name, self.lives_remaining)
            return f"{pet.name} used a life! {self.lives_remaining} lives remaining."
        return None

    def ability_status(self) -> str:
        return f"({self.lives_remaining} lives remaining)"


@dataclass
class BirdTraits:
    """Song: boosts every stat at once, then needs two minutes to recover."""
    song_cooldown: float = 0.0
    songs_performed: int = 0

    species = Species.BIRD
    sound = "Chirp chirp"
    sound_effect = "chirp"
    variant_label = "feather color"
    ability_description = "Song - Boosts all stats!"

    def play(self, pet) -> str:
        base_play(pet.stats)
        pet.stats.hunger += BIRD_PLAY_HUNGER_RESTORE
        return f"{pet.name} performs aerial acrobatics! Happiness increased."

    def interact_message(self, name: str) -> str:
        return f"{name} is chirping happily! {self.sound}"

    def can_use_ability(self) -> bool:
        return self.song_cooldown <= 0

    def use_ability(self, pet, now: float) -> str:
        if not self.can_use_ability():
            return f"{pet.name} needs to rest before singing again."
        pet.stats.hunger += SONG_HUNGER_BOOST
        pet.stats.happiness += SONG_HAPPINESS_BOOST
        pet.stats.health += SONG_HEALTH_BOOST
        pet.stats.cleanliness += SONG_CLEANLINESS_BOOST
        self.song_cooldown = SONG_COOLDOWN
        self.songs_performed += 1
        logger.info("%s sang (song #%d)", pet.name, self.songs_performed)
        return f"{pet.name} sings a beautiful song! All stats boosted!"

    def happiness_decay_modifier(self) -> float:
        return 1.0

    def after_update(self, pet, delta_time: float, now: float) -> Optional[str]:
        if self.song_cooldown > 0:
            self.song_cooldown = max(0.0, self.song_cooldown - delta_time)
            if self.song_cooldown == 0.0:
                return f"{pet.name} is ready to sing again!"
        return None

    def ability_status(self) -> str:
        if self.song_cooldown > 0:
            return f"(Cooldown: {self.song_cooldown:.0f} seconds)"
        return "(Ready!)"


TRAITS_BY_SPECIES = {
    Species.DOG: DogTraits,
    Species.CAT: CatTraits,
    Species.BIRD: BirdTraits,
}


def create_traits(species: Species):
    try:
        return TRAITS_BY_SPECIES[species]()
    except KeyError:
        raise ValueError(f"Unknown species: {species!r}") from None
