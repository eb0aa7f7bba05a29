import time
import random
import logging
from enum import Enum, auto
from typing import Callable, List, Optional

from constants import MENU_MIN, MENU_MAX, PET_CHOICE_MIN, PET_CHOICE_MAX
from models import Species
from pet_entity import Pet, create_pet
from species import TRAITS_BY_SPECIES

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    SETUP = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    EXITED = auto()


# Menu number -> Pet method
ACTIONS = {
    1: "feed",
    2: "play",
    3: "sleep",
    4: "clean",
    5: "interact",
    6: "use_special_ability",
}
VIEW_STATUS = 7
EXIT_GAME = 8


class GameManager:
    """Owns the single pet and drives the turn loop: update, render, read, dispatch."""

    def __init__(self, ui, reader, clock: Callable[[], float] = time.time,
                 rng: Optional[random.Random] = None, sounds=None):
        self.ui = ui
        self.reader = reader
        self.clock = clock
        self.rng = rng
        self.sounds = sounds
        self.pet: Optional[Pet] = None
        self.phase = GamePhase.SETUP

    def _play(self, effect):
        if self.sounds is not None:
            self.sounds.play_effect(effect)

    # --- Setup ---
    def create_pet(self, species, name: str, variant: str = "") -> Pet:
        self.pet = create_pet(species, name, variant, clock=self.clock, rng=self.rng)
        self.phase = GamePhase.PLAYING
        return self.pet

    def setup(self):
        self.ui.display_welcome()
        self.ui.display_pet_selection()
        choice = self.reader.read_int_in_range(
            PET_CHOICE_MIN, PET_CHOICE_MAX, f"\nSelect pet type ({PET_CHOICE_MIN}-{PET_CHOICE_MAX}): ")
        species = Species.from_choice(choice)
        name = self.reader.read_string("\nEnter your pet's name: ")
        label = TRAITS_BY_SPECIES[species].variant_label
        variant = self.reader.read_line(
            f"Enter your {species.value.lower()}'s {label} (optional): ")

        pet = self.create_pet(species, name, variant)
        born = f"{name} the {variant} {species.value}" if variant else f"{name} the {species.value}"
        self.ui.display_message(f"\n{born} has been born! {pet.make_sound()}")
        self._play(pet.traits.sound_effect)

    # --- Turn loop ---
    def update_pet(self) -> List[str]:
        if self.pet is None:
            return []
        # The pet stamps last_update itself on every update
        return self.pet.update(self.clock() - self.pet.last_update)

    def handle_action(self, choice: int) -> bool:
        """Dispatch one menu choice. Returns False when the player wants to exit."""
        if choice == EXIT_GAME:
            return False
        if choice == VIEW_STATUS:
            self.ui.display_status(self.pet.get_status())
            return True

        method = ACTIONS.get(choice)
        if method is None:
            self.ui.display_message("Invalid choice!")
            return True

        if method == "use_special_ability" and not self.pet.can_use_ability():
            self.ui.display_message("Special ability is not available right now!")
            return True

        result = getattr(self.pet, method)()
        if method == "interact":
            self._play(self.pet.traits.sound_effect)
        elif method == "use_special_ability":
            self._play("ability")
        self.ui.display_message(result)
        return True

    def step(self) -> GamePhase:
        """Run one loop iteration and return the resulting phase."""
        self.ui.clear_screen()
        for notice in self.update_pet():
            self.ui.display_message(notice)

        status = self.pet.get_status()
        if not self.pet.is_alive():
            self.phase = GamePhase.GAME_OVER
            logger.info("Game over: %s died at %.2f minutes", status.name, status.age)
            self._play("game_over")
            self.ui.display_game_over(status)
            return self.phase

        self.ui.display_status(status)
        self.ui.display_warnings(status)
        self.ui.display_main_menu()
        choice = self.reader.read_int_in_range(MENU_MIN, MENU_MAX, "\nChoose an action: ")

        if not self.handle_action(choice):
            self.phase = GamePhase.EXITED
            logger.info("Player exited with %s alive", self.pet.name)
            self.ui.display_message(f"\nThanks for playing! Goodbye from {self.pet.name}!")
            return self.phase

        self.reader.wait_for_enter()
        return self.phase

    def run(self) -> GamePhase:
        if self.phase == GamePhase.SETUP:
            self.setup()
        while self.phase == GamePhase.PLAYING:
            self.step()
        return self.phase
