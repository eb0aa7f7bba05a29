import os
import sys

from colorama import Fore, Style, init

from constants import MAX_STAT, PROGRESS_BAR_CELLS, WARNING_THRESHOLD
from models import Status

BANNER_WIDTH = 44


def make_progress_bar(value: int) -> str:
    """10-cell bar, one filled cell per 10 points."""
    filled = max(0, min(PROGRESS_BAR_CELLS, value // (MAX_STAT // PROGRESS_BAR_CELLS)))
    return "█" * filled + "░" * (PROGRESS_BAR_CELLS - filled)


def stat_color(value: int) -> str:
    if value < 20:
        return Fore.RED
    if value < 50:
        return Fore.YELLOW
    return Fore.GREEN


class ConsoleUI:
    """Renders menus and pet status to a terminal using colorama."""

    def __init__(self, output=None, use_color=True):
        self.use_color = use_color
        if use_color:
            # Cross-platform terminal coloring; wraps sys.stdout on Windows
            init(autoreset=True)
        self.output = output if output is not None else sys.stdout

    # --- helpers ---
    def _print(self, text="", color=""):
        if self.use_color and color:
            text = f"{color}{text}{Style.RESET_ALL}"
        self.output.write(text + "\n")

    def _banner(self, title, color=Fore.CYAN):
        self._print("╔" + "═" * BANNER_WIDTH + "╗", color)
        self._print("║" + title.center(BANNER_WIDTH) + "║", color)
        self._print("╚" + "═" * BANNER_WIDTH + "╝", color)

    # --- presentation interface ---
    def clear_screen(self):
        if self.output is sys.stdout and sys.stdout.isatty():
            os.system("cls" if os.name == "nt" else "clear")

    def display_welcome(self):
        self._banner("WELCOME TO VIRTUAL PET SIMULATOR")
        self._print("Take care of your pet by feeding, playing, cleaning and resting.")
        self._print("Watch your pet grow from Baby to Adult to Elderly!")

    def display_pet_selection(self):
        self._print()
        self._banner("CHOOSE YOUR PET TYPE")
        self._print("1. Dog   - Loyal companion with happiness boost")
        self._print("2. Cat   - Independent pet with 9 lives")
        self._print("3. Bird  - Cheerful singer with stat boosts")

    def display_main_menu(self):
        self._print("\n" + "─" * (BANNER_WIDTH + 2))
        self._banner("WHAT WILL YOU DO?")
        for line in (
            "1. Feed",
            "2. Play",
            "3. Sleep",
            "4. Clean",
            "5. Interact (Make Sound)",
            "6. Use Special Ability",
            "7. View Status",
            "8. Exit Game",
        ):
            self._print(line)

    def display_status(self, status: Status):
        title = f"{status.type} ({status.variant})" if status.variant else status.type
        self._print(f"\n=== {status.name}'s Status ===", Style.BRIGHT)
        self._print(f"Type: {title}")
        self._print(f"Age: {status.age:.2f} minutes ({status.age_stage.value})")
        for label, value in (
            ("Health", status.health),
            ("Hunger", status.hunger),
            ("Happiness", status.happiness),
            ("Cleanliness", status.cleanliness),
        ):
            self._print(f"{label + ':':<13}{value:>3}/100 [{make_progress_bar(value)}]",
                        stat_color(value))

        if status.is_ill:
            self._print(f"\nILLNESS: {status.name} is sick with {status.illness_name}! Clean to cure.",
                        Fore.RED)

        self._print(f"\nSpecial Ability: {status.special_ability} {status.ability_status}",
                    Fore.MAGENTA)
        self._print(f"Status: {status.status_message}")
        self._print("===================")

    def display_warnings(self, status: Status):
        warnings = []
        if not status.is_alive:
            warnings.append("WARNING: Your pet's health is critical!")
        else:
            if status.hunger < WARNING_THRESHOLD:
                warnings.append(f"{status.name} is very hungry!")
            if status.happiness < WARNING_THRESHOLD:
                warnings.append(f"{status.name} is feeling sad!")
            if status.health < WARNING_THRESHOLD:
                warnings.append(f"{status.name}'s health is low!")
            if status.cleanliness < WARNING_THRESHOLD:
                warnings.append(f"{status.name} is getting dirty!")
        for warning in warnings:
            self._print(f"(!) {warning}", Fore.YELLOW)
        return warnings

    def display_message(self, text: str):
        self._print(text)

    def display_game_over(self, status: Status):
        self._print()
        self._banner("GAME OVER", Fore.RED)
        self._print(f"{status.name} has died... Game Over.", Fore.RED)
        self._print(f"{status.name} lived for {status.age:.2f} minutes ({status.age_stage.value}).")
