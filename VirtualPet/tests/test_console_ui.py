import io

import pytest
from colorama import Fore, deinit

from console_ui import ConsoleUI, make_progress_bar, stat_color
from illness import Illness
from pet_entity import create_pet


@pytest.fixture
def ui():
    return ConsoleUI(output=io.StringIO(), use_color=False)


@pytest.mark.parametrize("value,filled", [(0, 0), (9, 0), (10, 1), (55, 5), (99, 9), (100, 10)])
def test_progress_bar_cells(value, filled):
    bar = make_progress_bar(value)
    assert len(bar) == 10
    assert bar.count("█") == filled
    assert bar.count("░") == 10 - filled


def test_stat_color_bands():
    assert stat_color(10) == Fore.RED
    assert stat_color(30) == Fore.YELLOW
    assert stat_color(80) == Fore.GREEN


def test_status_screen(ui, clock):
    pet = create_pet("dog", "Rex", "Beagle", clock=clock)
    pet.stats.hunger = 55
    ui.display_status(pet.get_status())
    text = ui.output.getvalue()
    assert "=== Rex's Status ===" in text
    assert "Type: Dog (Beagle)" in text
    assert "Age: 0.00 minutes (Baby)" in text
    assert "Hunger:       55/100 [█████░░░░░]" in text
    assert "Special Ability: Loyalty - Maintains happiness longer! (Inactive)" in text
    assert "Status: Alive and well!" in text
    assert "ILLNESS" not in text


def test_status_screen_shows_illness(ui, clock):
    pet = create_pet("cat", "Tom", clock=clock)
    pet.illness = Illness(is_ill=True, name="Fleas")
    ui.display_status(pet.get_status())
    assert "ILLNESS: Tom is sick with Fleas! Clean to cure." in ui.output.getvalue()


def test_warnings_for_low_stats(ui, clock):
    pet = create_pet("bird", "Polly", clock=clock)
    pet.stats.hunger = 29
    pet.stats.cleanliness = 10
    warnings = ui.display_warnings(pet.get_status())
    assert warnings == ["Polly is very hungry!", "Polly is getting dirty!"]
    assert "(!) Polly is very hungry!" in ui.output.getvalue()


def test_no_warnings_when_cared_for(ui, clock):
    assert ui.display_warnings(create_pet("dog", "Rex", clock=clock).get_status()) == []


def test_main_menu_lists_all_actions(ui):
    ui.display_main_menu()
    text = ui.output.getvalue()
    for n, label in enumerate(["Feed", "Play", "Sleep", "Clean", "Interact",
                               "Use Special Ability", "View Status", "Exit Game"], start=1):
        assert f"{n}. {label}" in text


def test_game_over_screen(ui, clock):
    pet = create_pet("dog", "Rex", clock=clock)
    clock.advance(90)
    pet.stats.health = 0
    ui.display_game_over(pet.get_status())
    text = ui.output.getvalue()
    assert "GAME OVER" in text
    assert "Rex has died... Game Over." in text
    assert "Rex lived for 1.50 minutes (Baby)." in text


def test_colors_only_when_enabled(clock):
    plain = ConsoleUI(output=io.StringIO(), use_color=False)
    plain.display_message("hello")
    assert plain.output.getvalue() == "hello\n"

    colored = ConsoleUI(output=io.StringIO(), use_color=True)
    try:
        colored.display_status(create_pet("dog", "Rex", clock=clock).get_status())
    finally:
        deinit()
    assert Fore.GREEN in colored.output.getvalue()


def test_clear_screen_skips_captured_output(ui):
    ui.clear_screen()
    assert ui.output.getvalue() == ""
