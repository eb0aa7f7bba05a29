import random

from constants import ILLNESS_NAMES
from illness import Illness, illness_chance
from pet_entity import create_pet


def test_illness_chance_never_rises_with_cleanliness():
    chances = [illness_chance(c) for c in range(0, 101)]
    assert all(a >= b for a, b in zip(chances, chances[1:]))
    assert illness_chance(5) > illness_chance(25) > illness_chance(90) == 0.0


def test_roll_makes_dirty_pet_ill(always_ill):
    illness = Illness()
    name = illness.roll(5, always_ill)
    assert illness.is_ill
    assert name in ILLNESS_NAMES
    assert illness.name == name


def test_roll_never_sickens_clean_pet(always_ill):
    illness = Illness()
    assert illness.roll(90, always_ill) is None
    assert not illness.is_ill
    assert illness.name == ""


def test_roll_does_not_relabel_existing_illness(always_ill):
    illness = Illness(is_ill=True, name="Cold")
    assert illness.roll(0, always_ill) is None
    assert illness.name == "Cold"


def test_dirty_pets_fall_ill_more_often():
    rng = random.Random(42)
    clean_count = dirty_count = 0
    for _ in range(500):
        clean, dirty = Illness(), Illness()
        clean.roll(25, rng)
        dirty.roll(5, rng)
        clean_count += clean.is_ill
        dirty_count += dirty.is_ill
    assert dirty_count > clean_count > 0


def test_cure_clears_flag_and_label():
    illness = Illness(is_ill=True, name="Fleas")
    illness.cure()
    assert not illness.is_ill
    assert illness.name == ""


def test_health_multiplier_only_while_ill():
    assert Illness().health_decay_multiplier == 1.0
    assert Illness(is_ill=True, name="Fever").health_decay_multiplier == 2.5


# --- Cure path through the Pet aggregate ---

def _sick_pet(species, clock, cleanliness):
    pet = create_pet(species, "Patient", clock=clock)
    pet.illness = Illness(is_ill=True, name="Infection")
    pet.stats.cleanliness = cleanliness
    return pet


def test_clean_above_threshold_cures_in_same_call(clock):
    pet = _sick_pet("dog", clock, 30)
    message = pet.clean()
    assert pet.stats.cleanliness == 70
    assert not pet.illness.is_ill
    assert pet.illness.name == ""
    assert "cured" in message.lower()


def test_clean_to_exactly_sixty_does_not_cure(clock):
    pet = _sick_pet("cat", clock, 20)
    message = pet.clean()
    assert pet.stats.cleanliness == 60
    assert pet.illness.is_ill
    assert "cured" not in message.lower()


def test_other_actions_never_cure(clock):
    pet = _sick_pet("dog", clock, 10)
    pet.feed()
    pet.play()
    pet.sleep()
    pet.interact()
    pet.use_special_ability()
    assert pet.illness.is_ill
    assert pet.illness.name == "Infection"


def test_bird_song_does_not_cure(clock):
    pet = _sick_pet("bird", clock, 50)
    pet.stats.health = 50
    pet.use_special_ability()
    assert pet.stats.health == 65
    assert pet.stats.cleanliness == 70
    assert pet.illness.is_ill


def test_cat_nine_lives_does_not_cure(clock):
    pet = _sick_pet("cat", clock, 50)
    pet.stats.health = 10
    pet.use_special_ability()
    assert pet.stats.health == 100
    assert pet.illness.is_ill


def test_status_reports_illness(clock):
    pet = _sick_pet("bird", clock, 50)
    status = pet.get_status()
    assert status.is_ill
    assert status.illness_name == "Infection"
    assert "ILL" in status.status_message
