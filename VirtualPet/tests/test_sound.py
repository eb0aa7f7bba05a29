import os

from sounds import SoundManager


def test_sound_manager_records_last_played():
    sounds = SoundManager(enabled=False)
    sounds.play_effect("woof")
    assert sounds.last_played == "woof"


def test_muted_manager_reports_no_mixer():
    sounds = SoundManager(enabled=False)
    ok, info = sounds.check_output()
    assert ok is False
    assert info == {"mixer_init": None}
    assert sounds.load("meow", "nowhere.wav") is False


def test_sound_manager_check_output_dummy():
    # SDL_AUDIODRIVER=dummy is set in conftest; simulates a box with no audio
    sounds = SoundManager()
    try:
        ok, info = sounds.check_output()
        # Even if mixer failed to init, check_output should return clean info
        assert isinstance(ok, bool)
        assert "mixer_init" in info
    finally:
        sounds.close()
    assert sounds.enabled is False


def test_missing_asset_is_silent(tmp_path):
    sounds = SoundManager(sound_dir=str(tmp_path))
    try:
        sounds.play_effect("chirp")
        assert sounds.last_played == "chirp"
        if sounds.enabled:
            assert sounds.assets["chirp"] is None
            assert sounds.load("chirp", os.path.join(str(tmp_path), "chirp.wav")) is False
    finally:
        sounds.close()
