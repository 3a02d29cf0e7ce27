import pytest

from flappy.gamestate import GamePhase, InputState

ALL = list(GamePhase)


@pytest.mark.parametrize("phase", ALL)
def test_game_over_absorbs_on_either_side(phase):
    assert (GamePhase.GAME_OVER | phase) is GamePhase.GAME_OVER
    assert (phase | GamePhase.GAME_OVER) is GamePhase.GAME_OVER


def test_merge_without_game_over_takes_the_newer_phase():
    assert (GamePhase.PLAYING | GamePhase.PAUSED) is GamePhase.PAUSED
    assert (GamePhase.PAUSED | GamePhase.PLAYING) is GamePhase.PLAYING


def test_toggle_pause():
    assert GamePhase.PLAYING.toggled_pause() is GamePhase.PAUSED
    assert GamePhase.PAUSED.toggled_pause() is GamePhase.PLAYING
    assert GamePhase.COUNTDOWN.toggled_pause() is GamePhase.PAUSED
    assert GamePhase.GAME_OVER.toggled_pause() is GamePhase.GAME_OVER


def test_predicates_are_exclusive():
    for phase in ALL:
        flags = [phase.is_paused(), phase.is_countdown(), phase.is_playing(), phase.is_gameover()]
        assert flags.count(True) == 1


def test_input_state_starts_released():
    assert InputState().flap is False
