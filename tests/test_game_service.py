"""Tests for the session-owning game service."""

import random
from datetime import date

import pytest

from arabic_wordle.config.game_settings import MESSAGE_NOT_IN_LIST, MESSAGE_WON, MESSAGE_WRONG_LENGTH
from arabic_wordle.models.game import GameStatus
from arabic_wordle.services.game_service import GameService, initialize_game_service, get_game_service
from arabic_wordle.services.word_source import WordSource

from conftest import MISSES, TARGET


def type_and_submit(service, game_id, word):
    for letter in word:
        service.press_key(game_id, letter)
    return service.press_key(game_id, "Enter")


def test_new_game_hides_answer(service):
    game_id = service.create_new_game()
    view = service.get_game_state(game_id)
    assert view.game_id == game_id
    assert view.status == "playing"
    assert view.answer is None
    assert view.max_rounds == 6
    assert len(view.grid) == 6
    assert service.get_state(game_id).target_word == TARGET


def test_each_game_has_its_own_state(service):
    first = service.create_new_game()
    second = service.create_new_game()
    service.press_key(first, "ل")
    assert service.get_game_state(first).current_guess == "ل"
    assert service.get_game_state(second).current_guess == ""


def test_english_and_arabic_keys(service):
    game_id = service.create_new_game()
    for key in ["g", "u", "f", ",", "h"]:
        view = service.press_key(game_id, key)
    assert view.current_guess == TARGET
    view = service.press_key(game_id, "Backspace")
    assert view.current_guess == "لعبو"
    view = service.press_key(game_id, "F1")
    assert view.current_guess == "لعبو"


def test_win_reveals_answer(service):
    game_id = service.create_new_game()
    view = type_and_submit(service, game_id, TARGET)
    assert view.won is True
    assert view.game_over is True
    assert view.status == "won"
    assert view.message == MESSAGE_WON
    assert view.answer == TARGET
    assert view.guess_results == [[(letter, "correct") for letter in TARGET]]
    assert view.letter_status == {letter: "correct" for letter in TARGET}


def test_loss_after_six_misses(service):
    game_id = service.create_new_game()
    for word in MISSES:
        view = type_and_submit(service, game_id, word)
    assert view.status == "lost"
    assert view.won is False
    assert view.answer == TARGET
    assert view.guesses == MISSES


def test_keys_ignored_after_game_over(service):
    game_id = service.create_new_game()
    type_and_submit(service, game_id, TARGET)
    before = service.get_state(game_id)
    service.press_key(game_id, "ل")
    assert service.get_state(game_id) is before


def test_rejected_submit_guess_keeps_typed_buffer(service):
    game_id = service.create_new_game()
    view = service.submit_guess(game_id, "ااااا")
    assert view.guesses == []
    assert view.current_guess == ""
    assert view.message == MESSAGE_NOT_IN_LIST

    service.press_key(game_id, "ل")
    service.press_key(game_id, "ع")
    view = service.submit_guess(game_id, "لعب")
    assert view.guesses == []
    assert view.current_guess == "لع"
    assert view.message == MESSAGE_WRONG_LENGTH


def test_overlong_submit_guess_never_enters_buffer(service):
    game_id = service.create_new_game()
    view = service.submit_guess(game_id, TARGET * 2)
    assert view.guesses == []
    assert view.current_guess == ""
    assert view.message == MESSAGE_WRONG_LENGTH
    assert len(service.get_state(game_id).current_guess) <= 5
    assert all(cell["letter"] == "" for cell in view.grid[0])


def test_multi_letter_key_press_is_ignored(service):
    game_id = service.create_new_game()
    view = service.press_key(game_id, TARGET)
    assert view.current_guess == ""
    view = service.press_key(game_id, "لا")
    assert view.current_guess == "لا"


def test_submit_guess_valid_word(service):
    game_id = service.create_new_game()
    view = service.submit_guess(game_id, f" {MISSES[0]} ")
    assert view.guesses == [MISSES[0]]
    assert view.current_row == 1
    assert view.current_guess == ""
    assert all(status == "absent" for _, status in view.guess_results[0])


def test_submit_guess_after_game_over_returns_none(service):
    game_id = service.create_new_game()
    service.submit_guess(game_id, TARGET)
    assert service.submit_guess(game_id, MISSES[0]) is None


def test_is_valid_guess(service):
    game_id = service.create_new_game()
    assert service.is_valid_guess(game_id, TARGET) == (True, "")
    assert service.is_valid_guess(game_id, "لعب") == (False, MESSAGE_WRONG_LENGTH)
    assert service.is_valid_guess(game_id, "ااااا") == (False, MESSAGE_NOT_IN_LIST)
    assert service.is_valid_guess(game_id, "") == (False, "Guess must be a valid string")
    assert service.is_valid_guess("missing", TARGET) == (False, "Game not found")
    service.submit_guess(game_id, TARGET)
    assert service.is_valid_guess(game_id, TARGET) == (False, "Game is already over")


def test_reset_game(service):
    game_id = service.create_new_game()
    type_and_submit(service, game_id, TARGET)
    view = service.reset_game(game_id)
    assert view.status == "playing"
    assert view.guesses == []
    assert view.current_guess == ""
    assert view.answer is None
    assert service.get_state(game_id).status is GameStatus.PLAYING


def test_unknown_game(service):
    assert service.get_game_state("missing") is None
    assert service.press_key("missing", "ل") is None
    assert service.submit_guess("missing", TARGET) is None
    assert service.reset_game("missing") is None
    assert service.delete_game("missing") is False


def test_delete_game(service):
    game_id = service.create_new_game()
    assert service.delete_game(game_id) is True
    assert service.get_game_state(game_id) is None


def test_random_word_mode():
    words = ["مدرسة", "حديقة", "مدينة"]
    service = GameService(WordSource(words), word_mode="random", rng=random.Random(3))
    targets = {service.get_state(service.create_new_game()).target_word for _ in range(20)}
    assert targets <= set(words)


def test_canonical_scoring_mode():
    source = WordSource(["مدرسة", "ممممم"], epoch=date.today())
    service = GameService(source, scoring_mode="canonical")
    game_id = service.create_new_game()
    view = service.submit_guess(game_id, "ممممم")
    assert [status for _, status in view.guess_results[0]] == ["correct"] + ["absent"] * 4

    simple = GameService(source)
    game_id = simple.create_new_game()
    view = simple.submit_guess(game_id, "ممممم")
    assert [status for _, status in view.guess_results[0]] == ["correct"] + ["present"] * 4


@pytest.mark.parametrize("kwargs", [{"word_mode": "weekly"}, {"scoring_mode": "strict"}])
def test_unknown_modes_rejected(kwargs):
    with pytest.raises(ValueError):
        GameService(**kwargs)


def test_initialize_from_config():
    class Settings:
        WORD_EPOCH = "2024-01-01"
        WORD_MODE = "random"
        SCORING_MODE = "canonical"
        MAX_ROUNDS = 6

    service = initialize_game_service(Settings)
    assert get_game_service() is service
    assert service.word_mode == "random"
    assert service.canonical is True
    assert service.word_source.epoch == date(2024, 1, 1)
