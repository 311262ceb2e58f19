import random

import pytest

from wordscramble.errors import ConfigurationError, RoundNotStartedError
from wordscramble.game_logic import (
    RoundState, SubmitOutcome, is_composable, is_original, is_real, normalize_word, score_for_word,
)


def test_composable_respects_letter_counts():
    assert is_composable('silent', 'listen')
    assert is_composable('net', 'listen')
    assert not is_composable('lists', 'listen')
    assert not is_composable('cat', 'listen')
    # order of letters in the candidate does not matter
    assert is_composable('tnes', 'listen')


def test_original_rejects_root_and_used_words():
    assert not is_original('listen', 'listen', [])
    assert not is_original('tile', 'listen', ['tile'])
    assert is_original('tile', 'listen', ['lint'])


def test_real_needs_three_letters(dictionary):
    assert not is_real('to', dictionary)
    assert is_real('tin', dictionary)
    assert not is_real('tns', dictionary)


def test_normalize_and_score():
    assert normalize_word('  CaT \n') == 'cat'
    assert score_for_word('silent') == 12


def test_submit_before_start_fails_fast(dictionary):
    state = RoundState(dictionary)
    assert not state.is_started
    with pytest.raises(RoundNotStartedError):
        state.submit('silent')


def test_start_round_with_empty_list(dictionary):
    state = RoundState(dictionary)
    with pytest.raises(ConfigurationError):
        state.start_round([])
    with pytest.raises(ConfigurationError):
        state.start_round(['', '  '])
    assert state.root_word is None


def test_failed_restart_keeps_previous_round(round_state):
    round_state.submit('silent')
    with pytest.raises(ConfigurationError):
        round_state.start_round([])
    assert round_state.root_word == 'listen'
    assert round_state.used_words == ('silent',)
    assert round_state.score == 12


def test_start_round_normalizes_root(dictionary):
    state = RoundState(dictionary)
    assert state.start_round(['  LISTEN \r', '']) == 'listen'
    assert state.root_word == 'listen'


def test_start_round_picks_from_list(dictionary):
    state = RoundState(dictionary, rng=random.Random(3))
    words = ['listen', 'enlist', 'tinsel']
    picks = {state.start_round(words) for _ in range(50)}
    assert picks <= set(words)
    assert len(picks) > 1


def test_start_round_resets_state(round_state):
    round_state.submit('silent')
    round_state.submit('tile')
    assert round_state.score > 0
    round_state.start_round(['listen'])
    assert round_state.used_words == ()
    assert round_state.score == 0


def test_accepts_anagram_of_root(round_state):
    result = round_state.submit('silent')
    assert result.outcome is SubmitOutcome.ACCEPTED
    assert result.accepted
    assert result.score == 12
    assert round_state.used_words == ('silent',)


def test_root_word_is_duplicate(round_state):
    result = round_state.submit('listen')
    assert result.outcome is SubmitOutcome.REJECTED_DUPLICATE
    assert round_state.used_words == ()
    assert round_state.score == 0


def test_too_many_of_a_letter(round_state):
    assert round_state.submit('lists').outcome is SubmitOutcome.REJECTED_NOT_COMPOSABLE


def test_short_word_is_not_real(round_state):
    assert round_state.submit('it').outcome is SubmitOutcome.REJECTED_NOT_REAL


def test_unknown_word_is_not_real(round_state):
    assert round_state.submit('tels').outcome is SubmitOutcome.REJECTED_NOT_REAL


def test_resubmitting_is_duplicate(round_state):
    round_state.submit('silent')
    result = round_state.submit('silent')
    assert result.outcome is SubmitOutcome.REJECTED_DUPLICATE
    assert result.score == 12


def test_duplicate_checked_before_length(dictionary):
    state = RoundState(dictionary)
    state.start_round(['to'])
    # also too short to be real, but the root word check comes first
    assert state.submit('to').outcome is SubmitOutcome.REJECTED_DUPLICATE


def test_composability_checked_before_realness(round_state):
    # 'cat' is a real word but cannot be built from 'listen'
    assert round_state.submit('cat').outcome is SubmitOutcome.REJECTED_NOT_COMPOSABLE


def test_blank_input_is_ignored(round_state):
    result = round_state.submit('   ')
    assert result.outcome is SubmitOutcome.IGNORED
    assert not result.rejected
    assert round_state.used_words == ()


def test_input_is_normalized(round_state):
    assert round_state.submit(' SILENT ').accepted
    assert round_state.used_words == ('silent',)
    assert round_state.submit('silent').outcome is SubmitOutcome.REJECTED_DUPLICATE


def test_rejection_is_idempotent(round_state):
    round_state.submit('tile')
    for word in ('lists', 'tels', 'tile', 'it'):
        first = round_state.submit(word)
        second = round_state.submit(word)
        assert first == second
        assert round_state.used_words == ('tile',)
        assert round_state.score == 8


def test_score_and_order_over_a_round(round_state):
    accepted = ['silent', 'tin', 'nest', 'inlet']
    for word in accepted:
        assert round_state.submit(word).accepted
    round_state.submit('lists')
    round_state.submit('to')
    assert round_state.used_words == tuple(reversed(accepted))
    assert round_state.score == 2 * sum(len(w) for w in accepted)


def test_locale_is_passed_to_dictionary(dictionary):
    state = RoundState(dictionary, locale='fr')
    state.start_round(['listen'])
    assert state.submit('silent').outcome is SubmitOutcome.REJECTED_NOT_REAL
