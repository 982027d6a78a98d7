from collections import Counter
from itertools import product

import pytest

from wordle_server.models.game import MatchType
from wordle_server.services.match_engine import evaluate, pattern_key

E, P, A = MatchType.EXACT, MatchType.PRESENT, MatchType.ABSENT

WORDS = ['mower', 'owler', 'salad', 'cauld', 'camel', 'shout', 'llama', 'allan',
         'eerie', 'geese', 'speed', 'abbey', 'kebab', 'lolly']


def classes(matches):
    return [m.classification for m in matches]


@pytest.mark.parametrize('secret, guess, expected', [
    ('mower', 'owler', [P, P, A, E, E]),
    ('salad', 'cauld', [A, E, A, P, E]),
    ('camel', 'camel', [E, E, E, E, E]),
    ('shout', 'camel', [A, A, A, A, A]),
    ('llama', 'allan', [P, E, P, P, A]),
])
def test_known_scenarios(secret, guess, expected):
    solved, matches = evaluate(secret, guess)
    assert classes(matches) == expected
    assert solved == (secret == guess)


def test_positions_and_characters_follow_the_guess():
    _, matches = evaluate('mower', 'owler')
    assert [m.position for m in matches] == [0, 1, 2, 3, 4]
    assert ''.join(m.character for m in matches) == 'owler'


def test_repeated_guess_letter_beyond_secret_count_is_absent():
    # 'e' twice in the secret, three times in the guess, none in place
    _, matches = evaluate('speed', 'eerie')
    assert classes(matches) == [P, P, A, A, A]


def test_exact_match_wins_over_earlier_partial():
    # The only 'l' of the secret is matched in place, so the earlier 'l' gets nothing
    _, matches = evaluate('camel', 'label')
    assert classes(matches) == [A, E, A, E, E]


def test_single_secret_letter_goes_to_earliest_guess_position():
    _, matches = evaluate('mower', 'eerie')
    assert classes(matches) == [P, A, P, A, A]


def test_supports_other_word_lengths():
    solved, matches = evaluate('banana', 'ananas')
    assert not solved
    assert classes(matches) == [P, P, P, P, P, A]


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        evaluate('mower', 'owl')


def test_pattern_key():
    _, matches = evaluate('mower', 'owler')
    assert pattern_key(matches) == 'PP-EE'


@pytest.mark.parametrize('secret, guess', list(product(WORDS, repeat=2)))
def test_properties_hold_for_every_pair(secret, guess):
    solved, matches = evaluate(secret, guess)

    # Deterministic
    assert evaluate(secret, guess) == (solved, matches)

    # Solved only on whole-word equality
    assert solved == (secret == guess)

    # Exact matches are never downgraded
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            assert matches[i].classification == E

    # No letter is credited more often than it occurs in the secret
    credited = Counter(m.character for m in matches if m.classification != A)
    secret_counts = Counter(secret)
    for letter, count in credited.items():
        assert count <= secret_counts[letter]
