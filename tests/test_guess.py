"""
Testing guess scoring.
"""

import itertools

import pytest

from game.colors import COLORS
from game.errors import DuplicateNotAllowed
from game.guess import evaluate_guess, has_duplicates

from conftest import B, G, O, R, W, Y


def test_no_matches():
    assert evaluate_guess((R, B, W, Y), (G, G, O, O), True) == (0, 0)


def test_exact_match_returns_full_score():
    secret = (R, B, W, Y)
    assert evaluate_guess(secret, secret, False) == (4, 0)
    assert evaluate_guess(secret, secret, True) == (4, 0)


def test_color_only():
    assert evaluate_guess((R, B, W, Y), (B, R, Y, W), False) == (0, 4)


def test_mixed():
    assert evaluate_guess((R, B, W, Y), (R, W, G, O), False) == (1, 1)


def test_repeated_colors_are_not_multiplicity_corrected():
    # positions 0 and 2 are exact, positions 1 and 3 each find their color elsewhere
    secret = (R, R, B, G)
    guess = (R, G, B, R)
    assert evaluate_guess(secret, guess, True) == (2, 2)


def test_repeated_guess_color_credited_every_time():
    # classic scoring would give (1, 0); membership scoring credits each R
    assert evaluate_guess((R, B, W, Y), (R, R, R, R), True) == (1, 3)


def test_duplicate_guess_rejected():
    with pytest.raises(DuplicateNotAllowed):
        evaluate_guess((R, B, W, Y), (R, R, W, Y), False)


def test_duplicate_rejected_even_when_it_would_score():
    with pytest.raises(DuplicateNotAllowed):
        evaluate_guess((R, B), (B, B), False)


@pytest.mark.parametrize("allow_duplicates", [True, False])
def test_score_bounds(allow_duplicates):
    secret = (R, B, W)
    for guess in itertools.product(COLORS, repeat=3):
        if not allow_duplicates and has_duplicates(guess):
            continue
        exact, color_only = evaluate_guess(secret, guess, allow_duplicates)
        assert 0 <= exact + color_only <= len(secret)


def test_has_duplicates():
    assert has_duplicates((R, R))
    assert not has_duplicates((R, B, G))
