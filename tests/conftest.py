"""
Pytest fixtures for the Mastermind engine tests.
"""

import random

import pytest

from game.board import GameSession
from game.colors import Color

R, O, B, W, Y, G = (
    Color.RED,
    Color.ORANGE,
    Color.BLUE,
    Color.WHITE,
    Color.YELLOW,
    Color.GREEN,
)


class HookCounter:
    """Zero-argument callable that counts how often it was called."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


class FixedRng:
    """Random source that draws the same secret every game."""

    def __init__(self, secret):
        self.secret = list(secret)

    def choices(self, colors, k):
        return self.secret[:k]

    def sample(self, colors, k):
        return self.secret[:k]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_session():
    """Build a session whose secret is always `secret`."""

    def _make(secret, allow_duplicates=True, max_tries=None, **kwargs):
        return GameSession(
            len(secret),
            allow_duplicates=allow_duplicates,
            max_tries=max_tries,
            rng=FixedRng(secret),
            **kwargs,
        )

    return _make
