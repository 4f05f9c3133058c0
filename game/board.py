from __future__ import annotations

from typing import Callable, Optional

from .buffer import BufferEvent, GuessBuffer, PushResult
from .colors import DEFAULT_COLOR_SET, Color, ColorSet
from .errors import ParseError
from .guess import evaluate_guess
from .ruleset import validate_rules
from .secret_code import as_string, generate_sequence
from state.game_state import GameOutcome, GameRecord, GameState


def _noop():
    pass


class GameSession:
    """
    Plays Mastermind games back to back with one fixed configuration.

    Colors are pushed one at a time (or as text) into a GuessBuffer. When a
    full guess is collected it is resolved: a match wins the game, the last
    allowed try loses it, anything else is scored and play continues. A won
    or lost game is recorded in `history` and a new secret is drawn at once.

    Attributes:
        length (int): Number of pegs per sequence.
        allow_duplicates (bool): Whether secrets and guesses may repeat colors.
        max_tries (int | None): Tries per game, None for unlimited.
        color_set (ColorSet): The colors in play.
        last_outcome (GameOutcome | None): How the most recent game ended. Set
            before the win/lose hook fires and cleared when the next guess
            completes.
    """

    def __init__(
        self,
        length: int,
        allow_duplicates: bool = True,
        max_tries: Optional[int] = None,
        on_win: Optional[Callable[[], None]] = None,
        on_lose: Optional[Callable[[], None]] = None,
        color_set: Optional[ColorSet] = None,
        rng=None,
    ):
        self.color_set = color_set or DEFAULT_COLOR_SET

        # Check if there is a problem with our config
        validate_rules(
            {
                "code_length": length,
                "max_attempts": max_tries,
                "colors": self.color_set.letters(),
            }
        )

        self.length = length
        self.allow_duplicates = allow_duplicates
        self.max_tries = max_tries
        self.on_win = on_win or _noop
        self.on_lose = on_lose or _noop
        self.rng = rng

        self.last_outcome = None
        self.secret = self._generate_secret()
        self.attempts: list[tuple[Color, ...]] = []
        self._history: list[GameRecord] = []
        self.buffer = GuessBuffer(length, self._finish_try, self.color_set)

    @classmethod
    def from_rules(cls, rules: dict, on_win=None, on_lose=None, rng=None):
        """Create a session from a ruleset dict such as DEFAULT_RULES."""
        validate_rules(rules)
        return cls(
            length=rules["code_length"],
            allow_duplicates=rules.get("allow_duplicates", True),
            max_tries=rules.get("max_attempts"),
            on_win=on_win,
            on_lose=on_lose,
            color_set=ColorSet.from_letters(rules["colors"]),
            rng=rng,
        )

    @property
    def rules(self) -> dict:
        return {
            "code_length": self.length,
            "allow_duplicates": self.allow_duplicates,
            "max_attempts": self.max_tries,
            "colors": list(self.color_set.letters()),
        }

    # --- Input ---

    def push(self, color: Color) -> PushResult:
        """Push one color into the guess in progress."""
        if not isinstance(color, Color) or color not in self.color_set:
            raise ParseError(
                f"Color {color!s} is not part of this game.", token=str(color)
            )
        return self.buffer.push(color)

    def push_text(self, text: str) -> list[PushResult]:
        """Parse and push a whole string; see GuessBuffer.push_text."""
        return self.buffer.push_text(text)

    # --- Try resolution ---

    def _finish_try(self, guess: tuple[Color, ...]) -> PushResult:
        """Decide to either win the game, lose it, or keep going."""

        self.last_outcome = None
        if guess == self.secret:
            self.last_outcome = GameOutcome.WON
            self.on_win()
            self._close_game(won=True)
            return PushResult(BufferEvent.GAME_ENDED, won=True, guess=guess)

        if self.max_tries is not None and self.try_count + 1 == self.max_tries:
            self.last_outcome = GameOutcome.LOST
            self.on_lose()
            self._close_game(won=False)
            return PushResult(BufferEvent.GAME_ENDED, won=False, guess=guess)

        # Raises DuplicateNotAllowed; the drained guess is then dropped
        score = evaluate_guess(self.secret, guess, self.allow_duplicates)
        self.attempts.append(guess)
        return PushResult(BufferEvent.ROUND_CONTINUES, score=score, guess=guess)

    def _close_game(self, won: bool):
        self._history.append(GameRecord(self.secret, self.try_count, won))
        self.reset()

    def reset(self):
        """Start a new game with a fresh secret, same length and mode."""
        self.attempts = []
        self.buffer.clear()
        self.secret = self._generate_secret()

    def new_game(self):
        """Abandon the current game without recording it."""
        self.reset()

    def _generate_secret(self):
        return generate_sequence(
            self.length, self.allow_duplicates, self.color_set, self.rng
        )

    # --- Queries ---

    @property
    def try_count(self) -> int:
        return len(self.attempts)

    @property
    def history(self) -> tuple[GameRecord, ...]:
        return tuple(self._history)

    @property
    def buffered(self) -> tuple[Color, ...]:
        return self.buffer.contents

    def remaining_attempts(self) -> Optional[int]:
        """Return how many guesses are left, or None when unlimited."""
        if self.max_tries is None:
            return None
        return max(0, self.max_tries - self.try_count)

    def reveal_code(self) -> str:
        """Return the secret code as letters (used at the end of the game)."""
        return as_string(self.secret)

    def get_current_state(self) -> GameState:
        """Return a GameState snapshot for display or export."""
        return GameState(
            rules=self.rules,
            attempts=list(self.attempts),
            current_attempts=self.try_count,
            last_outcome=self.last_outcome,
            history=list(self._history),
            code=self.reveal_code(),
        )
