from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .colors import DEFAULT_COLOR_SET, Color, ColorSet
from .errors import MastermindError


class BufferEvent(Enum):
    AWAITING_INPUT = "awaiting_input"
    ROUND_CONTINUES = "round_continues"
    GAME_ENDED = "game_ended"


@dataclass(frozen=True)
class PushResult:
    """
    What happened after one color was pushed.

    Attributes:
        event: AWAITING_INPUT while the guess is incomplete, otherwise the
            outcome of the completed guess.
        score: (exact, color_only) for ROUND_CONTINUES, else None.
        won: True/False for GAME_ENDED, else None.
        guess: The completed guess, else None.
    """

    event: BufferEvent
    score: Optional[tuple[int, int]] = None
    won: Optional[bool] = None
    guess: Optional[tuple[Color, ...]] = None

    @property
    def completed(self) -> bool:
        return self.event is not BufferEvent.AWAITING_INPUT

    @property
    def game_ended(self) -> bool:
        return self.event is BufferEvent.GAME_ENDED


AWAITING = PushResult(BufferEvent.AWAITING_INPUT)


class GuessBuffer:
    """
    Collects colors for the guess in progress.

    Input may arrive one color at a time or as text spanning several lines,
    so colors are buffered until `length` of them have been pushed. The full
    guess is then drained and handed to `on_full`, which decides the result.
    """

    def __init__(
        self,
        length: int,
        on_full: Callable[[tuple[Color, ...]], PushResult],
        color_set: ColorSet = DEFAULT_COLOR_SET,
    ):
        self.length = length
        self.on_full = on_full
        self.color_set = color_set
        self._colors: list[Color] = []

    def push(self, color: Color) -> PushResult:
        """Append one color; resolve the guess if it is now complete."""
        self._colors.append(color)
        if len(self._colors) < self.length:
            return AWAITING

        guess = tuple(self._colors)
        self._colors.clear()
        return self.on_full(guess)

    def push_text(self, text: str) -> list[PushResult]:
        """
        Parse text one character at a time and push every color.

        Text longer than one guess keeps going, so a single call can finish
        several guesses (or games).

        Args:
            text (str): e.g. "rgby" or "RGBYrrgg".
        Returns:
            list[PushResult]: The result of every completed guess, in order.
        Raises:
            ParseError, DuplicateNotAllowed: On the first bad character or
            rejected guess. `game_ended` on the error tells whether a game
            already ended earlier in the same text.
        """

        results = []
        game_ended = False
        for char in text:
            try:
                result = self.push(self.color_set.parse(char))
            except MastermindError as e:
                e.game_ended = game_ended
                raise
            if result.completed:
                results.append(result)
                game_ended |= result.game_ended
        return results

    @property
    def contents(self) -> tuple[Color, ...]:
        return tuple(self._colors)

    def clear(self):
        self._colors.clear()

    def __len__(self):
        return len(self._colors)
