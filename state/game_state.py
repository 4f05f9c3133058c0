# state/game_state.py
from dataclasses import dataclass
from enum import Enum


class GameOutcome(Enum):
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameRecord:
    """One completed game: the secret, the tries used and whether it was won."""

    secret: tuple
    tries_used: int
    won: bool

    @property
    def outcome(self) -> GameOutcome:
        return GameOutcome.WON if self.won else GameOutcome.LOST

    def to_dict(self):
        return {
            "secret": "".join(c.letter for c in self.secret),
            "tries_used": self.tries_used,
            "won": self.won,
        }


class GameState:
    """Container for a session snapshot"""

    def __init__(
        self,
        rules,
        attempts,
        current_attempts,
        last_outcome,
        history,
        code=None,
    ):
        self.rules = rules
        self.attempts = attempts
        self.current_attempts = current_attempts
        self.last_outcome = last_outcome
        self.history = history
        self.secret_code = code

    def to_dict(self, reveal_code=False):
        # Return the snapshot as dictionary for i.e. json
        return {
            "rules": self.rules,
            "attempts": [
                "".join(c.letter for c in attempt) for attempt in self.attempts
            ],
            "current_attempts": self.current_attempts,
            "last_outcome": self.last_outcome.value if self.last_outcome else None,
            "history": [record.to_dict() for record in self.history],
            "secret_code": self.secret_code if reveal_code else None,
        }
