# Errors raised by the game engine


class MastermindError(ValueError):
    """Base class for every error the engine raises on bad input or config."""

    def __init__(self, msg: str):
        super().__init__(msg)
        # Set by GuessBuffer.push_text when a game ended earlier in the text
        self.game_ended = False


class ConfigError(MastermindError):
    """The session cannot be built with the requested rules."""


class ParseError(MastermindError):
    """
        A token could not be read as a color.
    Attributes:
        token (str): The offending input (the first character, or "" if empty).
    """

    def __init__(self, msg: str, token: str = ""):
        super().__init__(msg)
        self.token = token


class DuplicateNotAllowed(MastermindError):
    """A guess repeats a color while the ruleset forbids duplicates."""
