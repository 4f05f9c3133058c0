# Configuration: colors, code length, duplicates allowed, etc.
from .errors import ConfigError

DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "allow_duplicates": True,  # Can the code contain repeated colors?
    "max_attempts": 10,  # Number of guesses per game, None for unlimited
    "colors": [
        "R",
        "B",
        "W",
        "Y",
        "G",
        "O",
    ],  # Default color set (Red, Blue, White, Yellow, Green, Orange)
    "display": {
        "emoji_map": {  # For CLI rendering
            "R": "🔴",
            "B": "🔵",
            "W": "⚪",
            "Y": "🟡",
            "G": "🟢",
            "O": "🟠",
            "BK": "⚫",  # exact match peg
            "CL": "◽",  # color-only peg
        }
    },
}


def validate_rules(rules: dict) -> dict:
    """
    Check a ruleset before a session is built from it.

    Args:
        rules (dict): The ruleset, shaped like DEFAULT_RULES.
    Returns:
        dict: The same ruleset, if valid.
    Raises:
        ConfigError: If a value is missing or out of range.
    """

    colors = rules.get("colors") or []
    if len(colors) < 2:
        raise ConfigError("A ruleset needs at least 2 colors.")
    if len({c.upper() for c in colors}) != len(colors):
        raise ConfigError("A ruleset cannot list the same color twice.")

    length = rules.get("code_length")
    if not isinstance(length, int) or isinstance(length, bool):
        raise ConfigError(f"Code length must be an integer, got {length!r}.")
    if length < 2:
        raise ConfigError(f"Code length must be at least 2, but got {length}.")
    if length > len(colors):
        raise ConfigError(
            f"Choose less than or equal to {len(colors)} pegs to play with!"
        )

    max_attempts = rules.get("max_attempts")
    if max_attempts is not None and (
        not isinstance(max_attempts, int)
        or isinstance(max_attempts, bool)
        or max_attempts < 1
    ):
        raise ConfigError(
            f"Max attempts must be a positive integer or None, got {max_attempts!r}."
        )

    return rules
