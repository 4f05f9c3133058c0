from .errors import DuplicateNotAllowed


def has_duplicates(sequence) -> bool:
    """Return True if any color appears more than once in the sequence."""
    return len(set(sequence)) != len(sequence)


def evaluate_guess(secret, guess, allow_duplicates: bool) -> tuple[int, int]:
    """
    Compare a guess with the secret sequence and compute feedback.

    Args:
        secret (Sequence[Color]): The hidden sequence.
        guess (Sequence[Color]): The candidate, same length as the secret.
        allow_duplicates (bool): The session mode. When False, a guess that
        repeats a color is rejected before anything is scored.

    Returns:
        tuple[int, int]: (exact, color_only)
        exact: pegs with the right color in the right position,
        color_only: pegs whose color occurs anywhere in the secret but not
        at that position.

    Raises:
        DuplicateNotAllowed: If duplicates are off and the guess repeats a
        color.

    Notes:
        Color-only matches are a plain membership test. A color already
        credited elsewhere is not removed from the secret, so with repeated
        colors color_only can be higher than classic Mastermind feedback.
    """

    if not allow_duplicates and has_duplicates(guess):
        raise DuplicateNotAllowed(
            "Cannot have duplicates when using non-duplicate mode!"
        )

    exact = 0
    color_only = 0
    for i, color in enumerate(guess):
        if secret[i] == color:
            exact += 1
        elif color in secret:
            color_only += 1

    return (exact, color_only)
