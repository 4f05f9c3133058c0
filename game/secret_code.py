import random

from .colors import COLORS


def generate_sequence(length: int, allow_duplicates: bool, colors=COLORS, rng=None):
    """
    Generate a random secret sequence.

    Args:
        length (int): Number of pegs. Must not exceed len(colors) when
        duplicates are not allowed; the caller checks this.
        allow_duplicates (bool): Whether a color may appear more than once.
        colors (Iterable[Color]): The colors to draw from.
        rng (random.Random | None): Source of randomness. Defaults to the
        module-level generator.

    Returns:
        tuple[Color, ...]: The generated sequence, in draw order.
    """

    rng = rng or random
    colors = list(colors)

    # Draw with replacement, or sample distinct colors without replacement.
    if allow_duplicates:
        sequence = rng.choices(colors, k=length)
    else:
        sequence = rng.sample(colors, k=length)

    return tuple(sequence)


def as_string(sequence) -> str:
    """
    Return a string representation of a sequence (e.g. 'RGBY').
    Returns:
        str: The sequence as letters, or 'EMPTY'.
    """
    return "".join(c.letter for c in sequence) if sequence else "EMPTY"
