from enum import Enum

from .errors import ConfigError, ParseError


class Color(Enum):
    """A peg color. The value is the letter that selects it."""

    RED = "R"
    ORANGE = "O"
    BLUE = "B"
    WHITE = "W"
    YELLOW = "Y"
    GREEN = "G"

    @property
    def letter(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self):
        return self.label


# Catalog order, used when drawing secrets
COLORS = (
    Color.RED,
    Color.BLUE,
    Color.WHITE,
    Color.YELLOW,
    Color.GREEN,
    Color.ORANGE,
)


class ColorSet:
    """
        The fixed, ordered catalog of colors a game is played with.
    Attributes:
        colors (tuple[Color, ...]): The available colors, in catalog order.
    """

    def __init__(self, colors=COLORS):
        self.colors = tuple(colors)
        if len(self.colors) < 2:
            raise ConfigError("A color set needs at least 2 colors.")
        if len(set(self.colors)) != len(self.colors):
            raise ConfigError("A color set cannot list the same color twice.")
        self._by_letter = {c.letter: c for c in self.colors}

    @classmethod
    def from_letters(cls, letters):
        """Build a color set from rule letters such as ["R", "G", "B"]."""
        try:
            colors = [Color(letter.upper()) for letter in letters]
        except ValueError as e:
            raise ConfigError(f"Unknown color in ruleset: {e}") from e
        return cls(colors)

    def parse(self, token: str) -> Color:
        """
        Read a color from the first character of a token (case-insensitive).

        Args:
            token (str): e.g. "r", "Red" or "blue".
        Returns:
            Color: The matching color.
        Raises:
            ParseError: If the token is empty or its first character selects
            no color in this set.
        """

        if not token:
            raise ParseError("Input too short!")
        first = token[0]
        color = self._by_letter.get(first.upper())
        if color is None:
            raise ParseError(
                f"Invalid initial character: '{first.lower()}'", token=first
            )
        return color

    def letters(self) -> str:
        return "".join(c.letter for c in self.colors)

    def __contains__(self, color):
        return color in self.colors

    def __iter__(self):
        return iter(self.colors)

    def __len__(self):
        return len(self.colors)

    def __repr__(self):
        return f"ColorSet({self.letters()})"


DEFAULT_COLOR_SET = ColorSet()
