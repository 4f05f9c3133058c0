"""
Tests for the color catalog and color parsing.
"""

import pytest

from game.colors import COLORS, DEFAULT_COLOR_SET, Color, ColorSet
from game.errors import ConfigError, ParseError


class TestParse:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("r", Color.RED),
            ("O", Color.ORANGE),
            ("b", Color.BLUE),
            ("W", Color.WHITE),
            ("y", Color.YELLOW),
            ("g", Color.GREEN),
        ],
    )
    def test_first_letter_rule(self, token, expected):
        assert DEFAULT_COLOR_SET.parse(token) is expected

    def test_only_first_character_counts(self):
        assert DEFAULT_COLOR_SET.parse("Blueish") is Color.BLUE
        assert DEFAULT_COLOR_SET.parse("gx") is Color.GREEN

    def test_unknown_character_cites_input(self):
        with pytest.raises(ParseError) as exc:
            DEFAULT_COLOR_SET.parse("x")
        assert "'x'" in str(exc.value)
        assert exc.value.token == "x"

    def test_empty_token(self):
        with pytest.raises(ParseError, match="too short"):
            DEFAULT_COLOR_SET.parse("")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            DEFAULT_COLOR_SET.parse("7")

    def test_restricted_set_rejects_missing_color(self):
        colors = ColorSet([Color.RED, Color.BLUE])
        with pytest.raises(ParseError):
            colors.parse("g")


class TestColorSet:
    def test_catalog(self):
        assert len(DEFAULT_COLOR_SET) == 6
        assert list(DEFAULT_COLOR_SET) == list(COLORS)
        assert all(c in DEFAULT_COLOR_SET for c in Color)

    def test_needs_two_colors(self):
        with pytest.raises(ConfigError):
            ColorSet([Color.RED])

    def test_from_letters(self):
        colors = ColorSet.from_letters(["r", "G", "B"])
        assert list(colors) == [Color.RED, Color.GREEN, Color.BLUE]
        assert colors.letters() == "RGB"

    def test_from_letters_unknown(self):
        with pytest.raises(ConfigError):
            ColorSet.from_letters(["R", "P"])

    def test_colors_compare_by_equality_only(self):
        assert Color.RED == Color("R")
        assert Color.RED != Color.BLUE
        with pytest.raises(TypeError):
            Color.RED < Color.BLUE

    def test_repeated_color_rejected(self):
        with pytest.raises(ConfigError, match="twice"):
            ColorSet([Color.RED, Color.RED])

    def test_from_letters_repeated_color_rejected(self):
        with pytest.raises(ConfigError):
            ColorSet.from_letters(["R", "r", "B"])
