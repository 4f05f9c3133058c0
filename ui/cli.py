# # Command-line interface (text-based play)

from game.board import GameSession
from game.errors import ConfigError, MastermindError
from game.ruleset import DEFAULT_RULES
from game.secret_code import as_string
from plot.plot import compute_history_stats, format_stats, plot_history
from state.serializer import state_to_json

BANNER = r"""
    ~~~~ Mastermind ~~~~
Rules: A set of pegs from the
following colours are selected:
   ┏━━━━━━┳━━━━━━┳━━━━━━┓
   ┃Orange┃Yellow┃ Red  ┃
   ┣━━━━━━╋━━━━━━╋━━━━━━┫
   ┃ Blue ┃Green ┃White ┃
   ┗━━━━━━┻━━━━━━┻━━━━━━┛
The player takes guesses at
the selected colours, and is
given the number of pegs in a
correct position (And colour)
and the number of correct
colours chosen in an incorrect
position.
"""


def log_print(msg: str) -> None:
    print(msg, flush=True)


def ask_duplicates(read=input) -> bool:
    """Prompt until the player answers `true` or `false`."""
    answer = read('Would you like to allow duplicates? ("true" or "false"): ')
    while answer.strip().lower() not in ("true", "false"):
        answer = read("Please try again! Either `true` or `false`. ")
    return answer.strip().lower() == "true"


def ask_pegs(read=input, max_pegs=6) -> int:
    """Prompt until the player enters a peg count from 2 to max_pegs."""
    answer = read(f"How many pegs would you like to play with? (2-{max_pegs}, inclusive): ")
    while True:
        try:
            pegs = int(answer.strip())
        except ValueError:
            pegs = None
        if pegs is not None and 2 <= pegs <= max_pegs:
            return pegs
        answer = read(
            f"Please try again! Enter a valid positive integer from 2-{max_pegs} inclusive. "
        )


def render_row(guess, score, emoji_map):
    """Render one scored guess as a board row (for CLI)."""
    exact, color_only = score
    row = ""
    for c in guess:
        row += "| " + emoji_map.get(c.letter, c.letter) + " "
    row += "|| "
    row += emoji_map["BK"] * exact + emoji_map["CL"] * color_only
    return row


def render_history(history):
    """Return the previous-games table as text."""
    lines = ["Previous games:"]
    for idx, record in enumerate(history):
        pegs = ", ".join(c.label for c in record.secret)
        lines.append(
            f"Game #{idx + 1} with pegs [{pegs}] was "
            f"{'won' if record.won else 'lost'} with {record.tries_used} attempts"
        )
    return "\n".join(lines)


def _reveal(record):
    log_print(f"The secret code was: {as_string(record.secret)}")


def gameloop(rules=None, games=2, read=input, rng=None, show_json=False, plot_path=None):
    """
    Play `games` games on the terminal and print the history afterwards.

    Returns:
        GameSession | None: The session, or None if the rules were invalid.
    """

    rules = rules or DEFAULT_RULES
    emoji_map = rules.get("display", DEFAULT_RULES["display"])["emoji_map"]

    try:
        session = GameSession.from_rules(
            rules,
            on_win=lambda: log_print("You won!"),
            on_lose=lambda: log_print("Uh-oh, you lost"),
            rng=rng,
        )
    except ConfigError as e:
        log_print(str(e))
        return None

    log_print("Generated new state! Game #1")
    while len(session.history) < games:
        text = read("Enter next colours > ").strip()
        before = finished = len(session.history)
        try:
            results = session.push_text(text)
        except MastermindError as e:
            log_print(f"Error encountered: {e}")
            results = []

        for result in results:
            if result.game_ended:
                _reveal(session.history[finished])
                finished += 1
                continue
            exact, color_only = result.score
            log_print(render_row(result.guess, result.score, emoji_map))
            log_print(
                f"Good try, here are your matching pegs: {exact} are in the "
                f"correct position and {color_only} have the right colour"
            )
        # Games that ended before an error cut the line short
        for record in session.history[finished:]:
            _reveal(record)

        played = len(session.history)
        if before < played < games:
            log_print(f"Generated new state! Game #{played + 1}")

    log_print(render_history(session.history))
    log_print(format_stats(compute_history_stats(session.history)))
    if show_json:
        log_print(state_to_json(session.get_current_state(), reveal_code=True))
    if plot_path:
        log_print(f"Saved {plot_history(session.history, plot_path)}")
    return session
