from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
    """
    Annotate points (x, y) on ax with formatted y values.

    Args:
        ax: matplotlib Axes
        xs: list of x coordinates
        ys: list of y coordinates
        fmt: format string for y values
        dx: x offset in points
        dy: y offset in points
        fontsize: font size for annotations
    """

    for x, y in zip(xs, ys):
        if y is None:
            continue
        ax.annotate(
            fmt.format(y),
            (x, y),
            textcoords="offset points",
            xytext=(dx, dy),
            ha="center",
            va="center",
            fontsize=fontsize,
        )


def compute_history_stats(history):
    """
    Summarize a session's game history.

    Returns a dict with:
      games (int), wins (int), losses (int)
      win_rate (float, np.nan if no games)
      avg_tries / min_tries / max_tries (float, np.nan if no won games), won games only
    """
    won = np.array([record.won for record in history], dtype=bool)
    tries = np.array([record.tries_used for record in history], dtype=np.float32)

    n = int(won.size)
    n_won = int(np.count_nonzero(won))

    # avg, min, max tries (won games only)
    won_tries = tries[won]
    if won_tries.size > 0:
        avg_tries = float(np.mean(won_tries))
        min_tries = float(np.min(won_tries))
        max_tries = float(np.max(won_tries))
    else:
        avg_tries = min_tries = max_tries = np.nan

    return {
        "games": n,
        "wins": n_won,
        "losses": n - n_won,
        "win_rate": n_won / n if n else np.nan,
        "avg_tries": avg_tries,
        "min_tries": min_tries,
        "max_tries": max_tries,
    }


def format_stats(stats) -> str:
    lines = [
        f"Games played: {stats['games']} (won {stats['wins']}, lost {stats['losses']})"
    ]
    if stats["wins"]:
        lines.append(f"Win rate: {stats['win_rate'] * 100:.1f}%")
        lines.append(f"Average tries over won games: {stats['avg_tries']:.2f}")
        lines.append(f"Min tries over won games: {stats['min_tries']:.0f}")
        lines.append(f"Max tries over won games: {stats['max_tries']:.0f}")
    return "\n".join(lines)


def plot_history(history, out_path):
    """
    Save a bar chart of tries per game, colored by outcome.

    Args:
        history: list of GameRecord, in play order
        out_path: PNG path to write
    Returns:
        Path: The written file.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    stats = compute_history_stats(history)
    x = np.arange(1, len(history) + 1)
    tries = [record.tries_used for record in history]
    bar_colors = ["tab:green" if record.won else "tab:red" for record in history]

    # Plot configuration:
    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(x, tries, color=bar_colors)
    _annotate_points(ax, x, tries, fmt="{:d}", dy=6)
    if not np.isnan(stats["avg_tries"]):
        ax.axhline(stats["avg_tries"], linestyle="--", color="tab:blue")

    # Titles and labels
    ax.set_title(
        f"Tries per Game\n Games won: {stats['wins']} of {stats['games']}"
    )
    ax.set_xlabel("Game")
    ax.set_ylabel("Tries used")
    if len(x):
        ax.set_xticks(x)
    ax.grid(True, axis="y")
    ax.legend(
        handles=[
            Line2D([0], [0], color="tab:green", lw=6, label="Won"),
            Line2D([0], [0], color="tab:red", lw=6, label="Lost"),
            Line2D([0], [0], color="tab:blue", linestyle="--", label="Average tries (won)"),
        ]
    )
    # Save plot
    fig.savefig(out_path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out_path

