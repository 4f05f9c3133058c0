# Convert session snapshots to readable formats (for export)
import json

from .game_state import GameState


def to_json(data_dict: dict) -> str:
    """
    Convert a dictionary to a JSON string.
    Args:
        data_dict (dict): The dictionary to convert.
    Returns:
        str: The JSON string representation of the dictionary.
    """
    return json.dumps(data_dict, indent=2, ensure_ascii=False)


def state_to_json(game_state: GameState, reveal_code=False) -> str:
    """Serialize a session snapshot, including its game history."""
    return to_json(game_state.to_dict(reveal_code=reveal_code))
