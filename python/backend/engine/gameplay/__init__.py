from backend.engine.gameplay.game import GamePlay, validate_move_sequence
from backend.engine.gameplay.moves import board_moves, legal_moves, neighbors

__all__ = [
    "GamePlay",
    "board_moves",
    "legal_moves",
    "neighbors",
    "validate_move_sequence",
]
