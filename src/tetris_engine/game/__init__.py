"""Game module for the falling-block rules engine.

Exports the core engine and supporting classes:
- Field: Playfield grid, collision checks and line clearing
- Piece: Tetromino shape and position with naive rotation
- PieceKind: Enum of the seven piece kinds
- Game: Falling piece, lookahead queue, hold slot and pause/game-over control
- Action: Input tokens accepted by Game.action
"""

from .errors import InvalidArgument
from .actions import Action, Direction, Rotation
from .pieces import BASE_SHAPES, Piece, PieceKind
from .grid import Field, PlacementResult
from .core import Game, GameConfig, GameState, NEXT_QUEUE_SIZE

__all__ = [
    "InvalidArgument",
    "Action",
    "Direction",
    "Rotation",
    "BASE_SHAPES",
    "Piece",
    "PieceKind",
    "Field",
    "PlacementResult",
    "Game",
    "GameConfig",
    "GameState",
    "NEXT_QUEUE_SIZE",
]
