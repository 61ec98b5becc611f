from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional, Tuple, Union

import numpy as np

from .actions import Action, Direction, parse_action
from .grid import Field
from .pieces import Piece, PieceKind

logger = logging.getLogger(__name__)


NEXT_QUEUE_SIZE = 4


class GameState(str, Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    queue_size: int = NEXT_QUEUE_SIZE
    random_seed: Optional[int] = None


class Game:
    """One playthrough: a field, the falling piece, the lookahead queue and the hold slot.

    The host drives the game by calling :meth:`update` on a fixed tick and
    :meth:`action` for each input. Calls must be serialised by the host.
    """

    def __init__(self, width: int = 10, height: int = 20, rng: Optional[random.Random] = None,
                 queue_size: int = NEXT_QUEUE_SIZE) -> None:
        self.field = Field(width, height)
        self.rng = rng or random.Random()
        self.queue_size = max(NEXT_QUEUE_SIZE, int(queue_size))
        self.active_piece: Optional[Piece] = None
        self.hold_piece: Optional[Piece] = None
        self.can_hold = True
        self.paused = False
        self.is_over = False
        self.lines_cleared = 0
        self._queue: Deque[Piece] = deque()
        self._fill_queue()

    @classmethod
    def from_config(cls, config: Optional[GameConfig] = None) -> "Game":
        config = config or GameConfig()
        return cls(config.width, config.height, rng=random.Random(config.random_seed),
                   queue_size=config.queue_size)

    # Observation

    @property
    def next_pieces(self) -> Tuple[Piece, ...]:
        return tuple(self._queue)

    @property
    def state(self) -> GameState:
        if self.is_over:
            return GameState.GAME_OVER
        if self.paused:
            return GameState.PAUSED
        if self.active_piece is None:
            return GameState.SPAWNING
        return GameState.FALLING

    def get_state(self) -> np.ndarray:
        # Overlay the falling piece on a copy of the grid, negated to tell it apart
        state = self.field.clone_state()
        if self.active_piece is not None and not self.is_over:
            for x, y in self.active_piece.cells_at():
                if self.field.is_inside(x, y):
                    state[y, x] = -int(self.active_piece.kind)
        return state

    # Queue

    def _random_piece(self) -> Piece:
        kind = self.rng.choice(list(PieceKind))
        return Piece.spawn(kind)

    def _fill_queue(self) -> None:
        while len(self._queue) < self.queue_size:
            self._queue.append(self._random_piece())

    def _pop_next(self) -> Piece:
        piece = self._queue.popleft()
        self._fill_queue()
        return piece

    # Lifecycle

    def _spawn(self, piece: Piece) -> None:
        piece.x = (self.field.width - piece.width) // 2
        self.active_piece = piece
        logger.debug("spawned %s at x=%d", piece.kind.name, piece.x)

    def _settle(self) -> None:
        assert self.active_piece is not None
        result = self.field.place_piece(self.active_piece)
        self.lines_cleared += result.lines_cleared
        logger.debug("settled %s, %d line(s) cleared", self.active_piece.kind.name, result.lines_cleared)
        self.active_piece = None
        self.can_hold = True

    def _check_game_over(self) -> None:
        if not self.field.is_row_empty(0):
            self.is_over = True
            self.active_piece = None
            logger.debug("game over after %d line(s)", self.lines_cleared)

    def restart(self) -> None:
        self.field.reset()
        self.is_over = False
        self.paused = False
        self.hold_piece = None
        self.can_hold = True
        self.lines_cleared = 0
        self._queue.clear()
        self._fill_queue()
        self._spawn(self._pop_next())
        logger.debug("game restarted")

    def update(self) -> None:
        if self.paused or self.is_over:
            return

        if self.active_piece is None:
            self._spawn(self._pop_next())
        elif self.field.check_collision(self.active_piece, Action.DOWN):
            self._settle()
        else:
            self.active_piece.move(Direction.DOWN)

        self._check_game_over()

    # Input

    def action(self, name: Union[str, Action]) -> None:
        action = parse_action(name)

        if self.is_over:
            if action is Action.PUSH:
                self.restart()
            return
        if self.active_piece is None:
            return

        if action is Action.HOLD:
            self.hold()
        elif action is Action.PUSH:
            self.push()
        elif action is Action.PAUSE:
            self.pause()
        elif self.field.check_collision(self.active_piece, action):
            return
        elif action.rotation is not None:
            self.active_piece.rotate(action.rotation)
        else:
            self.active_piece.move(action.direction)

    def hold(self) -> None:
        if not self.can_hold or self.active_piece is None:
            return
        # Only the kind survives; position and rotation are dropped
        detached = Piece.spawn(self.active_piece.kind)
        self.active_piece = None
        if self.hold_piece is not None:
            self._spawn(Piece.spawn(self.hold_piece.kind))
        else:
            self._spawn(self._pop_next())
        self.hold_piece = detached
        self.can_hold = False
        logger.debug("holding %s", detached.kind.name)

    def push(self) -> None:
        if self.active_piece is None:
            return
        while not self.field.check_collision(self.active_piece, Action.DOWN):
            self.active_piece.move(Direction.DOWN)
        self._settle()

    def pause(self) -> None:
        self.paused = not self.paused
        logger.debug("paused" if self.paused else "resumed")
