from __future__ import annotations

from enum import Enum
from typing import Tuple, Union

from .errors import InvalidArgument


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


class Rotation(str, Enum):
    RIGHT = "right"
    LEFT = "left"


class Action(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE_LEFT = "rotate-left"
    ROTATE_RIGHT = "rotate-right"
    HOLD = "hold"
    PUSH = "push"
    PAUSE = "pause"

    @classmethod
    def _missing_(cls, value):
        # Older front ends send a single "rotate" token for clockwise rotation
        if value == "rotate":
            return cls.ROTATE_RIGHT
        return None

    @property
    def direction(self) -> Direction | None:
        if self in (Action.LEFT, Action.RIGHT, Action.DOWN):
            return Direction(self.value)
        return None

    @property
    def rotation(self) -> Rotation | None:
        if self is Action.ROTATE_LEFT:
            return Rotation.LEFT
        if self is Action.ROTATE_RIGHT:
            return Rotation.RIGHT
        return None


def parse_direction(value: Union[str, Direction]) -> Direction:
    try:
        return Direction(getattr(value, "value", value))
    except ValueError:
        raise InvalidArgument(f"invalid direction: {value!r}") from None


def parse_rotation(value: Union[str, Rotation]) -> Rotation:
    try:
        return Rotation(getattr(value, "value", value))
    except ValueError:
        raise InvalidArgument(f"invalid rotation: {value!r}") from None


def parse_action(value: Union[str, Action]) -> Action:
    try:
        return Action(getattr(value, "value", value))
    except ValueError:
        raise InvalidArgument(f"invalid action: {value!r}") from None
