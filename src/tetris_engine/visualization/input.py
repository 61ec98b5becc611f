from __future__ import annotations

from typing import Optional

from tetris_engine.game import Action


REPEATABLE = (Action.LEFT, Action.RIGHT, Action.DOWN)


class KeyRepeat:
    """Frame-counted auto repeat for held movement keys.

    A press fires once immediately (handled by the caller). While the key
    stays down, the action repeats every ``interval`` frames once ``delay``
    frames have passed.
    """

    def __init__(self, delay: int = 15, interval: int = 2) -> None:
        self.delay = delay
        self.interval = max(1, interval)
        self.action: Optional[Action] = None
        self.held_frames = 0

    def press(self, action: Action) -> None:
        if action in REPEATABLE:
            self.action = action
            self.held_frames = 0
        else:
            self.release()

    def release(self, action: Optional[Action] = None) -> None:
        if action is None or action is self.action:
            self.action = None
            self.held_frames = 0

    def tick(self) -> Optional[Action]:
        if self.action is None:
            return None
        self.held_frames += 1
        if self.held_frames <= self.delay:
            return None
        if (self.held_frames - self.delay) % self.interval == 0:
            return self.action
        return None
