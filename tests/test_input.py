import unittest

from tetris_engine.game import Action
from tetris_engine.visualization.input import KeyRepeat


class KeyRepeatTests(unittest.TestCase):
    def test_repeats_after_delay(self):
        repeat = KeyRepeat(delay=3, interval=2)
        repeat.press(Action.LEFT)
        fired = [repeat.tick() for _ in range(8)]
        self.assertEqual(fired, [None, None, None, None, Action.LEFT, None, Action.LEFT, None])

    def test_release_stops_repeat(self):
        repeat = KeyRepeat(delay=0, interval=1)
        repeat.press(Action.DOWN)
        self.assertIs(repeat.tick(), Action.DOWN)
        repeat.release(Action.DOWN)
        self.assertIsNone(repeat.tick())

    def test_releasing_another_key_keeps_repeat(self):
        repeat = KeyRepeat(delay=0, interval=1)
        repeat.press(Action.RIGHT)
        repeat.release(Action.LEFT)
        self.assertIs(repeat.tick(), Action.RIGHT)

    def test_non_movement_keys_do_not_repeat(self):
        repeat = KeyRepeat(delay=0, interval=1)
        repeat.press(Action.LEFT)
        repeat.press(Action.PUSH)
        self.assertIsNone(repeat.tick())


if __name__ == "__main__":
    unittest.main()
